"""Integration tests for the Checkout use case and order queries."""

import pytest

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.checkout import CheckoutHandler
from storefront.application.dto import OrderViewModel
from storefront.application.list_orders import ListOrdersHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.infrastructure.session.session_cart import SessionCart
from tests.fakes import FakeOrderRepository, FakeProductRepository


def _setup():
    product_repo = FakeProductRepository([
        Product(id=1, name="Echo Dot", price=Money.of("39.99"), quantity=10),
        Product(id=2, name="Kindle", price=Money.of("89.00"), quantity=2),
    ])
    order_repo = FakeOrderRepository()
    cart = SessionCart()
    return order_repo, product_repo, cart


def _form(**overrides) -> OrderViewModel:
    values = dict(
        name="Alice", address="1 Main Street", city="Lyon", zip_code="69001", country="France",
    )
    values.update(overrides)
    return OrderViewModel(**values)


class TestCheckoutHappyPath:

    def test_records_order_and_drains_stock(self):
        order_repo, product_repo, cart = _setup()
        AddToCartHandler(product_repo, cart).handle(1, 3)
        AddToCartHandler(product_repo, cart).handle(2, 1)

        dto = CheckoutHandler(order_repo, product_repo, cart).handle(_form())

        assert dto.id == 1
        assert dto.total == "208.97 EUR"
        assert [line.quantity for line in dto.lines] == [3, 1]
        assert product_repo.get_by_id(1).quantity == 7
        assert product_repo.get_by_id(2).quantity == 1
        assert cart.is_empty
        assert order_repo.get_by_id(1).name == "Alice"

    def test_order_keeps_cart_price_after_catalog_edit(self):
        order_repo, product_repo, cart = _setup()
        AddToCartHandler(product_repo, cart).handle(1, 1)

        product_repo.get_by_id(1).price = Money.of("99.99")
        dto = CheckoutHandler(order_repo, product_repo, cart).handle(_form())

        assert dto.lines[0].unit_price == "39.99 EUR"

    def test_selling_the_last_unit_removes_product(self):
        order_repo, product_repo, cart = _setup()
        AddToCartHandler(product_repo, cart).handle(2, 2)

        CheckoutHandler(order_repo, product_repo, cart).handle(_form())

        assert product_repo.get_by_id(2) is None


class TestCheckoutValidation:

    def test_empty_cart_rejected(self):
        order_repo, product_repo, cart = _setup()
        with pytest.raises(ValidationError) as info:
            CheckoutHandler(order_repo, product_repo, cart).handle(_form())
        assert info.value.violations == ["CartEmpty"]

    def test_missing_fields_rejected(self):
        order_repo, product_repo, cart = _setup()
        AddToCartHandler(product_repo, cart).handle(1, 1)

        with pytest.raises(ValidationError) as info:
            CheckoutHandler(order_repo, product_repo, cart).handle(_form(city="", country=" "))

        assert info.value.violations == ["ErrorMissingCity", "ErrorMissingCountry"]
        assert order_repo.list_all() == []
        assert not cart.is_empty

    def test_stock_reduced_below_cart_rejected(self):
        order_repo, product_repo, cart = _setup()
        AddToCartHandler(product_repo, cart).handle(1, 3)
        product_repo.get_by_id(1).quantity = 2

        with pytest.raises(ValidationError, match="Insufficient stock for Echo Dot"):
            CheckoutHandler(order_repo, product_repo, cart).handle(_form())

        assert order_repo.list_all() == []
        assert cart.find_line(1).quantity == 3
        assert product_repo.get_by_id(1).quantity == 2

    def test_mixed_currencies_rejected_before_stock_is_taken(self):
        order_repo, product_repo, cart = _setup()
        product_repo.save(Product(id=3, name="Fire TV", price=Money.of("49.99", "USD"), quantity=5))
        AddToCartHandler(product_repo, cart).handle(1, 2)
        AddToCartHandler(product_repo, cart).handle(3, 1)

        with pytest.raises(ValidationError, match="Cannot combine EUR with USD"):
            CheckoutHandler(order_repo, product_repo, cart).handle(_form())

        assert order_repo.list_all() == []
        assert product_repo.get_by_id(1).quantity == 10
        assert product_repo.get_by_id(3).quantity == 5
        assert cart.total_quantity == 3


class TestOrderQueries:

    def test_show_and_list(self):
        order_repo, product_repo, cart = _setup()
        AddToCartHandler(product_repo, cart).handle(1, 1)
        CheckoutHandler(order_repo, product_repo, cart).handle(_form())
        AddToCartHandler(product_repo, cart).handle(2, 1)
        CheckoutHandler(order_repo, product_repo, cart).handle(_form(name="Bob"))

        assert ShowOrderHandler(order_repo).handle(2).name == "Bob"
        assert [o.id for o in ListOrdersHandler(order_repo).handle()] == [1, 2]

    def test_show_missing_order_rejected(self):
        order_repo, _, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="not found"):
            ShowOrderHandler(order_repo).handle(999)
