"""Integration tests for the cart use cases."""

import pytest

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.remove_from_cart import RemoveFromCartHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.infrastructure.session.session_cart import SessionCart
from tests.fakes import FakeProductRepository


def _setup():
    repo = FakeProductRepository([
        Product(id=1, name="Echo Dot", price=Money.of("40.00"), quantity=5),
        Product(id=2, name="Kindle", price=Money.of("90.00"), quantity=1),
    ])
    cart = SessionCart()
    return repo, cart


class TestAddToCart:

    def test_adds_line(self):
        repo, cart = _setup()
        AddToCartHandler(repo, cart).handle(1, 2)
        assert cart.find_line(1).quantity == 2

    def test_default_quantity_is_one(self):
        repo, cart = _setup()
        AddToCartHandler(repo, cart).handle(2)
        assert cart.find_line(2).quantity == 1

    def test_repeated_adds_accumulate(self):
        repo, cart = _setup()
        handler = AddToCartHandler(repo, cart)
        handler.handle(1, 2)
        handler.handle(1, 3)
        assert cart.find_line(1).quantity == 5
        assert len(cart.lines) == 1

    def test_more_than_stock_rejected(self):
        repo, cart = _setup()
        handler = AddToCartHandler(repo, cart)
        handler.handle(1, 4)
        with pytest.raises(ValidationError, match="Insufficient stock for Echo Dot"):
            handler.handle(1, 2)
        assert cart.find_line(1).quantity == 4

    def test_unknown_product_rejected(self):
        repo, cart = _setup()
        with pytest.raises(EntityNotFoundError, match="not found"):
            AddToCartHandler(repo, cart).handle(99)
        assert cart.is_empty

    def test_non_positive_quantity_rejected(self):
        repo, cart = _setup()
        with pytest.raises(ValidationError, match="must be positive"):
            AddToCartHandler(repo, cart).handle(1, 0)


class TestRemoveFromCart:

    def test_removes_line(self):
        repo, cart = _setup()
        AddToCartHandler(repo, cart).handle(1, 2)
        RemoveFromCartHandler(cart).handle(1)
        assert cart.is_empty

    def test_absent_line_rejected(self):
        _, cart = _setup()
        with pytest.raises(EntityNotFoundError, match="not in the cart"):
            RemoveFromCartHandler(cart).handle(1)


class TestShowCart:

    def test_totals_and_average(self):
        repo, cart = _setup()
        AddToCartHandler(repo, cart).handle(1, 2)
        AddToCartHandler(repo, cart).handle(2, 1)

        dto = ShowCartHandler(cart).handle()

        assert [line.product_name for line in dto.lines] == ["Echo Dot", "Kindle"]
        assert dto.lines[0].line_total == "80.00 EUR"
        assert dto.total_quantity == 3
        assert dto.total == "170.00"
        assert dto.average == "56.67"

    def test_empty_cart(self):
        _, cart = _setup()
        dto = ShowCartHandler(cart).handle()
        assert dto.lines == []
        assert dto.total == "0.00"
        assert dto.average == "0.00"
