"""Application service: product catalog administration.

Lists, validates, saves and deletes products. Saving a product writes to
the repository only: carts hold snapshots, so an admin edit never changes
what a shopper already has in their cart.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import ProductViewModel
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money
from storefront.domain.repository.cart import Cart
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.validation.product_rules import (
    ProductRule,
    check_product,
    format_price,
    parse_price,
    parse_stock,
)

logger = structlog.get_logger(__name__)


class ProductService:

    def __init__(
        self,
        product_repo: ProductRepository,
        cart: Cart,
        decimal_separator: str = ".",
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self._product_repo = product_repo
        self._cart = cart
        self._decimal_separator = decimal_separator
        self._currency = currency

    # --- Queries --------------------------------------------------------------

    def list_products(self) -> list[ProductViewModel]:
        return [self._to_view_model(p) for p in self._product_repo.list_all()]

    def get_product(self, product_id: int) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")
        return product

    def get_product_view_model(self, product_id: int) -> ProductViewModel:
        return self._to_view_model(self.get_product(product_id))

    # --- Commands -------------------------------------------------------------

    def validate(self, view: ProductViewModel) -> list[ProductRule]:
        return check_product(view.name, view.price, view.stock, self._decimal_separator)

    def save(self, view: ProductViewModel) -> Product:
        """Validate, convert and persist a submitted product.

        Creates a product when ``view.id`` is None, otherwise overwrites
        every editable field of the existing one. Raises ValidationError
        (with the rule identifiers) before anything is written.
        """
        violations = self.validate(view)
        if violations:
            raise ValidationError(
                "Invalid product: " + ", ".join(v.value for v in violations),
                [v.value for v in violations],
            )

        price = Money(parse_price(view.price, self._decimal_separator), self._currency)
        stock = parse_stock(view.stock)

        if view.id is None:
            product = Product(
                id=None,
                name=view.name.strip(),
                price=price,
                quantity=stock,
                description=(view.description or "").strip(),
                details=(view.details or "").strip(),
            )
        else:
            product = self.get_product(view.id)
            product.name = view.name.strip()
            product.price = price
            product.quantity = stock
            product.description = (view.description or "").strip()
            product.details = (view.details or "").strip()

        self._product_repo.save(product)
        logger.info(
            "product_saved",
            product_id=product.id,
            created=view.id is None,
            price=str(product.price.amount),
            stock=product.quantity,
        )
        return product

    def delete_product(self, product_id: int) -> None:
        """Remove a product from the catalog and from the cart."""
        self.get_product(product_id)
        self._cart.remove_line(product_id)
        self._product_repo.delete(product_id)
        logger.info("product_deleted", product_id=product_id)

    # --- Mapping --------------------------------------------------------------

    def _to_view_model(self, product: Product) -> ProductViewModel:
        return ProductViewModel(
            id=product.id,
            name=product.name,
            price=format_price(product.price.amount, self._decimal_separator),
            stock=str(product.quantity),
            description=product.description,
            details=product.details,
        )
