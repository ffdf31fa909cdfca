"""Application service: Add to Cart use case.

The persisted stock is authoritative for new additions: a line may never
grow beyond what the catalog currently holds. Lines already in the cart
are not re-checked when the catalog changes.
"""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.repository.cart import Cart
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class AddToCartHandler:

    def __init__(self, product_repo: ProductRepository, cart: Cart) -> None:
        self._product_repo = product_repo
        self._cart = cart

    def handle(self, product_id: int, quantity: int = 1) -> None:
        if quantity <= 0:
            raise ValidationError("Quantity must be positive")

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")

        line = self._cart.find_line(product_id)
        in_cart = line.quantity if line is not None else 0
        if in_cart + quantity > product.quantity:
            raise ValidationError(
                f"Insufficient stock for {product.name} "
                f"(cart would hold {in_cart + quantity}, "
                f"have {product.quantity} available)"
            )

        self._cart.add_item(product, quantity)
        logger.info("cart_item_added", product_id=product_id, quantity=quantity)
