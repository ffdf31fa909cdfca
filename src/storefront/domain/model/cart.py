"""Cart line: a product snapshot plus a quantity.

A line copies the product at the moment it is first added. Later catalog
edits (price, stock, name) never reach a line that is already in a cart.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money


@dataclass
class CartLine:

    product: Product  # snapshot taken at add-time
    quantity: int

    def __post_init__(self) -> None:
        if self.quantity <= 0:
            raise ValidationError("Cart line quantity must be positive")

    @property
    def product_id(self) -> int:
        return self.product.id  # type: ignore[return-value]

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity

    def increase(self, quantity: int) -> None:
        if quantity <= 0:
            raise ValidationError("Quantity must be positive")
        self.quantity += quantity
