"""Product aggregate.

Products live independently of carts and orders. They have their own
lifecycle: the administrator edits price and stock, checkouts drain stock,
and sold-out products leave the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    Kept as a mutable dataclass because admin edits and stock removal are
    legitimate mutations on the aggregate. Anything that must not follow
    those edits (cart lines) holds a ``snapshot()`` instead.
    """

    id: int | None
    name: str
    price: Money
    quantity: int
    description: str = ""
    details: str = ""

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise ValidationError("Product quantity cannot be negative")

    @property
    def is_sold_out(self) -> bool:
        return self.quantity == 0

    def snapshot(self) -> Product:
        """Return an independent copy of the product as it is right now."""
        return replace(self)

    def remove_stock(self, quantity: int) -> None:
        """Take ``quantity`` units out of stock (checkout)."""
        if quantity <= 0:
            raise ValidationError("Stock removal quantity must be positive")
        if quantity > self.quantity:
            raise ValidationError(
                f"Insufficient stock for {self.name} "
                f"(need {quantity}, have {self.quantity} available)"
            )
        self.quantity -= quantity
