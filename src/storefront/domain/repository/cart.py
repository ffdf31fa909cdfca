"""Abstract shopping cart.

The cart is a capability, not a storage detail: the session cart used by
the CLI and the in-memory one used in tests are interchangeable behind
this interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from storefront.domain.model.cart import CartLine
from storefront.domain.model.product import Product


class Cart(ABC):

    @abstractmethod
    def add_item(self, product: Product, quantity: int) -> None:
        """Add ``quantity`` units of a product.

        A new line stores a snapshot of ``product``; an existing line only
        grows its quantity and keeps its original snapshot.
        """

    @abstractmethod
    def remove_line(self, product_id: int) -> None:
        """Drop the line for a product; no-op when absent."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every line."""

    @property
    @abstractmethod
    def lines(self) -> list[CartLine]:
        """Lines in the order they were first added."""

    def find_line(self, product_id: int) -> CartLine | None:
        for line in self.lines:
            if line.product_id == product_id:
                return line
        return None

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def total_quantity(self) -> int:
        return sum(line.quantity for line in self.lines)

    def get_total_value(self) -> Decimal:
        return sum(
            (line.product.price.amount * line.quantity for line in self.lines),
            Decimal("0"),
        )

    def get_average_value(self) -> Decimal:
        """Average unit price over every unit in the cart, 0 when empty."""
        units = self.total_quantity
        if units == 0:
            return Decimal("0")
        return self.get_total_value() / units
