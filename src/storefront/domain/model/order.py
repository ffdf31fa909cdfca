"""Order aggregate: what a shopper bought at checkout.

An order copies each cart line (product name, unit price, quantity) so it
stays readable after the product is edited or removed from the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import CartLine
from storefront.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class OrderLine:

    product_id: int
    product_name: str
    quantity: Quantity
    unit_price: Money

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value

    @staticmethod
    def from_cart_line(line: CartLine) -> OrderLine:
        return OrderLine(
            product_id=line.product_id,
            product_name=line.product.name,
            quantity=Quantity(line.quantity),
            unit_price=line.product.price,
        )


@dataclass
class Order:
    """Aggregate root for shopper orders.

    Use ``Order.create()`` for new orders. The ``__init__`` stays simple so
    the repository can reconstitute persisted orders without re-validating.
    """

    id: int | None
    name: str
    address: str
    city: str
    zip_code: str
    country: str
    lines: list[OrderLine]
    date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        name: str,
        address: str,
        city: str,
        zip_code: str,
        country: str,
        lines: list[OrderLine],
    ) -> Order:
        if not lines:
            raise ValidationError("Order must contain at least one line")
        return Order(
            id=None,
            name=name.strip(),
            address=address.strip(),
            city=city.strip(),
            zip_code=zip_code.strip(),
            country=country.strip(),
            lines=list(lines),
        )

    @property
    def total(self) -> Money:
        result = Money.zero(self.lines[0].unit_price.currency) if self.lines else Money.zero()
        for line in self.lines:
            result = result + line.line_total
        return result
