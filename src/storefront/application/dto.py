"""View models and DTOs: plain containers that cross layer boundaries.

View models carry what a user typed (numbers still as text) into the
application layer; DTOs carry formatted results back out to the CLI
without exposing domain internals.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.model.order import Order


@dataclass
class ProductViewModel:
    """Input/output: a product as shown on, and submitted from, the admin form.

    ``id`` is never taken from user input for new products; it is set
    only when editing an existing one.
    """

    id: int | None = None
    name: str = ""
    price: str = ""
    stock: str = ""
    description: str = ""
    details: str = ""


@dataclass
class OrderViewModel:
    """Input: the checkout form."""

    name: str = ""
    address: str = ""
    city: str = ""
    zip_code: str = ""
    country: str = ""

    def as_fields(self) -> dict[str, str]:
        return {
            "name": self.name,
            "address": self.address,
            "city": self.city,
            "zip_code": self.zip_code,
            "country": self.country,
        }


@dataclass(frozen=True)
class CartLineDTO:
    product_id: int
    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "10.99 EUR"
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    lines: list[CartLineDTO] = field(default_factory=list)
    total_quantity: int = 0
    total: str = "0.00"
    average: str = "0.00"


@dataclass(frozen=True)
class OrderLineDTO:
    product_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    id: int
    name: str
    address: str
    city: str
    zip_code: str
    country: str
    lines: list[OrderLineDTO]
    total: str
    date: str


def to_order_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        name=order.name,
        address=order.address,
        city=order.city,
        zip_code=order.zip_code,
        country=order.country,
        lines=[
            OrderLineDTO(
                product_name=line.product_name,
                quantity=line.quantity.value,
                unit_price=str(line.unit_price),
                line_total=str(line.line_total),
            )
            for line in order.lines
        ],
        total=str(order.total),
        date=order.date.strftime("%Y-%m-%d %H:%M UTC"),
    )
