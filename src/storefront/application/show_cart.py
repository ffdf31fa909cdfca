"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from storefront.application.dto import CartDTO, CartLineDTO
from storefront.domain.repository.cart import Cart


class ShowCartHandler:

    def __init__(self, cart: Cart) -> None:
        self._cart = cart

    def handle(self) -> CartDTO:
        return CartDTO(
            lines=[
                CartLineDTO(
                    product_id=line.product_id,
                    product_name=line.product.name,
                    quantity=line.quantity,
                    unit_price=str(line.product.price),
                    line_total=str(line.line_total),
                )
                for line in self._cart.lines
            ],
            total_quantity=self._cart.total_quantity,
            total=f"{self._cart.get_total_value():.2f}",
            average=f"{self._cart.get_average_value():.2f}",
        )
