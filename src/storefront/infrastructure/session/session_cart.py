"""In-memory cart for one shopper session."""

from __future__ import annotations

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import CartLine
from storefront.domain.model.product import Product
from storefront.domain.repository.cart import Cart


class SessionCart(Cart):

    def __init__(self, lines: list[CartLine] | None = None) -> None:
        self._lines: dict[int, CartLine] = {}
        for line in lines or []:
            self._lines[line.product_id] = line

    def add_item(self, product: Product, quantity: int) -> None:
        if product.id is None:
            raise ValidationError("Only catalog products can be added to a cart")
        line = self._lines.get(product.id)
        if line is None:
            self._lines[product.id] = CartLine(product.snapshot(), quantity)
        else:
            line.increase(quantity)

    def remove_line(self, product_id: int) -> None:
        self._lines.pop(product_id, None)

    def clear(self) -> None:
        self._lines.clear()

    @property
    def lines(self) -> list[CartLine]:
        return list(self._lines.values())
