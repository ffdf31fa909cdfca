"""Application service: Remove from Cart use case."""

from __future__ import annotations

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.cart import Cart


class RemoveFromCartHandler:

    def __init__(self, cart: Cart) -> None:
        self._cart = cart

    def handle(self, product_id: int) -> None:
        if self._cart.find_line(product_id) is None:
            raise EntityNotFoundError(f"Product #{product_id} is not in the cart")
        self._cart.remove_line(product_id)
