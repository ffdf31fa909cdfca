"""In-memory fakes for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

from storefront.application.localizer import Localizer
from storefront.domain.model.order import Order
from storefront.domain.model.product import Product
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[int, Product] = {}
        for p in products or []:
            self._store[p.id] = p
        self.saved: list[Product] = []

    def next_id(self) -> int:
        return max(self._store, default=0) + 1

    def get_by_id(self, product_id: int) -> Product | None:
        return self._store.get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        if product.id is None:
            product.id = self.next_id()
        self._store[product.id] = product
        self.saved.append(product)

    def delete(self, product_id: int) -> None:
        self._store.pop(product_id, None)


class FakeOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[int, Order] = {}
        self._next_id = 1

    def next_id(self) -> int:
        return self._next_id

    def get_by_id(self, order_id: int) -> Order | None:
        return self._store.get(order_id)

    def list_all(self) -> list[Order]:
        return list(self._store.values())

    def save(self, order: Order) -> None:
        if order.id is None:
            order.id = self._next_id
            self._next_id += 1
        self._store[order.id] = order


class EchoLocalizer(Localizer):
    """Returns every key unchanged."""

    def get(self, key: str) -> str:
        return key
