"""Application service: List Orders use case (query)."""

from __future__ import annotations

from storefront.application.dto import OrderDTO, to_order_dto
from storefront.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self) -> list[OrderDTO]:
        return [to_order_dto(order) for order in self._order_repo.list_all()]
