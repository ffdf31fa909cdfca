"""Application service: Checkout use case.

Turns the cart into a recorded order. Orchestrates the checkout form
rules, the stock service (catalog side) and the Order aggregate, then
empties the cart.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import OrderDTO, OrderViewModel, to_order_dto
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import Order, OrderLine
from storefront.domain.repository.cart import Cart
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.stock_service import StockService
from storefront.domain.validation.order_rules import check_order

logger = structlog.get_logger(__name__)


class CheckoutHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        cart: Cart,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._cart = cart

    def handle(self, view: OrderViewModel) -> OrderDTO:
        violations = check_order(view.as_fields(), cart_is_empty=self._cart.is_empty)
        if violations:
            raise ValidationError(
                "Invalid order: " + ", ".join(v.value for v in violations),
                [v.value for v in violations],
            )

        lines = list(self._cart.lines)
        order = Order.create(
            name=view.name,
            address=view.address,
            city=view.city,
            zip_code=view.zip_code,
            country=view.country,
            lines=[OrderLine.from_cart_line(line) for line in lines],
        )
        # Mixed currencies fail here, before any stock is touched
        total = order.total

        # Stock first (validates every line before any write), then the order
        StockService(self._product_repo).remove_stock_for(lines)
        self._order_repo.save(order)
        self._cart.clear()

        logger.info(
            "order_placed",
            order_id=order.id,
            lines=len(order.lines),
            total=str(total.amount),
        )
        return to_order_dto(order)
