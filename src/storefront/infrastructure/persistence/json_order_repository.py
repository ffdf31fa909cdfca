"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.order import Order, OrderLine
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money, Quantity
from storefront.domain.repository.order_repository import OrderRepository


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> int:
        orders = self._load_raw()
        if not orders:
            return 1
        return max(o["id"] for o in orders) + 1

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._load_raw():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Order]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, order: Order) -> None:
        orders = self._load_raw()

        if order.id is None:
            order.id = self.next_id()

        # Upsert: replace if exists, otherwise append
        for i, raw in enumerate(orders):
            if raw["id"] == order.id:
                orders[i] = self._to_raw(order)
                break
        else:
            orders.append(self._to_raw(order))

        self._persist_raw(orders)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "name": order.name,
            "address": order.address,
            "city": order.city,
            "zip_code": order.zip_code,
            "country": order.country,
            "date": order.date.isoformat(),
            "lines": [
                {
                    "product_id": line.product_id,
                    "product_name": line.product_name,
                    "quantity": line.quantity.value,
                    "unit_price": str(line.unit_price.amount),
                    "currency": line.unit_price.currency,
                }
                for line in order.lines
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        lines = [
            OrderLine(
                product_id=item["product_id"],
                product_name=item["product_name"],
                quantity=Quantity(item["quantity"]),
                unit_price=Money(
                    Decimal(item["unit_price"]), item.get("currency", DEFAULT_CURRENCY)
                ),
            )
            for item in raw["lines"]
        ]
        return Order(
            id=raw["id"],
            name=raw["name"],
            address=raw["address"],
            city=raw["city"],
            zip_code=raw["zip_code"],
            country=raw["country"],
            lines=lines,
            date=datetime.fromisoformat(raw["date"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, orders: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(orders, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
