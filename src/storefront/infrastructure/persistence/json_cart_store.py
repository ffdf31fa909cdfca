"""Keeps a named session cart in a JSON file between CLI invocations.

Each line stores the full product snapshot taken when it was added, so a
reloaded cart still ignores catalog edits made in the meantime.
"""

from __future__ import annotations

import json
from pathlib import Path

from storefront.domain.model.cart import CartLine
from storefront.domain.repository.cart import Cart
from storefront.infrastructure.persistence.json_product_repository import (
    product_from_raw,
    product_to_raw,
)
from storefront.infrastructure.session.session_cart import SessionCart


class JsonCartStore:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def load(self) -> SessionCart:
        if not self._file_path.exists():
            return SessionCart()
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return SessionCart(
            [
                CartLine(product=product_from_raw(item["product"]), quantity=item["quantity"])
                for item in raw
            ]
        )

    def save(self, cart: Cart) -> None:
        raw = [
            {"product": product_to_raw(line.product), "quantity": line.quantity}
            for line in cart.lines
        ]
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )
