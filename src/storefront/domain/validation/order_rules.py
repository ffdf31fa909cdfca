"""Checkout form rules: every shipping field is required and the cart
must hold something."""

from __future__ import annotations

from enum import Enum


class OrderRule(str, Enum):
    CART_EMPTY = "CartEmpty"
    MISSING_NAME = "ErrorMissingName"
    MISSING_ADDRESS = "ErrorMissingAddress"
    MISSING_CITY = "ErrorMissingCity"
    MISSING_ZIP_CODE = "ErrorMissingZipCode"
    MISSING_COUNTRY = "ErrorMissingCountry"

    def __str__(self) -> str:
        return self.value


REQUIRED_FIELDS: tuple[tuple[str, OrderRule], ...] = (
    ("name", OrderRule.MISSING_NAME),
    ("address", OrderRule.MISSING_ADDRESS),
    ("city", OrderRule.MISSING_CITY),
    ("zip_code", OrderRule.MISSING_ZIP_CODE),
    ("country", OrderRule.MISSING_COUNTRY),
)


def check_order(fields: dict[str, str | None], cart_is_empty: bool) -> list[OrderRule]:
    """Return the violated checkout rules; ``fields`` maps field name to text."""
    violations: list[OrderRule] = []
    if cart_is_empty:
        violations.append(OrderRule.CART_EMPTY)
    for field_name, rule in REQUIRED_FIELDS:
        if not (fields.get(field_name) or "").strip():
            violations.append(rule)
    return violations
