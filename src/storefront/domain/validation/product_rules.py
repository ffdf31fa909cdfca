"""Product form rules.

The rules for a submitted product live in one ordered table. Each field is
checked rule by rule and stops at its first failure, so an empty price is
reported as ``MissingPrice`` only. Fields never short-circuit each other:
a form with a bad name, price and stock reports all three.

Only one decimal separator is accepted for prices, the configured one.
"10,99" is ``PriceNotANumber`` when the separator is "." and "10.99" is
``PriceNotANumber`` when it is ",".
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Callable

from storefront.domain.exceptions import ValidationError

SUPPORTED_SEPARATORS = (".", ",")


class ProductRule(str, Enum):
    MISSING_NAME = "MissingName"
    MISSING_PRICE = "MissingPrice"
    PRICE_NOT_A_NUMBER = "PriceNotANumber"
    PRICE_NOT_GREATER_THAN_ZERO = "PriceNotGreaterThanZero"
    MISSING_QUANTITY = "MissingQuantity"
    STOCK_NOT_AN_INTEGER = "StockNotAnInteger"
    STOCK_NOT_GREATER_THAN_ZERO = "StockNotGreaterThanZero"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class FieldRule:
    """One row of the rule table: ``check`` returns True when the value passes."""

    field: str
    rule: ProductRule
    check: Callable[[str, str], bool]


# Stock is a count of units; anything past 18 digits is not a usable integer.
_STOCK_PATTERN = re.compile(r"^-?[0-9]{1,18}$")


def _price_pattern(decimal_separator: str) -> re.Pattern[str]:
    return re.compile(rf"^-?[0-9]+(?:{re.escape(decimal_separator)}[0-9]{{1,2}})?$")


def _is_present(value: str, _sep: str) -> bool:
    return bool(value)


def _is_price(value: str, sep: str) -> bool:
    return _price_pattern(sep).match(value) is not None


def _is_positive_price(value: str, sep: str) -> bool:
    return Decimal(value.replace(sep, ".")) > 0


def _is_integer(value: str, _sep: str) -> bool:
    return _STOCK_PATTERN.match(value) is not None


def _is_positive_integer(value: str, _sep: str) -> bool:
    return int(value) > 0


PRODUCT_RULES: tuple[FieldRule, ...] = (
    FieldRule("name", ProductRule.MISSING_NAME, _is_present),
    FieldRule("price", ProductRule.MISSING_PRICE, _is_present),
    FieldRule("price", ProductRule.PRICE_NOT_A_NUMBER, _is_price),
    FieldRule("price", ProductRule.PRICE_NOT_GREATER_THAN_ZERO, _is_positive_price),
    FieldRule("stock", ProductRule.MISSING_QUANTITY, _is_present),
    FieldRule("stock", ProductRule.STOCK_NOT_AN_INTEGER, _is_integer),
    FieldRule("stock", ProductRule.STOCK_NOT_GREATER_THAN_ZERO, _is_positive_integer),
)


def check_product(
    name: str | None,
    price: str | None,
    stock: str | None,
    decimal_separator: str = ".",
) -> list[ProductRule]:
    """Return the violated rules for a submitted product, in table order.

    An empty list means the submission is valid.
    """
    _assert_separator(decimal_separator)
    values = {
        "name": (name or "").strip(),
        "price": (price or "").strip(),
        "stock": (stock or "").strip(),
    }

    violations: list[ProductRule] = []
    failed_fields: set[str] = set()
    for row in PRODUCT_RULES:
        if row.field in failed_fields:
            continue
        if not row.check(values[row.field], decimal_separator):
            violations.append(row.rule)
            failed_fields.add(row.field)
    return violations


def parse_price(text: str, decimal_separator: str = ".") -> Decimal:
    """Convert a price that satisfies the price rules to a Decimal."""
    _assert_separator(decimal_separator)
    value = (text or "").strip()
    for row in PRODUCT_RULES:
        if row.field == "price" and not row.check(value, decimal_separator):
            raise ValidationError(f"Invalid price: {text!r}", [row.rule.value])
    return Decimal(value.replace(decimal_separator, "."))


def parse_stock(text: str) -> int:
    """Convert a stock value that satisfies the stock rules to an int."""
    value = (text or "").strip()
    for row in PRODUCT_RULES:
        if row.field == "stock" and not row.check(value, "."):
            raise ValidationError(f"Invalid stock: {text!r}", [row.rule.value])
    return int(value)


def format_price(amount: Decimal, decimal_separator: str = ".") -> str:
    """Render a stored price the way the form expects it back."""
    _assert_separator(decimal_separator)
    return f"{amount:.2f}".replace(".", decimal_separator)


def _assert_separator(decimal_separator: str) -> None:
    if decimal_separator not in SUPPORTED_SEPARATORS:
        raise ValueError(
            f"Unsupported decimal separator {decimal_separator!r}, "
            f"expected one of {SUPPORTED_SEPARATORS}"
        )
