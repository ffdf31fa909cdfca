"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import re

from storefront.application.product_service import ProductService
from storefront.domain.repository.cart import Cart
from storefront.infrastructure.config.settings import StorefrontSettings
from storefront.infrastructure.localization.message_catalog import (
    MessageCatalogLocalizer,
)
from storefront.infrastructure.persistence.json_cart_store import JsonCartStore
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

_SESSION_NAME = re.compile(r"^[A-Za-z0-9_-]+$")


def product_repository(settings: StorefrontSettings) -> JsonProductRepository:
    return JsonProductRepository(settings.data_dir / "products.json")


def order_repository(settings: StorefrontSettings) -> JsonOrderRepository:
    return JsonOrderRepository(settings.data_dir / "orders.json")


def cart_store(settings: StorefrontSettings, session: str) -> JsonCartStore:
    if not _SESSION_NAME.match(session):
        raise ValueError(f"Invalid session name {session!r}")
    return JsonCartStore(settings.data_dir / "carts" / f"{session}.json")


def product_service(settings: StorefrontSettings, cart: Cart) -> ProductService:
    return ProductService(
        product_repo=product_repository(settings),
        cart=cart,
        decimal_separator=settings.decimal_separator,
        currency=settings.currency,
    )


def localizer(settings: StorefrontSettings, language: str | None = None) -> MessageCatalogLocalizer:
    return MessageCatalogLocalizer(language or settings.language)
