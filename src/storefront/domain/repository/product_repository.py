"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory)
live in the infrastructure layer and the test suite.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Generate the next unique product ID."""

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog, in catalog order."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product, assigning an ID when it has none."""

    @abstractmethod
    def delete(self, product_id: int) -> None:
        """Remove a product from the catalog; no-op when absent."""
