"""Domain service: Stock removal at checkout.

Coordinates the cross-aggregate operation of draining product stock for
every line of a cart.

The two-phase approach (validate-then-mutate) ensures the catalog is never
left with only some lines deducted when one product is short.
"""

from __future__ import annotations

from collections.abc import Iterable

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.cart import CartLine
from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository


class StockService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def check_available(self, lines: Iterable[CartLine]) -> list[tuple[Product, int]]:
        """Load the current product for every line and check its stock.

        Returns (product, quantity) pairs ready for ``remove_stock``.
        """
        pending: list[tuple[Product, int]] = []
        for line in lines:
            product = self._product_repo.get_by_id(line.product_id)
            if product is None:
                raise EntityNotFoundError(
                    f"Product '{line.product.name}' is no longer in the catalog"
                )
            if line.quantity > product.quantity:
                raise ValidationError(
                    f"Insufficient stock for {product.name} "
                    f"(need {line.quantity}, have {product.quantity} available)"
                )
            pending.append((product, line.quantity))
        return pending

    def remove_stock_for(self, lines: Iterable[CartLine]) -> None:
        """Deduct every line's quantity from the catalog.

        Phase 1 checks all lines before anything is written. Phase 2
        deducts and persists; products left at zero stock are removed
        from the catalog.
        """
        pending = self.check_available(lines)

        for product, qty in pending:
            product.remove_stock(qty)
            if product.is_sold_out:
                self._product_repo.delete(product.id)  # type: ignore[arg-type]
            else:
                self._product_repo.save(product)
