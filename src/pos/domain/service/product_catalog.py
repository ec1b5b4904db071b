"""Domain service: Product Catalog.

Holds the product snapshot fetched when the session opened and answers
the two questions the sales screen asks of it: which products match the
cashier's search, and in which order to show them.

Everything here is a pure transformation over the snapshot.
"""

from __future__ import annotations

import locale
from collections.abc import Iterable, Set

from pos.domain.exceptions import EntityNotFoundError
from pos.domain.model.product import Product


class ProductCatalog:

    def __init__(self, products: Iterable[Product] = ()) -> None:
        self._products: list[Product] = list(products)
        self._categories = self._derive_categories(self._products)

    @property
    def products(self) -> list[Product]:
        return list(self._products)

    @property
    def categories(self) -> list[str]:
        """Distinct non-empty categories, in order of first appearance."""
        return list(self._categories)

    def category_counts(self) -> dict[str, int]:
        """Number of products in each category, in ``categories`` order."""
        counts = dict.fromkeys(self._categories, 0)
        for product in self._products:
            if product.category in counts:
                counts[product.category] += 1
        return counts

    def get(self, product_id: int) -> Product:
        for product in self._products:
            if product.id == product_id:
                return product
        raise EntityNotFoundError(f"Product #{product_id} not found")

    def filter(self, search_term: str = "", category: str | None = None) -> list[Product]:
        """Products whose name or SKU contains *search_term* (case-insensitive).

        When *category* is set the product must also belong to it.
        """
        needle = (search_term or "").casefold()
        return [
            product
            for product in self._products
            if self._matches_search(product, needle)
            and (category is None or product.category == category)
        ]

    @staticmethod
    def sort(products: Iterable[Product], pins: Set[int]) -> list[Product]:
        """Pinned products first, then by name within each group.

        ``sorted`` is stable, so products with equal names keep their
        catalog order.
        """
        return sorted(
            products,
            key=lambda p: (p.id not in pins, locale.strxfrm((p.name or "").casefold())),
        )

    def browse(
        self,
        search_term: str = "",
        category: str | None = None,
        pins: Set[int] = frozenset(),
    ) -> list[Product]:
        return self.sort(self.filter(search_term, category), pins)

    def __len__(self) -> int:
        return len(self._products)

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _matches_search(product: Product, needle: str) -> bool:
        if not needle:
            return True
        return needle in (product.name or "").casefold() or needle in (product.sku or "").casefold()

    @staticmethod
    def _derive_categories(products: list[Product]) -> list[str]:
        seen: dict[str, None] = {}
        for product in products:
            if isinstance(product.category, str) and product.category:
                seen.setdefault(product.category, None)
        return list(seen)
