"""Application service: Browse Catalog use case (query)."""

from __future__ import annotations

from pos.application.dto import ProductDTO
from pos.application.session import PosSession
from pos.domain.service.pin_registry import PinRegistry


class BrowseCatalogHandler:

    def __init__(self, pin_registry: PinRegistry) -> None:
        self._pin_registry = pin_registry

    def handle(
        self,
        session: PosSession,
        search_term: str | None = None,
        category: str | None = None,
    ) -> list[ProductDTO]:
        """Return the products to display, pinned first.

        Passing a search term or category also stores it on the session
        so later listings keep the same filter.
        """
        if search_term is not None:
            session.search_term = search_term
        if category is not None:
            session.selected_category = category or None

        pins = self._pin_registry.pins
        products = session.catalog.browse(
            search_term=session.search_term,
            category=session.selected_category,
            pins=pins,
        )
        return [ProductDTO.from_product(p, pinned=p.id in pins) for p in products]

    @staticmethod
    def categories(session: PosSession) -> list[str]:
        return session.catalog.categories

    @staticmethod
    def category_counts(session: PosSession) -> dict[str, int]:
        return session.catalog.category_counts()
