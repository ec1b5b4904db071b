"""Port for the external product catalog service.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON file, HTTP, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pos.domain.model.product import Product


class CatalogService(ABC):

    @abstractmethod
    def get_all(self, status: str | None = "active", limit: int = 100) -> list[Product]:
        """Return up to *limit* products, optionally filtered by status.

        Raises ServiceError if the catalog cannot be reached or read.
        """
