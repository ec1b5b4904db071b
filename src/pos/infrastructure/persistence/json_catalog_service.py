"""JSON-file-backed implementation of CatalogService."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from pathlib import Path

from pos.domain.exceptions import ServiceError, ValidationError
from pos.domain.gateway.catalog_service import CatalogService
from pos.domain.model.product import Product
from pos.domain.model.value_objects import DEFAULT_CURRENCY, Money
from pos.infrastructure.persistence import json_file


class JsonCatalogService(CatalogService):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        json_file.ensure_file(self._file_path)

    # --- CatalogService interface ---------------------------------------------

    def get_all(self, status: str | None = "active", limit: int = 100) -> list[Product]:
        products = [self._to_domain(raw) for raw in self._load_raw()]
        if status is not None:
            products = [p for p in products if p.status == status]
        return products[:limit]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        try:
            return Product(
                id=int(raw["id"]),
                name=raw["name"],
                sku=raw.get("sku", ""),
                price=Money(Decimal(str(raw["price"])), raw.get("currency", DEFAULT_CURRENCY)),
                stock=Decimal(str(raw.get("stock", "0"))),
                unit=raw.get("unit", "pcs"),
                category=raw.get("category") or None,
                status=raw.get("status", "active"),
            )
        except (KeyError, TypeError, ValueError, InvalidOperation, ValidationError) as exc:
            raise ServiceError(f"Malformed product record: {raw!r}") from exc

    def _load_raw(self) -> list[dict]:
        raw = json_file.load(self._file_path)
        if not isinstance(raw, list):
            raise ServiceError(f"{self._file_path.name} must contain a list of products")
        return raw
