"""JSON-file-backed implementation of SalesService.

Sales are stored in the same payload shape the sales API accepts, with
an ``id`` assigned on creation.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import InvalidOperation
from pathlib import Path

from pos.domain.exceptions import ServiceError, ValidationError
from pos.domain.gateway.sales_service import SalesService, ServiceResult
from pos.domain.model.sale import Sale, SaleRecord
from pos.domain.model.value_objects import Money
from pos.infrastructure.persistence import json_file


class JsonSalesService(SalesService):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        json_file.ensure_file(self._file_path)

    # --- SalesService interface -----------------------------------------------

    def get_all(self, date_from: date, date_to: date, limit: int = 50) -> list[SaleRecord]:
        records = [self._to_record(raw) for raw in self._load_raw()]
        records = [r for r in records if date_from <= r.sale_date.date() <= date_to]
        records.sort(key=lambda r: r.sale_date, reverse=True)
        return records[:limit]

    def create(self, sale: Sale) -> ServiceResult:
        sales = self._load_raw()
        sale_id = self._next_id(sales)
        sales.append({"id": sale_id, **sale.to_payload()})
        json_file.persist(self._file_path, sales)
        return ServiceResult(success=True, message="Sale recorded", data={"id": sale_id})

    # --- Serialization --------------------------------------------------------

    def _next_id(self, sales: list) -> int:
        try:
            ids = [int(s["id"]) for s in sales]
        except (KeyError, TypeError, ValueError) as exc:
            raise ServiceError(f"{self._file_path.name} holds a sale without a valid id") from exc
        return max(ids, default=0) + 1

    @staticmethod
    def _to_record(raw: dict) -> SaleRecord:
        try:
            sale_date = datetime.fromisoformat(raw["saleDate"])
            if sale_date.tzinfo is None:
                # Stored dates are written in UTC.
                sale_date = sale_date.replace(tzinfo=timezone.utc)
            return SaleRecord(
                id=int(raw["id"]),
                customer_name=raw["customerName"],
                total_amount=Money.of(raw["totalAmount"]),
                payment_method=raw["paymentMethod"],
                status=raw["status"],
                sale_date=sale_date,
                item_count=len(raw.get("items", [])),
            )
        except (KeyError, TypeError, ValueError, InvalidOperation, ValidationError) as exc:
            raise ServiceError(f"Malformed sale record: {raw!r}") from exc

    def _load_raw(self) -> list[dict]:
        raw = json_file.load(self._file_path)
        if not isinstance(raw, list):
            raise ServiceError(f"{self._file_path.name} must contain a list of sales")
        return raw
