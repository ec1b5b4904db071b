"""JSON-file-backed implementation of CustomerService."""

from __future__ import annotations

from pathlib import Path

from pos.domain.exceptions import ServiceError
from pos.domain.gateway.customer_service import CustomerService
from pos.domain.model.product import Customer
from pos.infrastructure.persistence import json_file


class JsonCustomerService(CustomerService):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        json_file.ensure_file(self._file_path)

    def get_all(self, limit: int = 100) -> list[Customer]:
        raw = json_file.load(self._file_path)
        if not isinstance(raw, list):
            raise ServiceError(f"{self._file_path.name} must contain a list of customers")
        try:
            customers = [
                Customer(id=int(item["id"]), name=item["name"], phone=item.get("phone"))
                for item in raw
            ]
        except (KeyError, TypeError, ValueError) as exc:
            raise ServiceError(f"Malformed customer record in {self._file_path.name}") from exc
        return customers[:limit]
