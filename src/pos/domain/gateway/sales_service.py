"""Port for the external sales service."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from pos.domain.model.sale import Sale, SaleRecord


@dataclass(frozen=True)
class ServiceResult:
    """Outcome of a write call: the service may refuse with a message."""

    success: bool
    message: str | None = None
    data: dict[str, Any] = field(default_factory=dict)


class SalesService(ABC):

    @abstractmethod
    def get_all(self, date_from: date, date_to: date, limit: int = 50) -> list[SaleRecord]:
        """Return sales dated within [date_from, date_to], newest first."""

    @abstractmethod
    def create(self, sale: Sale) -> ServiceResult:
        """Record a new sale.

        A refused sale is reported through ``ServiceResult.success``;
        transport failures raise ServiceError.
        """
