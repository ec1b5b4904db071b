"""Application service: Today's Orders query."""

from __future__ import annotations

from datetime import datetime, timezone

import structlog

from pos.application.dto import SaleRecordDTO
from pos.application.session import PosSession
from pos.domain.exceptions import ServiceError
from pos.domain.gateway.sales_service import SalesService

logger = structlog.get_logger(__name__)


class TodaysOrdersHandler:

    def __init__(self, sales_service: SalesService, limit: int = 50) -> None:
        self._sales_service = sales_service
        self._limit = limit

    def refresh(self, session: PosSession) -> None:
        """Reload today's sales into the session.

        A failed fetch leaves an empty list; the list is informational
        only, so the cashier is not interrupted.
        """
        today = datetime.now(timezone.utc).date()
        try:
            session.todays_orders = self._sales_service.get_all(
                date_from=today, date_to=today, limit=self._limit
            )
        except ServiceError as exc:
            logger.error("Failed to fetch today's orders", error=str(exc))
            session.todays_orders = []

    def handle(self, session: PosSession) -> list[SaleRecordDTO]:
        return [SaleRecordDTO.from_record(record) for record in session.todays_orders]
