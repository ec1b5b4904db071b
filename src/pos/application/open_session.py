"""Application service: Open Session use case.

Fetches the catalog, the customer list and today's orders, and builds a
fresh PosSession around them. A failing collaborator never prevents the
session from opening; it just starts with less data.
"""

from __future__ import annotations

import structlog

from pos.application.session import PosSession
from pos.application.todays_orders import TodaysOrdersHandler
from pos.domain.exceptions import ServiceError
from pos.domain.gateway.catalog_service import CatalogService
from pos.domain.gateway.customer_service import CustomerService
from pos.domain.gateway.notifier import NotificationKind, Notifier
from pos.domain.model.product import Customer, Product
from pos.domain.model.sale import PaymentMethod, SaleStatus
from pos.domain.service.product_catalog import ProductCatalog

logger = structlog.get_logger(__name__)


class OpenSessionHandler:

    def __init__(
        self,
        catalog_service: CatalogService,
        customer_service: CustomerService,
        todays_orders: TodaysOrdersHandler,
        notifier: Notifier,
        catalog_limit: int = 100,
        customer_limit: int = 100,
        default_payment: PaymentMethod = PaymentMethod.CASH,
        default_status: SaleStatus = SaleStatus.COMPLETED,
    ) -> None:
        self._catalog_service = catalog_service
        self._customer_service = customer_service
        self._todays_orders = todays_orders
        self._notifier = notifier
        self._catalog_limit = catalog_limit
        self._customer_limit = customer_limit
        self._default_payment = default_payment
        self._default_status = default_status

    def handle(self) -> PosSession:
        session = PosSession(
            catalog=ProductCatalog(self._fetch_products()),
            customers=self._fetch_customers(),
            payment_method=self._default_payment,
            sale_status=self._default_status,
        )
        self._todays_orders.refresh(session)
        logger.info(
            "POS session opened",
            products=len(session.catalog),
            categories=len(session.catalog.categories),
            customers=len(session.customers),
        )
        return session

    def _fetch_products(self) -> list[Product]:
        try:
            return self._catalog_service.get_all(status="active", limit=self._catalog_limit)
        except ServiceError as exc:
            logger.error("Failed to fetch products", error=str(exc))
            self._notifier.notify(NotificationKind.ERROR, "Error", "Failed to load products")
            return []

    def _fetch_customers(self) -> list[Customer]:
        try:
            return self._customer_service.get_all(limit=self._customer_limit)
        except ServiceError as exc:
            logger.error("Failed to fetch customers", error=str(exc))
            return []
