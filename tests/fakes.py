"""In-memory fakes for testing.

These implement the same abstract interfaces as the JSON adapters
but keep everything in memory. No file I/O, no side effects.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from pos.domain.exceptions import ServiceError
from pos.domain.gateway.catalog_service import CatalogService
from pos.domain.gateway.customer_service import CustomerService
from pos.domain.gateway.key_value_store import KeyValueStore
from pos.domain.gateway.notifier import NotificationKind, Notifier
from pos.domain.gateway.sales_service import SalesService, ServiceResult
from pos.domain.model.product import Customer, Product
from pos.domain.model.sale import Sale, SaleRecord
from pos.domain.model.value_objects import Money


def make_product(
    id: int = 1,
    name: str = "Hinge",
    sku: str = "H1",
    price: str = "50",
    category: str | None = "Hardware",
    unit: str = "pcs",
) -> Product:
    return Product(
        id=id,
        name=name,
        sku=sku,
        price=Money.of(price),
        stock=Decimal("100"),
        unit=unit,
        category=category,
    )


class FakeCatalogService(CatalogService):

    def __init__(self, products: list[Product] | None = None, fail: bool = False) -> None:
        self._products = list(products or [])
        self._fail = fail

    def get_all(self, status: str | None = "active", limit: int = 100) -> list[Product]:
        if self._fail:
            raise ServiceError("catalog unavailable")
        return [p for p in self._products if status is None or p.status == status][:limit]


class FakeCustomerService(CustomerService):

    def __init__(self, customers: list[Customer] | None = None, fail: bool = False) -> None:
        self._customers = list(customers or [])
        self._fail = fail

    def get_all(self, limit: int = 100) -> list[Customer]:
        if self._fail:
            raise ServiceError("customers unavailable")
        return self._customers[:limit]


class FakeSalesService(SalesService):
    """Records created sales; can be told to refuse or to blow up."""

    def __init__(
        self,
        result: ServiceResult | None = None,
        error: ServiceError | None = None,
        fail_get_all: bool = False,
    ) -> None:
        self.result = result or ServiceResult(success=True)
        self.error = error
        self.fail_get_all = fail_get_all
        self.created: list[Sale] = []
        self.get_all_calls = 0
        self.on_create = None

    def get_all(self, date_from: date, date_to: date, limit: int = 50) -> list[SaleRecord]:
        self.get_all_calls += 1
        if self.fail_get_all:
            raise ServiceError("sales unavailable")
        records = [
            SaleRecord(
                id=i,
                customer_name=sale.customer_name,
                total_amount=sale.total_amount,
                payment_method=sale.payment_method.value,
                status=sale.status.value,
                sale_date=sale.sale_date,
                item_count=len(sale.items),
            )
            for i, sale in enumerate(self.created, start=1)
        ]
        return records[:limit]

    def create(self, sale: Sale) -> ServiceResult:
        if self.on_create is not None:
            self.on_create(sale)
        if self.error is not None:
            raise self.error
        if self.result.success:
            self.created.append(sale)
        return self.result


class FakeKeyValueStore(KeyValueStore):

    def __init__(self, data: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(data or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class RecordingNotifier(Notifier):

    def __init__(self) -> None:
        self.messages: list[tuple[NotificationKind, str, str]] = []

    def notify(self, kind: NotificationKind, title: str, message: str) -> None:
        self.messages.append((kind, title, message))

    @property
    def titles(self) -> list[str]:
        return [title for _, title, _ in self.messages]
