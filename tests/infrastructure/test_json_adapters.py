"""Tests for the JSON-file-backed adapters (real files under tmp_path)."""

import json
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from pos.domain.exceptions import ServiceError
from pos.domain.model.cart import Cart
from pos.domain.model.sale import PaymentMethod, SaleStatus
from pos.domain.model.value_objects import Money
from pos.domain.service.checkout_composer import CheckoutComposer
from pos.domain.service.pin_registry import PINNED_PRODUCTS_KEY, PinRegistry
from pos.infrastructure.persistence.json_catalog_service import JsonCatalogService
from pos.infrastructure.persistence.json_customer_service import JsonCustomerService
from pos.infrastructure.persistence.json_key_value_store import JsonKeyValueStore
from pos.infrastructure.persistence.json_sales_service import JsonSalesService
from tests.fakes import make_product

PRODUCTS = [
    {"id": 1, "name": "Hinge", "sku": "H1", "price": "50.00", "stock": "40",
     "unit": "pcs", "category": "Hardware", "status": "active"},
    {"id": 2, "name": "Old Lock", "sku": "L9", "price": "900", "status": "inactive"},
    {"id": 3, "name": "Wire", "sku": "W1", "price": 120, "unit": "m", "category": ""},
]


def _write(path, data) -> None:
    path.write_text(json.dumps(data), encoding="utf-8")


class TestJsonCatalogService:

    def test_missing_file_is_created_empty(self, tmp_path):
        service = JsonCatalogService(tmp_path / "data" / "products.json")
        assert service.get_all() == []
        assert (tmp_path / "data" / "products.json").read_text() == "[]"

    def test_reads_active_products(self, tmp_path):
        path = tmp_path / "products.json"
        _write(path, PRODUCTS)
        products = JsonCatalogService(path).get_all()
        assert [p.id for p in products] == [1, 3]
        hinge = products[0]
        assert hinge.price == Money.of("50")
        assert hinge.stock == Decimal("40")
        assert hinge.category == "Hardware"
        assert products[1].category is None
        assert products[1].unit == "m"

    def test_status_none_and_limit(self, tmp_path):
        path = tmp_path / "products.json"
        _write(path, PRODUCTS)
        service = JsonCatalogService(path)
        assert len(service.get_all(status=None)) == 3
        assert len(service.get_all(status=None, limit=2)) == 2

    def test_corrupt_file_raises_service_error(self, tmp_path):
        path = tmp_path / "products.json"
        path.write_text("{oops", encoding="utf-8")
        with pytest.raises(ServiceError, match="Cannot read products.json"):
            JsonCatalogService(path).get_all()

    def test_malformed_record_raises_service_error(self, tmp_path):
        path = tmp_path / "products.json"
        _write(path, [{"id": 1, "name": "No price"}])
        with pytest.raises(ServiceError, match="Malformed product"):
            JsonCatalogService(path).get_all()


class TestJsonCustomerService:

    def test_reads_customers(self, tmp_path):
        path = tmp_path / "customers.json"
        _write(path, [{"id": 1, "name": "Ali", "phone": "0300"}, {"id": "2", "name": "Sara"}])
        customers = JsonCustomerService(path).get_all(limit=10)
        assert [(c.id, c.name, c.phone) for c in customers] == [(1, "Ali", "0300"), (2, "Sara", None)]

    def test_not_a_list(self, tmp_path):
        path = tmp_path / "customers.json"
        _write(path, {"customers": []})
        with pytest.raises(ServiceError):
            JsonCustomerService(path).get_all()


class TestJsonSalesService:

    def _sale(self, when: datetime):
        cart = Cart()
        cart.add(make_product(id=1, price="50"), 2)
        return CheckoutComposer().compose(
            cart, None, PaymentMethod.CASH, SaleStatus.COMPLETED, now=when
        )

    def test_create_assigns_sequential_ids(self, tmp_path):
        path = tmp_path / "sales.json"
        service = JsonSalesService(path)
        now = datetime.now(timezone.utc)
        first = service.create(self._sale(now))
        second = service.create(self._sale(now))
        assert first.success and second.success
        assert (first.data["id"], second.data["id"]) == (1, 2)
        stored = json.loads(path.read_text())
        assert stored[0]["id"] == 1
        assert stored[0]["customerName"] == "Walk-in Customer"
        assert stored[0]["totalAmount"] == "100.00"

    def test_get_all_filters_by_date_newest_first(self, tmp_path):
        service = JsonSalesService(tmp_path / "sales.json")
        today = datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)
        service.create(self._sale(today - timedelta(days=1)))
        service.create(self._sale(today))
        service.create(self._sale(today + timedelta(hours=2)))

        records = service.get_all(date(2024, 5, 1), date(2024, 5, 1))
        assert [r.id for r in records] == [3, 2]
        assert records[0].total_amount == Money.of("100")
        assert records[0].item_count == 1
        assert records[0].payment_method == "cash"

    def test_get_all_limit(self, tmp_path):
        service = JsonSalesService(tmp_path / "sales.json")
        now = datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)
        for _ in range(3):
            service.create(self._sale(now))
        assert len(service.get_all(date(2024, 5, 1), date(2024, 5, 1), limit=2)) == 2

    @pytest.mark.parametrize("amount", ["abc", "-5", None])
    def test_bad_stored_amount_raises_service_error(self, tmp_path, amount):
        path = tmp_path / "sales.json"
        _write(path, [{"id": 1, "customerName": "Ali", "totalAmount": amount,
                       "paymentMethod": "cash", "status": "completed",
                       "saleDate": "2024-05-01T09:00:00+00:00"}])
        with pytest.raises(ServiceError, match="Malformed sale record"):
            JsonSalesService(path).get_all(date(2024, 5, 1), date(2024, 5, 1))

    def test_naive_stored_date_is_read_as_utc(self, tmp_path):
        path = tmp_path / "sales.json"
        service = JsonSalesService(path)
        service.create(self._sale(datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)))
        stored = json.loads(path.read_text())
        stored.append({**stored[0], "id": 2, "saleDate": "2024-05-01T11:00:00"})
        _write(path, stored)

        records = service.get_all(date(2024, 5, 1), date(2024, 5, 1))

        assert [r.id for r in records] == [2, 1]
        assert records[0].sale_date.tzinfo is timezone.utc

    def test_create_over_record_without_id_raises_service_error(self, tmp_path):
        path = tmp_path / "sales.json"
        _write(path, [{"customerName": "Ali"}])
        with pytest.raises(ServiceError, match="without a valid id"):
            JsonSalesService(path).create(self._sale(datetime.now(timezone.utc)))
        assert json.loads(path.read_text()) == [{"customerName": "Ali"}]


class TestJsonKeyValueStore:

    def test_get_missing(self, tmp_path):
        assert JsonKeyValueStore(tmp_path / "store.json").get("x") is None

    def test_set_then_get_survives_reopen(self, tmp_path):
        path = tmp_path / "store.json"
        JsonKeyValueStore(path).set("theme", "dark")
        assert JsonKeyValueStore(path).get("theme") == "dark"

    def test_pins_survive_restart(self, tmp_path):
        path = tmp_path / "store.json"
        PinRegistry(JsonKeyValueStore(path)).toggle(7)
        assert PinRegistry(JsonKeyValueStore(path)).pins == frozenset({7})
        assert json.loads(path.read_text())[PINNED_PRODUCTS_KEY] == "[7]"

    def test_corrupt_store_degrades_pins_to_empty(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text("{not json", encoding="utf-8")
        assert PinRegistry(JsonKeyValueStore(path)).pins == frozenset()
