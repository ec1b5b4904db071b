"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass

from pos.application.add_to_cart import AddToCartHandler, EnterQuantityHandler
from pos.application.browse_catalog import BrowseCatalogHandler
from pos.application.checkout import CheckoutHandler
from pos.application.open_session import OpenSessionHandler
from pos.application.select_customer import SelectCustomerHandler
from pos.application.todays_orders import TodaysOrdersHandler
from pos.application.toggle_pin import TogglePinHandler
from pos.application.update_cart import UpdateCartHandler
from pos.domain.gateway.notifier import Notifier
from pos.domain.service.pin_registry import PinRegistry
from pos.infrastructure.cli.notifier import ClickNotifier
from pos.infrastructure.config import Settings, get_settings
from pos.infrastructure.persistence.json_catalog_service import JsonCatalogService
from pos.infrastructure.persistence.json_customer_service import JsonCustomerService
from pos.infrastructure.persistence.json_key_value_store import JsonKeyValueStore
from pos.infrastructure.persistence.json_sales_service import JsonSalesService


def catalog_service(settings: Settings) -> JsonCatalogService:
    return JsonCatalogService(settings.data_dir / "products.json")


def customer_service(settings: Settings) -> JsonCustomerService:
    return JsonCustomerService(settings.data_dir / "customers.json")


def sales_service(settings: Settings) -> JsonSalesService:
    return JsonSalesService(settings.data_dir / "sales.json")


def pin_registry(settings: Settings) -> PinRegistry:
    store = JsonKeyValueStore(settings.data_dir / "store.json")
    return PinRegistry(store, key=settings.pinned_products_key)


@dataclass
class PosApp:
    """Every handler a POS front end needs, built against one data directory."""

    open_session: OpenSessionHandler
    browse_catalog: BrowseCatalogHandler
    toggle_pin: TogglePinHandler
    enter_quantity: EnterQuantityHandler
    add_to_cart: AddToCartHandler
    update_cart: UpdateCartHandler
    select_customer: SelectCustomerHandler
    todays_orders: TodaysOrdersHandler
    checkout: CheckoutHandler


def build_app(settings: Settings | None = None, notifier: Notifier | None = None) -> PosApp:
    settings = settings or get_settings()
    notifier = notifier or ClickNotifier()
    pins = pin_registry(settings)
    sales = sales_service(settings)
    todays_orders = TodaysOrdersHandler(sales, limit=settings.todays_orders_limit)

    return PosApp(
        open_session=OpenSessionHandler(
            catalog_service=catalog_service(settings),
            customer_service=customer_service(settings),
            todays_orders=todays_orders,
            notifier=notifier,
            catalog_limit=settings.catalog_limit,
            customer_limit=settings.customer_limit,
            default_payment=settings.default_payment_method,
            default_status=settings.default_sale_status,
        ),
        browse_catalog=BrowseCatalogHandler(pins),
        toggle_pin=TogglePinHandler(pins, notifier),
        enter_quantity=EnterQuantityHandler(),
        add_to_cart=AddToCartHandler(notifier),
        update_cart=UpdateCartHandler(),
        select_customer=SelectCustomerHandler(),
        todays_orders=todays_orders,
        checkout=CheckoutHandler(
            sales_service=sales,
            todays_orders=todays_orders,
            notifier=notifier,
            default_payment=settings.default_payment_method,
        ),
    )
