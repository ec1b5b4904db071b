"""Runtime settings, read from ``POS_*`` environment variables or ``.env``."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from pos.domain.model.sale import PaymentMethod, SaleStatus
from pos.domain.service.pin_registry import PINNED_PRODUCTS_KEY


class Settings(BaseSettings):
    data_dir: Path = Path("data")
    pinned_products_key: str = PINNED_PRODUCTS_KEY
    catalog_limit: int = 100
    customer_limit: int = 100
    todays_orders_limit: int = 50
    default_payment_method: PaymentMethod = PaymentMethod.CASH
    default_sale_status: SaleStatus = SaleStatus.COMPLETED
    log_level: str = "WARNING"
    log_json: bool = False

    model_config = SettingsConfigDict(
        env_prefix="POS_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
