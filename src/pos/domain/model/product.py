"""Catalog snapshots: Product and Customer.

Both are read-only copies of what the catalog and customer services
returned when the session was opened. Nothing in the POS mutates them.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from pos.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A product as offered on the sales screen."""

    id: int
    name: str
    sku: str
    price: Money
    stock: Decimal = Decimal("0")
    unit: str = "pcs"
    category: str | None = None
    status: str = "active"


@dataclass(frozen=True)
class Customer:
    """A registered customer. A sale without one is a walk-in sale."""

    id: int
    name: str
    phone: str | None = None
