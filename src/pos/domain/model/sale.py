"""Sale — the transaction handed to the sales service at checkout.

A Sale is composed once per checkout attempt and is not kept locally
after submission. Line totals and the sale total are derived from the
cart at composition time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pos.domain.model.value_objects import Money, Quantity

WALK_IN_CUSTOMER = "Walk-in Customer"


class PaymentMethod(Enum):
    CASH = "cash"
    CREDIT = "credit"
    BANK_TRANSFER = "bank_transfer"
    CARD = "card"


class SaleStatus(Enum):
    COMPLETED = "completed"
    PENDING = "pending"
    PROCESSING = "processing"


@dataclass(frozen=True)
class SaleLineItem:
    product_id: int
    quantity: Quantity
    unit_price: Money

    @property
    def total_price(self) -> Money:
        return self.unit_price * self.quantity


@dataclass(frozen=True)
class Sale:
    customer_id: int | None
    customer_name: str
    items: tuple[SaleLineItem, ...]
    total_amount: Money
    payment_method: PaymentMethod
    status: SaleStatus
    notes: str
    discount: Money = field(default_factory=Money.zero)
    sale_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_walk_in(self) -> bool:
        return self.customer_id is None

    def to_payload(self) -> dict[str, Any]:
        """Render the sale in the wire format the sales service accepts."""
        return {
            "customerId": self.customer_id,
            "customerName": self.customer_name,
            "items": [
                {
                    "productId": item.product_id,
                    "quantity": str(item.quantity),
                    "unitPrice": f"{item.unit_price.amount:.2f}",
                    "totalPrice": f"{item.total_price.amount:.2f}",
                }
                for item in self.items
            ],
            "totalAmount": f"{self.total_amount.amount:.2f}",
            "discount": f"{self.discount.amount:.2f}",
            "paymentMethod": self.payment_method.value,
            "status": self.status.value,
            "saleDate": self.sale_date.isoformat(),
            "notes": self.notes,
        }


@dataclass(frozen=True)
class SaleRecord:
    """A previously recorded sale, as listed in today's orders."""

    id: int
    customer_name: str
    total_amount: Money
    payment_method: str
    status: str
    sale_date: datetime
    item_count: int = 0
