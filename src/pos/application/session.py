"""Per-terminal sales session state.

A PosSession is everything the sales screen remembers between cashier
actions: the catalog snapshot, the cart, and the pending selections that
go into the next sale. Handlers read and update it; nothing else does.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from pos.domain.exceptions import CheckoutInProgressError
from pos.domain.model.cart import Cart
from pos.domain.model.product import Customer
from pos.domain.model.sale import PaymentMethod, SaleRecord, SaleStatus
from pos.domain.service.product_catalog import ProductCatalog


class CheckoutState(Enum):
    """Where the session is in a checkout attempt; IDLE between attempts."""

    IDLE = "IDLE"
    VALIDATING = "VALIDATING"
    EMPTY_ERROR = "EMPTY_ERROR"
    SUBMITTING = "SUBMITTING"
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"


@dataclass
class PosSession:
    catalog: ProductCatalog = field(default_factory=ProductCatalog)
    customers: list[Customer] = field(default_factory=list)
    todays_orders: list[SaleRecord] = field(default_factory=list)
    cart: Cart = field(default_factory=Cart)
    selected_customer: Customer | None = None
    payment_method: PaymentMethod = PaymentMethod.CASH
    sale_status: SaleStatus = SaleStatus.COMPLETED
    search_term: str = ""
    selected_category: str | None = None
    # Free-text quantity being typed next to each product, keyed by product ID.
    quantity_inputs: dict[int, str] = field(default_factory=dict)
    submitting: bool = False
    checkout_state: CheckoutState = CheckoutState.IDLE

    def ensure_idle(self) -> None:
        """Raise if a sale submission is still pending."""
        if self.submitting:
            raise CheckoutInProgressError("A sale is already being submitted")

    def reset_after_sale(self, default_payment: PaymentMethod) -> None:
        self.cart.clear()
        self.selected_customer = None
        self.quantity_inputs.clear()
        self.payment_method = default_payment
