"""Domain service: Checkout Composer.

Turns the cart plus the cashier's selections into a Sale. Composition is
pure; submitting the sale is the application layer's job.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pos.domain.exceptions import EmptyCartError
from pos.domain.model.cart import Cart
from pos.domain.model.product import Customer
from pos.domain.model.sale import (
    WALK_IN_CUSTOMER,
    PaymentMethod,
    Sale,
    SaleLineItem,
    SaleStatus,
)
from pos.domain.model.value_objects import Money


class CheckoutComposer:

    def compose(
        self,
        cart: Cart,
        customer: Customer | None,
        payment_method: PaymentMethod,
        status: SaleStatus,
        now: datetime | None = None,
    ) -> Sale:
        """Build the Sale for the current cart.

        Raises EmptyCartError if there is nothing to sell.
        """
        if cart.is_empty:
            raise EmptyCartError("Cart is empty")

        items = tuple(
            SaleLineItem(
                product_id=line.product_id,
                quantity=line.quantity,
                unit_price=line.unit_price,
            )
            for line in cart.lines
        )

        return Sale(
            customer_id=customer.id if customer else None,
            customer_name=customer.name if customer else WALK_IN_CUSTOMER,
            items=items,
            total_amount=cart.total(),
            discount=Money.zero(),
            payment_method=payment_method,
            status=status,
            sale_date=now or datetime.now(timezone.utc),
            notes=f"Sale to {customer.name}" if customer else "Walk-in customer sale",
        )
