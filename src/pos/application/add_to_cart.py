"""Application service: Add To Cart use cases.

Covers the two ways a product lands in the cart: the one-tap add (one
unit) and the custom quantity typed next to the product.
"""

from __future__ import annotations

from decimal import Decimal

from pos.application.dto import CartDTO
from pos.application.session import PosSession
from pos.domain.exceptions import InvalidQuantityError
from pos.domain.gateway.notifier import NotificationKind, Notifier
from pos.domain.model.value_objects import Quantity, is_quantity_text, parse_quantity


class EnterQuantityHandler:
    """Keeps the free-text quantity the cashier is typing for a product."""

    def handle(self, session: PosSession, product_id: int, text: str) -> bool:
        """Store *text* if it still looks like a number.

        Returns False, leaving the previous input in place, for anything
        else (letters, a second decimal point, a sign, ...).
        """
        if not is_quantity_text(text):
            return False
        session.quantity_inputs[product_id] = text
        return True


class AddToCartHandler:

    def __init__(self, notifier: Notifier) -> None:
        self._notifier = notifier

    def handle(
        self,
        session: PosSession,
        product_id: int,
        quantity: Quantity | Decimal | int = 1,
    ) -> CartDTO:
        """Add *quantity* of a catalog product to the session's cart."""
        session.ensure_idle()
        added = quantity if isinstance(quantity, Quantity) else Quantity(quantity)
        product = session.catalog.get(product_id)
        line = session.cart.add(product, added)
        session.quantity_inputs.pop(product_id, None)

        self._notifier.notify(
            NotificationKind.SUCCESS,
            "Added to Cart",
            f"{added} {line.unit} of {line.name} added to cart",
        )
        return CartDTO.from_cart(session.cart)

    def handle_custom(self, session: PosSession, product_id: int) -> CartDTO:
        """Add the quantity typed for *product_id*.

        Raises InvalidQuantityError, after notifying the cashier, when the
        typed value is empty, zero or not a number. The cart is unchanged.
        """
        try:
            quantity = parse_quantity(session.quantity_inputs.get(product_id))
        except InvalidQuantityError:
            self._notifier.notify(
                NotificationKind.ERROR, "Invalid Quantity", "Please enter a valid quantity"
            )
            raise
        return self.handle(session, product_id, quantity)
