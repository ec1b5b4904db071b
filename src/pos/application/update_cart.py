"""Application service: Update Cart use case.

Quantity changes and removals on lines already in the cart.
"""

from __future__ import annotations

from decimal import Decimal

from pos.application.dto import CartDTO
from pos.application.session import PosSession


class UpdateCartHandler:

    def set_quantity(self, session: PosSession, product_id: int, quantity: Decimal | int) -> CartDTO:
        """Set an absolute quantity; zero or less removes the line."""
        session.ensure_idle()
        session.cart.set_quantity(product_id, quantity)
        return CartDTO.from_cart(session.cart)

    def increment(self, session: PosSession, product_id: int) -> CartDTO:
        session.ensure_idle()
        session.cart.increment(product_id)
        return CartDTO.from_cart(session.cart)

    def decrement(self, session: PosSession, product_id: int) -> CartDTO:
        session.ensure_idle()
        session.cart.decrement(product_id)
        return CartDTO.from_cart(session.cart)

    def remove(self, session: PosSession, product_id: int) -> CartDTO:
        session.ensure_idle()
        session.cart.remove(product_id)
        return CartDTO.from_cart(session.cart)

    @staticmethod
    def show(session: PosSession) -> CartDTO:
        return CartDTO.from_cart(session.cart)
