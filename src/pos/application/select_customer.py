"""Application service: Select Customer use case."""

from __future__ import annotations

from pos.application.session import PosSession
from pos.domain.exceptions import EntityNotFoundError
from pos.domain.model.product import Customer


class SelectCustomerHandler:

    def handle(self, session: PosSession, customer_id: int | None) -> Customer | None:
        """Select the customer for the next sale; None means walk-in."""
        if customer_id is None:
            session.selected_customer = None
            return None

        for customer in session.customers:
            if customer.id == customer_id:
                session.selected_customer = customer
                return customer
        raise EntityNotFoundError(f"Customer #{customer_id} not found")
