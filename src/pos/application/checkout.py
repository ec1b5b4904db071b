"""Application service: Checkout use case.

Orchestrates the checkout composer (pure) and the sales service (remote)
for one checkout attempt:

    IDLE -> VALIDATING -> EMPTY_ERROR                  -> IDLE (unchanged)
                       -> SUBMITTING -> SUCCESS        -> IDLE (reset)
                                     -> FAILURE        -> IDLE (unchanged)

Nothing is persisted between the steps, so a failed attempt can be
retried by simply calling ``handle`` again with the same session.
"""

from __future__ import annotations

import structlog

from pos.application.dto import CheckoutResultDTO, SaleDTO
from pos.application.session import CheckoutState, PosSession
from pos.application.todays_orders import TodaysOrdersHandler
from pos.domain.exceptions import EmptyCartError, ServiceError
from pos.domain.gateway.notifier import NotificationKind, Notifier
from pos.domain.gateway.sales_service import SalesService
from pos.domain.model.sale import PaymentMethod
from pos.domain.service.checkout_composer import CheckoutComposer

logger = structlog.get_logger(__name__)

GENERIC_FAILURE = "Failed to process sale"


class CheckoutHandler:

    def __init__(
        self,
        sales_service: SalesService,
        todays_orders: TodaysOrdersHandler,
        notifier: Notifier,
        composer: CheckoutComposer | None = None,
        default_payment: PaymentMethod = PaymentMethod.CASH,
    ) -> None:
        self._sales_service = sales_service
        self._todays_orders = todays_orders
        self._notifier = notifier
        self._composer = composer or CheckoutComposer()
        self._default_payment = default_payment

    def handle(self, session: PosSession) -> CheckoutResultDTO:
        """Compose a sale from the session and submit it.

        Returns a result DTO in every case except a re-entrant call while
        a submission is pending, which raises CheckoutInProgressError.
        """
        session.ensure_idle()

        session.checkout_state = CheckoutState.VALIDATING
        try:
            sale = self._composer.compose(
                cart=session.cart,
                customer=session.selected_customer,
                payment_method=session.payment_method,
                status=session.sale_status,
            )
        except EmptyCartError:
            session.checkout_state = CheckoutState.EMPTY_ERROR
            logger.info("Checkout rejected: empty cart")
            self._notifier.notify(
                NotificationKind.ERROR,
                "Empty Cart",
                "Please add items to cart before checkout",
            )
            session.checkout_state = CheckoutState.IDLE
            return CheckoutResultDTO(success=False, message="Cart is empty")

        session.checkout_state = CheckoutState.SUBMITTING
        session.submitting = True
        logger.info(
            "Submitting sale",
            customer=sale.customer_name,
            items=len(sale.items),
            total=str(sale.total_amount),
            payment_method=sale.payment_method.value,
        )
        try:
            result = self._sales_service.create(sale)
            failure = None if result.success else (result.message or GENERIC_FAILURE)
        except ServiceError as exc:
            failure = str(exc) or GENERIC_FAILURE
        finally:
            session.submitting = False

        if failure is not None:
            session.checkout_state = CheckoutState.FAILURE
            logger.warning("Sale failed", error=failure)
            self._notifier.notify(NotificationKind.ERROR, "Sale Failed", f"Error: {failure}")
            session.checkout_state = CheckoutState.IDLE
            return CheckoutResultDTO(success=False, message=failure)

        session.checkout_state = CheckoutState.SUCCESS
        session.reset_after_sale(self._default_payment)
        self._todays_orders.refresh(session)
        message = (
            f"Order has been processed with status: {sale.status.value}. "
            f"Total: {sale.total_amount}"
        )
        logger.info("Sale completed", total=str(sale.total_amount), status=sale.status.value)
        self._notifier.notify(NotificationKind.SUCCESS, "Sale Completed Successfully", message)
        session.checkout_state = CheckoutState.IDLE
        return CheckoutResultDTO(success=True, message=message, sale=SaleDTO.from_sale(sale))
