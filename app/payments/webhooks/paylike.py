"""
Paylike notification processor.

After the buyer completes the Paylike popup, the browser is redirected
to the webhook URL with the new transaction ID. Nothing in that request
is trusted: the transaction is fetched back from Paylike with the
private key and checked against the order before it is captured.

Flow:
    verify():   non-empty txn_id → not seen before → transaction fetched
                → order exists → amount covers balance due
    dispatch(): log notification → capture pending amount
                → record Payment (once per transaction) → mark order paid

Request parameters:
    txn_id: Paylike transaction ID
    order_id: Order being paid
    shop_test_ipn: Present on test notifications (skips the duplicate check)

Usage:
    from payments.webhooks.paylike import PaylikeWebhook

    processor = PaylikeWebhook.from_request(request)
    if processor.verify():
        result = processor.dispatch()
        redirect_url = result.data if result else processor.get_error_url()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from django.db import DatabaseError, IntegrityError, transaction as db_transaction

from core.helpers import get_client_ip
from core.services import ServiceResult

from payments.gateways import get_gateway
from payments.state_machines import WebhookEventType, WebhookState
from payments.webhooks.base import WebhookProcessor
from shop.models import Order, Payment

if TYPE_CHECKING:
    from django.http import HttpRequest, QueryDict

    from payments.adapters import Transaction


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WebhookNotification:
    """
    Parameters of an inbound Paylike notification.

    Attributes:
        txn_id: Paylike transaction ID ("" if missing)
        order_id: Order ID ("" if missing)
        is_test: Whether the test flag was present
        params: All query parameters as a flat dict
    """

    txn_id: str
    order_id: str
    is_test: bool
    params: dict[str, Any]

    @classmethod
    def from_query(cls, query: QueryDict | dict[str, Any]) -> WebhookNotification:
        params = {key: query.get(key) for key in query}
        return cls(
            txn_id=(params.get("txn_id") or "").strip(),
            order_id=(params.get("order_id") or "").strip(),
            is_test=WebhookProcessor.test_flag in params,
            params=params,
        )


class PaylikeWebhook(WebhookProcessor):
    """
    Processor for one Paylike notification.

    Attributes:
        transaction: Transaction fetched from Paylike during verify()
    """

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.transaction: Transaction | None = None

    @classmethod
    def from_request(cls, request: HttpRequest) -> PaylikeWebhook:
        """Build a processor from the redirect request."""
        notification = WebhookNotification.from_query(request.GET)
        return cls(
            source="paylike",
            gateway=get_gateway("paylike"),
            data=notification.params,
            txn_id=notification.txn_id,
            order_id=notification.order_id,
            event_type=WebhookEventType.AUTHORIZED,
            ip_address=get_client_ip(request),
        )

    def _log_context(self) -> dict[str, Any]:
        return {
            "gateway": self.source,
            "txn_id": self.txn_id,
            "order_id": self.order_id,
            "ip_address": self.ip_address,
        }

    # =========================================================================
    # Verification
    # =========================================================================

    def verify(self) -> ServiceResult[Transaction]:
        """
        Check that the notification names a real, sufficient payment.

        Gates run in order and stop at the first failure. Provider errors
        are caught here and reported as a failed result.

        Returns:
            ServiceResult with the fetched Transaction on success.
            Error codes:
            - EMPTY_TRANSACTION_ID: No transaction ID in the request
            - DUPLICATE_NOTIFICATION: Transaction ID already logged
            - TRANSACTION_FETCH_FAILED: Paylike lookup failed
            - ORDER_NOT_FOUND: Unknown order ID
            - INSUFFICIENT_PAYMENT: Transaction amount below balance due
        """
        if not self.txn_id:
            logger.error("Paylike notification without transaction ID", extra=self._log_context())
            return ServiceResult.failure(
                "Transaction ID is empty",
                error_code="EMPTY_TRANSACTION_ID",
            )

        if not self.is_test and not self.is_unique_txn_id():
            logger.warning("Duplicate Paylike notification", extra=self._log_context())
            return ServiceResult.failure(
                "Transaction was already processed",
                error_code="DUPLICATE_NOTIFICATION",
            )

        try:
            self.transaction = self.gateway.get_transaction(self.txn_id)
        except Exception as e:
            logger.error(
                f"Could not fetch Paylike transaction: {type(e).__name__}",
                extra={**self._log_context(), "error": str(e)},
            )
            return ServiceResult.from_exception(e, error_code="TRANSACTION_FETCH_FAILED")

        self.order = Order.get_instance(self.order_id)
        if self.order is None:
            logger.error("Paylike notification for unknown order", extra=self._log_context())
            return ServiceResult.failure(
                f"Order {self.order_id!r} not found",
                error_code="ORDER_NOT_FOUND",
            )

        self.payment_amount = Decimal(self.transaction.amount) / 100
        balance_due = self.order.balance_due
        if self.payment_amount < balance_due:
            logger.error(
                "Paylike transaction amount below order balance",
                extra={
                    **self._log_context(),
                    "payment_amount": str(self.payment_amount),
                    "balance_due": str(balance_due),
                },
            )
            return ServiceResult.failure(
                "Payment amount is less than the balance due",
                error_code="INSUFFICIENT_PAYMENT",
            )

        self._transition(WebhookState.RECEIVED, WebhookState.VERIFIED)
        logger.info("Paylike notification verified", extra=self._log_context())
        return ServiceResult.success(self.transaction)

    # =========================================================================
    # Dispatch
    # =========================================================================

    def dispatch(self) -> ServiceResult[str]:
        """
        Act on a verified notification.

        Returns:
            ServiceResult with the thank-you URL on success.
            Error codes:
            - UNSUPPORTED_EVENT_TYPE: Event type has no handler
            - CAPTURE_FAILED: Paylike did not capture the full amount
            - PAYMENT_NOT_RECORDED: Payment already existed or could not be saved
            - PURCHASE_NOT_COMPLETED: Payment recorded but the order is not paid

        Raises:
            InvalidStateTransitionError: verify() has not succeeded
        """
        self._check_transition(WebhookState.VERIFIED, WebhookState.DISPATCHED)

        self.ref_id = self.txn_id
        self.log_ipn(
            {
                "request": self.data,
                "transaction": self.transaction.raw_response if self.transaction else {},
            }
        )

        if self.event_type == WebhookEventType.AUTHORIZED:
            result = self._handle_authorized()
        else:
            logger.warning(
                f"Unsupported Paylike event type: {self.event_type}",
                extra=self._log_context(),
            )
            result = ServiceResult.failure(
                f"Unsupported event type {self.event_type!r}",
                error_code="UNSUPPORTED_EVENT_TYPE",
            )

        return self.finish(result)

    def _handle_authorized(self) -> ServiceResult[str]:
        if not self.capture():
            return ServiceResult.failure(
                "Transaction could not be captured",
                error_code="CAPTURE_FAILED",
            )

        try:
            with db_transaction.atomic():
                payment, created = Payment.objects.get_or_create(
                    reference_id=self.ref_id,
                    defaults={
                        "order": self.order,
                        "amount": self.payment_amount,
                        "gateway": self.source,
                        "method": self.source,
                        "comment": f"Webhook {self.txn_id}",
                    },
                )
        except IntegrityError:
            logger.warning("Concurrent Paylike payment insert", extra=self._log_context())
            created = False
        except DatabaseError as e:
            logger.exception(
                "Captured Paylike payment could not be saved",
                extra={**self._log_context(), "amount": str(self.payment_amount), "error": str(e)},
            )
            return ServiceResult.failure(
                "Captured payment could not be saved",
                error_code="PAYMENT_NOT_RECORDED",
            )

        if not created:
            logger.warning("Paylike payment already recorded", extra=self._log_context())
            return ServiceResult.failure(
                "Payment was not recorded",
                error_code="PAYMENT_NOT_RECORDED",
            )

        logger.info(
            "Paylike payment recorded",
            extra={**self._log_context(), "amount": str(payment.amount)},
        )
        if not self.handle_purchase():
            return ServiceResult.failure(
                "Order purchase was not completed",
                error_code="PURCHASE_NOT_COMPLETED",
            )
        return ServiceResult.success(self.get_thanks_url())

    def capture(self) -> bool:
        """
        Capture the transaction's pending amount.

        Returns:
            True if Paylike captured exactly the pending amount.
            Provider errors are logged and reported as False.
        """
        if self.transaction is None:
            return False
        try:
            return self.gateway.capture_transaction(
                self.txn_id,
                self.transaction.pending_amount,
                self.transaction.currency,
            )
        except Exception as e:
            logger.error(
                f"Paylike capture failed: {type(e).__name__}",
                extra={**self._log_context(), "error": str(e)},
            )
            return False
