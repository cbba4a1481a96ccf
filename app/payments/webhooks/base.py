"""
Base class for gateway notification processors.

A WebhookProcessor carries one inbound notification through the
received → verified → dispatched lifecycle. Gateway subclasses read the
request into the processor's fields and implement verify() and
dispatch(); this class provides what they share:
- Duplicate detection against the notification log
- Notification logging (WebhookEvent rows)
- Marking the order paid once a payment is recorded
- The thank-you and error redirect URLs

Configuration (via settings):
- SHOP_URL: Storefront base URL used for redirects
- SHOP_ERROR_REDIRECT_PATH: Path appended to SHOP_URL on errors

Usage:
    processor = PaylikeWebhook.from_request(request)
    if processor.verify():
        result = processor.dispatch()
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import TYPE_CHECKING, Any
from urllib.parse import urlencode

from django.conf import settings
from django.utils import timezone

from core.services import ServiceResult

from payments.exceptions import InvalidStateTransitionError
from payments.models import WebhookEvent
from payments.state_machines import WebhookEventType, WebhookState

if TYPE_CHECKING:
    from datetime import datetime

    from payments.gateways import Gateway
    from shop.models import Order


logger = logging.getLogger(__name__)


PAYMENT_ERROR_MESSAGE = "There was an error processing your payment."


def get_error_url() -> str:
    """Storefront URL buyers are sent to when a payment cannot be completed."""
    path = getattr(settings, "SHOP_ERROR_REDIRECT_PATH", "/index.php")
    return f"{settings.SHOP_URL.rstrip('/')}{path}"


class WebhookProcessor:
    """
    Processor for one gateway notification.

    Attributes:
        source: Gateway name the notification was sent to
        data: Request parameters as received
        timestamp: When the notification was received
        gateway: Gateway instance handling the notification
        txn_id: Provider transaction ID
        order_id: Order ID the notification refers to
        event_type: Notification event type
        payment_amount: Amount paid, in major units (set by verify)
        ref_id: Reference recorded on the Payment
        ip_address: Address the request came from
        state: Lifecycle state (WebhookState)
        order: Order loaded during verification
        event_log: WebhookEvent row written by log_ipn()
    """

    # Request parameter that marks a test notification
    test_flag = "shop_test_ipn"

    def __init__(
        self,
        *,
        source: str,
        gateway: Gateway,
        data: dict[str, Any] | None = None,
        txn_id: str = "",
        order_id: str = "",
        event_type: str = WebhookEventType.AUTHORIZED,
        ip_address: str = "",
        timestamp: datetime | None = None,
    ) -> None:
        self.source = source
        self.gateway = gateway
        self.data: dict[str, Any] = dict(data or {})
        self.timestamp = timestamp or timezone.now()
        self.txn_id = txn_id
        self.order_id = order_id
        self.event_type = event_type
        self.ip_address = ip_address
        self.payment_amount: Decimal | None = None
        self.ref_id = ""
        self.state = WebhookState.RECEIVED
        self.order: Order | None = None
        self.event_log: WebhookEvent | None = None

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(source={self.source!r}, "
            f"txn_id={self.txn_id!r}, state={self.state!r})"
        )

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def verify(self) -> ServiceResult:
        raise NotImplementedError

    def dispatch(self) -> ServiceResult[str]:
        raise NotImplementedError

    def _check_transition(self, expected: str, target: str) -> None:
        """
        Check that moving to `target` is allowed, which is only from `expected`.

        Raises:
            InvalidStateTransitionError: Processor is not in `expected`
        """
        if self.state != expected:
            raise InvalidStateTransitionError(
                f"Cannot move to '{target}' from '{self.state}' state",
                details={"current_state": str(self.state), "target_state": target},
            )

    def _transition(self, expected: str, target: str) -> None:
        self._check_transition(expected, target)
        self.state = target

    @property
    def is_test(self) -> bool:
        """Whether the request was flagged as a test notification."""
        return self.test_flag in self.data

    # =========================================================================
    # Shared Steps
    # =========================================================================

    def is_unique_txn_id(self) -> bool:
        """Check that no notification with this transaction ID was logged."""
        return not WebhookEvent.has_been_logged(self.source, self.txn_id)

    def log_ipn(self, payload: dict[str, Any] | None = None) -> WebhookEvent:
        """
        Persist the notification.

        Args:
            payload: Data to store in place of the raw request parameters

        Returns:
            The created WebhookEvent
        """
        self.event_log = WebhookEvent.objects.create(
            gateway=self.source,
            txn_id=self.txn_id,
            ref_id=self.ref_id,
            order_id=self.order_id,
            event_type=self.event_type,
            payload=payload if payload is not None else self.data,
            ip_address=self.ip_address or None,
            is_test=self.is_test,
        )
        logger.info(
            "Gateway notification logged",
            extra={
                "gateway": self.source,
                "txn_id": self.txn_id,
                "order_id": self.order_id,
                "event_id": str(self.event_log.id),
            },
        )
        return self.event_log

    def handle_purchase(self) -> bool:
        """Mark the order paid once its balance is covered."""
        if self.order is None:
            return False
        return self.order.handle_purchase()

    def finish(self, result: ServiceResult) -> ServiceResult:
        """Record the outcome on the log row and mark the processor dispatched."""
        if self.event_log is not None:
            if result:
                self.event_log.mark_processed()
            else:
                self.event_log.mark_failed(result.error or "")
            self.event_log.save(
                update_fields=["status", "processed_at", "error_message", "updated_at"]
            )
        self.state = WebhookState.DISPATCHED
        return result

    # =========================================================================
    # Redirects
    # =========================================================================

    def get_thanks_url(self) -> str:
        """Storefront thank-you URL naming this gateway."""
        query = urlencode({"thanks": self.gateway.description})
        return f"{settings.SHOP_URL.rstrip('/')}?{query}"

    def get_error_url(self) -> str:
        return get_error_url()
