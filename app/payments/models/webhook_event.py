"""
WebhookEvent model for gateway notification logging.

Stores every notification a gateway dispatches, for audit trails and
for the duplicate check: a transaction ID that has already been logged
for a gateway is not processed again (unless the request is flagged as
a test notification).

Usage:
    from payments.models import WebhookEvent

    if WebhookEvent.has_been_logged("paylike", txn_id):
        # Duplicate or replayed notification
        return

    event = WebhookEvent.objects.create(
        gateway="paylike",
        txn_id=txn_id,
        ref_id=txn_id,
        order_id=order_id,
        event_type="authorized",
        payload=payload,
    )
    # ... handle event ...
    event.mark_processed()
    event.save()
"""

from __future__ import annotations

from django.db import models

from core.models import BaseModel
from core.model_mixins import UUIDPrimaryKeyMixin

from payments.state_machines import WebhookEventStatus


class WebhookEvent(UUIDPrimaryKeyMixin, BaseModel):
    """
    Logged gateway notification.

    Fields:
        gateway: Gateway name that received the notification
        txn_id: Provider transaction ID from the notification
        ref_id: Reference recorded on the resulting Payment
        order_id: Order ID from the notification
        event_type: Notification event type (e.g. 'authorized')
        payload: Transaction data and original request parameters (JSON)
        ip_address: Address the notification came from
        is_test: Whether the request was flagged as a test notification
        status: Processing outcome
        processed_at: When the notification was processed successfully
        error_message: Error details if processing failed

    Note:
        txn_id is intentionally not unique: test notifications may reuse
        a transaction ID and every delivery is kept for the audit trail.
    """

    # ==========================================================================
    # Notification Identification
    # ==========================================================================

    gateway = models.CharField(
        max_length=40,
        db_index=True,
        help_text="Gateway that received the notification",
    )

    txn_id = models.CharField(
        max_length=128,
        help_text="Provider transaction ID",
    )

    ref_id = models.CharField(
        max_length=128,
        blank=True,
        default="",
        help_text="Payment reference recorded for this notification",
    )

    order_id = models.CharField(
        max_length=40,
        blank=True,
        default="",
        db_index=True,
        help_text="Order ID from the notification",
    )

    event_type = models.CharField(
        max_length=40,
        help_text="Notification event type (e.g. 'authorized')",
    )

    # ==========================================================================
    # Payload
    # ==========================================================================

    payload = models.JSONField(
        default=dict,
        help_text="Transaction data and request parameters (JSON)",
    )

    ip_address = models.GenericIPAddressField(
        null=True,
        blank=True,
        help_text="Remote address of the notification request",
    )

    is_test = models.BooleanField(
        default=False,
        help_text="Request was flagged as a test notification",
    )

    # ==========================================================================
    # Processing Status
    # ==========================================================================

    status = models.CharField(
        max_length=20,
        choices=WebhookEventStatus.choices,
        default=WebhookEventStatus.RECEIVED,
        db_index=True,
        help_text="Processing outcome",
    )

    processed_at = models.DateTimeField(
        null=True,
        blank=True,
        help_text="When the notification was processed successfully",
    )

    error_message = models.TextField(
        null=True,
        blank=True,
        help_text="Error message if processing failed",
    )

    # ==========================================================================
    # Meta & Methods
    # ==========================================================================

    class Meta:
        ordering = ["-created_at"]
        verbose_name = "Webhook Event"
        verbose_name_plural = "Webhook Events"
        indexes = [
            models.Index(fields=["gateway", "txn_id"], name="webhook_event_gateway_txn_idx"),
            models.Index(fields=["status", "created_at"], name="webhook_event_status_idx"),
        ]

    def __str__(self) -> str:
        """Return string representation with gateway and transaction ID."""
        return f"WebhookEvent({self.gateway}, {self.txn_id})"

    @classmethod
    def has_been_logged(cls, gateway: str, txn_id: str) -> bool:
        """Check whether a notification for this transaction was already logged."""
        return cls.objects.filter(gateway=gateway, txn_id=txn_id).exists()

    @property
    def is_processed(self) -> bool:
        """Check if the notification was processed successfully."""
        return self.status == WebhookEventStatus.PROCESSED

    @property
    def is_failed(self) -> bool:
        """Check if processing the notification failed."""
        return self.status == WebhookEventStatus.FAILED

    def mark_processed(self) -> None:
        """
        Mark notification as successfully processed.

        Note: Does not save - caller must save after calling.
        """
        from django.utils import timezone

        self.status = WebhookEventStatus.PROCESSED
        self.processed_at = timezone.now()
        self.error_message = None

    def mark_failed(self, error_message: str) -> None:
        """
        Mark notification as failed with error message.

        Args:
            error_message: Description of what went wrong

        Note: Does not save - caller must save after calling.
        """
        self.status = WebhookEventStatus.FAILED
        self.error_message = error_message
