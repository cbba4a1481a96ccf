"""
State enums for webhook processing.

These are Django TextChoices for database storage and admin integration.

State Machines Overview:

WebhookEvent (logged notification) Status:
    received → processed
    received → failed

Webhook processor State (in memory, one request):
    received → verified → dispatched
    Any gate failure is terminal; the processor is not reused.
"""

from django.db import models


class WebhookEventStatus(models.TextChoices):
    """
    Outcome recorded on a logged WebhookEvent.

    State Flow:
        RECEIVED → PROCESSED
        RECEIVED → FAILED
    """

    RECEIVED = "received", "Received"
    PROCESSED = "processed", "Processed"
    FAILED = "failed", "Failed"


class WebhookState(models.TextChoices):
    """
    Progress of a webhook processor through one notification.

    State Flow:
        RECEIVED → VERIFIED → DISPATCHED
    """

    RECEIVED = "received", "Received"
    VERIFIED = "verified", "Verified"
    DISPATCHED = "dispatched", "Dispatched"


class WebhookEventType(models.TextChoices):
    """
    Notification event types understood by the gateways.

    - AUTHORIZED: Funds are on hold at the provider and can be captured
    """

    AUTHORIZED = "authorized", "Authorized"


__all__ = [
    "WebhookEventStatus",
    "WebhookEventType",
    "WebhookState",
]
