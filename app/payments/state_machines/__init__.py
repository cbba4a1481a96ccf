"""
State enums for webhook processing.
"""

from payments.state_machines.states import (
    WebhookEventStatus,
    WebhookEventType,
    WebhookState,
)

__all__ = [
    "WebhookEventStatus",
    "WebhookEventType",
    "WebhookState",
]
