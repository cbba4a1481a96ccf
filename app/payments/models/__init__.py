"""
Payment domain models.

This module contains the payment plugin models:
- WebhookEvent: Logged gateway notifications (audit trail and duplicate check)

Orders and payments belong to the shop app (shop.models).
"""

from payments.models.webhook_event import WebhookEvent

__all__ = [
    "WebhookEvent",
]
