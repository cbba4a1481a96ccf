"""
Payment notifications from gateways.

This package provides the notification processors and the views that
receive them. A processor verifies a notification against the provider
before acting on it, and logs every notification it dispatches.

Usage:
    # In urls.py
    from payments.webhooks.views import paylike_webhook

    urlpatterns = [
        path("webhooks/paylike/", paylike_webhook, name="paylike_webhook"),
    ]
"""

from payments.webhooks.base import PAYMENT_ERROR_MESSAGE, WebhookProcessor, get_error_url
from payments.webhooks.paylike import PaylikeWebhook, WebhookNotification
from payments.webhooks.views import paylike_webhook

__all__ = [
    "PAYMENT_ERROR_MESSAGE",
    "PaylikeWebhook",
    "WebhookNotification",
    "WebhookProcessor",
    "get_error_url",
    "paylike_webhook",
]
