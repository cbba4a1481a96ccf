"""
Payments app configuration.

This app provides the payment gateway infrastructure:
- Gateway registry and the Paylike gateway
- Paylike API adapter
- Webhook processing and notification log
"""

from django.apps import AppConfig


class PaymentsConfig(AppConfig):
    """Configuration for the payments application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "payments"
    verbose_name = "Payments"

    def ready(self) -> None:
        # Register bundled gateways
        import payments.gateways  # noqa: F401
