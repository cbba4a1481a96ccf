"""
URL configuration for the payments app.

Routes:
    - GET /webhooks/paylike/ - Paylike payment notification

All routes are prefixed with /payments/ when included in the main URLconf.

Usage:
    # In config/urls.py
    urlpatterns = [
        path("payments/", include("payments.urls")),
    ]
"""

from django.urls import path

from payments.webhooks.views import paylike_webhook

app_name = "payments"

urlpatterns = [
    # Webhook endpoints
    path("webhooks/paylike/", paylike_webhook, name="paylike_webhook"),
]
