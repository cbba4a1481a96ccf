"""
Webhook endpoint views for payment gateways.

The Paylike checkout popup redirects the buyer's browser here with the
new transaction ID. The view verifies and dispatches the notification,
then redirects the buyer back to the storefront.

Usage:
    # In urls.py
    from payments.webhooks.views import paylike_webhook

    urlpatterns = [
        path("webhooks/paylike/", paylike_webhook, name="paylike_webhook"),
    ]
"""

from __future__ import annotations

import logging

from django.contrib import messages
from django.http import HttpRequest, HttpResponse, HttpResponseRedirect
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET

from payments.webhooks.base import PAYMENT_ERROR_MESSAGE
from payments.webhooks.paylike import PaylikeWebhook


logger = logging.getLogger(__name__)


@csrf_exempt
@require_GET
def paylike_webhook(request: HttpRequest) -> HttpResponse:
    """
    Receive a Paylike payment notification.

    This view:
    1. Verifies the notification against the transaction fetched from Paylike
    2. Captures the payment and records it against the order
    3. Redirects to the thank-you page, or to the error page with a flash message

    Security:
    - Request parameters are only used to look the transaction up
    - CSRF exemption required for the provider redirect
    - Only GET requests accepted

    Returns:
        HttpResponseRedirect to the storefront
    """
    processor = PaylikeWebhook.from_request(request)

    verified = processor.verify()
    if not verified:
        logger.warning(
            "Paylike notification rejected",
            extra={
                "txn_id": processor.txn_id,
                "order_id": processor.order_id,
                "error_code": verified.error_code,
            },
        )
        messages.error(request, PAYMENT_ERROR_MESSAGE)
        return HttpResponseRedirect(processor.get_error_url())

    result = processor.dispatch()
    if not result:
        logger.warning(
            "Paylike notification not completed",
            extra={
                "txn_id": processor.txn_id,
                "order_id": processor.order_id,
                "error_code": result.error_code,
            },
        )
        messages.error(request, PAYMENT_ERROR_MESSAGE)
        return HttpResponseRedirect(processor.get_error_url())

    return HttpResponseRedirect(result.data)
