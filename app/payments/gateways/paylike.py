"""
Gateway implementation for Paylike (https://paylike.io).

The buyer pays in Paylike's hosted popup, opened by the checkout button.
When the popup completes, the browser is sent to this gateway's webhook
URL with the new transaction ID; the webhook then fetches the
transaction back from Paylike and captures it (see
payments.webhooks.paylike).

Configuration (via settings):
- PAYLIKE_TEST_MODE: Use the test keys (default: True)
- PAYLIKE_PUBLIC_KEY / PAYLIKE_PRIVATE_KEY: Production keys
- PAYLIKE_TEST_PUBLIC_KEY / PAYLIKE_TEST_PRIVATE_KEY: Test keys

Usage:
    from payments.gateways import get_gateway

    gateway = get_gateway("paylike")
    transaction = gateway.get_transaction(txn_id)
    captured = gateway.capture_transaction(
        txn_id, transaction.pending_amount, transaction.currency
    )
"""

from __future__ import annotations

import logging
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING, Any

from django.template.loader import render_to_string

from payments.adapters import CaptureParams, PaylikeAdapter, Transaction
from payments.exceptions import PaylikeTransactionNotFoundError
from payments.gateways.base import CheckoutContext, Gateway
from payments.gateways.registry import register_gateway

if TYPE_CHECKING:
    from payments.adapters import TransactionClient
    from shop.models import Order


logger = logging.getLogger(__name__)


SDK_URL = "https://sdk.paylike.io/3.js"

SUPPORTED_CURRENCIES = frozenset(
    {
        "USD", "AUD", "CAD", "EUR", "GBP", "JPY", "NZD", "CHF", "HKD",
        "SGD", "SEK", "DKK", "PLN", "NOK", "CZK", "ILS", "MXN",
        "PHP", "TWD", "THB", "MYR", "RUB",
    }
)


def to_minor_units(amount: Decimal) -> int:
    """Convert a major-unit amount (e.g. dollars) to integer minor units."""
    return int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


@register_gateway
class PaylikeGateway(Gateway):
    """
    Paylike payment gateway.

    The provider client is created lazily on first use and reused for
    the lifetime of the gateway instance. Pass `client` to substitute any
    TransactionClient (tests, sandboxes).
    """

    name = "paylike"
    provider = "Paylike"
    description = "Paylike"
    version = "0.1.0"
    settings_prefix = "PAYLIKE"
    config_keys = ("public_key", "private_key")
    services = {"checkout": True, "terms": False}
    supported_currencies = SUPPORTED_CURRENCIES
    form_method = "get"

    def __init__(self, client: TransactionClient | None = None) -> None:
        super().__init__()
        self._api_client = client

    # =========================================================================
    # Provider API
    # =========================================================================

    def _get_api_client(self) -> TransactionClient:
        """Get the API client, creating it on first use."""
        if self._api_client is None:
            self._api_client = PaylikeAdapter(private_key=self.get_config("private_key"))
        return self._api_client

    def get_transaction(self, transaction_id: str) -> Transaction:
        """
        Get the transaction named in a notification.

        Args:
            transaction_id: Paylike transaction ID

        Returns:
            Transaction snapshot from Paylike

        Raises:
            PaylikeTransactionNotFoundError: ID is empty or unknown to Paylike
            PaylikeError: Any other provider failure
        """
        if not transaction_id:
            raise PaylikeTransactionNotFoundError("Transaction ID is empty")
        return self._get_api_client().fetch(transaction_id)

    def capture_transaction(self, transaction_id: str, amount: int, currency: str) -> bool:
        """
        Capture exactly `amount` of an authorized transaction.

        The capture only counts as successful when Paylike reports that
        the captured amount equals the requested amount. A partial
        capture is a failure.

        Args:
            transaction_id: Paylike transaction ID
            amount: Amount to capture in minor units
            currency: Transaction currency

        Returns:
            True on a full capture, False otherwise

        Raises:
            PaylikeError: Provider failure (callers decide how to report it)
        """
        if not transaction_id:
            return False
        if amount is None or amount < 1:
            return False

        transaction = self._get_api_client().capture(
            transaction_id,
            CaptureParams(amount=amount, currency=currency),
        )
        if transaction.captured_amount != amount:
            logger.warning(
                "Paylike captured amount differs from requested amount",
                extra={
                    "transaction_id": transaction_id,
                    "requested": amount,
                    "captured": transaction.captured_amount,
                },
            )
            return False
        return True

    # =========================================================================
    # Display
    # =========================================================================

    def ipn_log_vars(self, data: dict[str, Any]) -> dict[str, Any]:
        """
        Transaction values from a logged Paylike notification.

        Args:
            data: Logged payload ({"request": ..., "transaction": ...})

        Returns:
            Name/value pairs for display, empty if no transaction was logged
        """
        txn = data.get("transaction") or {}
        if not txn:
            return {}
        return {
            "Transaction ID": txn.get("id", ""),
            "Amount": txn.get("amount", ""),
            "Captured": txn.get("capturedAmount", ""),
            "Currency": txn.get("currency", ""),
            "Test": "Yes" if txn.get("test") else "No",
        }

    # =========================================================================
    # Checkout
    # =========================================================================

    def has_valid_config(self) -> bool:
        """Both the public and the private key must be set."""
        return bool(self.get_config("public_key")) and bool(self.get_config("private_key"))

    @staticmethod
    def _js_key(order: Order) -> str:
        """Order ID made safe for use in a JavaScript function name."""
        return re.sub(r"\W", "_", str(order.order_id))

    def gateway_vars(self, order: Order, context: CheckoutContext) -> str:
        """
        Render the checkout script for an order.

        Adds the Paylike SDK to the page context (once) and renders the
        script that opens the Paylike popup for the order's balance due.

        Args:
            order: Order being paid
            context: Checkout page context collecting linked scripts

        Returns:
            HTML for the checkout script, or "" if checkout is unsupported
        """
        if not self.supports("checkout"):
            return ""

        context.add_link_script(SDK_URL)

        checkout = {
            "public_key": self.get_config("public_key"),
            "webhook_url": self.get_webhook_url({"order_id": order.order_id}),
            "currency_code": order.currency,
            "order_total": to_minor_units(order.balance_due),
            "order_id": order.order_id,
        }
        js_key = self._js_key(order)
        return render_to_string(
            "payments/paylike/checkout.html",
            {
                "checkout": checkout,
                "js_key": js_key,
                "element_id": f"paylike-checkout-{js_key}",
            },
        )

    def get_checkout_js(self, order: Order) -> str:
        """Open the Paylike popup and keep the form from submitting."""
        return f"SHOP_paylike_{self._js_key(order)}(); return false;"
