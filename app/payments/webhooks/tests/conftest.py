"""
Pytest fixtures for webhook tests.

Sections:
    - Order Fixtures
    - Processor Fixtures
"""

from decimal import Decimal

import pytest
from django.test import RequestFactory

from payments.webhooks import PaylikeWebhook
from shop.tests.factories import OrderFactory


# =============================================================================
# Order Fixtures
# =============================================================================


@pytest.fixture
def order(db):
    """A $50.00 USD order awaiting payment."""
    return OrderFactory(order_id="ORDER-1", total=Decimal("50.00"), currency="USD")


@pytest.fixture
def authorized_txn(paylike_client):
    """A 5000-cent USD authorization at Paylike."""
    paylike_client.add_transaction("txn_abc123", amount=5000, currency="USD")
    return "txn_abc123"


# =============================================================================
# Processor Fixtures
# =============================================================================


@pytest.fixture
def make_processor(paylike_gateway):
    """Build a PaylikeWebhook from query parameters, bound to the fake client."""
    factory = RequestFactory()

    def _create(**params) -> PaylikeWebhook:
        request = factory.get("/payments/webhooks/paylike/", params, REMOTE_ADDR="10.0.0.5")
        processor = PaylikeWebhook.from_request(request)
        processor.gateway = paylike_gateway
        return processor

    return _create
