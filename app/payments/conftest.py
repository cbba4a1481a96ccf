"""
Pytest fixtures for payment tests.

Usage:
    def test_gateway_fetch(paylike_client, paylike_gateway):
        paylike_client.add_transaction("txn_1", amount=5000)
        assert paylike_gateway.get_transaction("txn_1").amount == 5000
"""

import pytest

from payments.gateways import CheckoutContext, PaylikeGateway
from payments.tests.fakes import FakePaylikeClient


@pytest.fixture
def paylike_client():
    """In-memory Paylike client."""
    return FakePaylikeClient()


@pytest.fixture
def paylike_gateway(paylike_client):
    """Paylike gateway backed by the in-memory client."""
    return PaylikeGateway(client=paylike_client)


@pytest.fixture
def checkout_context():
    return CheckoutContext()
