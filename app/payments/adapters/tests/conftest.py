"""
Pytest fixtures for Paylike adapter tests.

This module provides fixtures for testing the Paylike adapter without
network access: a mock requests session and builders for real
requests.Response objects.

Sections:
    - Test Data Fixtures
    - Mock Session Fixtures
"""

import json
from typing import Any
from unittest.mock import MagicMock

import pytest
import requests

from payments.adapters import PaylikeAdapter


# =============================================================================
# Test Data Fixtures
# =============================================================================


@pytest.fixture
def transaction_id():
    """A Paylike transaction ID."""
    return "5f7b1c2e9b1b4a2d8c3e4f5a"


@pytest.fixture
def transaction_data(transaction_id):
    """Create a Paylike transaction object."""

    def _create(
        amount: int = 5000,
        pending_amount: int = 5000,
        captured_amount: int = 0,
        currency: str = "USD",
        **extra: Any,
    ) -> dict[str, Any]:
        data = {
            "id": transaction_id,
            "test": True,
            "currency": currency,
            "amount": amount,
            "pendingAmount": pending_amount,
            "capturedAmount": captured_amount,
            "refundedAmount": 0,
            "voidedAmount": 0,
            "successful": True,
            "custom": {"orderId": "ORDER-1"},
        }
        data.update(extra)
        return data

    return _create


# =============================================================================
# Mock Session Fixtures
# =============================================================================


@pytest.fixture
def make_response():
    """Build a requests.Response with a JSON (or raw) body."""

    def _create(
        status_code: int = 200,
        body: Any = None,
        raw: bytes | None = None,
        reason: str = "OK",
    ) -> requests.Response:
        response = requests.Response()
        response.status_code = status_code
        response.reason = reason
        response._content = raw if raw is not None else json.dumps(body).encode()
        response.headers["Content-Type"] = "application/json"
        return response

    return _create


@pytest.fixture
def mock_session():
    """Mock requests session; set .request.return_value or .side_effect per test."""
    return MagicMock()


@pytest.fixture
def adapter(mock_session):
    """Paylike adapter bound to the mock session."""
    return PaylikeAdapter(
        private_key="test-private-key",
        api_url="https://api.paylike.test/",
        timeout=5,
        session=mock_session,
    )
