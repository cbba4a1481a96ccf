"""
Pytest fixtures for storefront tests.
"""

from decimal import Decimal

import pytest

from shop.tests.factories import OrderFactory


@pytest.fixture
def order(db):
    """A $50.00 USD order awaiting payment."""
    return OrderFactory(order_id="ORDER-1", total=Decimal("50.00"), currency="USD")
