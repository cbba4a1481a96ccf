"""
Tests for the gateway registry.

Tests cover:
- Registration and lookup by name
- Checkout gateway selection (enabled, configured, currency)
"""

import pytest

from payments.exceptions import PaymentNotFoundError
from payments.gateways import GATEWAYS, Gateway, PaylikeGateway, get_checkout_gateways, get_gateway
from payments.gateways.registry import register_gateway


class TestRegistry:
    """Tests for register_gateway / get_gateway."""

    def test_paylike_is_registered(self):
        assert GATEWAYS["paylike"] is PaylikeGateway

    def test_get_gateway_returns_new_instance(self):
        first = get_gateway("paylike")
        second = get_gateway("paylike")

        assert isinstance(first, PaylikeGateway)
        assert first is not second

    def test_unknown_gateway(self):
        with pytest.raises(PaymentNotFoundError) as exc_info:
            get_gateway("nope")

        assert exc_info.value.error_code == "GATEWAY_NOT_FOUND"

    def test_gateway_without_name_rejected(self):
        class NamelessGateway(Gateway):
            pass

        with pytest.raises(ValueError, match="must define a gateway name"):
            register_gateway(NamelessGateway)


class TestCheckoutGateways:
    """Tests for get_checkout_gateways."""

    def test_configured_gateway_listed(self):
        names = [gateway.name for gateway in get_checkout_gateways()]

        assert "paylike" in names

    def test_disabled_gateway_excluded(self, settings):
        settings.PAYLIKE_ENABLED = False

        assert "paylike" not in [gateway.name for gateway in get_checkout_gateways()]

    def test_missing_keys_excluded(self, settings):
        settings.PAYLIKE_TEST_PUBLIC_KEY = ""

        assert "paylike" not in [gateway.name for gateway in get_checkout_gateways()]

    def test_unsupported_currency_excluded(self, settings):
        settings.SHOP_CURRENCY = "BRL"

        assert "paylike" not in [gateway.name for gateway in get_checkout_gateways()]
