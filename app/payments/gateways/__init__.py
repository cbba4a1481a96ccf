"""
Payment gateways available to the storefront.

A gateway knows how to render its checkout button for an order and how
to talk to its provider. Gateways register themselves by name; import
this package to make all bundled gateways available.

Usage:
    from payments.gateways import get_gateway

    gateway = get_gateway("paylike")
    if gateway.enabled:
        html = gateway.gateway_vars(order, CheckoutContext())
"""

from payments.gateways.base import CheckoutContext, Gateway
from payments.gateways.registry import (
    GATEWAYS,
    get_checkout_gateways,
    get_gateway,
    register_gateway,
)

# Bundled gateways register themselves on import
from payments.gateways.paylike import PaylikeGateway

__all__ = [
    "GATEWAYS",
    "CheckoutContext",
    "Gateway",
    "PaylikeGateway",
    "get_checkout_gateways",
    "get_gateway",
    "register_gateway",
]
