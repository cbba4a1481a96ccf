"""
Gateway registry.

Maps gateway names to gateway classes so that views, webhooks and the
storefront can look a gateway up by the name carried in URLs and logs.

Usage:
    from payments.gateways.registry import get_gateway, register_gateway

    @register_gateway
    class MyGateway(Gateway):
        name = "mygateway"

    gateway = get_gateway("mygateway")
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from payments.exceptions import PaymentNotFoundError

if TYPE_CHECKING:
    from payments.gateways.base import Gateway


logger = logging.getLogger(__name__)


# Maps gateway names to gateway classes
GATEWAYS: dict[str, type[Gateway]] = {}


def register_gateway(cls: type[Gateway]) -> type[Gateway]:
    """
    Class decorator to register a gateway under its name.

    Args:
        cls: Gateway subclass with a non-empty `name`

    Returns:
        The class, unchanged
    """
    if not cls.name:
        raise ValueError(f"{cls.__name__} must define a gateway name")
    GATEWAYS[cls.name] = cls
    logger.debug(f"Registered gateway {cls.name}")
    return cls


def get_gateway(name: str) -> Gateway:
    """
    Get a new instance of a registered gateway.

    Each call returns a fresh instance, so per-instance state such as a
    cached API client lives no longer than the request that asked for it.

    Raises:
        PaymentNotFoundError: No gateway is registered under that name
    """
    gateway_cls = GATEWAYS.get(name)
    if gateway_cls is None:
        raise PaymentNotFoundError(
            f"Unknown payment gateway: {name}",
            error_code="GATEWAY_NOT_FOUND",
            details={"gateway": name},
        )
    return gateway_cls()


def get_checkout_gateways() -> list[Gateway]:
    """
    Get the gateways that can show a checkout button right now.

    A gateway qualifies when it is enabled, supports the "checkout"
    service and has a complete configuration.
    """
    gateways = []
    for gateway_cls in GATEWAYS.values():
        gateway = gateway_cls()
        if gateway.enabled and gateway.supports("checkout") and gateway.has_valid_config():
            gateways.append(gateway)
    return gateways
