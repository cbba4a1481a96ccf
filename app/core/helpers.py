"""
Helper functions for common infrastructure operations.

These utilities are pure infrastructure - they have no knowledge
of orders, gateways or payments.

Usage:
    from core.helpers import get_client_ip

    ip = get_client_ip(request)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from django.core.exceptions import ValidationError
from django.core.validators import validate_ipv46_address

if TYPE_CHECKING:
    from django.http import HttpRequest


def get_client_ip(request: HttpRequest) -> str:
    """
    Extract client IP from request, handling proxies.

    Checks X-Forwarded-For header for proxy chains. Values that are not
    valid IPv4 or IPv6 addresses are discarded.

    Args:
        request: Django HTTP request

    Returns:
        Client IP address string (empty if unknown or malformed)
    """
    x_forwarded_for = request.META.get("HTTP_X_FORWARDED_FOR")
    if x_forwarded_for:
        # First entry is the original client
        ip = x_forwarded_for.split(",")[0].strip()
    else:
        ip = request.META.get("REMOTE_ADDR", "")

    try:
        validate_ipv46_address(ip)
    except ValidationError:
        return ""
    return ip
