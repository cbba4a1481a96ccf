"""
Shop domain models.

This module contains the models the gateway plugins work against:
- Order: A buyer's order with a total and a balance due
- Payment: A payment recorded against an order, unique per gateway reference
"""

from shop.models.order import Order, OrderStatus
from shop.models.payment import Payment

__all__ = [
    "Order",
    "OrderStatus",
    "Payment",
]
