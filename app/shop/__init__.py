"""
Shop app: the storefront the payment gateways plug into.

This app owns the platform side of a purchase:
- Order: what the buyer owes (total, balance due, status)
- Payment: money recorded against an order, one row per gateway reference
- Storefront pages: landing/thank-you page and the order checkout page

Related apps:
    - payments: gateway plugins that render checkout buttons and record
      payments from provider notifications

Usage:
    from shop.models import Order, Payment

    order = Order.get_instance("20201234")
    if order and order.balance_due > 0:
        ...
"""
