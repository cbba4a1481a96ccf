"""
Storefront views.

These pages are the host side of the gateway integration: the landing
page buyers are redirected back to, and the checkout page that renders
one purchase button per usable gateway.

Usage:
    # In urls.py
    from shop import views

    urlpatterns = [
        path("", views.index, name="index"),
        path("orders/<str:order_id>/checkout/", views.checkout, name="checkout"),
    ]
"""

from __future__ import annotations

import logging

from django.http import HttpRequest, HttpResponse
from django.shortcuts import get_object_or_404, render

from payments.gateways import GATEWAYS, CheckoutContext, Gateway, get_checkout_gateways
from shop.models import Order


logger = logging.getLogger(__name__)


def _find_gateway(label: str) -> Gateway | None:
    """Find a gateway by its name or by the description shown to buyers."""
    for name, gateway_class in GATEWAYS.items():
        if label in (name, gateway_class.description):
            return gateway_class()
    return None


def index(request: HttpRequest) -> HttpResponse:
    """
    Storefront landing page.

    With ?thanks=<gateway>, shows the thank-you message for a completed
    purchase. Flashed messages (e.g. payment errors) are shown by the
    template.
    """
    thanks = None
    label = request.GET.get("thanks", "").strip()
    if label:
        gateway = _find_gateway(label)
        if gateway is None:
            logger.warning("Thank-you page for unknown gateway", extra={"gateway": label})
        else:
            thanks = gateway.thanks_vars()

    return render(request, "shop/index.html", {"thanks": thanks})


def checkout(request: HttpRequest, order_id: str) -> HttpResponse:
    """
    Checkout page for an order.

    Renders the order summary and the purchase button of every enabled,
    configured gateway. Provider scripts are collected in one
    CheckoutContext so each is linked once per page.
    """
    order = get_object_or_404(Order, order_id=order_id)
    context = CheckoutContext()

    buttons = []
    if not order.is_paid:
        for gateway in get_checkout_gateways():
            buttons.append(
                {
                    "name": gateway.name,
                    "description": gateway.description,
                    "method": gateway.get_method(),
                    "onclick": gateway.get_checkout_js(order),
                    "html": gateway.gateway_vars(order, context),
                }
            )

    return render(
        request,
        "shop/checkout.html",
        {
            "order": order,
            "buttons": buttons,
            "link_scripts": context.link_scripts,
        },
    )
