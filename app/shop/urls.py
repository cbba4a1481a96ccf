"""
URL configuration for the shop app.

Routes:
    - GET / - Storefront landing page (thank-you messages, payment errors)
    - GET /index.php - Same page, at the path gateways redirect errors to
    - GET /orders/<order_id>/checkout/ - Checkout page with gateway buttons

All routes are prefixed with /shop/ when included in the main URLconf.
"""

from django.urls import path

from shop import views

app_name = "shop"

urlpatterns = [
    path("", views.index, name="index"),
    path("index.php", views.index, name="index_php"),
    path("orders/<str:order_id>/checkout/", views.checkout, name="checkout"),
]
