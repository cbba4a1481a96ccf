"""
URL configuration for the Django application.

The `urlpatterns` list routes URLs to views. This is the root URL configuration
that includes all app-specific routes.

URL Structure:
    /admin/                        - Django admin interface
    /health/                       - Health check endpoint (for load balancers, Docker)
    /shop/                         - Storefront
        index.php                  - Storefront landing page (error redirects)
        orders/{order_id}/checkout/ - Checkout page with gateway buttons
    /payments/                     - Payment endpoints
        webhooks/paylike/          - Paylike payment notification (GET)

For more information, see:
https://docs.djangoproject.com/en/5.2/topics/http/urls/
"""

from django.contrib import admin
from django.urls import include, path

from core.views import health_check

urlpatterns = [
    # Admin
    path("admin/", admin.site.urls),
    # Health check (Docker, Kubernetes, load balancers)
    path("health/", health_check, name="health_check"),
    # Storefront
    path("shop/", include("shop.urls")),
    # Payments
    path("payments/", include("payments.urls")),
]

# =============================================================================
# Admin Site Customization
# =============================================================================
admin.site.site_header = "Shop Admin"
admin.site.site_title = "Shop Admin Portal"
admin.site.index_title = "Orders and Payments"
