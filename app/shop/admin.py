"""
Shop admin configuration.

Registers orders and payments so staff can see what a gateway recorded.
"""

from django.contrib import admin

from shop.models import Order, Payment


class PaymentInline(admin.TabularInline):
    """Payments shown on the order page (read-only)."""

    model = Payment
    extra = 0
    can_delete = False
    readonly_fields = ["reference_id", "amount", "gateway", "method", "comment", "created_at"]


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    """
    Admin configuration for Order.

    Shows the derived balance due next to the stored total.
    """

    list_display = ["order_id", "currency", "total", "balance_due", "status", "created_at"]
    list_filter = ["status", "currency"]
    search_fields = ["order_id"]
    readonly_fields = ["created_at", "updated_at", "paid_at"]
    ordering = ["-created_at"]
    inlines = [PaymentInline]


@admin.register(Payment)
class PaymentAdmin(admin.ModelAdmin):
    """Admin configuration for Payment."""

    list_display = ["reference_id", "order", "amount", "gateway", "method", "created_at"]
    list_filter = ["gateway"]
    search_fields = ["reference_id", "order__order_id"]
    readonly_fields = ["created_at", "updated_at"]
    ordering = ["-created_at"]
