"""
Payment admin configuration.

Registers the gateway notification log with the Django admin.
"""

from django.contrib import admin
from django.utils.html import format_html_join

from payments.exceptions import PaymentNotFoundError
from payments.gateways import get_gateway
from payments.models import WebhookEvent

__all__ = [
    "WebhookEventAdmin",
]


@admin.register(WebhookEvent)
class WebhookEventAdmin(admin.ModelAdmin):
    """
    Admin configuration for WebhookEvent.

    Provides visibility into notification processing status.
    Notifications are immutable once logged.
    """

    list_display = [
        "id",
        "gateway",
        "txn_id",
        "order_id",
        "event_type",
        "status",
        "is_test",
        "created_at",
    ]
    list_filter = ["gateway", "status", "event_type", "is_test", "created_at"]
    search_fields = ["id", "txn_id", "ref_id", "order_id"]
    readonly_fields = [
        "id",
        "created_at",
        "updated_at",
        "gateway",
        "txn_id",
        "ref_id",
        "order_id",
        "event_type",
        "payload",
        "gateway_details",
        "ip_address",
        "is_test",
        "processed_at",
    ]
    date_hierarchy = "created_at"
    ordering = ["-created_at"]

    fieldsets = (
        (
            None,
            {
                "fields": ("id", "gateway", "txn_id", "ref_id", "order_id", "event_type", "status"),
            },
        ),
        (
            "Processing",
            {
                "fields": ("processed_at", "ip_address", "is_test"),
            },
        ),
        (
            "Error Info",
            {
                "fields": ("error_message",),
                "classes": ("collapse",),
            },
        ),
        (
            "Payload",
            {
                "fields": ("gateway_details", "payload"),
                "classes": ("collapse",),
            },
        ),
        (
            "Timestamps",
            {
                "fields": ("created_at", "updated_at"),
            },
        ),
    )

    @admin.display(description="Gateway details")
    def gateway_details(self, obj: WebhookEvent) -> str:
        """Gateway-specific values extracted from the logged payload."""
        try:
            gateway = get_gateway(obj.gateway)
        except PaymentNotFoundError:
            return "-"
        values = gateway.ipn_log_vars(obj.payload or {})
        if not values:
            return "-"
        return format_html_join("", "<div><strong>{}:</strong> {}</div>", values.items())

    def has_delete_permission(self, request, obj=None) -> bool:
        """Disable delete for notifications (audit trail)."""
        return False

    def has_add_permission(self, request) -> bool:
        """Notifications are only created by the gateways."""
        return False
