# Generated manually for the initial payments schema

"""
Initial schema for the payments app.

Creates:
1. WebhookEvent - logged gateway notifications
"""

import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="WebhookEvent",
            fields=[
                (
                    "created_at",
                    models.DateTimeField(
                        auto_now_add=True,
                        db_index=True,
                        help_text="Timestamp when this record was created",
                    ),
                ),
                (
                    "updated_at",
                    models.DateTimeField(
                        auto_now=True,
                        help_text="Timestamp when this record was last modified",
                    ),
                ),
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        help_text="Unique identifier for this record",
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "gateway",
                    models.CharField(
                        db_index=True,
                        help_text="Gateway that received the notification",
                        max_length=40,
                    ),
                ),
                (
                    "txn_id",
                    models.CharField(help_text="Provider transaction ID", max_length=128),
                ),
                (
                    "ref_id",
                    models.CharField(
                        blank=True,
                        default="",
                        help_text="Payment reference recorded for this notification",
                        max_length=128,
                    ),
                ),
                (
                    "order_id",
                    models.CharField(
                        blank=True,
                        db_index=True,
                        default="",
                        help_text="Order ID from the notification",
                        max_length=40,
                    ),
                ),
                (
                    "event_type",
                    models.CharField(
                        help_text="Notification event type (e.g. 'authorized')",
                        max_length=40,
                    ),
                ),
                (
                    "payload",
                    models.JSONField(
                        default=dict,
                        help_text="Transaction data and request parameters (JSON)",
                    ),
                ),
                (
                    "ip_address",
                    models.GenericIPAddressField(
                        blank=True,
                        help_text="Remote address of the notification request",
                        null=True,
                    ),
                ),
                (
                    "is_test",
                    models.BooleanField(
                        default=False,
                        help_text="Request was flagged as a test notification",
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("received", "Received"),
                            ("processed", "Processed"),
                            ("failed", "Failed"),
                        ],
                        db_index=True,
                        default="received",
                        help_text="Processing outcome",
                        max_length=20,
                    ),
                ),
                (
                    "processed_at",
                    models.DateTimeField(
                        blank=True,
                        help_text="When the notification was processed successfully",
                        null=True,
                    ),
                ),
                (
                    "error_message",
                    models.TextField(
                        blank=True,
                        help_text="Error message if processing failed",
                        null=True,
                    ),
                ),
            ],
            options={
                "verbose_name": "Webhook Event",
                "verbose_name_plural": "Webhook Events",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["gateway", "txn_id"], name="webhook_event_gateway_txn_idx"),
                    models.Index(fields=["status", "created_at"], name="webhook_event_status_idx"),
                ],
            },
        ),
    ]
