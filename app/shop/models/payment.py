"""
Payment model for money recorded against an order.

A Payment is written by a gateway after it has actually collected funds.
The provider's transaction ID is stored as reference_id, which is unique:
repeated notifications for the same transaction can never record the
payment twice.

Usage:
    from shop.models import Payment

    payment, created = Payment.objects.get_or_create(
        reference_id="5f7b1c2e...",
        defaults={
            "order": order,
            "amount": Decimal("50.00"),
            "gateway": "paylike",
            "method": "paylike",
        },
    )
"""

from __future__ import annotations

from django.db import models

from core.models import BaseModel


class Payment(BaseModel):
    """
    A payment received for an order.

    Fields:
        reference_id: Gateway transaction ID (unique, idempotency key)
        order: Order the payment applies to
        amount: Amount in major currency units
        gateway: Gateway name that recorded the payment
        method: Payment method label
        comment: Free-form note (e.g. which notification created it)
    """

    reference_id = models.CharField(
        max_length=128,
        unique=True,
        help_text="Gateway transaction ID - unique constraint for idempotency",
    )

    order = models.ForeignKey(
        "shop.Order",
        on_delete=models.PROTECT,
        related_name="payments",
        help_text="Order this payment applies to",
    )

    amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        help_text="Payment amount in major currency units",
    )

    gateway = models.CharField(
        max_length=40,
        help_text="Name of the gateway that recorded the payment",
    )

    method = models.CharField(
        max_length=40,
        blank=True,
        default="",
        help_text="Payment method label",
    )

    comment = models.CharField(
        max_length=255,
        blank=True,
        default="",
        help_text="Free-form comment",
    )

    class Meta:
        ordering = ["-created_at"]
        verbose_name = "Payment"
        verbose_name_plural = "Payments"

    def __str__(self) -> str:
        """Return string representation with reference and amount."""
        return f"Payment({self.reference_id}, {self.amount})"

    @classmethod
    def get_by_reference(cls, reference_id: str) -> Payment | None:
        """Return the payment recorded for a gateway reference, if any."""
        return cls.objects.filter(reference_id=reference_id).first()
