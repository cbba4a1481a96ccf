"""
Order model for the storefront.

An Order is what gateways are asked to collect money for. Gateways never
change an order's total; they record Payments against it and, once the
balance is covered, ask the order to complete the purchase.

Usage:
    from shop.models import Order

    order = Order.get_instance("20201234")
    if order is None:
        ...  # unknown order id from a notification

    if payment_amount < order.balance_due:
        ...  # insufficient payment

    order.handle_purchase()
"""

from __future__ import annotations

import logging
from decimal import Decimal

from django.db import models
from django.db.models import Sum
from django.utils import timezone

from core.models import BaseModel

logger = logging.getLogger(__name__)


class OrderStatus(models.TextChoices):
    """
    Lifecycle status for an Order.

    State Flow:
        PENDING → PAID
    """

    PENDING = "pending", "Pending"
    PAID = "paid", "Paid"


class Order(BaseModel):
    """
    A buyer's order.

    Fields:
        order_id: Public order identifier passed to gateways and back
        currency: ISO 4217 currency code of the order
        total: Order total in major units (e.g. dollars)
        status: Current lifecycle status
        paid_at: When the balance was covered

    Note:
        balance_due is derived from recorded Payments rather than stored,
        so a Payment row is the single source of truth for money received.
    """

    order_id = models.CharField(
        max_length=40,
        unique=True,
        db_index=True,
        help_text="Public order identifier used in gateway requests",
    )

    currency = models.CharField(
        max_length=3,
        help_text="ISO 4217 currency code",
    )

    total = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        help_text="Order total in major currency units",
    )

    status = models.CharField(
        max_length=20,
        choices=OrderStatus.choices,
        default=OrderStatus.PENDING,
        db_index=True,
        help_text="Current order status",
    )

    paid_at = models.DateTimeField(
        null=True,
        blank=True,
        help_text="When the order balance was fully paid",
    )

    class Meta:
        ordering = ["-created_at"]
        verbose_name = "Order"
        verbose_name_plural = "Orders"

    def __str__(self) -> str:
        """Return string representation with order ID and status."""
        return f"Order({self.order_id}, {self.status})"

    @classmethod
    def get_instance(cls, order_id: str | None) -> Order | None:
        """
        Look up an order by its public ID.

        Args:
            order_id: Public order identifier

        Returns:
            The Order, or None if the ID is empty or unknown
        """
        if not order_id:
            return None
        return cls.objects.filter(order_id=order_id).first()

    @property
    def amount_paid(self) -> Decimal:
        """Sum of all payments recorded against this order."""
        paid = self.payments.aggregate(total=Sum("amount"))["total"]
        return paid or Decimal("0.00")

    @property
    def balance_due(self) -> Decimal:
        """Amount still owed, never negative."""
        return max(self.total - self.amount_paid, Decimal("0.00"))

    @property
    def is_paid(self) -> bool:
        return self.status == OrderStatus.PAID

    def handle_purchase(self) -> bool:
        """
        Complete the purchase once the balance is covered.

        Marks the order paid and stamps paid_at. Safe to call again on an
        order that is already paid.

        Returns:
            True if the order is paid, False if a balance remains
        """
        balance = self.balance_due
        if balance > 0:
            logger.warning(
                "Purchase not completed, balance remains",
                extra={"order_id": self.order_id, "balance_due": str(balance)},
            )
            return False

        if not self.is_paid:
            self.status = OrderStatus.PAID
            self.paid_at = timezone.now()
            self.save(update_fields=["status", "paid_at", "updated_at"])
            logger.info("Order paid", extra={"order_id": self.order_id})
        return True
