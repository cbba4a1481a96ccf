"""
Factory Boy factories for payment test data.

Usage:
    from payments.tests.factories import WebhookEventFactory

    # Log a notification for a transaction
    event = WebhookEventFactory(txn_id="txn_1")

    # A notification that failed processing
    event = WebhookEventFactory(status=WebhookEventStatus.FAILED)
"""

import factory

from payments.models import WebhookEvent
from payments.state_machines import WebhookEventStatus, WebhookEventType


class WebhookEventFactory(factory.django.DjangoModelFactory):
    """Factory for creating logged gateway notifications."""

    class Meta:
        model = WebhookEvent

    gateway = "paylike"
    txn_id = factory.Sequence(lambda n: f"txn_{n:06d}")
    ref_id = factory.LazyAttribute(lambda o: o.txn_id)
    order_id = factory.Sequence(lambda n: f"ORDER-{n}")
    event_type = WebhookEventType.AUTHORIZED
    payload = factory.LazyAttribute(lambda o: {"request": {"txn_id": o.txn_id, "order_id": o.order_id}})
    ip_address = "127.0.0.1"
    status = WebhookEventStatus.RECEIVED
