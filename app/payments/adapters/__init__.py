"""
Payment adapters for external services.

This module provides adapters for external payment providers. All
provider API calls should go through these adapters to ensure
consistent error handling, timeouts and logging.

Usage:
    from payments.adapters import CaptureParams, PaylikeAdapter

    adapter = PaylikeAdapter(private_key="...")
    transaction = adapter.fetch("5f7b1c2e9b1b4a2d8c3e4f5a")
    adapter.capture(transaction.id, CaptureParams(amount=5000, currency="USD"))
"""

from payments.adapters.paylike_adapter import (
    CaptureParams,
    PaylikeAdapter,
    Transaction,
    TransactionClient,
)

__all__ = [
    "CaptureParams",
    "PaylikeAdapter",
    "Transaction",
    "TransactionClient",
]
