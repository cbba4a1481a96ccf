"""
Payment-specific exceptions for gateway operations.

This module provides a hierarchy of exceptions for payment operations,
including payment domain errors, provider (Paylike) errors and state
errors raised when the webhook processor is driven out of order.

Exception Hierarchy:
    PaymentError (base for payment domain)
    ├── PaymentNotFoundError - Payment entity lookup failures
    └── PaymentProcessingError - Payment processing failures
        └── PaylikeError - Base for all Paylike errors
            ├── PaylikeTransactionNotFoundError - Unknown transaction (permanent)
            ├── PaylikeInvalidRequestError - Invalid request params (permanent)
            ├── PaylikeAuthenticationError - Bad private key (permanent)
            ├── PaylikeRateLimitError - Rate limited (transient, retry)
            ├── PaylikeAPIUnavailableError - API unavailable (transient, retry)
            └── PaylikeTimeoutError - Request timeout (transient, retry)

    InvalidStateTransitionError - Processor step not allowed (inherits ConflictError)

Usage:
    from payments.exceptions import PaylikeError, PaylikeTransactionNotFoundError

    try:
        transaction = gateway.get_transaction(txn_id)
    except PaylikeTransactionNotFoundError:
        ...  # notification names a transaction the provider doesn't know
    except PaylikeError as e:
        if e.is_retryable:
            ...
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from core.exceptions import BaseApplicationError, ConflictError

if TYPE_CHECKING:
    from typing import Any


# =============================================================================
# Payment Domain Exceptions
# =============================================================================


class PaymentError(BaseApplicationError):
    """
    Base exception for all payment operations.

    All payment-specific exceptions inherit from this class,
    which itself inherits from BaseApplicationError for
    consistent error codes.
    """

    default_error_code: str = "PAYMENT_ERROR"


class PaymentNotFoundError(PaymentError):
    """
    Raised when a payment entity cannot be found.

    Use for:
    - Unknown gateway name
    - Order lookup fails where an order is required
    """

    default_error_code: str = "PAYMENT_NOT_FOUND"


class PaymentProcessingError(PaymentError):
    """
    Raised when payment processing fails.

    Use for:
    - Provider API errors
    - Processing timeouts
    """

    default_error_code: str = "PAYMENT_PROCESSING_ERROR"


# =============================================================================
# Paylike-Specific Exceptions
# =============================================================================


class PaylikeError(PaymentProcessingError):
    """
    Base exception for all Paylike-related errors.

    Provides common attributes for provider error handling:
    - provider_code: Paylike's error code or the HTTP status
    - status_code: HTTP status returned by the API (if any)
    - is_retryable: Whether the operation can be retried

    Example:
        try:
            gateway.capture_transaction(txn_id, 5000, "USD")
        except PaylikeError as e:
            if e.is_retryable:
                ...  # provider will redeliver, or buyer can retry
    """

    default_error_code: str = "PAYLIKE_ERROR"
    is_retryable: bool = False

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        provider_code: str | None = None,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ):
        details = details or {}
        if provider_code:
            details["provider_code"] = provider_code
        if status_code:
            details["status_code"] = status_code
        super().__init__(message, error_code=error_code, details=details)
        self.provider_code = provider_code
        self.status_code = status_code


# -----------------------------------------------------------------------------
# Permanent Errors (do not retry)
# -----------------------------------------------------------------------------


class PaylikeTransactionNotFoundError(PaylikeError):
    """
    The transaction ID is empty or unknown to Paylike.

    Raised by fetch when the ID is blank (no API call is made) or when
    the API answers 404. A notification naming such a transaction must
    not be processed.
    """

    default_error_code: str = "TRANSACTION_NOT_FOUND"
    is_retryable: bool = False


class PaylikeInvalidRequestError(PaylikeError):
    """
    Invalid parameters sent to Paylike.

    Common causes:
    - Capture amount greater than the pending amount
    - Currency does not match the transaction
    - Malformed transaction ID
    """

    default_error_code: str = "INVALID_REQUEST"
    is_retryable: bool = False


class PaylikeAuthenticationError(PaylikeError):
    """
    Paylike rejected the private key.

    This is an operational problem (wrong or revoked key), not something
    a retry can fix.
    """

    default_error_code: str = "AUTHENTICATION_FAILED"
    is_retryable: bool = False


# -----------------------------------------------------------------------------
# Transient Errors (safe to retry)
# -----------------------------------------------------------------------------


class PaylikeRateLimitError(PaylikeError):
    """
    Too many requests to the Paylike API.
    """

    default_error_code: str = "RATE_LIMITED"
    is_retryable: bool = True


class PaylikeAPIUnavailableError(PaylikeError):
    """
    Paylike API is unavailable.

    Raised for connection failures and 5xx responses.
    """

    default_error_code: str = "API_UNAVAILABLE"
    is_retryable: bool = True


class PaylikeTimeoutError(PaylikeError):
    """
    Request to Paylike timed out.

    Note:
        A timed-out capture may still have succeeded on the provider side.
        The captured amount is only trusted when it is read back.
    """

    default_error_code: str = "TIMEOUT"
    is_retryable: bool = True


# =============================================================================
# State Exceptions
# =============================================================================


class InvalidStateTransitionError(ConflictError):
    """
    Raised when a webhook processor step is called out of order.

    The processor only moves received → verified → dispatched. Calling
    dispatch() before a successful verify() is a programming error.

    Example:
        raise InvalidStateTransitionError(
            "Cannot dispatch from 'received' state",
            details={"current_state": "received", "target_state": "dispatched"},
        )
    """

    default_error_code: str = "INVALID_STATE_TRANSITION"
