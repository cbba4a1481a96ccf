"""
Paylike API adapter for transaction operations.

This module provides the PaylikeAdapter class which encapsulates the
Paylike REST API calls the gateway needs. All Paylike calls should go
through this adapter to ensure consistent error handling, timeouts and
logging.

Features:
- Configurable timeout on all API calls
- One requests.Session per adapter (connection reuse)
- Automatic error translation to domain exceptions
- Structured logging with timing metrics

Configuration (via settings):
- PAYLIKE_API_URL: API base URL (default: https://api.paylike.io)
- PAYLIKE_API_TIMEOUT_SECONDS: API call timeout (default: 10)

Authentication is HTTP basic auth with an empty user name and the
private (app) key as the password.

Usage:
    from payments.adapters import CaptureParams, PaylikeAdapter

    adapter = PaylikeAdapter(private_key="...")

    # Fetch a transaction
    transaction = adapter.fetch("5f7b1c2e9b1b4a2d8c3e4f5a")

    # Capture the pending amount
    transaction = adapter.capture(
        transaction.id,
        CaptureParams(amount=transaction.pending_amount, currency=transaction.currency),
    )
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable
from urllib.parse import quote

import requests
from django.conf import settings

from payments.exceptions import (
    PaylikeAPIUnavailableError,
    PaylikeAuthenticationError,
    PaylikeInvalidRequestError,
    PaylikeRateLimitError,
    PaylikeTimeoutError,
    PaylikeTransactionNotFoundError,
)


DEFAULT_API_URL = "https://api.paylike.io"


# =============================================================================
# Data Types
# =============================================================================


def _as_int(value: Any) -> int:
    """Coerce a provider amount to int, treating missing values as 0."""
    if value in (None, ""):
        return 0
    return int(value)


@dataclass(frozen=True)
class Transaction:
    """
    Snapshot of a Paylike transaction.

    Immutable: every fetch or capture returns a new snapshot.

    Attributes:
        id: Paylike transaction ID
        amount: Authorized amount in minor units (e.g. cents)
        pending_amount: Amount still available for capture, minor units
        captured_amount: Amount captured so far, minor units
        currency: ISO 4217 currency code
        raw_response: Full transaction object from the API (for the audit log)
    """

    id: str
    amount: int
    pending_amount: int
    captured_amount: int
    currency: str
    raw_response: dict[str, Any] = field(default_factory=dict, compare=False)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Transaction:
        """
        Build a Transaction from a Paylike API transaction object.

        Args:
            data: The "transaction" object from an API response

        Returns:
            Transaction with numeric fields coerced to int
        """
        return cls(
            id=str(data.get("id", "")),
            amount=_as_int(data.get("amount")),
            pending_amount=_as_int(data.get("pendingAmount")),
            captured_amount=_as_int(data.get("capturedAmount")),
            currency=str(data.get("currency", "")),
            raw_response=dict(data),
        )


@dataclass
class CaptureParams:
    """
    Parameters for capturing a Paylike transaction.

    Attributes:
        amount: Amount to capture in minor units (at least 1)
        currency: ISO 4217 currency code of the transaction
        descriptor: Optional text shown on the buyer's statement
    """

    amount: int
    currency: str
    descriptor: str | None = None

    def __post_init__(self) -> None:
        """Validate parameters after initialization."""
        if self.amount < 1:
            raise ValueError("amount must be at least 1 minor unit")
        if not self.currency:
            raise ValueError("currency is required")

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"amount": self.amount, "currency": self.currency}
        if self.descriptor:
            payload["descriptor"] = self.descriptor
        return payload


# =============================================================================
# Client Protocol
# =============================================================================


@runtime_checkable
class TransactionClient(Protocol):
    """
    Protocol for provider transaction clients.

    The gateway depends on this interface only, so tests and other
    environments can substitute a fake client.
    """

    def fetch(self, transaction_id: str) -> Transaction: ...

    def capture(self, transaction_id: str, params: CaptureParams) -> Transaction: ...


# =============================================================================
# Paylike Adapter
# =============================================================================


class PaylikeAdapter:
    """
    Adapter for Paylike API operations.

    Implements TransactionClient over HTTPS with requests. One instance
    holds one requests.Session; the gateway keeps one adapter per
    gateway instance.

    Usage:
        adapter = PaylikeAdapter(private_key=settings.PAYLIKE_PRIVATE_KEY)
        transaction = adapter.fetch(txn_id)
    """

    def __init__(
        self,
        private_key: str,
        api_url: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ):
        self.api_url = (api_url or getattr(settings, "PAYLIKE_API_URL", DEFAULT_API_URL)).rstrip("/")
        self.timeout = timeout or getattr(settings, "PAYLIKE_API_TIMEOUT_SECONDS", 10)
        self.session = session or requests.Session()
        self.session.auth = ("", private_key)
        self.session.headers.update({"Accept": "application/json"})

    @classmethod
    def get_logger(cls) -> logging.Logger:
        """Get logger for this adapter."""
        return logging.getLogger(f"{cls.__module__}.{cls.__name__}")

    # =========================================================================
    # Core Operations
    # =========================================================================

    def fetch(self, transaction_id: str) -> Transaction:
        """
        Fetch a transaction by ID.

        Args:
            transaction_id: Paylike transaction ID

        Returns:
            Transaction snapshot

        Raises:
            PaylikeTransactionNotFoundError: Empty, malformed or unknown ID
            PaylikeAuthenticationError: Private key rejected
            PaylikeAPIUnavailableError: Paylike service unavailable
            PaylikeTimeoutError: Request timed out
        """
        if not transaction_id:
            raise PaylikeTransactionNotFoundError("Transaction ID is empty")

        try:
            data = self._request(
                "GET",
                f"/transactions/{quote(transaction_id, safe='')}",
                log_context={"operation": "fetch_transaction", "transaction_id": transaction_id},
            )
        except PaylikeInvalidRequestError as e:
            # A malformed ID is reported as a bad request
            raise PaylikeTransactionNotFoundError(
                f"Invalid transaction ID: {transaction_id}",
                provider_code=e.provider_code,
                status_code=e.status_code,
            ) from e

        return Transaction.from_api(self._transaction_object(data))

    def capture(self, transaction_id: str, params: CaptureParams) -> Transaction:
        """
        Capture an authorized transaction.

        Args:
            transaction_id: Paylike transaction ID
            params: Amount (minor units) and currency to capture

        Returns:
            Transaction snapshot after the capture, including capturedAmount

        Raises:
            PaylikeTransactionNotFoundError: Unknown transaction
            PaylikeInvalidRequestError: Amount/currency rejected
            PaylikeAPIUnavailableError: Paylike service unavailable
            PaylikeTimeoutError: Request timed out
        """
        data = self._request(
            "POST",
            f"/transactions/{quote(transaction_id, safe='')}/captures",
            json=params.to_payload(),
            log_context={
                "operation": "capture_transaction",
                "transaction_id": transaction_id,
                "amount": params.amount,
                "currency": params.currency,
            },
        )
        return Transaction.from_api(self._transaction_object(data))

    # =========================================================================
    # HTTP
    # =========================================================================

    def _request(
        self,
        method: str,
        path: str,
        log_context: dict[str, Any],
        json: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """
        Send a request and return the decoded JSON body.

        Raises:
            PaylikeError subclass for every failure
        """
        logger = self.get_logger()
        start_time = time.time()
        logger.info("Starting Paylike operation", extra=log_context)

        try:
            response = self.session.request(
                method,
                f"{self.api_url}{path}",
                json=json,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            duration_ms = (time.time() - start_time) * 1000
            self._handle_transport_error(e, log_context, duration_ms)
            raise  # Never reached, _handle_transport_error always raises

        duration_ms = (time.time() - start_time) * 1000
        if not response.ok:
            self._handle_http_error(response, log_context, duration_ms)

        try:
            data = response.json()
        except ValueError:
            logger.error(
                "Paylike returned a non-JSON body",
                extra={**log_context, "status_code": response.status_code},
            )
            raise PaylikeAPIUnavailableError(
                "Unexpected response from Paylike",
                provider_code="invalid_json",
                status_code=response.status_code,
            )

        logger.info(
            "Paylike operation completed",
            extra={**log_context, "status_code": response.status_code, "duration_ms": duration_ms},
        )
        return data

    @staticmethod
    def _transaction_object(data: Any) -> dict[str, Any]:
        """Extract the transaction object from a response body."""
        if isinstance(data, dict) and isinstance(data.get("transaction"), dict):
            return data["transaction"]
        raise PaylikeAPIUnavailableError(
            "Paylike response has no transaction object",
            provider_code="invalid_response",
        )

    # =========================================================================
    # Error Handling
    # =========================================================================

    @staticmethod
    def _error_message(response: requests.Response) -> tuple[str, str | None]:
        """
        Pull a message and code out of a Paylike error body.

        Paylike answers errors either with one object or with a list of
        field errors; anything else falls back to the HTTP reason.
        """
        try:
            body = response.json()
        except ValueError:
            return response.reason or f"HTTP {response.status_code}", None

        if isinstance(body, list) and body:
            body = body[0]
        if isinstance(body, dict):
            message = body.get("message") or body.get("text") or response.reason
            code = body.get("code")
            return str(message), str(code) if code is not None else None
        return response.reason or f"HTTP {response.status_code}", None

    @classmethod
    def _handle_http_error(
        cls,
        response: requests.Response,
        log_context: dict[str, Any],
        duration_ms: float,
    ) -> None:
        """
        Translate an HTTP error response to a domain exception.

        Raises:
            PaylikeAuthenticationError: 401/403
            PaylikeTransactionNotFoundError: 404
            PaylikeRateLimitError: 429
            PaylikeAPIUnavailableError: 5xx
            PaylikeInvalidRequestError: any other 4xx
        """
        logger = cls.get_logger()
        status = response.status_code
        message, provider_code = cls._error_message(response)
        log_context = {
            **log_context,
            "status_code": status,
            "provider_code": provider_code,
            "duration_ms": duration_ms,
        }

        if status in (401, 403):
            logger.critical("Paylike authentication failed - check private key", extra=log_context)
            raise PaylikeAuthenticationError(
                "Paylike authentication failed",
                provider_code=provider_code,
                status_code=status,
            )

        if status == 404:
            logger.warning("Paylike resource not found", extra=log_context)
            raise PaylikeTransactionNotFoundError(
                message,
                provider_code=provider_code,
                status_code=status,
            )

        if status == 429:
            logger.warning("Rate limited by Paylike", extra=log_context)
            raise PaylikeRateLimitError(
                "Paylike rate limit exceeded. Please retry.",
                provider_code=provider_code,
                status_code=status,
            )

        if status >= 500:
            logger.error("Paylike API error", extra=log_context)
            raise PaylikeAPIUnavailableError(
                "Paylike service error. Please retry.",
                provider_code=provider_code,
                status_code=status,
            )

        logger.error("Invalid request to Paylike", extra=log_context)
        raise PaylikeInvalidRequestError(
            message,
            provider_code=provider_code,
            status_code=status,
        )

    @classmethod
    def _handle_transport_error(
        cls,
        error: requests.RequestException,
        log_context: dict[str, Any],
        duration_ms: float,
    ) -> None:
        """
        Translate a requests transport failure to a domain exception.

        Raises:
            PaylikeTimeoutError: Connect or read timeout
            PaylikeAPIUnavailableError: Connection or other transport error
        """
        logger = cls.get_logger()
        log_context = {**log_context, "duration_ms": duration_ms}

        if isinstance(error, requests.Timeout):
            logger.error("Paylike request timed out", extra=log_context)
            raise PaylikeTimeoutError(
                "Paylike request timed out. Please retry.",
                provider_code="timeout",
            )

        if isinstance(error, requests.ConnectionError):
            logger.error("Connection error to Paylike", extra=log_context, exc_info=True)
            raise PaylikeAPIUnavailableError(
                "Could not connect to Paylike. Please retry.",
                provider_code="api_connection_error",
            )

        logger.error(
            f"Unexpected error calling Paylike: {type(error).__name__}",
            extra=log_context,
            exc_info=True,
        )
        raise PaylikeAPIUnavailableError(
            f"Unexpected Paylike error: {error}",
            provider_code="unknown_error",
        )
