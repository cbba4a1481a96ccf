"""
Base exception classes for application-wide error handling.

This module provides a standardized exception hierarchy that enables:
- Machine-readable error codes for logging and redirects
- Detailed error information for debugging

Exception Hierarchy:
    BaseApplicationError (base)
    ├── NotFoundError - Resource not found
    └── ConflictError - State conflicts (duplicates, out-of-order calls)

Usage:
    from core.exceptions import NotFoundError

    # Raise with message only
    raise NotFoundError("Order not found")

    # Raise with error code and additional details
    raise NotFoundError(
        "Order not found",
        error_code="ORDER_NOT_FOUND",
        details={"order_id": "20201234"},
    )

Note:
    These exceptions are for domain/business logic errors. Expected
    failures inside a request flow are reported with core.services.ServiceResult.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any


class BaseApplicationError(Exception):
    """
    Base exception for all application-specific errors.

    Attributes:
        message: Human-readable error description
        error_code: Machine-readable code for handling and log filtering
        details: Additional error context

    Example:
        try:
            gateway.get_transaction(txn_id)
        except BaseApplicationError as e:
            logger.warning(f"Lookup failed: {e.error_code}")
    """

    default_error_code: str = "APPLICATION_ERROR"

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        """
        Initialize the exception.

        Args:
            message: Human-readable error description
            error_code: Machine-readable error code (defaults to class default)
            details: Additional error context
        """
        self.message = message
        self.error_code = error_code or self.default_error_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for logging or JSON responses.

        Returns:
            Dict with error, error_code, and details keys
        """
        result: dict[str, Any] = {
            "error": self.message,
            "error_code": self.error_code,
        }
        if self.details:
            result["details"] = self.details
        return result

    def __str__(self) -> str:
        """Return string representation with error code."""
        return f"[{self.error_code}] {self.message}"

    def __repr__(self) -> str:
        """Return detailed representation for debugging."""
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code!r}, "
            f"details={self.details!r})"
        )


class NotFoundError(BaseApplicationError):
    """
    Raised when a requested resource is not found.

    Use for:
    - Database record not found
    - External resource not found (e.g. provider transaction)
    """

    default_error_code: str = "NOT_FOUND"


class ConflictError(BaseApplicationError):
    """
    Raised when an operation conflicts with current state.

    Use for:
    - Duplicate entries (unique constraint violations)
    - Invalid state transitions

    Example:
        if processor.state != "verified":
            raise ConflictError(
                "Cannot dispatch an unverified notification",
                error_code="INVALID_STATE_TRANSITION",
                details={"current_state": processor.state},
            )
    """

    default_error_code: str = "CONFLICT"

