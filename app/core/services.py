"""
Result wrapper for service-layer operations.

Pattern Comparison:
    - ServiceResult: Use for expected failures (rejected notifications,
      failed captures, business rule violations)
    - Exceptions: Use for unexpected failures (database errors, bugs)

Usage:
    from core.services import ServiceResult

    def verify(self) -> ServiceResult[Transaction]:
        if not self.txn_id:
            return ServiceResult.failure(
                "Transaction ID is empty",
                error_code="EMPTY_TRANSACTION_ID",
            )
        return ServiceResult.success(transaction)

    result = processor.verify()
    if result:  # Same as: if result.success
        processor.dispatch()

Related:
    - core.exceptions: For unexpected/exceptional errors
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

# Generic type for ServiceResult data
T = TypeVar("T")


@dataclass
class ServiceResult(Generic[T]):
    """
    Standard result wrapper for service operations.

    Provides consistent success/failure handling without exceptions.

    Attributes:
        success: Whether the operation succeeded
        data: Result data if successful (None if failed)
        error: Error message if failed (None if successful)
        error_code: Machine-readable error code

    Usage:
        # Success case
        return ServiceResult.success(redirect_url)

        # Failure case
        return ServiceResult.failure("Capture failed", "CAPTURE_FAILED")
    """

    success: bool
    data: T | None = None
    error: str | None = None
    error_code: str | None = None

    @classmethod
    def success(cls, data: T) -> ServiceResult[T]:
        """
        Create a successful result.

        Args:
            data: The result data

        Returns:
            ServiceResult with success=True and data set
        """
        return cls(success=True, data=data)

    @classmethod
    def failure(cls, error: str, error_code: str | None = None) -> ServiceResult[T]:
        """
        Create a failed result.

        Args:
            error: Human-readable error message
            error_code: Machine-readable error code

        Returns:
            ServiceResult with success=False and error details
        """
        return cls(
            success=False,
            error=error,
            error_code=error_code,
        )

    @classmethod
    def from_exception(cls, exc: Exception, error_code: str | None = None) -> ServiceResult[T]:
        """
        Create a failed result from an exception.

        Args:
            exc: The caught exception
            error_code: Optional error code (defaults to exception class name)

        Returns:
            ServiceResult with error details from exception
        """
        return cls(
            success=False,
            error=str(exc),
            error_code=error_code or exc.__class__.__name__.upper(),
        )

    def __bool__(self) -> bool:
        """
        Allow using result in boolean context.

        Example:
            if processor.verify():  # Same as: if result.success
                processor.dispatch()
        """
        return self.success
