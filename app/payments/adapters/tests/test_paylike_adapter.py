"""
Tests for Paylike adapter.

Tests cover:
- Transaction and CaptureParams data types
- Request construction (URL, auth, payload, timeout)
- Error translation for HTTP status codes and transport failures
- Malformed responses
"""

import pytest
import requests
from django.test import override_settings

from payments.adapters import CaptureParams, PaylikeAdapter, Transaction, TransactionClient
from payments.exceptions import (
    PaylikeAPIUnavailableError,
    PaylikeAuthenticationError,
    PaylikeInvalidRequestError,
    PaylikeRateLimitError,
    PaylikeTimeoutError,
    PaylikeTransactionNotFoundError,
)


# =============================================================================
# Data Type Tests
# =============================================================================


class TestTransaction:
    """Tests for Transaction.from_api."""

    def test_reads_camel_case_amounts(self, transaction_data):
        """Should map Paylike field names to snapshot fields."""
        data = transaction_data(amount=5000, pending_amount=3000, captured_amount=2000)

        transaction = Transaction.from_api(data)

        assert transaction.id == data["id"]
        assert transaction.amount == 5000
        assert transaction.pending_amount == 3000
        assert transaction.captured_amount == 2000
        assert transaction.currency == "USD"
        assert transaction.raw_response == data

    def test_missing_amounts_default_to_zero(self):
        """Should treat absent amount fields as 0."""
        transaction = Transaction.from_api({"id": "txn", "amount": "1200"})

        assert transaction.amount == 1200
        assert transaction.pending_amount == 0
        assert transaction.captured_amount == 0
        assert transaction.currency == ""

    def test_snapshots_compare_without_raw_response(self, transaction_data):
        """Two snapshots with the same values are equal whatever the raw body."""
        first = Transaction.from_api(transaction_data())
        second = Transaction.from_api(transaction_data(descriptor="other"))

        assert first == second


class TestCaptureParams:
    """Tests for CaptureParams validation."""

    def test_valid_params(self):
        params = CaptureParams(amount=5000, currency="USD")

        assert params.to_payload() == {"amount": 5000, "currency": "USD"}

    def test_descriptor_included_when_set(self):
        params = CaptureParams(amount=100, currency="EUR", descriptor="ORDER-1")

        assert params.to_payload() == {"amount": 100, "currency": "EUR", "descriptor": "ORDER-1"}

    def test_amount_must_be_positive(self):
        """Should raise ValueError for zero or negative amount."""
        with pytest.raises(ValueError, match="amount must be at least 1 minor unit"):
            CaptureParams(amount=0, currency="USD")

        with pytest.raises(ValueError, match="amount must be at least 1 minor unit"):
            CaptureParams(amount=-100, currency="USD")

    def test_currency_required(self):
        with pytest.raises(ValueError, match="currency is required"):
            CaptureParams(amount=100, currency="")


# =============================================================================
# Adapter Setup Tests
# =============================================================================


class TestAdapterSetup:
    """Tests for adapter construction."""

    def test_uses_basic_auth_with_private_key(self, adapter, mock_session):
        """Private key is the password, user name is empty."""
        assert mock_session.auth == ("", "test-private-key")

    def test_strips_trailing_slash_from_api_url(self, adapter):
        assert adapter.api_url == "https://api.paylike.test"

    @override_settings(PAYLIKE_API_URL="https://api.example.test", PAYLIKE_API_TIMEOUT_SECONDS=3)
    def test_defaults_come_from_settings(self, mock_session):
        adapter = PaylikeAdapter(private_key="key", session=mock_session)

        assert adapter.api_url == "https://api.example.test"
        assert adapter.timeout == 3

    def test_implements_transaction_client(self, adapter):
        assert isinstance(adapter, TransactionClient)


# =============================================================================
# Fetch Tests
# =============================================================================


class TestFetch:
    """Tests for PaylikeAdapter.fetch."""

    def test_fetch_success(self, adapter, mock_session, make_response, transaction_data, transaction_id):
        """Should GET the transaction and return a snapshot."""
        mock_session.request.return_value = make_response(
            body={"transaction": transaction_data(amount=5000)}
        )

        transaction = adapter.fetch(transaction_id)

        assert transaction.id == transaction_id
        assert transaction.amount == 5000
        mock_session.request.assert_called_once_with(
            "GET",
            f"https://api.paylike.test/transactions/{transaction_id}",
            json=None,
            timeout=5,
        )

    def test_empty_id_does_not_call_api(self, adapter, mock_session):
        with pytest.raises(PaylikeTransactionNotFoundError):
            adapter.fetch("")

        mock_session.request.assert_not_called()

    def test_unknown_transaction(self, adapter, mock_session, make_response, transaction_id):
        mock_session.request.return_value = make_response(
            status_code=404,
            body={"code": "NOT_FOUND", "message": "Transaction not found"},
            reason="Not Found",
        )

        with pytest.raises(PaylikeTransactionNotFoundError) as exc_info:
            adapter.fetch(transaction_id)

        assert exc_info.value.status_code == 404
        assert exc_info.value.provider_code == "NOT_FOUND"
        assert "Transaction not found" in str(exc_info.value)

    def test_malformed_id_reported_as_not_found(self, adapter, mock_session, make_response):
        """A 400 on fetch means the ID itself is bad."""
        mock_session.request.return_value = make_response(
            status_code=400,
            body=[{"field": "id", "message": "invalid id"}],
            reason="Bad Request",
        )

        with pytest.raises(PaylikeTransactionNotFoundError) as exc_info:
            adapter.fetch("not-an-id")

        assert exc_info.value.status_code == 400
        assert isinstance(exc_info.value.__cause__, PaylikeInvalidRequestError)

    def test_id_is_escaped_in_path(self, adapter, mock_session, make_response, transaction_data):
        """Reserved characters in the ID stay inside the transaction path segment."""
        mock_session.request.return_value = make_response(
            body={"transaction": transaction_data()}
        )

        adapter.fetch("T1/captures?x=#y")

        url = mock_session.request.call_args.args[1]
        assert url == "https://api.paylike.test/transactions/T1%2Fcaptures%3Fx%3D%23y"

    def test_response_without_transaction_object(self, adapter, mock_session, make_response, transaction_id):
        mock_session.request.return_value = make_response(body={"unexpected": True})

        with pytest.raises(PaylikeAPIUnavailableError):
            adapter.fetch(transaction_id)

    def test_non_json_body(self, adapter, mock_session, make_response, transaction_id):
        mock_session.request.return_value = make_response(raw=b"<html>gateway</html>")

        with pytest.raises(PaylikeAPIUnavailableError) as exc_info:
            adapter.fetch(transaction_id)

        assert exc_info.value.provider_code == "invalid_json"


# =============================================================================
# Capture Tests
# =============================================================================


class TestCapture:
    """Tests for PaylikeAdapter.capture."""

    def test_capture_success(self, adapter, mock_session, make_response, transaction_data, transaction_id):
        """Should POST amount and currency and return the updated snapshot."""
        mock_session.request.return_value = make_response(
            body={"transaction": transaction_data(pending_amount=0, captured_amount=5000)}
        )

        transaction = adapter.capture(transaction_id, CaptureParams(amount=5000, currency="USD"))

        assert transaction.captured_amount == 5000
        assert transaction.pending_amount == 0
        mock_session.request.assert_called_once_with(
            "POST",
            f"https://api.paylike.test/transactions/{transaction_id}/captures",
            json={"amount": 5000, "currency": "USD"},
            timeout=5,
        )

    def test_id_is_escaped_in_capture_path(self, adapter, mock_session, make_response, transaction_data):
        mock_session.request.return_value = make_response(
            body={"transaction": transaction_data(captured_amount=100)}
        )

        adapter.capture("A?amount=1", CaptureParams(amount=100, currency="USD"))

        url = mock_session.request.call_args.args[1]
        assert url == "https://api.paylike.test/transactions/A%3Famount%3D1/captures"

    def test_capture_rejected(self, adapter, mock_session, make_response, transaction_id):
        """A 400 on capture stays an invalid request."""
        mock_session.request.return_value = make_response(
            status_code=400,
            body={"code": "AMOUNT_INVALID", "message": "Amount exceeds pending amount"},
            reason="Bad Request",
        )

        with pytest.raises(PaylikeInvalidRequestError) as exc_info:
            adapter.capture(transaction_id, CaptureParams(amount=9000, currency="USD"))

        assert exc_info.value.provider_code == "AMOUNT_INVALID"
        assert exc_info.value.is_retryable is False


# =============================================================================
# Error Translation Tests
# =============================================================================


class TestErrorTranslation:
    """Tests for mapping HTTP and transport failures to domain exceptions."""

    @pytest.mark.parametrize(
        "status_code,exception_class,retryable",
        [
            (401, PaylikeAuthenticationError, False),
            (403, PaylikeAuthenticationError, False),
            (429, PaylikeRateLimitError, True),
            (500, PaylikeAPIUnavailableError, True),
            (503, PaylikeAPIUnavailableError, True),
        ],
    )
    def test_http_status_mapping(
        self, adapter, mock_session, make_response, transaction_id, status_code, exception_class, retryable
    ):
        mock_session.request.return_value = make_response(
            status_code=status_code, body={"message": "error"}, reason="Error"
        )

        with pytest.raises(exception_class) as exc_info:
            adapter.capture(transaction_id, CaptureParams(amount=100, currency="USD"))

        assert exc_info.value.status_code == status_code
        assert exc_info.value.is_retryable is retryable

    def test_error_body_not_json_uses_reason(self, adapter, mock_session, make_response, transaction_id):
        mock_session.request.return_value = make_response(
            status_code=422, raw=b"nope", reason="Unprocessable Entity"
        )

        with pytest.raises(PaylikeInvalidRequestError, match="Unprocessable Entity"):
            adapter.capture(transaction_id, CaptureParams(amount=100, currency="USD"))

    def test_timeout(self, adapter, mock_session, transaction_id):
        mock_session.request.side_effect = requests.ReadTimeout("read timed out")

        with pytest.raises(PaylikeTimeoutError) as exc_info:
            adapter.fetch(transaction_id)

        assert exc_info.value.is_retryable is True

    def test_connect_timeout_is_a_timeout(self, adapter, mock_session, transaction_id):
        mock_session.request.side_effect = requests.ConnectTimeout("connect timed out")

        with pytest.raises(PaylikeTimeoutError):
            adapter.fetch(transaction_id)

    def test_connection_error(self, adapter, mock_session, transaction_id):
        mock_session.request.side_effect = requests.ConnectionError("refused")

        with pytest.raises(PaylikeAPIUnavailableError) as exc_info:
            adapter.fetch(transaction_id)

        assert exc_info.value.provider_code == "api_connection_error"

    def test_other_transport_error(self, adapter, mock_session, transaction_id):
        mock_session.request.side_effect = requests.TooManyRedirects("loop")

        with pytest.raises(PaylikeAPIUnavailableError) as exc_info:
            adapter.fetch(transaction_id)

        assert exc_info.value.provider_code == "unknown_error"
