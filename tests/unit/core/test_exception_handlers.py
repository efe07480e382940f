"""
Unit Tests for Exception Handlers.

Tests the exception handler functions in isolation.
"""

import json
from unittest.mock import MagicMock

import pytest
from fastapi import Request
from fastapi.exceptions import RequestValidationError

from quirknotes.core.exception_handlers import (
    EXCEPTION_STATUS_MAP,
    _get_request_id,
    application_error_handler,
    unhandled_exception_handler,
    validation_error_handler,
)
from quirknotes.core.exceptions import (
    ApplicationError,
    AuthenticationError,
    ConflictError,
    DatabaseError,
    NotFoundError,
    ValidationError,
)


class TestExceptionStatusMapping:
    """Tests for exception to HTTP status code mapping."""

    @pytest.mark.parametrize(
        ("exc_type", "status"),
        [
            (ValidationError, 400),
            (ConflictError, 400),
            (AuthenticationError, 401),
            (NotFoundError, 404),
            (DatabaseError, 500),
        ],
    )
    def test_mapping(self, exc_type, status):
        assert EXCEPTION_STATUS_MAP[exc_type] == status


class TestGetRequestId:
    """Tests for request ID extraction."""

    def test_extracts_from_request_state(self):
        request = MagicMock(spec=Request)
        request.state.request_id = "state-123"
        request.headers = {}

        assert _get_request_id(request) == "state-123"

    def test_extracts_from_header(self):
        request = MagicMock(spec=Request)
        del request.state.request_id
        request.headers = {"x-request-id": "header-456"}

        assert _get_request_id(request) == "header-456"


@pytest.fixture
def mock_request():
    """Create a mock request."""
    request = MagicMock(spec=Request)
    request.url.path = "/getNote/abc"
    request.method = "GET"
    request.headers = {"x-request-id": "test-123"}
    del request.state.request_id
    return request


class TestApplicationErrorHandler:
    """Tests for application_error_handler."""

    async def test_not_found_returns_404(self, mock_request):
        response = await application_error_handler(
            mock_request, NotFoundError("Unable to find note with given ID.")
        )

        assert response.status_code == 404
        body = json.loads(response.body)
        assert body["success"] is False
        assert body["error"]["code"] == "RES_NOT_FOUND"
        assert body["error"]["message"] == "Unable to find note with given ID."
        assert body["metadata"]["request_id"] == "test-123"

    async def test_conflict_returns_400(self, mock_request):
        response = await application_error_handler(
            mock_request, ConflictError("Username already exists.")
        )

        assert response.status_code == 400
        assert json.loads(response.body)["error"]["code"] == "RES_CONFLICT"

    async def test_validation_includes_details(self, mock_request):
        exc = ValidationError("Title and content are both required.", details={"missing_fields": ["title"]})

        response = await application_error_handler(mock_request, exc)

        body = json.loads(response.body)
        assert response.status_code == 400
        assert body["error"]["details"] == {"missing_fields": ["title"]}

    async def test_database_error_hides_message(self, mock_request):
        response = await application_error_handler(
            mock_request, DatabaseError("Database operation failed: get_note")
        )

        body = json.loads(response.body)
        assert response.status_code == 500
        assert "get_note" not in body["error"]["message"]

    async def test_unmapped_error_returns_500(self, mock_request):
        response = await application_error_handler(mock_request, ApplicationError("boom"))

        assert response.status_code == 500


class TestValidationErrorHandler:
    """Tests for validation_error_handler."""

    async def test_returns_400_with_field_details(self, mock_request):
        exc = RequestValidationError(
            [{"loc": ("body", "title"), "msg": "Input should be a valid string", "type": "string_type"}]
        )

        response = await validation_error_handler(mock_request, exc)

        body = json.loads(response.body)
        assert response.status_code == 400
        assert body["error"]["code"] == "VAL_REQUEST_INVALID"
        assert body["error"]["details"]["validation_errors"][0]["field"] == "body.title"


class TestUnhandledExceptionHandler:
    """Tests for unhandled_exception_handler."""

    async def test_returns_generic_500(self, mock_request):
        response = await unhandled_exception_handler(
            mock_request, RuntimeError("connection string leaked here")
        )

        body = json.loads(response.body)
        assert response.status_code == 500
        assert body["error"]["code"] == "SYS_INTERNAL_ERROR"
        assert "connection string" not in response.body.decode()
