"""Tests for error handling"""
import json

import pytest
from unittest.mock import Mock, patch
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from app.core.errors import (
    Conflict,
    ErrorResponse,
    Forbidden,
    InternalError,
    InvalidArgument,
    NotFound,
    Unauthenticated,
    ValidationFailed,
    error_response_handler,
    http_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)


def mock_request(path="/api/v1/things"):
    request = Mock()
    request.url.path = path
    request.method = "GET"
    return request


def body(response: JSONResponse) -> dict:
    return json.loads(response.body.decode())


class TestErrorResponse:
    """Test ErrorResponse exception classes"""

    def test_error_response_defaults(self):
        error = ErrorResponse("Bad request")
        assert error.status_code == 400
        assert error.details == {}
        assert str(error) == "Bad request"

    def test_explicit_status_code_wins(self):
        error = InternalError("Could not connect", status_code=503)
        assert error.status_code == 503

    @pytest.mark.parametrize(
        "error_class, status_code",
        [
            (ValidationFailed, 400),
            (Unauthenticated, 401),
            (Forbidden, 403),
            (NotFound, 404),
            (Conflict, 409),
            (InvalidArgument, 400),
            (InternalError, 500),
        ],
    )
    def test_typed_errors_carry_their_status(self, error_class, status_code):
        error = error_class("message") if error_class is not ValidationFailed else error_class()
        assert isinstance(error, ErrorResponse)
        assert error.status_code == status_code


class TestErrorHandlers:
    """Test error handler functions"""

    @pytest.mark.asyncio
    async def test_error_response_handler_builds_envelope(self):
        with patch("app.core.errors.logger"):
            response = await error_response_handler(mock_request(), NotFound("Product not found"))

        assert response.status_code == 404
        assert body(response) == {"success": False, "message": "Product not found"}

    @pytest.mark.asyncio
    async def test_validation_failed_includes_field_errors(self):
        error = ValidationFailed(errors=[{"field": "sort", "message": "Cannot sort by 'x'"}])
        with patch("app.core.errors.logger"):
            response = await error_response_handler(mock_request(), error)

        assert response.status_code == 400
        assert body(response)["errors"] == [{"field": "sort", "message": "Cannot sort by 'x'"}]

    @pytest.mark.asyncio
    async def test_request_validation_errors_are_flattened(self):
        exc = RequestValidationError([
            {"loc": ("body", "email"), "msg": "value is not a valid email address", "type": "value_error"},
            {"loc": ("body", "password"), "msg": "Value error, Password must contain a digit", "type": "value_error"},
        ])
        with patch("app.core.errors.logger"):
            response = await validation_exception_handler(mock_request(), exc)

        content = body(response)
        assert response.status_code == 400
        assert content["success"] is False
        assert content["message"] == "Validation error"
        assert content["errors"] == [
            {"field": "email", "message": "value is not a valid email address"},
            {"field": "password", "message": "Password must contain a digit"},
        ]

    @pytest.mark.asyncio
    async def test_unmatched_route_message(self):
        with patch("app.core.errors.logger"):
            response = await http_exception_handler(mock_request("/nowhere"), HTTPException(404, "Not Found"))

        assert response.status_code == 404
        assert body(response) == {"success": False, "message": "Not found - /nowhere"}

    @pytest.mark.asyncio
    async def test_other_http_exceptions_keep_detail(self):
        with patch("app.core.errors.logger"):
            response = await http_exception_handler(mock_request(), HTTPException(405, "Method Not Allowed"))

        assert response.status_code == 405
        assert body(response)["message"] == "Method Not Allowed"

    @pytest.mark.asyncio
    async def test_unhandled_exception_is_generic_500(self):
        with patch("app.core.errors.logger") as mock_logger:
            response = await unhandled_exception_handler(mock_request(), RuntimeError("boom"))

        assert response.status_code == 500
        assert body(response) == {"success": False, "message": "Internal server error"}
        mock_logger.error.assert_called_once()
