"""Unit tests for middleware components"""
import uuid

import pytest
from unittest.mock import Mock, patch

from app.core.context import get_correlation_id, set_correlation_id
from app.middleware.request_context import RequestContextMiddleware


class MockRequest:
    def __init__(self, headers=None):
        self.headers = headers or {}
        self.state = Mock()
        self.method = "GET"
        self.url = Mock(path="/api/v1/products")


def mock_call_next(captured: dict):
    async def call_next(req):
        captured["correlation_id"] = get_correlation_id()
        response = Mock()
        response.headers = {}
        response.status_code = 200
        return response

    return call_next


class TestRequestContextMiddleware:
    """Test RequestContextMiddleware functionality"""

    @pytest.mark.asyncio
    @patch("app.middleware.request_context.logger")
    @patch("app.middleware.request_context.config")
    async def test_correlation_id_from_header(self, mock_config, mock_logger):
        """Test reusing the caller's correlation ID"""
        # Arrange
        mock_config.correlation_id_header = "X-Correlation-ID"
        middleware = RequestContextMiddleware(Mock())
        request = MockRequest({"X-Correlation-ID": "test-correlation-123"})
        captured = {}

        # Act
        response = await middleware.dispatch(request, mock_call_next(captured))

        # Assert
        assert captured["correlation_id"] == "test-correlation-123"
        assert request.state.correlation_id == "test-correlation-123"
        assert response.headers["X-Correlation-ID"] == "test-correlation-123"

    @pytest.mark.asyncio
    @patch("app.middleware.request_context.logger")
    @patch("app.middleware.request_context.config")
    async def test_correlation_id_generated(self, mock_config, mock_logger):
        """Test generating a new correlation ID when none is provided"""
        # Arrange
        mock_config.correlation_id_header = "X-Correlation-ID"
        middleware = RequestContextMiddleware(Mock())
        captured = {}

        # Act
        response = await middleware.dispatch(MockRequest(), mock_call_next(captured))

        # Assert
        generated_id = captured["correlation_id"]
        assert uuid.UUID(generated_id)
        assert response.headers["X-Correlation-ID"] == generated_id

    @pytest.mark.asyncio
    @patch("app.middleware.request_context.logger")
    @patch("app.middleware.request_context.config")
    async def test_request_is_logged(self, mock_config, mock_logger):
        """Test the completed request is logged with its outcome"""
        # Arrange
        mock_config.correlation_id_header = "X-Correlation-ID"
        middleware = RequestContextMiddleware(Mock())

        # Act
        await middleware.dispatch(MockRequest(), mock_call_next({}))

        # Assert
        mock_logger.info.assert_called_once()
        metadata = mock_logger.info.call_args.kwargs["metadata"]
        assert metadata["event"] == "request_completed"
        assert metadata["method"] == "GET"
        assert metadata["path"] == "/api/v1/products"
        assert metadata["status_code"] == 200

    def test_set_and_get_correlation_id(self):
        """Test setting and getting correlation ID"""
        set_correlation_id("test-correlation-456")
        assert get_correlation_id() == "test-correlation-456"
