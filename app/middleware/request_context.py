"""
Request context middleware
Gives every request a correlation ID and logs its outcome
"""

import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.config import config
from app.core.context import set_correlation_id
from app.core.logger import logger


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    - Reuses the caller's correlation ID header or generates a new one
    - Exposes it through a context variable for the logger
    - Echoes it on the response and logs method, path, status and duration
    """

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get(config.correlation_id_header) or str(uuid.uuid4())
        set_correlation_id(correlation_id)
        request.state.correlation_id = correlation_id

        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = round((time.perf_counter() - started) * 1000, 2)

        response.headers[config.correlation_id_header] = correlation_id

        logger.info(
            f"{request.method} {request.url.path} {response.status_code}",
            metadata={
                "event": "request_completed",
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
            },
        )

        return response
