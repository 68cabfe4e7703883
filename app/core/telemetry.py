"""
OpenTelemetry instrumentation for FastAPI and PyMongo

Creates spans for inbound requests and database operations. Exporting is
left to whatever tracer provider the deployment configures.
"""

from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.pymongo import PymongoInstrumentor

from app.core.config import config
from app.core.logger import logger


def instrument_app(app) -> None:
    """Instrument the application when telemetry is enabled"""
    if not config.telemetry_enabled:
        logger.debug("OpenTelemetry instrumentation disabled")
        return

    try:
        FastAPIInstrumentor.instrument_app(app)
        instrumentor = PymongoInstrumentor()
        if not instrumentor.is_instrumented_by_opentelemetry:
            instrumentor.instrument()
        logger.info("OpenTelemetry instrumentation complete")
    except Exception as e:
        # Tracing is optional; the service keeps running without it
        logger.error(f"Failed to instrument application: {e}", error=e)
