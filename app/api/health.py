"""
Health and service information endpoints
"""

import time
from datetime import datetime, timezone

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.core.config import config
from app.core.logger import logger

router = APIRouter()

# Track service start time
start_time = time.time()


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("/health")
def health_check():
    """Liveness check - the process is up and serving requests"""
    return {
        "success": True,
        "message": "Server is running",
        "service": config.service_name,
        "environment": config.environment,
        "uptime_seconds": round(time.time() - start_time, 2),
        "timestamp": _now(),
    }


@router.get("/health/ready")
async def readiness_check(request: Request):
    """Readiness check - the database answers a ping"""
    database = getattr(request.app.state, "database", None)
    started = time.perf_counter()
    healthy = database is not None and await database.ping()
    response_time_ms = round((time.perf_counter() - started) * 1000, 2)

    check = {
        "name": "database",
        "status": "healthy" if healthy else "unhealthy",
        "response_time_ms": response_time_ms,
    }

    if healthy:
        return {"success": True, "status": "ready", "checks": [check], "timestamp": _now()}

    logger.warning("Readiness check failed", metadata={"event": "readiness_check_failed", "checks": [check]})
    return JSONResponse(
        status_code=503,
        content={"success": False, "status": "not ready", "checks": [check], "timestamp": _now()},
    )
