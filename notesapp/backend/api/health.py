"""
Health Check Endpoints.

- /health: Liveness check (process running)
- /health/ready: Readiness check (note store reachable)
"""

import asyncio
from typing import Any

from fastapi import APIRouter, HTTPException, Request

from notesapp.backend.core.config import get_app_config
from notesapp.backend.core.exceptions import StorageError
from notesapp.backend.core.logging import get_logger
from notesapp.backend.core.utils import utc_now

router = APIRouter()
logger = get_logger(__name__)


async def check_note_store(request: Request) -> dict[str, Any]:
    """
    Check note store connectivity.

    Returns:
        Dict with status, backend, latency, and optional error message
    """
    store = request.app.state.note_store
    timeout = get_app_config().application.timeouts.database
    start = utc_now()
    try:
        async with asyncio.timeout(timeout):
            await store.ping()
    except (StorageError, TimeoutError) as e:
        logger.warning("Note store health check failed", extra={"error": str(e)})
        return {"status": "unhealthy", "backend": store.backend, "error": str(e)}

    latency_ms = int((utc_now() - start).total_seconds() * 1000)
    return {"status": "healthy", "backend": store.backend, "latency_ms": latency_ms}


@router.get("/health")
async def health_check() -> dict[str, str]:
    """
    Liveness check.

    No dependency checks; this endpoint should always respond quickly.
    """
    return {"status": "healthy"}


@router.get("/health/ready")
async def readiness_check(request: Request) -> dict[str, Any]:
    """
    Readiness check.

    Returns 503 if the note store is unreachable.
    """
    checks = {"note_store": await check_note_store(request)}

    if checks["note_store"]["status"] != "healthy":
        raise HTTPException(
            status_code=503,
            detail={
                "status": "unhealthy",
                "checks": checks,
                "timestamp": utc_now().isoformat(),
            },
        )

    return {
        "status": "healthy",
        "checks": checks,
        "timestamp": utc_now().isoformat(),
    }
