"""
order_store.api.routers.health

Health and readiness endpoints.

Responsibilities:
- Provide liveness probe (`/healthz`).
- Provide readiness probe (`/readyz`) backed by the connection provider's probe.
"""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from order_store.db.connection import ConnectionProvider

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(request: Request) -> JSONResponse:
    provider: ConnectionProvider = request.app.state.provider
    if await provider.test_connection(timeout=request.app.state.settings.command_timeout):
        return JSONResponse({"status": "ready"})
    return JSONResponse({"status": "unavailable"}, status_code=503)


# --- Module Notes -----------------------------------------------------------
# The probe never raises, so /readyz answers 503 instead of 500 when the DB is down.
