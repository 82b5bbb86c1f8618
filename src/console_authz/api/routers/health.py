"""
console_authz.api.routers.health

Liveness endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    # The service has no external dependencies, so liveness implies readiness.
    return {"status": "ok"}
