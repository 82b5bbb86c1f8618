"""
console_authz.api.routers.scopes

Scope catalog endpoint.

Responsibilities:
- Serve the registry of known scope tokens and the levels each may be granted at.
"""

from __future__ import annotations

from fastapi import APIRouter

from console_authz.api.schemas import ScopeDefOut
from console_authz.authz.scopes import SCOPES

router = APIRouter(prefix="/v1/scopes", tags=["scopes"])


@router.get("", response_model=list[ScopeDefOut])
async def list_scopes() -> list[ScopeDefOut]:
    return [
        ScopeDefOut(
            key=defn.key,
            levels=list(defn.levels),
            label=defn.label,
            description=defn.description,
        )
        for defn in SCOPES
    ]
