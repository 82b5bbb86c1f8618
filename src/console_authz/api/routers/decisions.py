"""
console_authz.api.routers.decisions

Scope and grant decision endpoints.

Responsibilities:
- Resolve effective scopes for a principal snapshot.
- Expose the anti-escalation checks (grantable scopes/roles, user edits).
"""

from __future__ import annotations

from fastapi import APIRouter

from console_authz.api.schemas import (
    DecisionResponse,
    EditUserRequest,
    HasScopeRequest,
    PrincipalRequest,
    RoleIn,
    RoleListResponse,
    RolesRequest,
    ScopeListResponse,
    ScopesRequest,
)
from console_authz.authz import guard
from console_authz.authz.resolver import effective_scopes
from console_authz.observability.logging import get_logger

log = get_logger(__name__)

router = APIRouter(prefix="/v1/decisions", tags=["decisions"])


@router.post("/effective-scopes", response_model=ScopeListResponse)
async def resolve_effective_scopes(body: PrincipalRequest) -> ScopeListResponse:
    scopes = effective_scopes(body.principal.to_domain(), body.project_id)
    return ScopeListResponse(scopes=sorted(scopes))


@router.post("/has-scope", response_model=DecisionResponse)
async def has_scope(body: HasScopeRequest) -> DecisionResponse:
    allowed = guard.has_scope(body.principal.to_domain(), body.scope, body.project_id)
    return DecisionResponse(allowed=allowed)


@router.post("/grantable-scopes", response_model=ScopeListResponse)
async def grantable_scopes(body: ScopesRequest) -> ScopeListResponse:
    scopes = guard.filter_grantable_scopes(
        body.principal.to_domain(), body.scopes, body.project_id
    )
    return ScopeListResponse(scopes=sorted(scopes))


@router.post("/can-grant-scopes", response_model=DecisionResponse)
async def can_grant_scopes(body: ScopesRequest) -> DecisionResponse:
    principal = body.principal.to_domain()
    allowed = guard.can_grant_scopes(principal, body.scopes, body.project_id)
    if not allowed:
        grantable = guard.filter_grantable_scopes(principal, body.scopes, body.project_id)
        log.debug(
            "grant_denied",
            actor=principal.id,
            project_id=body.project_id,
            missing=sorted(set(body.scopes) - grantable),
        )
    return DecisionResponse(allowed=allowed)


@router.post("/grantable-roles", response_model=RoleListResponse)
async def grantable_roles(body: RolesRequest) -> RoleListResponse:
    kept = guard.filter_grantable_roles(
        body.principal.to_domain(),
        [role.to_domain() for role in body.roles],
        body.project_id,
    )
    roles = [
        RoleIn(
            id=role.id,
            name=role.name,
            scopes=sorted(role.scopes),
            level=role.level,
            project_id=role.project_id,
        )
        for role in kept
    ]
    return RoleListResponse(roles=roles)


@router.post("/can-edit-user", response_model=DecisionResponse)
async def can_edit_user(body: EditUserRequest) -> DecisionResponse:
    principal = body.principal.to_domain()
    allowed = guard.can_edit_user_permissions(
        principal,
        body.target_scopes,
        body.target_is_owner,
        body.project_id,
    )
    if not allowed:
        log.debug(
            "edit_denied",
            actor=principal.id,
            project_id=body.project_id,
            target_is_owner=body.target_is_owner,
        )
    return DecisionResponse(allowed=allowed)


# --- Module Notes -----------------------------------------------------------
# Handlers are thin: parse, convert to domain records, call the pure core, serialize.
# Denials are logged here rather than in the core, which stays free of I/O.
