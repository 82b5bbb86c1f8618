"""
console_authz.api.routers.routes

Route visibility endpoints backed by the static navigation table.

Responsibilities:
- Report per-path access for a principal (unlisted paths follow the table policy).
- Return the navigation groups a principal can see.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from console_authz.api.deps import route_table_dep
from console_authz.api.schemas import (
    NavigationGroupOut,
    NavigationResponse,
    PrincipalRequest,
    RouteAccessRequest,
    RouteAccessResponse,
    RouteOut,
)
from console_authz.authz.routes import RouteTable, principal_can_open, principal_navigation

router = APIRouter(prefix="/v1/routes", tags=["routes"])


@router.post("/access", response_model=RouteAccessResponse)
async def route_access(
    body: RouteAccessRequest,
    table: RouteTable = Depends(route_table_dep),
) -> RouteAccessResponse:
    principal = body.principal.to_domain()
    access = {
        path: principal_can_open(principal, table, path, body.project_id) for path in body.paths
    }
    return RouteAccessResponse(access=access)


@router.post("/navigation", response_model=NavigationResponse)
async def navigation(
    body: PrincipalRequest,
    table: RouteTable = Depends(route_table_dep),
) -> NavigationResponse:
    groups = [
        NavigationGroupOut(
            title=group.title,
            routes=[
                RouteOut(
                    path=route.path,
                    required_scopes=list(route.required_scopes),
                    mode=route.mode.value,
                )
                for route in routes
            ],
        )
        for group, routes in principal_navigation(
            body.principal.to_domain(), table, body.project_id
        )
    ]
    return NavigationResponse(groups=groups)
