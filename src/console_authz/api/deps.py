"""
console_authz.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide the static route table to routers.
- Encapsulate app.state access patterns.
"""

from __future__ import annotations

from fastapi import Request

from console_authz.authz.routes import RouteTable


def route_table_dep(request: Request) -> RouteTable:
    # The table is built once in `console_authz.api.app.create_app`.
    return request.app.state.route_table  # type: ignore[attr-defined]
