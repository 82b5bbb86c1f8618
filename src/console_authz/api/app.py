"""
console_authz.api.app

FastAPI app factory for the console authorization decision API.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Build the immutable route table once, before any request is served.
- Map construction-time authz errors to 422 responses.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from console_authz import __version__
from console_authz.api.routers.decisions import router as decisions_router
from console_authz.api.routers.health import router as health_router
from console_authz.api.routers.routes import router as routes_router
from console_authz.api.routers.scopes import router as scopes_router
from console_authz.authz.route_table import build_route_table
from console_authz.errors import AuthzConfigError
from console_authz.observability.logging import configure_logging, get_logger
from console_authz.observability.middleware import RequestContextMiddleware
from console_authz.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    app = FastAPI(
        title="Console Authorization Decision API",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
    )

    # Static configuration: built before serving and never mutated per request.
    app.state.route_table = build_route_table(unlisted_policy=settings.unlisted_route_policy)
    log.info(
        "route_table_loaded",
        env=settings.env,
        routes=len(app.state.route_table.paths),
        unlisted_policy=settings.unlisted_route_policy.value,
    )

    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(scopes_router)
    app.include_router(decisions_router)
    app.include_router(routes_router)

    @app.exception_handler(AuthzConfigError)
    async def _authz_config_error(_: Request, exc: AuthzConfigError) -> JSONResponse:
        log.warning("authz_input_rejected", error=str(exc))
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    return app


# --- Module Notes -----------------------------------------------------------
# Decisions here are advisory for rendering; the enforcing backend re-validates
# every privileged mutation.
