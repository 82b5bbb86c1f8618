"""
console_authz.authz.route_table

Static navigation table for the admin console.

Responsibilities:
- Declare the console's route groups once, as immutable configuration.
- Build a `RouteTable` with the configured unlisted-route policy.
"""

from __future__ import annotations

from console_authz.authz.routes import (
    RouteConfig,
    RouteGroup,
    RouteMode,
    RouteScopeLevel,
    RouteTable,
    UnlistedRoutePolicy,
)

DEFAULT_ROUTE_GROUPS: tuple[RouteGroup, ...] = (
    RouteGroup(
        title="general",
        default_scope_level=RouteScopeLevel.ANY,
        routes=(
            RouteConfig(path="/"),
            RouteConfig(path="/dashboard", required_scopes=("read_dashboard",)),
            RouteConfig(path="/playground", required_scopes=("write_requests",)),
            RouteConfig(path="/help-center"),
        ),
    ),
    RouteGroup(
        title="project",
        default_scope_level=RouteScopeLevel.PROJECT,
        routes=(
            RouteConfig(path="/project/requests", required_scopes=("read_requests",)),
            RouteConfig(path="/project/api-keys", required_scopes=("read_api_keys",)),
            RouteConfig(path="/project/prompts", required_scopes=("read_prompts",)),
            RouteConfig(path="/project/users", required_scopes=("read_users",)),
            RouteConfig(path="/project/roles", required_scopes=("read_roles",)),
            RouteConfig(
                path="/project/channels",
                required_scopes=("read_project_channels", "read_channels"),
                mode=RouteMode.DISABLED,
            ),
        ),
    ),
    RouteGroup(
        title="admin",
        default_scope_level=RouteScopeLevel.SYSTEM,
        routes=(
            RouteConfig(path="/channels", required_scopes=("read_channels", "write_channels")),
            RouteConfig(path="/requests", required_scopes=("read_requests",)),
            RouteConfig(path="/api-keys", required_scopes=("read_api_keys",)),
            RouteConfig(path="/users", required_scopes=("read_users",)),
            RouteConfig(path="/roles", required_scopes=("read_roles",)),
            RouteConfig(path="/projects", required_scopes=("read_projects",)),
            RouteConfig(path="/data-storages", required_scopes=("read_data_storages",)),
            RouteConfig(
                path="/system",
                required_scopes=("read_settings", "write_settings"),
                mode=RouteMode.DISABLED,
            ),
        ),
    ),
)


def build_route_table(
    *,
    unlisted_policy: UnlistedRoutePolicy = UnlistedRoutePolicy.DENY,
    groups: tuple[RouteGroup, ...] = DEFAULT_ROUTE_GROUPS,
) -> RouteTable:
    return RouteTable(groups=groups, unlisted_policy=unlisted_policy)


# --- Module Notes -----------------------------------------------------------
# Required scopes use OR semantics: listing both read_ and write_ opens the route
# to holders of either.
