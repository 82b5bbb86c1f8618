"""
console_authz.authz

Authorization decision core.

Responsibilities:
- Scope resolution and ownership evaluation (leaf components).
- Anti-escalation grant checks.
- Route visibility against the static navigation table.

Every function here is pure: callers pass the principal, optional project id,
and static configuration explicitly.
"""

from console_authz.authz.guard import (
    can_edit_role,
    can_edit_user_permissions,
    can_grant_role,
    can_grant_scopes,
    filter_grantable_roles,
    filter_grantable_scopes,
    has_all_scopes,
    has_any_scope,
    has_project_scope,
    has_scope,
    has_system_scope,
)
from console_authz.authz.models import Principal, ProjectMembership, Role
from console_authz.authz.ownership import is_owner
from console_authz.authz.resolver import effective_scopes, project_scopes, system_scopes
from console_authz.authz.routes import (
    RouteConfig,
    RouteGroup,
    RouteMode,
    RouteScopeLevel,
    RouteTable,
    UnlistedRoutePolicy,
    has_group_access,
    has_path_access,
    has_route_access,
)
from console_authz.authz.scopes import WILDCARD, Scope, ScopeLevel

__all__ = [
    "Principal",
    "ProjectMembership",
    "Role",
    "RouteConfig",
    "RouteGroup",
    "RouteMode",
    "RouteScopeLevel",
    "RouteTable",
    "Scope",
    "ScopeLevel",
    "UnlistedRoutePolicy",
    "WILDCARD",
    "can_edit_role",
    "can_edit_user_permissions",
    "can_grant_role",
    "can_grant_scopes",
    "effective_scopes",
    "filter_grantable_roles",
    "filter_grantable_scopes",
    "has_all_scopes",
    "has_any_scope",
    "has_group_access",
    "has_path_access",
    "has_project_scope",
    "has_route_access",
    "has_scope",
    "has_system_scope",
    "is_owner",
    "project_scopes",
    "system_scopes",
]
