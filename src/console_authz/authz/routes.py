"""
console_authz.authz.routes

Route and route-group visibility against a static configuration table.

Responsibilities:
- Define the immutable route table types (`RouteConfig`, `RouteGroup`, `RouteTable`).
- Evaluate route / group access for a set of held scopes (OR semantics).
- Resolve which scope set a route is judged against for a principal.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from console_authz.authz.models import Principal
from console_authz.authz.ownership import is_owner
from console_authz.authz.resolver import effective_scopes, system_scopes
from console_authz.authz.scopes import WILDCARD
from console_authz.errors import DuplicateRouteError


class RouteScopeLevel(str, enum.Enum):
    SYSTEM = "system"
    PROJECT = "project"
    ANY = "any"


class RouteMode(str, enum.Enum):
    """Presentation directive applied by the UI after an access decision."""

    HIDDEN = "hidden"
    DISABLED = "disabled"


class UnlistedRoutePolicy(str, enum.Enum):
    DENY = "deny"
    ALLOW = "allow"


@dataclass(frozen=True, slots=True)
class RouteConfig:
    path: str
    required_scopes: tuple[str, ...] = ()
    # None inherits the owning group's default level.
    scope_level: RouteScopeLevel | None = None
    mode: RouteMode = RouteMode.HIDDEN

    def __post_init__(self) -> None:
        object.__setattr__(self, "required_scopes", tuple(self.required_scopes or ()))


@dataclass(frozen=True, slots=True)
class RouteGroup:
    title: str
    default_scope_level: RouteScopeLevel = RouteScopeLevel.ANY
    routes: tuple[RouteConfig, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "routes", tuple(self.routes or ()))

    def level_for(self, route: RouteConfig) -> RouteScopeLevel:
        return route.scope_level or self.default_scope_level


@dataclass(frozen=True)
class RouteTable:
    """
    Immutable route table built once at startup.

    Lookup is by exact path; there is no wildcard or path-parameter matching.
    """

    groups: tuple[RouteGroup, ...]
    unlisted_policy: UnlistedRoutePolicy = UnlistedRoutePolicy.DENY
    _index: Mapping[str, tuple[RouteGroup, RouteConfig]] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        groups = tuple(self.groups)
        index: dict[str, tuple[RouteGroup, RouteConfig]] = {}
        for group in groups:
            for route in group.routes:
                if route.path in index:
                    raise DuplicateRouteError(route.path)
                index[route.path] = (group, route)
        object.__setattr__(self, "groups", groups)
        object.__setattr__(self, "_index", MappingProxyType(index))

    def lookup(self, path: str) -> RouteConfig | None:
        entry = self._index.get(path)
        return entry[1] if entry else None

    def group_of(self, path: str) -> RouteGroup | None:
        entry = self._index.get(path)
        return entry[0] if entry else None

    @property
    def paths(self) -> tuple[str, ...]:
        return tuple(self._index)


def has_route_access(user_scopes: Iterable[str] | None, route: RouteConfig) -> bool:
    if not route.required_scopes:
        return True
    held = frozenset(user_scopes or ())
    if WILDCARD in held:
        return True
    return any(scope in held for scope in route.required_scopes)


def has_group_access(user_scopes: Iterable[str] | None, group: RouteGroup) -> bool:
    held = frozenset(user_scopes or ())
    return any(has_route_access(held, route) for route in group.routes)


def accessible_routes(user_scopes: Iterable[str] | None, group: RouteGroup) -> list[RouteConfig]:
    held = frozenset(user_scopes or ())
    return [route for route in group.routes if has_route_access(held, route)]


def visible_groups(user_scopes: Iterable[str] | None, table: RouteTable) -> list[RouteGroup]:
    held = frozenset(user_scopes or ())
    return [group for group in table.groups if has_group_access(held, group)]


def has_path_access(user_scopes: Iterable[str] | None, table: RouteTable, path: str) -> bool:
    route = table.lookup(path)
    if route is None:
        return table.unlisted_policy is UnlistedRoutePolicy.ALLOW
    return has_route_access(user_scopes, route)


def route_scopes_for(
    principal: Principal,
    level: RouteScopeLevel,
    project_id: str | None = None,
) -> frozenset[str]:
    """
    Scope set a route of the given level is evaluated against.

    Owners at the relevant level are represented by the wildcard.
    """

    if level is RouteScopeLevel.SYSTEM:
        return frozenset({WILDCARD}) if principal.is_owner else system_scopes(principal)
    if level is RouteScopeLevel.PROJECT and project_id is None:
        return frozenset()
    if is_owner(principal, project_id):
        return frozenset({WILDCARD})
    return effective_scopes(principal, project_id)


def principal_can_open(
    principal: Principal,
    table: RouteTable,
    path: str,
    project_id: str | None = None,
) -> bool:
    group = table.group_of(path)
    route = table.lookup(path)
    if group is None or route is None:
        return table.unlisted_policy is UnlistedRoutePolicy.ALLOW
    return has_route_access(route_scopes_for(principal, group.level_for(route), project_id), route)


def principal_navigation(
    principal: Principal,
    table: RouteTable,
    project_id: str | None = None,
) -> list[tuple[RouteGroup, list[RouteConfig]]]:
    """Groups with at least one reachable route, paired with those routes."""

    navigation: list[tuple[RouteGroup, list[RouteConfig]]] = []
    for group in table.groups:
        reachable = [
            route
            for route in group.routes
            if has_route_access(
                route_scopes_for(principal, group.level_for(route), project_id), route
            )
        ]
        if reachable:
            navigation.append((group, reachable))
    return navigation


__all__ = [
    "RouteConfig",
    "RouteGroup",
    "RouteMode",
    "RouteScopeLevel",
    "RouteTable",
    "UnlistedRoutePolicy",
    "accessible_routes",
    "has_group_access",
    "has_path_access",
    "has_route_access",
    "principal_can_open",
    "principal_navigation",
    "route_scopes_for",
    "visible_groups",
]


# --- Module Notes -----------------------------------------------------------
# Unlisted paths are denied unless the table opts into UnlistedRoutePolicy.ALLOW.
