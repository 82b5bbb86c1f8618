"""
console_authz.authz.scopes

Canonical scope registry and the validated `Scope` token type.

Responsibilities:
- Catalog every scope the console knows about, with the levels it may be granted at.
- Reject unknown tokens at construction time so typos never silently fail to match.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass

from console_authz.errors import UnknownScopeError

WILDCARD = "*"


class ScopeLevel(str, enum.Enum):
    """Levels a scope or role can be granted at."""

    SYSTEM = "system"
    PROJECT = "project"


@dataclass(frozen=True, slots=True)
class ScopeDef:
    """Static scope definition."""

    key: str
    levels: tuple[ScopeLevel, ...]
    label: str
    description: str


_BOTH = (ScopeLevel.SYSTEM, ScopeLevel.PROJECT)
_SYSTEM_ONLY = (ScopeLevel.SYSTEM,)


def _scope(key: str, levels: tuple[ScopeLevel, ...], label: str, description: str) -> ScopeDef:
    return ScopeDef(key=key, levels=levels, label=label, description=description)


SCOPES: tuple[ScopeDef, ...] = (
    # System scopes ------------------------------------------------------
    _scope("read_dashboard", _SYSTEM_ONLY, "Read dashboard", "View usage dashboards."),
    _scope("read_channels", _SYSTEM_ONLY, "Read channels", "List and inspect channels."),
    _scope("write_channels", _SYSTEM_ONLY, "Manage channels", "Create and edit channels."),
    _scope("read_projects", _SYSTEM_ONLY, "Read projects", "Enumerate every project."),
    _scope("write_projects", _SYSTEM_ONLY, "Manage projects", "Create and edit projects."),
    _scope("read_settings", _SYSTEM_ONLY, "Read settings", "Inspect system configuration."),
    _scope("write_settings", _SYSTEM_ONLY, "Manage settings", "Modify system configuration."),
    _scope(
        "read_data_storages",
        _SYSTEM_ONLY,
        "Read data storages",
        "Inspect configured data storage backends.",
    ),
    _scope(
        "write_data_storages",
        _SYSTEM_ONLY,
        "Manage data storages",
        "Create and edit data storage backends.",
    ),
    # Scopes grantable at both levels ----------------------------------
    _scope("read_users", _BOTH, "Read users", "List users and their assignments."),
    _scope("write_users", _BOTH, "Manage users", "Invite, edit, and remove users."),
    _scope("read_roles", _BOTH, "Read roles", "Inspect role definitions."),
    _scope("write_roles", _BOTH, "Manage roles", "Create, edit, and delete roles."),
    _scope("read_api_keys", _BOTH, "Read API keys", "List and inspect API keys."),
    _scope("write_api_keys", _BOTH, "Manage API keys", "Create, rotate, and revoke API keys."),
    _scope("read_requests", _BOTH, "Read requests", "Browse request logs and traces."),
    _scope("write_requests", _BOTH, "Manage requests", "Delete or annotate request logs."),
    _scope("read_prompts", _BOTH, "Read prompts", "View prompt templates."),
    _scope("write_prompts", _BOTH, "Manage prompts", "Create and edit prompt templates."),
    _scope(
        "read_project_channels",
        _BOTH,
        "Read project channels",
        "View channels enabled for a project.",
    ),
)

SCOPE_REGISTRY: dict[str, ScopeDef] = {definition.key: definition for definition in SCOPES}


class Scope(str):
    """
    A scope token that is guaranteed to be registered (or the wildcard).

    Behaves exactly like the underlying string in sets and comparisons, so
    validated and raw tokens can be mixed freely at evaluation time.
    """

    __slots__ = ()

    def __new__(cls, token: str) -> Scope:
        if token != WILDCARD and token not in SCOPE_REGISTRY:
            raise UnknownScopeError(token)
        return super().__new__(cls, token)

    @property
    def is_wildcard(self) -> bool:
        return self == WILDCARD


def parse_scope(token: str) -> Scope:
    return Scope(token)


def parse_scopes(tokens: Iterable[str] | None) -> frozenset[Scope]:
    if not tokens:
        return frozenset()
    return frozenset(Scope(token) for token in tokens)


def scopes_for_level(level: ScopeLevel) -> tuple[str, ...]:
    """Registry keys that may appear on a role of the given level."""

    return tuple(defn.key for defn in SCOPES if level in defn.levels)


__all__ = [
    "SCOPE_REGISTRY",
    "SCOPES",
    "Scope",
    "ScopeDef",
    "ScopeLevel",
    "WILDCARD",
    "parse_scope",
    "parse_scopes",
    "scopes_for_level",
]


# --- Module Notes -----------------------------------------------------------
# Feature teams add new scopes here; the API's `/v1/scopes` endpoint serves this catalog.
