"""
console_authz.authz.models

Authorization domain models.

Responsibilities:
- Define the principal snapshot (`Principal`) and its project memberships.
- Define reusable scope bundles (`Role`).
- Normalize scope collections into immutable sets at construction.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from console_authz.authz.scopes import ScopeLevel
from console_authz.errors import DuplicateMembershipError


def _freeze(scopes: Iterable[str] | None) -> frozenset[str]:
    # Absent data denies rather than grants.
    if not scopes:
        return frozenset()
    return frozenset(scopes)


@dataclass(frozen=True, slots=True)
class ProjectMembership:
    project_id: str
    is_owner: bool = False
    scopes: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "scopes", _freeze(self.scopes))


@dataclass(frozen=True, slots=True)
class Principal:
    """
    Immutable snapshot of a caller as supplied by the identity system.

    `is_owner` is the global owner flag; project ownership lives on the
    individual memberships.
    """

    is_owner: bool = False
    scopes: frozenset[str] = field(default_factory=frozenset)
    memberships: tuple[ProjectMembership, ...] = ()
    id: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "scopes", _freeze(self.scopes))
        memberships = tuple(self.memberships or ())
        seen: set[str] = set()
        for membership in memberships:
            if membership.project_id in seen:
                raise DuplicateMembershipError(membership.project_id)
            seen.add(membership.project_id)
        object.__setattr__(self, "memberships", memberships)

    def membership_for(self, project_id: str | None) -> ProjectMembership | None:
        if project_id is None:
            return None
        for membership in self.memberships:
            if membership.project_id == project_id:
                return membership
        return None


@dataclass(frozen=True, slots=True)
class Role:
    id: str
    name: str
    scopes: frozenset[str] = field(default_factory=frozenset)
    level: ScopeLevel = ScopeLevel.SYSTEM
    project_id: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "scopes", _freeze(self.scopes))


__all__ = ["Principal", "ProjectMembership", "Role"]


# --- Module Notes -----------------------------------------------------------
# Snapshots are hashable, so callers may memoize decisions keyed on them.
