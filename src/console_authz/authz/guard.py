"""
console_authz.authz.guard

Anti-escalation checks used when one principal grants to, or edits, another.

Responsibilities:
- Answer scope possession questions (`has_scope` and friends).
- Filter the scopes and roles an actor may hand out.
- Decide whether an actor may edit another principal's permissions.

Rule: no principal may grant, or act as equal-or-superior to, a capability it
does not itself hold. Owners are exempt at the level where they are owners.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from console_authz.authz.models import Principal, Role
from console_authz.authz.ownership import is_owner
from console_authz.authz.resolver import effective_scopes, project_scopes, system_scopes
from console_authz.authz.scopes import WILDCARD


def _holds(held: frozenset[str], scope: str) -> bool:
    return WILDCARD in held or scope in held


def has_scope(principal: Principal, scope: str, project_id: str | None = None) -> bool:
    if is_owner(principal, project_id):
        return True
    return _holds(effective_scopes(principal, project_id), scope)


def has_any_scope(
    principal: Principal, scopes: Iterable[str], project_id: str | None = None
) -> bool:
    return any(has_scope(principal, scope, project_id) for scope in scopes)


def has_all_scopes(
    principal: Principal, scopes: Iterable[str], project_id: str | None = None
) -> bool:
    return all(has_scope(principal, scope, project_id) for scope in scopes)


def has_system_scope(principal: Principal, scope: str) -> bool:
    # Only the global owner flag and system-level grants count here.
    if principal.is_owner:
        return True
    return _holds(system_scopes(principal), scope)


def has_project_scope(principal: Principal, scope: str, project_id: str | None) -> bool:
    if project_id is None:
        return False
    if is_owner(principal, project_id):
        return True
    return _holds(project_scopes(principal, project_id), scope)


def filter_grantable_scopes(
    actor: Principal, candidates: Iterable[str] | None, project_id: str | None = None
) -> frozenset[str]:
    candidate_set = frozenset(candidates or ())
    if is_owner(actor, project_id):
        return candidate_set
    return candidate_set & effective_scopes(actor, project_id)


def can_grant_scopes(
    actor: Principal, scopes: Iterable[str] | None, project_id: str | None = None
) -> bool:
    if is_owner(actor, project_id):
        return True
    return frozenset(scopes or ()) <= effective_scopes(actor, project_id)


def filter_grantable_roles(
    actor: Principal, roles: Sequence[Role] | None, project_id: str | None = None
) -> list[Role]:
    roles = list(roles or ())
    if is_owner(actor, project_id):
        return roles
    held = effective_scopes(actor, project_id)
    return [role for role in roles if role.scopes <= held]


def can_grant_role(
    actor: Principal, role_scopes: Iterable[str] | None, project_id: str | None = None
) -> bool:
    return can_grant_scopes(actor, role_scopes, project_id)


def can_edit_role(actor: Principal, role: Role, project_id: str | None = None) -> bool:
    """Editing a role is as privileged as granting every scope it bundles."""

    return can_grant_scopes(actor, role.scopes, project_id)


def can_edit_user_permissions(
    actor: Principal,
    target_scopes: Iterable[str] | None,
    target_is_owner: bool,
    project_id: str | None = None,
) -> bool:
    actor_is_owner = is_owner(actor, project_id)
    if target_is_owner and not actor_is_owner:
        # Owners are protected even from non-owners holding identical scopes.
        return False
    if actor_is_owner:
        return True
    return can_grant_scopes(actor, target_scopes, project_id)


__all__ = [
    "can_edit_role",
    "can_edit_user_permissions",
    "can_grant_role",
    "can_grant_scopes",
    "filter_grantable_roles",
    "filter_grantable_scopes",
    "has_all_scopes",
    "has_any_scope",
    "has_project_scope",
    "has_scope",
    "has_system_scope",
]


# --- Module Notes -----------------------------------------------------------
# Grant-side subset checks compare literal tokens; holding "*" satisfies `has_scope`
# but does not by itself make concrete scopes grantable for a non-owner.
# Nothing here logs or performs I/O; denials are logged by the API routers.
