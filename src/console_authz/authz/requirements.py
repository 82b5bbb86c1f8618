"""
console_authz.authz.requirements

Declarative permission requirements for guarding UI controls.

Responsibilities:
- Describe any-of / all-of scope requirements at any, system, or project level.
- Evaluate a requirement against a principal snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass

from console_authz.authz.guard import has_project_scope, has_scope, has_system_scope
from console_authz.authz.models import Principal


@dataclass(frozen=True, slots=True)
class PermissionRequirement:
    """
    Every non-empty clause must hold; an empty requirement always passes.

    `any_of*` clauses pass when at least one listed scope is held,
    `all_of*` clauses when every listed scope is held.
    """

    any_of: tuple[str, ...] = ()
    all_of: tuple[str, ...] = ()
    any_of_system: tuple[str, ...] = ()
    all_of_system: tuple[str, ...] = ()
    any_of_project: tuple[str, ...] = ()
    all_of_project: tuple[str, ...] = ()

    @classmethod
    def single(cls, scope: str) -> PermissionRequirement:
        return cls(any_of=(scope,))


def satisfies(
    principal: Principal,
    requirement: PermissionRequirement,
    project_id: str | None = None,
) -> bool:
    def system(scope: str) -> bool:
        return has_system_scope(principal, scope)

    def project(scope: str) -> bool:
        return has_project_scope(principal, scope, project_id)

    def anywhere(scope: str) -> bool:
        return has_scope(principal, scope, project_id)

    clauses = (
        (requirement.all_of_system, system, all),
        (requirement.any_of_system, system, any),
        (requirement.all_of_project, project, all),
        (requirement.any_of_project, project, any),
        (requirement.all_of, anywhere, all),
        (requirement.any_of, anywhere, any),
    )
    for scopes, check, combine in clauses:
        if scopes and not combine(check(scope) for scope in scopes):
            return False
    return True


__all__ = ["PermissionRequirement", "satisfies"]
