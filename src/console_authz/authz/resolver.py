"""
console_authz.authz.resolver

Effective scope resolution across the system / project hierarchy.

Responsibilities:
- Union a principal's system scopes with the scopes of one project membership.
- Expose each level on its own for level-restricted checks.
"""

from __future__ import annotations

from console_authz.authz.models import Principal


def system_scopes(principal: Principal) -> frozenset[str]:
    return principal.scopes


def project_scopes(principal: Principal, project_id: str | None) -> frozenset[str]:
    membership = principal.membership_for(project_id)
    if membership is None:
        return frozenset()
    return membership.scopes


def effective_scopes(principal: Principal, project_id: str | None = None) -> frozenset[str]:
    """
    Scopes a principal holds, optionally within a project.

    A missing membership means "no project-level grants", never "unknown project".
    """

    if project_id is None:
        return principal.scopes
    return principal.scopes | project_scopes(principal, project_id)


__all__ = ["effective_scopes", "project_scopes", "system_scopes"]
