"""
console_authz.authz.ownership

Owner status evaluation.

Responsibilities:
- Decide whether a principal is unrestricted globally or within one project.
"""

from __future__ import annotations

from console_authz.authz.models import Principal


def is_owner(principal: Principal, project_id: str | None = None) -> bool:
    if principal.is_owner:
        return True
    membership = principal.membership_for(project_id)
    return membership is not None and membership.is_owner


__all__ = ["is_owner"]


# --- Module Notes -----------------------------------------------------------
# A project owner acting without a project id (or in another project) is not an owner.
