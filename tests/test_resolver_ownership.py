"""
tests.test_resolver_ownership

Effective scope resolution and owner evaluation.

Responsibilities:
- Verify the membership union and its fail-closed degradations.
- Keep global and project-scoped ownership apart.
"""

from __future__ import annotations

import pytest

from console_authz.authz.models import Principal, ProjectMembership
from console_authz.authz.ownership import is_owner
from console_authz.authz.resolver import effective_scopes, project_scopes, system_scopes
from console_authz.errors import DuplicateMembershipError


def _member(**kwargs) -> Principal:
    return Principal(
        scopes=frozenset({"a"}),
        memberships=(ProjectMembership(project_id="P", scopes=frozenset({"b"}), **kwargs),),
    )


def test_effective_scopes_unions_matching_membership() -> None:
    principal = _member()
    assert effective_scopes(principal, "P") == {"a", "b"}
    assert effective_scopes(principal, "Q") == {"a"}
    assert effective_scopes(principal) == {"a"}


def test_level_views_split_system_and_project_scopes() -> None:
    principal = _member()
    assert system_scopes(principal) == {"a"}
    assert project_scopes(principal, "P") == {"b"}
    assert project_scopes(principal, "Q") == frozenset()
    assert project_scopes(principal, None) == frozenset()


def test_missing_scope_collections_are_empty() -> None:
    membership = ProjectMembership("P", scopes=None)  # type: ignore[arg-type]
    principal = Principal(scopes=None, memberships=(membership,))  # type: ignore[arg-type]
    assert effective_scopes(principal, "P") == frozenset()


def test_scope_lists_collapse_duplicates() -> None:
    principal = Principal(scopes=["read_users", "read_users"])  # type: ignore[arg-type]
    assert principal.scopes == frozenset({"read_users"})


def test_duplicate_membership_is_rejected() -> None:
    with pytest.raises(DuplicateMembershipError):
        Principal(memberships=(ProjectMembership("P"), ProjectMembership("P")))


def test_global_owner_is_owner_everywhere() -> None:
    principal = Principal(is_owner=True)
    assert is_owner(principal)
    assert is_owner(principal, "P")
    assert is_owner(principal, "anything")


def test_project_owner_only_inside_its_project() -> None:
    principal = _member(is_owner=True)
    assert is_owner(principal, "P")
    assert not is_owner(principal)
    assert not is_owner(principal, "Q")


def test_plain_principal_is_not_owner() -> None:
    assert not is_owner(Principal(), "P")
