"""
tests.test_guard

Anti-escalation checks: scope possession, grant filtering, and user edits.
"""

from __future__ import annotations

import pytest

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
from console_authz.authz.resolver import effective_scopes
from console_authz.authz.scopes import ScopeLevel

OWNER = Principal(id="owner", is_owner=True)
ADMIN = Principal(id="admin", scopes=frozenset({"read_users", "write_users"}))
PROJECT_OWNER = Principal(
    id="p-owner",
    memberships=(ProjectMembership(project_id="P", is_owner=True),),
)
PROJECT_MEMBER = Principal(
    id="member",
    scopes=frozenset({"read_users"}),
    memberships=(ProjectMembership(project_id="P", scopes=frozenset({"read_api_keys"})),),
)
WILDCARD_HOLDER = Principal(id="wild", scopes=frozenset({"*"}))


@pytest.mark.parametrize("scope", ["read_users", "write_settings", "not_even_registered"])
@pytest.mark.parametrize("project_id", [None, "P", "Q"])
def test_owner_holds_every_scope(scope: str, project_id: str | None) -> None:
    assert has_scope(OWNER, scope, project_id)


def test_system_scope_is_sufficient_without_project() -> None:
    assert has_scope(ADMIN, "read_users")
    assert not has_scope(ADMIN, "read_roles")


def test_project_scope_counts_only_inside_project() -> None:
    assert has_scope(PROJECT_MEMBER, "read_api_keys", "P")
    assert not has_scope(PROJECT_MEMBER, "read_api_keys")
    assert not has_scope(PROJECT_MEMBER, "read_api_keys", "Q")


def test_wildcard_satisfies_has_scope() -> None:
    assert has_scope(WILDCARD_HOLDER, "write_channels")
    assert has_system_scope(WILDCARD_HOLDER, "write_channels")


def test_project_owner_does_not_bypass_outside_project() -> None:
    assert has_scope(PROJECT_OWNER, "write_users", "P")
    assert not has_scope(PROJECT_OWNER, "write_users")
    assert not has_scope(PROJECT_OWNER, "write_users", "Q")
    assert not can_grant_scopes(PROJECT_OWNER, ["write_users"])


def test_any_and_all_scope_helpers() -> None:
    assert has_any_scope(ADMIN, ["read_roles", "write_users"])
    assert not has_any_scope(ADMIN, ["read_roles"])
    assert has_all_scopes(ADMIN, ["read_users", "write_users"])
    assert not has_all_scopes(ADMIN, ["read_users", "read_roles"])


def test_level_restricted_helpers() -> None:
    assert has_system_scope(PROJECT_MEMBER, "read_users")
    assert not has_system_scope(PROJECT_MEMBER, "read_api_keys")
    assert has_project_scope(PROJECT_MEMBER, "read_api_keys", "P")
    assert not has_project_scope(PROJECT_MEMBER, "read_users", "P")
    assert not has_project_scope(PROJECT_MEMBER, "read_api_keys", None)
    assert has_project_scope(PROJECT_OWNER, "write_roles", "P")
    assert not has_system_scope(PROJECT_OWNER, "write_roles")


@pytest.mark.parametrize(
    "candidates",
    [
        set(),
        {"read_users"},
        {"read_users", "delete_users", "read_api_keys"},
        {"write_settings", "read_channels"},
    ],
)
@pytest.mark.parametrize("project_id", [None, "P", "Q"])
def test_grantable_scopes_never_exceed_actor(candidates: set[str], project_id: str | None) -> None:
    granted = filter_grantable_scopes(PROJECT_MEMBER, candidates, project_id)
    assert granted <= effective_scopes(PROJECT_MEMBER, project_id)
    assert granted <= candidates
    assert filter_grantable_scopes(OWNER, candidates, project_id) == candidates


def test_project_owner_grants_freely_inside_project() -> None:
    candidates = {"read_api_keys", "write_api_keys"}
    assert filter_grantable_scopes(PROJECT_OWNER, candidates, "P") == candidates
    assert filter_grantable_scopes(PROJECT_OWNER, candidates) == frozenset()
    assert can_grant_scopes(PROJECT_OWNER, candidates, "P")


def test_can_grant_scopes_requires_subset() -> None:
    assert can_grant_scopes(ADMIN, ["read_users"])
    assert can_grant_scopes(ADMIN, ["read_users", "write_users"])
    assert not can_grant_scopes(ADMIN, ["read_users", "write_projects"])
    assert can_grant_scopes(ADMIN, [])
    assert can_grant_scopes(ADMIN, None)


def test_wildcard_alone_does_not_make_concrete_scopes_grantable() -> None:
    assert not can_grant_scopes(WILDCARD_HOLDER, ["read_users"])
    assert can_grant_scopes(WILDCARD_HOLDER, ["*"])


def test_filter_grantable_roles_keeps_only_subset_roles() -> None:
    viewer = Role(id="1", name="viewer", scopes=frozenset({"read_users"}))
    deleter = Role(id="2", name="deleter", scopes=frozenset({"read_users", "delete_users"}))
    empty = Role(id="3", name="empty")

    assert filter_grantable_roles(ADMIN, [viewer, deleter, empty]) == [viewer, empty]
    assert filter_grantable_roles(OWNER, [viewer, deleter]) == [viewer, deleter]


def test_project_roles_use_project_effective_scopes() -> None:
    keys = Role(
        id="k",
        name="keys",
        scopes=frozenset({"read_api_keys"}),
        level=ScopeLevel.PROJECT,
        project_id="P",
    )
    assert filter_grantable_roles(PROJECT_MEMBER, [keys], "P") == [keys]
    assert filter_grantable_roles(PROJECT_MEMBER, [keys]) == []
    assert can_grant_role(PROJECT_MEMBER, keys.scopes, "P")
    assert not can_grant_role(PROJECT_MEMBER, keys.scopes)


def test_can_edit_role_follows_role_scopes() -> None:
    low = Role(id="low", name="low", scopes=frozenset({"read_users"}))
    high = Role(id="high", name="high", scopes=frozenset({"read_users", "read_projects"}))
    assert can_edit_role(ADMIN, low)
    assert not can_edit_role(ADMIN, high)
    assert can_edit_role(OWNER, high)


def test_non_owner_cannot_edit_owner_even_with_identical_scopes() -> None:
    assert not can_edit_user_permissions(ADMIN, ADMIN.scopes, True)
    assert not can_edit_user_permissions(ADMIN, [], True)
    assert not can_edit_user_permissions(PROJECT_OWNER, [], True)


def test_owner_target_editable_by_owner_at_same_level() -> None:
    assert can_edit_user_permissions(OWNER, ["read_users"], True)
    assert can_edit_user_permissions(PROJECT_OWNER, [], True, "P")


def test_project_owner_edits_any_non_owner_in_project() -> None:
    target_scopes = {"write_settings", "write_channels", "read_users"}
    assert can_edit_user_permissions(PROJECT_OWNER, target_scopes, False, "P")
    assert not can_edit_user_permissions(PROJECT_OWNER, target_scopes, False)


def test_non_owner_edits_only_lower_privileged_targets() -> None:
    assert can_edit_user_permissions(ADMIN, ["read_users"], False)
    assert not can_edit_user_permissions(ADMIN, ["read_users", "read_projects"], False)


def test_denied_checks_write_nothing(capsys: pytest.CaptureFixture[str]) -> None:
    actor = Principal(id="a", scopes=frozenset({"read_users"}))
    assert not can_grant_scopes(actor, ["write_users"])
    assert not can_grant_role(actor, {"write_users"})
    assert not can_edit_role(actor, Role(id="r", name="r", scopes=frozenset({"write_users"})))
    assert not can_edit_user_permissions(actor, [], True)
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_filter_grantable_roles_treats_none_as_empty() -> None:
    assert filter_grantable_roles(Principal(), None) == []
    assert filter_grantable_roles(OWNER, None) == []
