"""
console_authz.api.schemas

Request/response models for the decision API.

Responsibilities:
- Validate JSON bodies (including scope tokens against the registry).
- Convert wire models into the core's immutable domain records.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from console_authz.authz.models import Principal, ProjectMembership, Role
from console_authz.authz.scopes import ScopeLevel, parse_scopes


def _validated(tokens: list[str] | None) -> list[str]:
    # Raises UnknownScopeError (a ValueError), which pydantic reports as a 422.
    return sorted(parse_scopes(tokens))


class MembershipIn(BaseModel):
    project_id: str = Field(min_length=1)
    is_owner: bool = False
    scopes: list[str] = Field(default_factory=list)

    @field_validator("scopes", mode="before")
    @classmethod
    def validate_scopes(cls, value: list[str] | None) -> list[str]:
        return _validated(value)


class PrincipalIn(BaseModel):
    id: str | None = None
    is_owner: bool = False
    scopes: list[str] = Field(default_factory=list)
    memberships: list[MembershipIn] = Field(default_factory=list)

    @field_validator("scopes", mode="before")
    @classmethod
    def validate_scopes(cls, value: list[str] | None) -> list[str]:
        return _validated(value)

    def to_domain(self) -> Principal:
        return Principal(
            id=self.id,
            is_owner=self.is_owner,
            scopes=frozenset(self.scopes),
            memberships=tuple(
                ProjectMembership(
                    project_id=m.project_id,
                    is_owner=m.is_owner,
                    scopes=frozenset(m.scopes),
                )
                for m in self.memberships
            ),
        )


class RoleIn(BaseModel):
    id: str
    name: str
    scopes: list[str] = Field(default_factory=list)
    level: ScopeLevel = ScopeLevel.SYSTEM
    project_id: str | None = None

    @field_validator("scopes", mode="before")
    @classmethod
    def validate_scopes(cls, value: list[str] | None) -> list[str]:
        return _validated(value)

    def to_domain(self) -> Role:
        return Role(
            id=self.id,
            name=self.name,
            scopes=frozenset(self.scopes),
            level=self.level,
            project_id=self.project_id,
        )


class PrincipalRequest(BaseModel):
    principal: PrincipalIn
    project_id: str | None = None


class HasScopeRequest(PrincipalRequest):
    scope: str

    @field_validator("scope")
    @classmethod
    def validate_scope(cls, value: str) -> str:
        return _validated([value])[0]


class ScopesRequest(PrincipalRequest):
    scopes: list[str] = Field(default_factory=list)

    @field_validator("scopes", mode="before")
    @classmethod
    def validate_scopes(cls, value: list[str] | None) -> list[str]:
        return _validated(value)


class RolesRequest(PrincipalRequest):
    roles: list[RoleIn] = Field(default_factory=list)


class EditUserRequest(PrincipalRequest):
    target_scopes: list[str] = Field(default_factory=list)
    target_is_owner: bool = False

    @field_validator("target_scopes", mode="before")
    @classmethod
    def validate_target_scopes(cls, value: list[str] | None) -> list[str]:
        return _validated(value)


class RouteAccessRequest(PrincipalRequest):
    paths: list[str] = Field(min_length=1)


class DecisionResponse(BaseModel):
    allowed: bool


class ScopeListResponse(BaseModel):
    scopes: list[str]


class RoleListResponse(BaseModel):
    roles: list[RoleIn]


class RouteOut(BaseModel):
    path: str
    required_scopes: list[str]
    mode: str


class NavigationGroupOut(BaseModel):
    title: str
    routes: list[RouteOut]


class NavigationResponse(BaseModel):
    groups: list[NavigationGroupOut]


class RouteAccessResponse(BaseModel):
    access: dict[str, bool]


class ScopeDefOut(BaseModel):
    key: str
    levels: list[ScopeLevel]
    label: str
    description: str


# --- Module Notes -----------------------------------------------------------
# Scope lists are normalized (deduplicated, sorted) on the way in so responses
# are deterministic regardless of client ordering.
