"""
console_authz.errors

Construction-time errors raised while building authorization inputs.

Responsibilities:
- Signal malformed static configuration (unknown scopes, duplicate routes).
- Signal malformed principal snapshots (duplicate memberships).

Evaluation functions never raise these; they surface only when records or
tables are built.
"""

from __future__ import annotations


class AuthzConfigError(ValueError):
    pass


class UnknownScopeError(AuthzConfigError):
    def __init__(self, token: str) -> None:
        super().__init__(f"unknown scope: {token!r}")
        self.token = token


class DuplicateMembershipError(AuthzConfigError):
    def __init__(self, project_id: str) -> None:
        super().__init__(f"duplicate membership for project {project_id!r}")
        self.project_id = project_id


class DuplicateRouteError(AuthzConfigError):
    def __init__(self, path: str) -> None:
        super().__init__(f"duplicate route path: {path!r}")
        self.path = path


# --- Module Notes -----------------------------------------------------------
# The API layer maps AuthzConfigError to HTTP 422 (see `api.app`).
