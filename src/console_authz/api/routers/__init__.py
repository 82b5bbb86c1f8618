"""
console_authz.api.routers

Routers package.

Responsibilities:
- Group HTTP endpoints by concern (health, scopes, decisions, routes).
"""

# Package marker.
