"""
console_authz.observability

Observability package.

Responsibilities:
- Structured logging configuration (structlog).
- Request-scoped logging context for the decision API.
"""

# Package marker.
