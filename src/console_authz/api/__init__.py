"""
console_authz.api

HTTP decision API package.

Responsibilities:
- FastAPI app factory and entrypoint.
- Routers exposing the authz core as a stateless policy decision point.
"""

# Package marker.
