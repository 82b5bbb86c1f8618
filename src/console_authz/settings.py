"""
console_authz.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for the decision API and logging.
- Select the unlisted-route policy applied to the navigation table.
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from console_authz.authz.routes import UnlistedRoutePolicy


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CONSOLE_AUTHZ_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "console-authz"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Paths missing from the route table are denied unless explicitly opted in.
    unlisted_route_policy: UnlistedRoutePolicy = UnlistedRoutePolicy.DENY


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# The authz core itself never reads settings; values are passed in by the API layer.
