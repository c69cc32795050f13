"""
extension_name.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for the extension.
- Hide secrets from repr/logging (e.g., JWT secret).
- Offer a cached settings instance for the process entrypoint.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="EXTENSION_NAME_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "extension-name"
    log_level: str = "INFO"
    log_json: bool = True

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Extension
    greeting: str = "Hello from extension-name!"
    admin_ui_page_id: str = "extension-name-admin"

    # Secured routes; an empty list only requires an authenticated caller.
    api_required_roles: list[str] = Field(default_factory=list)
    privileged_subject: str = "system"

    # Auth
    jwt_alg: str = "HS256"
    jwt_issuer: str = "extension-name"
    jwt_audience: str = "extension-name-api"
    jwt_secret: str = Field(default="dev-secret-change-me", repr=False)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Request-time code reads settings from `app.state.settings` (see `api.deps`) so that
# an app built with explicit settings never falls back to the environment.
