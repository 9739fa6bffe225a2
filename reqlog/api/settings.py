"""
reqlog.api.settings

Purpose:
    Centralized configuration for the API service.
    Defaults live on the model; REQLOG_* environment variables override them
    (e.g. REQLOG_PORT=9090).

Notes:
    - Listener defaults to http://localhost:8080.
    - Blank variables are ignored; values that do not validate fail at startup.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from reqlog.api.contracts.api_paths import ApiPaths


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="REQLOG_", env_ignore_empty=True)

    service_name: str = Field(default="reqlog-api")
    service_version: str = Field(default="0.1.0")

    host: str = Field(default="localhost")
    port: int = Field(default=8080, ge=0, le=65535)

    api_prefix: str = Field(default=ApiPaths().api_prefix)
    log_level: str = Field(default="INFO")

    # Simulated downstream work inside GET /api/ping
    ping_delay_ms: int = Field(default=100, ge=0)

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}"


def get_settings() -> Settings:
    return Settings()
