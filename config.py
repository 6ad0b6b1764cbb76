"""
Client configuration via pydantic-settings.

All settings are loaded from environment variables (and .env file).

The base URL is read from BASEURL and the basic-auth credentials from USER
and PASSWORD, matching the variable names existing test environments export.
"""

from __future__ import annotations

from typing import Optional

from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"
    log_format: str = "console"  # "json" in CI


class ClientSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore", populate_by_name=True
    )

    # Prefix prepended to every endpoint path; empty means paths are absolute
    base_url: str = Field(
        default="", validation_alias=AliasChoices("BASEURL", "base_url")
    )

    # Basic-auth credentials, only required by ServiceBase.authenticate()
    user: Optional[str] = None
    password: Optional[str] = None

    http_timeout_seconds: float = 10.0
    http_raise_for_status: bool = True

    logging: Optional[LoggingSettings] = None

    @model_validator(mode="after")
    def _populate_sub_configs(self) -> "ClientSettings":
        if self.logging is None:
            self.logging = LoggingSettings()
        return self

    @property
    def has_credentials(self) -> bool:
        return bool(self.user and self.password)
