"""Application settings and configuration.

This module provides Pydantic settings classes for application configuration,
loaded from environment variables with support for nested configuration.
"""

import logging

import pydantic_settings
from pydantic import BaseModel, Field, field_validator

from everfit_app.platform.constants import DEFAULT_HOST, DEFAULT_PORT


class AppHTTPSettings(BaseModel):
    host: str = Field(DEFAULT_HOST)
    port: int = Field(DEFAULT_PORT, ge=1, le=65535)
    log_level: str = Field("INFO")
    log_json: bool | None = Field(
        None, description="Override log format: True=JSON, False=console, None=auto"
    )

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v):
        v_upper = v.upper()
        if v_upper not in logging._nameToLevel:
            raise ValueError(f'invalid value "{v}"')
        return v_upper


class BugsnagSettings(BaseModel):
    api_key: str = Field("")
    release_stage: str = Field("local")

    @field_validator("release_stage")
    @classmethod
    def _validate_bugsnag_release_stage(cls, v):
        if v not in ["development", "production", "local"]:
            raise ValueError(f'invalid bugsnag release stage "{v}"')
        return v


class Settings(pydantic_settings.BaseSettings):
    model_config = pydantic_settings.SettingsConfigDict(
        env_nested_delimiter="__",
        env_ignore_empty=True,
    )

    # Conventional platform variable; wins over APP_HTTP__PORT when set
    port: int | None = Field(None, validation_alias="PORT", ge=1, le=65535)

    app_http: AppHTTPSettings = AppHTTPSettings()
    bugsnag: BugsnagSettings = BugsnagSettings()

    @property
    def bind_port(self) -> int:
        """Port the HTTP listener binds to."""
        if self.port is not None:
            return self.port
        return self.app_http.port

    @property
    def json_logs(self) -> bool:
        """Resolve the log format: explicit override first, else JSON outside local."""
        if self.app_http.log_json is not None:
            return self.app_http.log_json
        return self.bugsnag.release_stage != "local"
