"""Gateway configuration — server identity, upstream URL, listener address.

Values come from the process environment, after an optional ``.env`` file
has been loaded::

    settings = load_settings()
    settings.likeminds_api_url   # "http://localhost:8000"
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from likeminds_mcp.errors import ConfigError

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]

# Environment variable name for each settings field.
ENV_VARS: dict[str, str] = {
    "server_name": "SERVER_NAME",
    "server_version": "SERVER_VERSION",
    "likeminds_api_url": "LIKEMINDS_API_URL",
    "host": "HOST",
    "port": "PORT",
    "log_level": "LOG_LEVEL",
}


class Settings(BaseModel):
    """Process-wide configuration, loaded once at startup."""

    model_config = ConfigDict(frozen=True)

    server_name: str = "likeminds-mcp-wrapper"
    server_version: str = "1.0.0"
    likeminds_api_url: str = "http://localhost:8000"
    host: str = "0.0.0.0"
    port: int = Field(default=8080, ge=1, le=65535)
    log_level: LogLevel = "INFO"

    @field_validator("likeminds_api_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from *environ* (defaults to ``os.environ``).

        Empty variables fall back to the field default.

        Raises
        ------
        ConfigError
            If any variable holds an invalid value.
        """
        env = os.environ if environ is None else environ
        values = {field: env[var] for field, var in ENV_VARS.items() if env.get(var)}
        try:
            return cls.model_validate(values)
        except ValidationError as exc:
            errors = "; ".join(
                f"{ENV_VARS[str(err['loc'][0])]}: {err['msg']}" for err in exc.errors()
            )
            msg = f"Invalid configuration: {errors}"
            raise ConfigError(msg) from exc


def load_settings(dotenv_path: str | None = None) -> Settings:
    """Load ``.env`` (if present) into the environment, then read :class:`Settings`."""
    load_dotenv(dotenv_path)
    return Settings.from_env()
