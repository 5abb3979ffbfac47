"""
Runtime configuration for consent decoding.

Uses ``pydantic_settings.BaseSettings`` for automatic environment
variable binding, type coercion, and validation.
"""

from __future__ import annotations

from typing import Literal

import pydantic
import pydantic_settings

LogLevel = Literal["debug", "info", "success", "warn", "error"]


class ConsentSettings(pydantic_settings.BaseSettings):
    """Settings loaded from the process environment.

    Attributes:
        cookie_env_var: Name of the environment variable holding
            the ambient cookie header (CGI/WSGI convention).
        log_level: Minimum level printed to stderr.
    """

    cookie_env_var: str = pydantic.Field(
        default="HTTP_COOKIE", validation_alias="CMP_CONSENT_COOKIE_ENV_VAR"
    )
    log_level: LogLevel = pydantic.Field(
        default="warn", validation_alias="CMP_CONSENT_LOG_LEVEL"
    )

    @pydantic.field_validator("log_level", mode="before")
    @classmethod
    def _normalise_level(cls, value: object) -> object:
        """Accept level names in any case and the ``warning`` spelling."""
        if isinstance(value, str):
            value = value.strip().lower()
            if value == "warning":
                return "warn"
        return value


_settings: ConsentSettings | None = None


def get_settings() -> ConsentSettings:
    """Get the process-wide settings (lazy loaded and cached)."""
    global _settings
    if _settings is None:
        _settings = ConsentSettings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next access re-reads the environment."""
    global _settings
    _settings = None
