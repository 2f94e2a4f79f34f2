"""Formatter settings using Pydantic BaseSettings for validation & env loading.

Every field can be set through a ``TIMEAGO_``-prefixed environment variable
or a ``.env`` file:
 - TIMEAGO_LANGUAGE normalized to lowercase; blank falls back to "en".
 - TIMEAGO_LOG_LEVEL validated against the standard logging level names.
"""
from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LANGUAGE = "en"
_ALLOWED_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class TimeAgoSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TIMEAGO_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    language: str = DEFAULT_LANGUAGE
    language_support_enabled: bool = True

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    @field_validator("language", mode="before")
    def _normalize_language(cls, v):  # noqa: D401
        v = str(v or "").strip().lower()
        return v or DEFAULT_LANGUAGE

    @field_validator("log_level", mode="before")
    def _validate_level(cls, v):
        level = str(v or "INFO").strip().upper()
        if level not in _ALLOWED_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_ALLOWED_LOG_LEVELS)}, got '{v}'")
        return level


def load_settings() -> TimeAgoSettings:
    return TimeAgoSettings()


__all__ = ["TimeAgoSettings", "load_settings", "DEFAULT_LANGUAGE"]
