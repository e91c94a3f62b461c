"""Configuration management using pydantic-settings.

Settings come from the environment and from optional ``.env`` /
``.env.local`` files (local overrides shared). They only pick the message
catalog and the log level; the loop contract is not configurable.

Usage:
    from echochat.config import settings
    print(settings.lang)
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from echochat.messages import CATALOGS

type LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All variables use the ``ECHOCHAT_`` prefix.
    """

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        extra="ignore",
    )

    lang: str = Field(
        default="en",
        validation_alias="ECHOCHAT_LANG",
        description="Message catalog language",
    )

    log_level: LogLevel = Field(
        default="WARNING",
        validation_alias="ECHOCHAT_LOG_LEVEL",
        description="Root log level (records go to stderr)",
    )

    @field_validator("lang")
    @classmethod
    def check_lang(cls, value: str) -> str:
        if value not in CATALOGS:
            raise ValueError(
                f"unknown language {value!r}, expected one of: {', '.join(CATALOGS)}"
            )
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value


# Singleton instance
settings = Settings.model_validate({})
