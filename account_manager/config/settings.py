"""
Configuration Management for Account Manager

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
Every field has a default, so the program runs with no environment at all.
Environment variables only override behavior, they are never required.
"""

from decimal import Decimal
from functools import lru_cache
from typing import Optional, Union

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from ACCOUNT_MANAGER_* environment variables.
    """

    model_config = SettingsConfigDict(
        env_prefix="ACCOUNT_MANAGER_",
        extra="ignore"
    )

    # Environment
    app_environment: str = Field(
        default="development",
        description="Application environment"
    )
    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode"
    )

    # Account
    initial_balance: Decimal = Field(
        default=Decimal("1000.00"),
        ge=0,
        description="Balance the account starts with at process start"
    )
    allow_negative_amounts: bool = Field(
        default=False,
        description="Accept negative credit/debit amounts (legacy permissive mode)"
    )

    # Audit trail
    audit_max_events: Optional[int] = Field(
        default=None,
        ge=1,
        description="Cap on audit events kept in memory per process (None = unbounded)"
    )


class LoggingSettings(BaseSettings):
    """Structured logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="ACCOUNT_MANAGER_LOG_",
        extra="ignore"
    )

    level: str = Field(
        default="WARNING",
        description="Minimum log level written to stderr"
    )
    json_format: bool = Field(
        default=True,
        description="Render log lines as JSON (False = human-readable console output)"
    )

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Only accept level names the stdlib logging module knows."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(extra="ignore")

    @property
    def app(self) -> AppSettings:
        return AppSettings()

    @property
    def logging(self) -> LoggingSettings:
        return LoggingSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, Union[bool, str]]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid}, plus a
    "<name>_error" entry for every group that failed to load.
    """
    results = {}

    settings = get_settings()

    for name in ("app", "logging"):
        try:
            getattr(settings, name)
            results[name] = True
        except ValidationError as e:
            results[name] = False
            results[f"{name}_error"] = str(e)

    return results
