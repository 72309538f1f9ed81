"""
Configuration Module.

Each sub-module owns one concern with its own environment variable prefix.

Usage:
    from datadog_logs.config import settings

    settings.datadog.service
    settings.logging.level
"""

from functools import cached_property

from pydantic_settings import BaseSettings, SettingsConfigDict

from .datadog import DatadogSettings
from .logging import LoggingSettings, LogLevel


class Settings(BaseSettings):
    """Composite settings aggregating the configuration domains."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @cached_property
    def datadog(self) -> DatadogSettings:
        return DatadogSettings()

    @cached_property
    def logging(self) -> LoggingSettings:
        return LoggingSettings()


# Singleton instance
settings = Settings()

__all__ = [
    "Settings",
    "settings",
    "DatadogSettings",
    "LoggingSettings",
    "LogLevel",
]
