"""
Logging Configuration.
"""

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LoggingSettings(BaseSettings):
    """Logging pipeline configuration."""

    model_config = SettingsConfigDict(
        env_prefix="DD_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    level: LogLevel = Field(default=LogLevel.INFO, description="Log level")
    sinks: str = Field(default="stdio", description="Comma-separated sink names (stdio, file)")
    file_path: str = Field(default="logs/datadog.log", description="Path for file sink")
    file_max_bytes: int = Field(default=10 * 1024 * 1024, description="Rotate the file sink past this size")
    file_backup_count: int = Field(default=5, description="Rotated files to keep")
