"""
Datadog Enrichment Configuration.

Reads the unified service tagging variables (``DD_SERVICE``, ``DD_HOSTNAME``,
``DD_TAGS``, ...) used to build a ``LogFormatter``. ``DD_ENV`` and
``DD_VERSION`` are looked up in the process environment on every call and
are not read from ``.env``, see ``datadog_logs.context``.
"""

from typing import List, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatadogSettings(BaseSettings):
    """
    Enrichment metadata settings.
    Prefix: DD_
    """

    model_config = SettingsConfigDict(
        env_prefix="DD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    source: Optional[str] = Field(default=None, description="Value for ddsource (defaults to csharp)")
    service: Optional[str] = Field(default=None, description="Service name")
    host: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("DD_HOST", "DD_HOSTNAME"),
        description="Host name",
    )
    tags: Optional[str] = Field(default=None, description="Comma-separated tags (key:value)")

    @property
    def tag_list(self) -> Optional[List[str]]:
        if self.tags is None:
            return None
        return [t.strip() for t in self.tags.split(",") if t.strip()]
