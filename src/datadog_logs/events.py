"""
Structured log event model.

The event is produced by the host logging pipeline; this module only
describes its shape so the serializer and formatter can consume it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Mapping, Optional


class LogEventLevel(str, Enum):
    """Severity levels, serialized by name."""

    VERBOSE = "Verbose"
    DEBUG = "Debug"
    INFORMATION = "Information"
    WARNING = "Warning"
    ERROR = "Error"
    FATAL = "Fatal"

    @classmethod
    def from_name(cls, name: str | None) -> "LogEventLevel":
        """Map a stdlib / structlog level name onto the enumeration."""
        if not name:
            return cls.INFORMATION
        return _LEVEL_ALIASES.get(str(name).lower(), cls.INFORMATION)


_LEVEL_ALIASES: Dict[str, LogEventLevel] = {
    "notset": LogEventLevel.VERBOSE,
    "verbose": LogEventLevel.VERBOSE,
    "trace": LogEventLevel.VERBOSE,
    "debug": LogEventLevel.DEBUG,
    "info": LogEventLevel.INFORMATION,
    "information": LogEventLevel.INFORMATION,
    "warn": LogEventLevel.WARNING,
    "warning": LogEventLevel.WARNING,
    "error": LogEventLevel.ERROR,
    "exception": LogEventLevel.ERROR,
    "critical": LogEventLevel.FATAL,
    "fatal": LogEventLevel.FATAL,
}


@dataclass(frozen=True)
class LogEvent:
    """One structured record emitted by application code."""

    rendered_message: str
    level: LogEventLevel = LogEventLevel.INFORMATION
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    properties: Mapping[str, Any] = field(default_factory=dict)
    message_template: Optional[str] = None
    exception: Optional[str] = None

    @property
    def template(self) -> str:
        return self.message_template if self.message_template is not None else self.rendered_message
