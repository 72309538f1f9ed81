"""
structlog processor rendering event dicts as Datadog JSON lines.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict

from structlog.typing import EventDict, WrappedLogger

from ..events import LogEvent, LogEventLevel
from ..formatter import LogFormatter

# structlog / stdlib bookkeeping keys that are not event properties
_INTERNAL_KEYS = {"_record", "_from_structlog", "_name"}


def _parse_timestamp(raw: Any) -> datetime:
    if isinstance(raw, datetime):
        return raw
    if isinstance(raw, str):
        try:
            return datetime.fromisoformat(raw.replace("Z", "+00:00"))
        except ValueError:
            pass
    return datetime.now(timezone.utc)


def event_from_dict(event_dict: EventDict) -> LogEvent:
    """Build a ``LogEvent`` from a structlog event dict."""
    data: Dict[str, Any] = dict(event_dict)
    message = data.pop("event", None)
    if message is None:
        message = data.pop("message", "")
    level = LogEventLevel.from_name(data.pop("level", None))
    timestamp = _parse_timestamp(data.pop("timestamp", None))
    exception = data.pop("exception", None)
    for key in _INTERNAL_KEYS:
        data.pop(key, None)

    return LogEvent(
        rendered_message=str(message),
        level=level,
        timestamp=timestamp,
        properties=data,
        exception=str(exception) if exception is not None else None,
    )


class DatadogRenderer:
    """Render the event dict to a Datadog JSON string.

    Must be the last dict-consuming processor in the chain.
    """

    def __init__(self, formatter: LogFormatter | None = None):
        self._formatter = formatter or LogFormatter()

    @property
    def formatter(self) -> LogFormatter:
        return self._formatter

    def __call__(self, logger: WrappedLogger, method_name: str, event_dict: EventDict) -> str:
        return self._formatter.format_message(event_from_dict(event_dict))
