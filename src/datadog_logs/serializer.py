"""
Base JSON serializer for log events.

Produces the intermediate document the formatter enriches. The layout
mirrors the classic structured-event JSON shape:

    {"Timestamp": ..., "Level": ..., "MessageTemplate": ...,
     "RenderedMessage": ..., "Exception": ..., "Properties": {...}}
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict

import orjson

from .events import LogEvent

# Integer range orjson encodes natively
_INT_MIN = -(2**63)
_INT_MAX = 2**64 - 1


def orjson_dumps(v: Any, *, default: Any = None) -> str:
    """Fast compact JSON serialization using orjson."""
    return orjson.dumps(
        v,
        default=default,
        option=orjson.OPT_UTC_Z | orjson.OPT_NAIVE_UTC | orjson.OPT_NON_STR_KEYS,
    ).decode()


def _clean_str(s: str) -> str:
    try:
        s.encode("utf-8")
    except UnicodeEncodeError:
        # Lone surrogates (e.g. from os.fsdecode) become \udcxx escapes
        return s.encode("utf-8", "backslashreplace").decode("utf-8")
    return s


def _sanitized_str(v: Any) -> str:
    return _clean_str(str(v))


def sanitize(value: Any) -> Any:
    """Rewrite values orjson refuses into strings, recursively.

    Integers outside the 64-bit range are stringified and strings that are
    not valid UTF-8 have their surrogates backslash-escaped.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value if _INT_MIN <= value <= _INT_MAX else str(value)
    if isinstance(value, str):
        return _clean_str(value)
    if isinstance(value, dict):
        return {(_clean_str(k) if isinstance(k, str) else sanitize(k)): sanitize(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [sanitize(v) for v in value]
    return value


class EventSerializer(ABC):
    """Abstract base class for event serializers."""

    @abstractmethod
    def serialize(self, event: LogEvent) -> str:
        """Serialize an event to a JSON string."""
        ...


class JsonEventSerializer(EventSerializer):
    """Serialize events in the structured-event JSON layout.

    Args:
        render_message: Include the ``RenderedMessage`` field.
    """

    def __init__(self, render_message: bool = True):
        self._render_message = render_message

    def to_dict(self, event: LogEvent) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "Timestamp": event.timestamp,
            "Level": event.level.value,
            "MessageTemplate": event.template,
        }
        if self._render_message:
            payload["RenderedMessage"] = event.rendered_message
        if event.exception is not None:
            payload["Exception"] = event.exception
        if event.properties:
            payload["Properties"] = dict(event.properties)
        return payload

    def serialize(self, event: LogEvent) -> str:
        payload = self.to_dict(event)
        try:
            # Values orjson cannot encode natively fall back to their str().
            return orjson_dumps(payload, default=str)
        except orjson.JSONEncodeError:
            return orjson_dumps(sanitize(payload), default=_sanitized_str)
