"""
Datadog log formatter.

Enriches structured log events with Datadog metadata and serializes them
to single-line JSON documents.
"""

from .context import EnrichmentContext, default_context
from .document import OutputDocument
from .events import LogEvent, LogEventLevel
from .exceptions import DatadogLogsError, DuplicateKeyError, SerializerContractError
from .formatter import CSHARP, LogFormatter
from .serializer import EventSerializer, JsonEventSerializer

__all__ = [
    "CSHARP",
    "DatadogLogsError",
    "DuplicateKeyError",
    "EnrichmentContext",
    "EventSerializer",
    "JsonEventSerializer",
    "LogEvent",
    "LogEventLevel",
    "LogFormatter",
    "OutputDocument",
    "SerializerContractError",
    "default_context",
]
