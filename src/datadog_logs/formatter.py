"""
Datadog log formatter.

Enriches a structured log event with Datadog metadata (source, service,
host, tags, env, version and trace correlation ids) and renames the
framework fields to Datadog's reserved attributes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Sequence

from .context import EnrichmentContext, default_context
from .document import OutputDocument
from .events import LogEvent
from .serializer import EventSerializer, JsonEventSerializer

if TYPE_CHECKING:
    from .config import DatadogSettings

# Default ddsource value
CSHARP = "csharp"

_shared_serializer = JsonEventSerializer(render_message=True)


class LogFormatter:
    """Turn log events into single-line Datadog JSON documents.

    Args:
        source: Value of ``ddsource``; defaults to ``CSHARP``.
        service: Value of ``service``; omitted when None.
        host: Value of ``host``; omitted when None.
        tags: Tags joined with ``,`` into ``ddtags``; omitted when None.
        context: Holder of the ``env`` / ``version`` overrides.
        serializer: Base serializer producing the intermediate JSON.
    """

    def __init__(
        self,
        source: Optional[str] = None,
        service: Optional[str] = None,
        host: Optional[str] = None,
        tags: Optional[Sequence[str]] = None,
        *,
        context: Optional[EnrichmentContext] = None,
        serializer: Optional[EventSerializer] = None,
    ):
        self._source = source if source is not None else CSHARP
        self._service = service
        self._host = host
        self._tags = ",".join(tags) if tags is not None else None
        self._context = context or default_context
        self._serializer = serializer or _shared_serializer

    @classmethod
    def from_settings(cls, settings: "DatadogSettings", **kwargs: Any) -> "LogFormatter":
        return cls(
            source=settings.source,
            service=settings.service,
            host=settings.host,
            tags=settings.tag_list,
            **kwargs,
        )

    @property
    def source(self) -> str:
        return self._source

    @property
    def service(self) -> Optional[str]:
        return self._service

    @property
    def host(self) -> Optional[str]:
        return self._host

    @property
    def tags(self) -> Optional[str]:
        return self._tags

    @property
    def context(self) -> EnrichmentContext:
        return self._context

    def format_message(self, event: LogEvent) -> str:
        """Enrich ``event`` with Datadog metadata and return it as JSON."""
        doc = OutputDocument.parse(self._serializer.serialize(event))

        # Trace correlation is only attached when the event carries properties
        properties = doc.get("Properties")
        if isinstance(properties, dict):
            doc.add(
                "dd",
                {
                    "span_id": properties.get("dd_span_id"),
                    "trace_id": properties.get("dd_trace_id"),
                },
            )

        doc.add("env", self._context.resolve_env())
        doc.add("version", self._context.resolve_version())

        if self._source is not None:
            doc.add("ddsource", self._source)
        if self._service is not None:
            doc.add("service", self._service)
        if self._host is not None:
            doc.add("host", self._host)
        if self._tags is not None:
            doc.add("ddtags", self._tags)

        # Reserved attributes, so the Log Explorer displays them properly
        doc.rename("RenderedMessage", "message")
        doc.rename("Level", "level")

        return doc.dumps()

    __call__ = format_message
