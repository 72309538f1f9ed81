"""
Datadog logging pipeline.

Routes structlog and stdlib logging events through ``LogFormatter`` and
writes the resulting JSON lines to the configured sinks:
- stdio: Standard output
- file: Local file with size-based rotation

Library: structlog for the processor chain, orjson for serialization.
"""

from .core import (
    bind_trace_context,
    clear_trace_context,
    configure_logging,
    get_logger,
    shutdown_logging,
)
from .renderer import DatadogRenderer, event_from_dict

__all__ = [
    "bind_trace_context",
    "clear_trace_context",
    "configure_logging",
    "get_logger",
    "shutdown_logging",
    "DatadogRenderer",
    "event_from_dict",
]
