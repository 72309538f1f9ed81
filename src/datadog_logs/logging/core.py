"""
Core logging configuration and initialization logic.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

import structlog
from structlog.typing import WrappedLogger, EventDict

from ..formatter import LogFormatter
from .renderer import DatadogRenderer
from .sinks import BaseSink, FileSink, StdioSink

# =============================================================================
# Global State
# =============================================================================

_sinks: list[BaseSink] = []


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(_name=name or "root")


def bind_trace_context(trace_id: Any, span_id: Any) -> None:
    """Attach trace correlation ids to every event logged in this context."""
    structlog.contextvars.bind_contextvars(dd_trace_id=trace_id, dd_span_id=span_id)


def clear_trace_context() -> None:
    structlog.contextvars.unbind_contextvars("dd_trace_id", "dd_span_id")


# =============================================================================
# Structlog Processors
# =============================================================================


def add_timestamp(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add ISO 8601 timestamp to log event."""
    event_dict.setdefault("timestamp", datetime.now(timezone.utc).isoformat())
    return event_dict


def add_logger_name(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add logger name to log event."""
    event_dict["logger"] = event_dict.get("_name", "root")
    event_dict.pop("_name", None)
    return event_dict


def multi_sink_emitter(logger: WrappedLogger, method_name: str, line: str) -> str:
    """Write the rendered line to all configured sinks. Returns empty to suppress default output."""
    for sink in _sinks:
        try:
            sink.emit(line)
        except Exception:
            pass  # A failing sink must not break the application
    return ""


# =============================================================================
# Configuration Logic
# =============================================================================


def _initialize_sinks(sinks: str, file_path: str, file_max_bytes: int, file_backup_count: int) -> None:
    """Initialize configured sinks based on input."""
    for sink in _sinks:
        sink.close()
    _sinks.clear()

    sink_names = [s.strip().lower() for s in sinks.split(",")]
    for name in sink_names:
        if name == "stdio":
            _sinks.append(StdioSink())
        elif name == "file":
            _sinks.append(FileSink(file_path, max_bytes=file_max_bytes, backup_count=file_backup_count))


def _configure_structlog(level: str, formatter: LogFormatter) -> None:
    """Configure structlog processors and factory."""
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        add_timestamp,
        add_logger_name,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    # Logger factory that discards the (empty) final output
    class NopFile:
        def write(self, s: str) -> None:
            pass

        def flush(self) -> None:
            pass

    _NOP_FILE = NopFile()

    class SilentPrintLoggerFactory:
        """Logger factory that returns a logger writing to nowhere."""

        def __call__(self, *args: Any) -> structlog.PrintLogger:
            return structlog.PrintLogger(file=_NOP_FILE)

    structlog.configure(
        processors=shared_processors + [DatadogRenderer(formatter), multi_sink_emitter],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level.upper(), logging.INFO)),
        context_class=dict,
        logger_factory=SilentPrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def configure_logging(
    *,
    level: str | None = None,
    sinks: str | None = None,
    file_path: str | None = None,
    formatter: LogFormatter | None = None,
    intercept: tuple[str, ...] = (),
) -> LogFormatter:
    """
    Configure structlog and stdlib logging to emit Datadog JSON lines.

    Unset arguments fall back to ``settings.logging`` / ``settings.datadog``.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        sinks: Comma-separated sink names (stdio, file)
        file_path: Path for file sink
        formatter: Formatter used to render every event
        intercept: Names of stdlib loggers whose own handlers are removed
            so they propagate into the pipeline

    Returns:
        The formatter in use.
    """
    from ..config import settings
    from .interceptors import RedirectStdLibHandler, intercept_loggers

    log_settings = settings.logging
    level = level or log_settings.level.value
    formatter = formatter or LogFormatter.from_settings(settings.datadog)

    # 1. Initialize Sinks
    _initialize_sinks(
        sinks or log_settings.sinks,
        file_path or log_settings.file_path,
        log_settings.file_max_bytes,
        log_settings.file_backup_count,
    )

    # 2. Configure Structlog
    _configure_structlog(level, formatter)

    # 3. Route stdlib logging (root) into structlog
    root_logger = logging.getLogger()
    root_logger.handlers = []
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    root_logger.addHandler(RedirectStdLibHandler())

    # 4. Intercept named third-party loggers
    if intercept:
        intercept_loggers(intercept)

    return formatter


def shutdown_logging() -> None:
    """Close all sinks."""
    for sink in _sinks:
        sink.close()
    _sinks.clear()
