"""
Interceptors for capturing standard library and third-party logs.
"""

import logging
from typing import Iterable

from .core import get_logger


class RedirectStdLibHandler(logging.Handler):
    """
    Redirect standard library logging events to structlog so they pass
    through the Datadog renderer like any other event.
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            # Skip records coming from structlog itself to avoid loops
            if "structlog" in record.name:
                return

            logger = get_logger(record.name or "stdlib")
            kwargs = {"exc_info": record.exc_info} if record.exc_info else {}
            logger.log(getattr(logging, record.levelname, logging.INFO), record.getMessage(), **kwargs)
        except Exception:
            self.handleError(record)


def intercept_loggers(names: Iterable[str]) -> None:
    """Strip handlers from the named loggers and their children so they propagate to root."""
    roots = tuple(names)
    for logger_name in roots:
        lg = logging.getLogger(logger_name)
        lg.handlers = []
        lg.propagate = True

    # Walk existing child loggers created before we got here
    for name, logger in logging.Logger.manager.loggerDict.items():
        if isinstance(logger, logging.PlaceHolder):
            continue
        if any(name == root or name.startswith(root + ".") for root in roots):
            logger.handlers = []
            logger.propagate = True
