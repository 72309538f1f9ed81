"""
Exception hierarchy for the Datadog log formatter.

Missing optional data is never an error; only contract violations between
the formatter and its collaborators are raised.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class DatadogLogsError(Exception):
    """Root of all formatter errors."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


class SerializerContractError(DatadogLogsError):
    """The base serializer produced output that is not a JSON object.

    Raised to the caller and never logged here: a failing log formatter
    that logs its own failure can recurse.
    """

    def __init__(self, reason: str, *, payload: Optional[str] = None) -> None:
        details: Dict[str, Any] = {"reason": reason}
        if payload is not None:
            details["payload"] = payload[:256]
        super().__init__(
            f"Serializer output is not a JSON object: {reason}",
            code="serializer_contract",
            details=details,
        )


class DuplicateKeyError(DatadogLogsError):
    """An inserted key already exists in the output document."""

    def __init__(self, key: str) -> None:
        super().__init__(
            f"Key already present in output document: {key}",
            code="duplicate_key",
            details={"key": key},
        )
