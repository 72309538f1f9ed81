"""
Log sink abstractions and concrete implementations.

Sinks receive already formatted Datadog JSON lines. Shipping to the intake
endpoint is left to an agent tailing stdout or the log file.
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any


class BaseSink(ABC):
    """Abstract base class for log sinks."""

    @abstractmethod
    def emit(self, line: str) -> None:
        """Emit one formatted log line to the sink."""
        ...

    @abstractmethod
    def close(self) -> None:
        """Close the sink and release resources."""
        ...


class StdioSink(BaseSink):
    """Standard I/O sink, one JSON document per line.

    Args:
        stream: Output stream (default: the current sys.stdout at write time)
    """

    def __init__(self, stream: Any = None):
        self._stream = stream

    def emit(self, line: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(line + "\n")
        stream.flush()

    def close(self) -> None:
        pass


class FileSink(BaseSink):
    """Local file sink with size-based rotation.

    Rotated files are named ``<path>.1`` (newest) to ``<path>.<backup_count>``.
    """

    def __init__(self, path: str | Path, max_bytes: int = 10 * 1024 * 1024, backup_count: int = 5):
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._max_bytes = max_bytes
        self._backup_count = backup_count
        self._file = open(self._path, "a", encoding="utf-8")

    @property
    def path(self) -> Path:
        return self._path

    def _backup(self, index: int) -> Path:
        return self._path.with_name(f"{self._path.name}.{index}")

    def emit(self, line: str) -> None:
        self._file.write(line + "\n")
        self._file.flush()
        self._maybe_rotate()

    def _maybe_rotate(self) -> None:
        if self._path.stat().st_size <= self._max_bytes:
            return
        self._file.close()
        if self._backup_count > 0:
            oldest = self._backup(self._backup_count)
            if oldest.exists():
                oldest.unlink()
            for i in range(self._backup_count - 1, 0, -1):
                src = self._backup(i)
                if src.exists():
                    src.rename(self._backup(i + 1))
            self._path.rename(self._backup(1))
        else:
            self._path.unlink()
        self._file = open(self._path, "a", encoding="utf-8")

    def close(self) -> None:
        self._file.close()
