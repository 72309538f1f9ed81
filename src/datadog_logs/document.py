"""
Ordered output document built from the serialized base event.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, MutableMapping

import orjson

from .exceptions import DuplicateKeyError, SerializerContractError
from .serializer import orjson_dumps


def drop_nulls(value: Any) -> Any:
    """Recursively remove mapping entries whose value is None.

    List elements are kept as-is, including None; only their nested
    mappings are cleaned.
    """
    if isinstance(value, dict):
        return {k: drop_nulls(v) for k, v in value.items() if v is not None}
    if isinstance(value, list):
        return [drop_nulls(v) for v in value]
    return value


class OutputDocument(MutableMapping[str, Any]):
    """Insertion-ordered mapping from key to JSON value.

    ``add`` refuses to overwrite an existing key and ``rename`` moves an
    entry to the end of the document.
    """

    def __init__(self, data: Dict[str, Any] | None = None) -> None:
        self._data: Dict[str, Any] = dict(data or {})

    @classmethod
    def parse(cls, raw: str | bytes) -> "OutputDocument":
        """Parse serializer output; the top level must be a JSON object."""
        try:
            data = orjson.loads(raw)
        except orjson.JSONDecodeError as exc:
            text = raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else raw
            raise SerializerContractError(str(exc), payload=text) from exc
        if not isinstance(data, dict):
            text = raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else raw
            raise SerializerContractError(f"top-level value is {type(data).__name__}", payload=text)
        return cls(data)

    def add(self, key: str, value: Any) -> None:
        if key in self._data:
            raise DuplicateKeyError(key)
        self._data[key] = value

    def rename(self, old_key: str, new_key: str) -> bool:
        """Rename ``old_key`` to ``new_key`` if present. Returns whether it did."""
        if old_key not in self._data:
            return False
        if new_key != old_key and new_key in self._data:
            raise DuplicateKeyError(new_key)
        value = self._data.pop(old_key)
        self.add(new_key, value)
        return True

    def to_dict(self) -> Dict[str, Any]:
        return drop_nulls(self._data)

    def dumps(self) -> str:
        """Single-line JSON, no trailing newline, null entries omitted."""
        return orjson_dumps(self.to_dict())

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"OutputDocument({self._data!r})"
