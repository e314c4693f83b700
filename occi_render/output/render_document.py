"""The per-session render document.

A ``RenderDocument`` accumulates the output of one render session. It is
created empty, mutated by each render operation, and serialized once by the
response emitter. Collections are ordered most-recent-first: ``prepend``
inserts at the front, so earlier content always remains the suffix.
"""

from typing import Any, Iterator


class RenderDocument:
    """Mutable mapping of top-level document keys to their values."""

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}

    def prepend(self, key: str, record: dict[str, Any]) -> None:
        """Insert ``record`` at the front of the collection under ``key``."""
        self._data[key] = [record] + self._data.get(key, [])

    def ensure_collection(self, key: str) -> list[dict[str, Any]]:
        return self._data.setdefault(key, [])

    def merge(self, values: dict[str, Any]) -> None:
        """Merge top-level values, overwriting existing keys."""
        self._data.update(values)

    def to_dict(self) -> dict[str, Any]:
        """A shallow copy of the document contents."""
        return dict(self._data)

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RenderDocument):
            return self._data == other._data
        if isinstance(other, dict):
            return self._data == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"RenderDocument({self._data!r})"
