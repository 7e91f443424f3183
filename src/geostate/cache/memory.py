"""In-memory resolution cache owned by a resolver instance."""

from __future__ import annotations

from typing import Any


class ResolutionCache:
    """
    Dictionary-backed cache without expiry.

    Entries live as long as the owning resolver. Not thread-safe: concurrent
    writes to the same key are last-write-wins.
    """

    def __init__(self) -> None:
        self._entries: dict[str, Any] = {}

    def get(self, key: str) -> Any | None:
        """Get a value from cache."""
        return self._entries.get(key)

    def set(self, key: str, value: Any) -> None:
        """Store a value."""
        self._entries[key] = value

    def clear(self) -> None:
        """Drop every entry."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries
