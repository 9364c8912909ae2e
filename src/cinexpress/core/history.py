"""Result history storage for CineXpress.

The history is intentionally simple:

- it is a list of :class:`HistoryItem` records, newest first
- it never holds more than ``limit`` records (oldest evicted)
- the file-backed store keeps the whole list in a single JSON file

Unreadable history is never fatal. If the JSON file is missing, invalid, not
a list, or holds a malformed record, the store behaves as if the history
were empty and logs a warning; the next successful save overwrites the bad
file.

Persisted layout::

    [
      {"originalText": "...", "optimizedPrompt": "...", "explanation": "...",
       "id": "...", "timestamp": 1700000000000},
      ...
    ]
"""

from __future__ import annotations

import json
import logging
import time
import uuid
from pathlib import Path
from typing import Protocol

from .errors import StorageError
from .models import HistoryItem, OptimizedResult

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 10


def create_history_item(result: OptimizedResult, now_ms: int | None = None) -> HistoryItem:
    """Stamp a result with a unique id and an epoch-millisecond timestamp."""
    timestamp = now_ms if now_ms is not None else int(time.time() * 1000)
    return HistoryItem(
        original_text=result.original_text,
        optimized_prompt=result.optimized_prompt,
        explanation=result.explanation,
        id=uuid.uuid4().hex,
        timestamp=timestamp,
    )


def push_history(
    items: list[HistoryItem], item: HistoryItem, limit: int = DEFAULT_HISTORY_LIMIT
) -> list[HistoryItem]:
    """Return a new list with ``item`` prepended and capped at ``limit``."""
    return [item, *items][:limit]


def decode_history(raw: object) -> list[HistoryItem]:
    """Decode a persisted history array.

    Raises:
        StorageError: If the data does not have the persisted layout
    """
    if not isinstance(raw, list):
        raise StorageError(f"History must be a JSON array, got {type(raw).__name__}")
    try:
        return [HistoryItem.from_dict(entry) for entry in raw]
    except ValueError as e:
        raise StorageError(str(e)) from e


class HistoryStore(Protocol):
    """Persistence boundary used by the UI and the REST API."""

    limit: int

    def load(self) -> list[HistoryItem]: ...

    def save(self, items: list[HistoryItem]) -> None: ...

    def clear(self) -> None: ...

    def add(self, result: OptimizedResult) -> tuple[HistoryItem, list[HistoryItem]]: ...


class InMemoryHistoryStore:
    """History store without persistence."""

    def __init__(self, limit: int = DEFAULT_HISTORY_LIMIT):
        self.limit = limit
        self._items: list[HistoryItem] = []

    def load(self) -> list[HistoryItem]:
        return list(self._items)

    def save(self, items: list[HistoryItem]) -> None:
        self._items = list(items)[: self.limit]

    def clear(self) -> None:
        self._items = []

    def add(self, result: OptimizedResult) -> tuple[HistoryItem, list[HistoryItem]]:
        item = create_history_item(result)
        self.save(push_history(self.load(), item, self.limit))
        return item, self.load()


class JsonHistoryStore:
    """History store backed by a single JSON file.

    Args:
        path: Location of the history file (the well-known key)
        limit: Maximum number of records kept
    """

    def __init__(self, path: Path, limit: int = DEFAULT_HISTORY_LIMIT):
        self.path = Path(path)
        self.limit = limit

    def _read(self) -> list[HistoryItem]:
        """Read and decode the file.

        Raises:
            StorageError: If the file cannot be read or decoded
        """
        try:
            with open(self.path, encoding="utf-8") as handle:
                raw = json.load(handle)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise StorageError(f"Cannot read history file {self.path}: {e}") from e
        return decode_history(raw)

    def load(self) -> list[HistoryItem]:
        """Load the stored history, newest first.

        Returns:
            Stored items, or an empty list if the file is missing or corrupt
        """
        if not self.path.exists():
            return []

        try:
            items = self._read()
        except StorageError as e:
            logger.warning(f"Discarding unreadable history: {e}")
            return []

        return items[: self.limit]

    def save(self, items: list[HistoryItem]) -> None:
        """Persist the history list, capped at ``limit``.

        Raises:
            StorageError: If the file cannot be written
        """
        records = [item.to_dict() for item in items[: self.limit]]
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as handle:
                json.dump(records, handle, indent=2, ensure_ascii=False)
        except OSError as e:
            raise StorageError(f"Cannot write history file {self.path}: {e}") from e

    def clear(self) -> None:
        """Remove the stored history entirely.

        Raises:
            StorageError: If the file cannot be removed
        """
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            raise StorageError(f"Cannot remove history file {self.path}: {e}") from e
        logger.info("History cleared")

    def add(self, result: OptimizedResult) -> tuple[HistoryItem, list[HistoryItem]]:
        """Stamp ``result``, prepend it and persist.

        Returns:
            Tuple of (new_item, updated_history)

        Raises:
            StorageError: If the updated history cannot be written
        """
        item = create_history_item(result)
        items = push_history(self.load(), item, self.limit)
        self.save(items)
        return item, items
