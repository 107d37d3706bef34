"""In-memory entry store.

The store lives as long as the process; nothing is persisted. Appends are
serialized by a lock so ids stay unique and ordering stays newest-first even
when the host serves requests from several threads.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable
from datetime import datetime, timezone

from loguru import logger

from .keywords import extract_keywords
from .models import Entry


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def clean_items(items: Iterable[str] | None) -> tuple[str, ...]:
    """Lowercase and trim items, dropping empties and exact duplicates."""
    cleaned: list[str] = []
    for item in items or ():
        value = str(item).strip().lower()
        if value and value not in cleaned:
            cleaned.append(value)
    return tuple(cleaned)


class EntryStore:
    """Append-only journal, newest entry first.

    Example::

        store = EntryStore()
        store.append("Add eggs to my shopping list", items=["egg"])
        store.all_entries()[0].items  # ("egg",)
    """

    def __init__(self, clock: Callable[[], datetime] = _utcnow):
        self._entries: list[Entry] = []
        self._lock = threading.Lock()
        self._clock = clock
        self._seq = 0

    def __len__(self) -> int:
        return len(self._entries)

    def append(
        self,
        content: str,
        tags: Iterable[str] | None = None,
        items: Iterable[str] | None = None,
    ) -> Entry:
        """Create an entry for ``content`` and put it at the front of the store.

        Args:
            content: Raw user message.
            tags: Optional labels, stored as given.
            items: Structured items; lowercased and de-duplicated.

        Returns:
            The new :class:`Entry`.
        """
        content = content if isinstance(content, str) else str(content or "")
        keywords = tuple(extract_keywords(content))
        cleaned = clean_items(items)

        with self._lock:
            created_at = self._clock()
            self._seq += 1
            entry = Entry(
                id=f"{int(created_at.timestamp() * 1000)}-{self._seq}",
                content=content,
                created_at=created_at,
                tags=tuple(tags or ()),
                keywords=keywords,
                items=cleaned,
            )
            self._entries.insert(0, entry)

        logger.debug(f"Stored entry {entry.id} ({len(entry.items)} items, {len(entry.keywords)} keywords)")
        return entry

    def all_entries(self) -> list[Entry]:
        """Live view of every entry, newest first."""
        return self._entries

    def recent(self, n: int) -> list[Entry]:
        """The newest ``n`` entries."""
        if n <= 0:
            return []
        return self._entries[:n]
