"""Core data models for the journal."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class Entry:
    """One stored journal record.

    Entries are immutable: ``keywords`` and ``items`` are derived once at
    creation and never recomputed.

    Attributes:
        id: Unique, creation-ordered identifier.
        content: The user's original message, verbatim.
        tags: Caller-supplied labels (stored only).
        keywords: Stemmed, filtered tokens of ``content`` for free-text lookup.
        items: Lowercase structured list items (empty for a plain note).
        created_at: Creation time (UTC).
    """

    id: str
    content: str
    created_at: datetime
    tags: tuple[str, ...] = ()
    keywords: tuple[str, ...] = ()
    items: tuple[str, ...] = ()

    @property
    def has_items(self) -> bool:
        return bool(self.items)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "content": self.content,
            "tags": list(self.tags),
            "keywords": list(self.keywords),
            "items": list(self.items),
            "createdAt": self.created_at.isoformat(timespec="milliseconds"),
        }

    def __repr__(self) -> str:
        preview = self.content[:50] + "..." if len(self.content) > 50 else self.content
        return f"Entry(id='{self.id}', content='{preview}', items={list(self.items)})"


@dataclass
class QueryResult:
    """Entries matching a query plus the item list derived from them."""

    query: str
    entries: list[Entry] = field(default_factory=list)
    items: list[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)
