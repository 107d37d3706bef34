"""Boolean lookup over stored entries.

List queries ("what's on my shopping list") take a broad-recall path: any
entry with items or keywords matches. Other queries match when a query token
and an entry keyword contain one another, or the token appears in the raw
content. No ranking; results keep store order (newest first).
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from jotbot.core.utils.text import normalize_text, stem

from .config import ExtractionConfig, SearchConfig
from .extraction import fallback_extract_items
from .intent import is_list_query
from .models import Entry, QueryResult
from .store import EntryStore
from .vocab import COMMON_VERBS, STOPWORDS

_LIST_CONTENT = re.compile(r"buy|add|shopping|supermarket|grocery", re.IGNORECASE)
_SPLIT = re.compile(r"[\s,]+")


def query_tokens(query: str | None) -> list[str]:
    """Stemmed, stopword-free tokens of a query."""
    tokens = []
    for token in _SPLIT.split(normalize_text(query)):
        token = stem(token)
        if token and token not in STOPWORDS:
            tokens.append(token)
    return tokens


def matches_list_query(entry: Entry) -> bool:
    return bool(entry.items or entry.keywords or _LIST_CONTENT.search(entry.content))


def matches_tokens(entry: Entry, tokens: Iterable[str]) -> bool:
    content = entry.content.lower()
    keywords = [k.lower() for k in entry.keywords]
    for token in tokens:
        if any(token in k or k in token for k in keywords):
            return True
        if token in content:
            return True
    return False


class QueryEngine:
    """Answers lookups against an :class:`EntryStore`.

    Args:
        store: The entry store to read from.
        config: Lookup settings (keyword folding).
        extraction_config: Settings used when items are re-derived from content.
    """

    def __init__(
        self,
        store: EntryStore,
        config: SearchConfig | None = None,
        extraction_config: ExtractionConfig | None = None,
    ):
        self.store = store
        self.config = config or SearchConfig()
        self.extraction_config = extraction_config or ExtractionConfig()

    def query_entries(self, query: str | None) -> list[Entry]:
        """Return entries relevant to ``query``, newest first."""
        entries = self.store.all_entries()
        if is_list_query(query):
            return [e for e in entries if matches_list_query(e)]

        tokens = query_tokens(query)
        if not tokens:
            return []
        return [e for e in entries if matches_tokens(e, tokens)]

    def get_items_for_results(self, results: Iterable[Entry]) -> list[str]:
        """Merge the items of ``results`` into one de-duplicated list.

        Stored items are used when present; otherwise items are re-extracted
        from the entry content (plus its keywords when ``fold_keywords``).
        """
        items: list[str] = []

        def _add(item: str) -> None:
            if item not in items:
                items.append(item)

        for entry in results:
            if entry.items:
                for item in entry.items:
                    _add(item)
                continue
            for item in fallback_extract_items(entry.content, self.extraction_config):
                _add(item)
            if self.config.fold_keywords:
                for keyword in entry.keywords:
                    folded = stem(keyword).lower()
                    if len(folded) > 1 and folded not in COMMON_VERBS:
                        _add(folded)
        return items

    def search(self, query: str | None) -> QueryResult:
        """Run :meth:`query_entries` and derive the item list in one call."""
        entries = self.query_entries(query)
        return QueryResult(query=query or "", entries=entries, items=self.get_items_for_results(entries))
