"""Text understanding and retrieval for journal messages.

Intent predicates, pattern-based item extraction, keyword indexing, an
in-memory entry store and boolean lookup over it.
"""

from .config import ExtractionConfig, SearchConfig
from .extraction import DEFAULT_RULES, ExtractionRule, fallback_extract_items
from .intent import Intent, classify, is_list_query, looks_like_add_intent, looks_like_question, mentions_action_verb
from .keywords import extract_keywords
from .models import Entry, QueryResult
from .search import QueryEngine
from .store import EntryStore

__all__ = [
    "DEFAULT_RULES",
    "Entry",
    "EntryStore",
    "ExtractionConfig",
    "ExtractionRule",
    "Intent",
    "QueryEngine",
    "QueryResult",
    "SearchConfig",
    "classify",
    "extract_keywords",
    "fallback_extract_items",
    "is_list_query",
    "looks_like_add_intent",
    "looks_like_question",
    "mentions_action_verb",
]
