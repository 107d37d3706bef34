"""Intent predicates over normalized message text.

Each predicate is total: ``None`` or empty input is simply ``False``.
They are independent; callers decide precedence (add before query).
"""

from __future__ import annotations

import re
from enum import Enum

from jotbot.core.utils.text import normalize_text


class Intent(Enum):
    """What a user message asks for."""

    ADD = "add"  # Add items to a list
    QUERY = "query"  # Ask what is on a list
    NOTE = "note"  # Plain journal note


_ACTION_VERBS = re.compile(r"\b(?:add|put|buy|need|remember|remind|get)\b")
_LIST_NOUNS = re.compile(r"\b(?:list|shopping|grocery|to-?do|todo|task|supermarket)\b")
_LOOSE_ACTION_VERBS = re.compile(r"\b(?:add|put|buy|need|remind)\b")

_LIST_QUERY = re.compile(
    r"\b(?:supermarket|grocery|shopping list|grocery list|to-?do list|todo"
    r"|what should i buy|what is my shopping list|what is my to-?do list"
    r"|what's on my list|shopping|to-?do)\b"
)

_QUESTION_WORDS = re.compile(r"\b(?:what|how|why|when|where|who|do|did|does|is|are|can|should)\b", re.IGNORECASE)


def looks_like_add_intent(text: str | None) -> bool:
    """True when the text has an action verb *and* a list noun, in any order."""
    s = normalize_text(text)
    if not s:
        return False
    return bool(_ACTION_VERBS.search(s) and _LIST_NOUNS.search(s))


def is_list_query(text: str | None) -> bool:
    """True when the text mentions a shopping/grocery/to-do list at all.

    Deliberately broad: a bare ``shopping`` or ``to-do`` qualifies.
    """
    s = normalize_text(text)
    if not s:
        return False
    return bool(_LIST_QUERY.search(s))


def mentions_action_verb(text: str | None) -> bool:
    """True when the text has one of add/put/buy/need/remind, list noun or not."""
    s = normalize_text(text)
    return bool(s and _LOOSE_ACTION_VERBS.search(s))


def looks_like_question(text: str | None) -> bool:
    """Trailing question mark or a question word anywhere."""
    if not text:
        return False
    stripped = text.strip()
    return stripped.endswith(("?", "¿")) or bool(_QUESTION_WORDS.search(stripped))


def classify(text: str | None, *, strict: bool = True) -> Intent:
    """Pick a branch: add-intent first, then list query, else a plain note.

    With ``strict=False`` a bare action verb (``need``, ``buy``...) is enough
    for the add branch even without a list noun.
    """
    if looks_like_add_intent(text) or (not strict and mentions_action_verb(text)):
        return Intent.ADD
    if is_list_query(text):
        return Intent.QUERY
    return Intent.NOTE
