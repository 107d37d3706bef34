"""Pattern-based item extraction.

Used whenever no language model is configured or the model call fails, so
its output must stand on its own. Rules are tried in order; the first one
whose captured chunk yields at least one item wins. When none does, a capped
token scan picks out noun-like words instead.

Example::

    >>> fallback_extract_items("Add eggs and milk to my shopping list")
    ['egg', 'milk']
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from jotbot.core.utils.text import normalize_text, stem

from .config import ExtractionConfig
from .vocab import is_noise

# Determiners and request verbs that sit in front of the actual item.
_LEADING_NOISE = re.compile(r"^(?:(?:the|my|a|an|some|more|to|buy|get|grab|add|put|pick up)\s+)+")

# "... to my shopping list", "... on the to-do list", "... for groceries"
_LIST_TAIL = re.compile(
    r"\s*\b(?:to|in|on|onto|into|at|for|from)\s+(?:(?:my|the|our|your)\s+)?(?:[a-z'-]+\s+)?"
    r"(?:list|lists|shopping|grocery|groceries|to-?do|todo|tasks?|supermarket)\b.*$"
)
_BOUNDARY = re.compile(r"\s*\b(?:to|in|on|at|for|my|the|from)\b(?![-']).*$")

_CHUNK_NOISE = re.compile(r"\b(?:list|lists|please)\b")
_QUOTES = re.compile(r"['\"]")
# ", and" counts as one separator; bare "and" or "&" only between spaces
_ITEM_SEPARATOR = re.compile(r"\s*,(?:\s*and\b)?\s*|\s+and\s+|\s+&\s+")
_ITEM_PUNCT = re.compile(r"[^a-z0-9\s\-&]")
_TOKEN_SPLIT = re.compile(r"[\s,]+")
_TOKEN_PUNCT = re.compile(r"[^a-z0-9\-']")
_WHITESPACE = re.compile(r"\s+")


def _cut_trailing(chunk: str) -> str:
    """Drop the destination tail of a captured phrase.

    A list destination (``to my shopping list``) is cut where it starts;
    otherwise the phrase ends at its first preposition or determiner.
    """
    chunk = _LEADING_NOISE.sub("", chunk.strip())
    tail = _LIST_TAIL.search(chunk)
    if tail:
        return chunk[: tail.start()].strip()
    return _BOUNDARY.sub("", chunk, count=1).strip()


@dataclass(frozen=True)
class ExtractionRule:
    """One capture pattern in the priority list.

    Attributes:
        name: Label used in logs and tests.
        pattern: Regex with a ``chunk`` named group.
        use_raw: Match the lowercased raw text instead of the normalized one
            (label rules need the ``:`` that normalization removes).
        cut_trailing: Trim the destination tail from the captured chunk.
    """

    name: str
    pattern: re.Pattern
    use_raw: bool = False
    cut_trailing: bool = False

    def capture(self, text: str, normalized: str) -> str | None:
        source = text.lower() if self.use_raw else normalized
        match = self.pattern.search(source)
        if not match:
            return None
        chunk = match.group("chunk")
        if self.use_raw:
            chunk = normalize_text(chunk)
        if self.cut_trailing:
            chunk = _cut_trailing(chunk)
        return chunk or None


DEFAULT_RULES: tuple[ExtractionRule, ...] = (
    ExtractionRule(
        name="action_verb",
        pattern=re.compile(
            r"\b(?:don't forget(?: to)?|do not forget(?: to)?|remind me to|remember to"
            r"|note to self|note to|add|put|buy|need)\s+(?P<chunk>.+)$"
        ),
        cut_trailing=True,
    ),
    ExtractionRule(
        name="labeled_list",
        pattern=re.compile(r"(?:shopping list|grocery list|shopping|to-?do list|todo)\s*:\s*(?P<chunk>.+)", re.DOTALL),
        use_raw=True,
    ),
    ExtractionRule(
        name="continuation",
        pattern=re.compile(r"\b(?:and also|also|plus)\s+(?P<chunk>.+)$"),
    ),
)


def split_items(chunk: str) -> list[str]:
    """Turn a captured phrase into cleaned, stemmed, de-duplicated items."""
    chunk = _CHUNK_NOISE.sub(" ", chunk)
    chunk = _QUOTES.sub("", chunk)
    chunk = _WHITESPACE.sub(" ", chunk).strip()

    items: list[str] = []
    for candidate in _ITEM_SEPARATOR.split(chunk):
        candidate = _ITEM_PUNCT.sub("", candidate).strip()
        candidate = _LEADING_NOISE.sub("", candidate).strip()
        if not candidate:
            continue
        item = stem(candidate).lower()
        if is_noise(item) or item in items:
            continue
        items.append(item)
    return items


def scan_tokens(normalized: str, limit: int) -> list[str]:
    """Conservative fallback: first ``limit`` distinct non-noise stemmed tokens."""
    items: list[str] = []
    for token in _TOKEN_SPLIT.split(normalized):
        token = _TOKEN_PUNCT.sub("", token).strip("-'")
        if not token:
            continue
        item = stem(token).strip("-'")
        if is_noise(item) or item in items:
            continue
        items.append(item)
        if len(items) >= limit:
            break
    return items


def fallback_extract_items(
    text: str | None,
    config: ExtractionConfig | None = None,
    rules: Sequence[ExtractionRule] = DEFAULT_RULES,
) -> list[str]:
    """Extract list items from free text without a language model.

    Args:
        text: Raw user message.
        config: Scan cap and input length limit.
        rules: Capture rules in priority order.

    Returns:
        Lowercase, non-empty, de-duplicated items in the order they appear.
    """
    config = config or ExtractionConfig()
    if not text or not isinstance(text, str):
        return []
    text = text[: config.max_input_chars]
    normalized = normalize_text(text)
    if not normalized:
        return []

    for rule in rules:
        chunk = rule.capture(text, normalized)
        if chunk is None:
            continue
        items = split_items(chunk)
        if items:
            return items

    return scan_tokens(normalized, config.max_scan_items)
