"""Keyword extraction for indexing general notes."""

from __future__ import annotations

import re

from jotbot.core.utils.text import normalize_text, stem

from .vocab import is_noise

_SPLIT = re.compile(r"[\s,]+")


def tokenize(text: str | None) -> list[str]:
    """Normalize ``text`` and split it on whitespace and commas."""
    return [t for t in _SPLIT.split(normalize_text(text)) if t]


def extract_keywords(text: str | None) -> list[str]:
    """Return significant stemmed tokens of ``text``, first occurrence order.

    Noise words are dropped before stemming and again after, since stemming
    can turn a plain token into one (``ins`` -> ``in``, ``buys`` -> ``buy``).
    """
    seen: set[str] = set()
    keywords: list[str] = []
    for token in tokenize(text):
        if is_noise(token):
            continue
        stemmed = stem(token)
        if is_noise(stemmed) or stemmed in seen:
            continue
        seen.add(stemmed)
        keywords.append(stemmed)
    return keywords
