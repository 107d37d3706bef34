"""Text processing utilities: normalization, stemming, truncation."""

import re

_SMART_QUOTES = re.compile(r"[‘’“”]")
_DISALLOWED = re.compile(r"[^a-z0-9\s,&\-']")
_WHITESPACE = re.compile(r"\s+")


def normalize_text(text: str | None) -> str:
    """Canonicalize free text for matching.

    Lowercases, folds smart quotes to an apostrophe, replaces anything outside
    ``[a-z0-9 ,&-']`` with a space and collapses whitespace.
    """
    if not text or not isinstance(text, str):
        return ""
    text = text.lower()
    text = _SMART_QUOTES.sub("'", text)
    text = _DISALLOWED.sub(" ", text)
    return _WHITESPACE.sub(" ", text).strip()


def stem(word: str) -> str:
    """Crude plural stripping: ``ies`` -> ``y``, then ``es``, then ``s``.

    First matching rule wins. No linguistic exceptions, so ``bus`` -> ``bu``.
    """
    if not word:
        return word
    if len(word) > 4 and word.endswith("ies"):
        return word[:-3] + "y"
    if len(word) > 3 and word.endswith("es"):
        return word[:-2]
    if len(word) > 2 and word.endswith("s"):
        return word[:-1]
    return word


def truncate_text(text: str, max_length: int = 100, ellipsis: str = "...") -> str:
    """Truncate text to max_length, appending ellipsis if truncated."""
    if not text:
        return ""
    if len(text) <= max_length:
        return text
    return text[: max_length - len(ellipsis)] + ellipsis
