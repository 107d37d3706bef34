"""Configuration dataclasses for item extraction and entry lookup.

Pure data containers with defaults; build them from a :class:`jotbot.core.config.Config`
with the ``from_config`` helpers or pass constructor args directly.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ExtractionConfig:
    """Settings for the pattern-based item extractor.

    Attributes:
        max_scan_items: Cap on items from the token-scan fallback, so a whole
            sentence is never treated as a list.
        max_input_chars: Raw message text beyond this many characters is ignored.
    """

    max_scan_items: int = 6
    max_input_chars: int = 2000

    @classmethod
    def from_config(cls, config) -> ExtractionConfig:
        return cls(
            max_scan_items=int(config.get("journal.max_fallback_items", cls.max_scan_items)),
            max_input_chars=int(config.get("journal.max_input_chars", cls.max_input_chars)),
        )


@dataclass
class SearchConfig:
    """Settings for list lookups.

    Attributes:
        fold_keywords: When an entry has no structured items, also add its
            keywords to the aggregated item list (more recall, noisier output).
    """

    fold_keywords: bool = False

    @classmethod
    def from_config(cls, config) -> SearchConfig:
        return cls(fold_keywords=bool(config.get("journal.fold_keywords", False)))
