"""JournalAssistant — decides what a chat message is and acts on it.

Dispatch order:
    0. quick save of short non-questions (only when enabled)
    1. add to a list: items from the model when available, else patterns
    2. list lookup
    3. plain note, stored without items

Usage::

    assistant = JournalAssistant.from_config(Config())
    reply = assistant.handle("Add eggs and milk to my shopping list")
    reply.entry.items  # ("egg", "milk")
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from loguru import logger

from jotbot.core.utils.text import truncate_text
from jotbot.journal.config import ExtractionConfig, SearchConfig
from jotbot.journal.extraction import fallback_extract_items
from jotbot.journal.intent import Intent, classify, looks_like_question
from jotbot.journal.models import Entry
from jotbot.journal.search import QueryEngine
from jotbot.journal.store import EntryStore

from .llm_extractor import SYSTEM_PROMPT, LLMItemExtractor

SOURCE_LLM = "llm"
SOURCE_FALLBACK = "fallback"


@dataclass
class AssistantReply:
    """Result of handling one message."""

    intent: Intent
    message: str
    entry: Entry | None = None
    results: list[Entry] = field(default_factory=list)
    items: list[str] = field(default_factory=list)
    source: str | None = None
    """Where items came from: ``"llm"``, ``"fallback"`` or None."""
    warning: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"intent": self.intent.value, "assistant": self.message}
        if self.entry is not None:
            data["entry"] = self.entry.to_dict()
        if self.intent is Intent.QUERY:
            data["results"] = [e.to_dict() for e in self.results]
            data["items"] = list(self.items)
        if self.source:
            data["source"] = self.source
        if self.warning:
            data["warning"] = self.warning
        return data


class JournalAssistant:
    """Routes messages between the entry store, the extractors and the query engine.

    Args:
        store: Entry store (a fresh one when omitted).
        llm_extractor: Optional model-backed extractor.
        extraction_config: Pattern extractor settings.
        search_config: Lookup settings.
        quick_save_max_chars: Save non-question messages up to this length
            directly with pattern items. 0 disables.
        strict_add_intent: Require both an action verb and a list noun for
            the add branch.
    """

    def __init__(
        self,
        store: EntryStore | None = None,
        llm_extractor: LLMItemExtractor | None = None,
        extraction_config: ExtractionConfig | None = None,
        search_config: SearchConfig | None = None,
        quick_save_max_chars: int = 0,
        strict_add_intent: bool = False,
    ):
        self.store = store if store is not None else EntryStore()
        self.llm_extractor = llm_extractor
        self.extraction_config = extraction_config or ExtractionConfig()
        self.engine = QueryEngine(self.store, search_config, self.extraction_config)
        self.quick_save_max_chars = quick_save_max_chars
        self.strict_add_intent = strict_add_intent

    @classmethod
    def from_config(cls, config, store: EntryStore | None = None) -> JournalAssistant:
        """Build an assistant from ``llm.*`` and ``journal.*`` config keys."""
        from jotbot.core.llm import LLMClient

        client = LLMClient.from_config(config, system_prompt=SYSTEM_PROMPT)
        if client is None:
            logger.info("No llm.model configured; using pattern extraction only")
        return cls(
            store=store,
            llm_extractor=LLMItemExtractor(client) if client else None,
            extraction_config=ExtractionConfig.from_config(config),
            search_config=SearchConfig.from_config(config),
            quick_save_max_chars=int(config.get("journal.quick_save_max_chars", 0) or 0),
            strict_add_intent=bool(config.get("journal.strict_add_intent", False)),
        )

    def handle(self, message: str) -> AssistantReply:
        """Handle one user message.

        Raises:
            ValueError: If the message is empty or blank.
        """
        text = str(message or "").strip()
        if not text:
            raise ValueError("No message provided")
        logger.debug(f"Received: {truncate_text(text, 80)}")

        if 0 < len(text) <= self.quick_save_max_chars and not looks_like_question(text):
            items = fallback_extract_items(text, self.extraction_config)
            entry = self.store.append(text, items=items)
            logger.info(f"Quick-saved short message with items: {list(entry.items)}")
            return AssistantReply(
                intent=Intent.ADD if entry.items else Intent.NOTE,
                message=f"Saved to journal: {entry.content}",
                entry=entry,
                items=list(entry.items),
                source=SOURCE_FALLBACK,
            )

        intent = classify(text, strict=self.strict_add_intent)
        if intent is Intent.ADD:
            return self._add(text)
        if intent is Intent.QUERY:
            return self._query(text)

        entry = self.store.append(text)
        logger.info("Saved plain note")
        return AssistantReply(intent=Intent.NOTE, message=f"Saved to journal: {entry.content}", entry=entry)

    def _add(self, text: str) -> AssistantReply:
        logger.info("Detected add intent")
        warning = None
        if self.llm_extractor is not None:
            items = self.llm_extractor.extract(text)
            if items is not None:
                entry = self.store.append(text, items=items)
                logger.info(f"Saved via LLM items: {list(entry.items)}")
                return AssistantReply(
                    intent=Intent.ADD,
                    message=f"Saved items: {', '.join(entry.items)}",
                    entry=entry,
                    items=list(entry.items),
                    source=SOURCE_LLM,
                )
            warning = "LLM extraction failed; used fallback extractor."
            logger.warning(warning)

        items = fallback_extract_items(text, self.extraction_config)
        entry = self.store.append(text, items=items)
        logger.info(f"Saved fallback items: {list(entry.items)}")
        return AssistantReply(
            intent=Intent.ADD,
            message=f"Saved to journal (fallback): {entry.content}",
            entry=entry,
            items=list(entry.items),
            source=SOURCE_FALLBACK,
            warning=warning,
        )

    def _query(self, text: str) -> AssistantReply:
        logger.info("Detected list query")
        result = self.engine.search(text)
        return AssistantReply(
            intent=Intent.QUERY,
            message=f"Found {len(result)} matching entries.",
            results=result.entries,
            items=result.items,
        )
