"""Tests for jotbot.assistant.service (JournalAssistant dispatch)."""

from unittest.mock import MagicMock

import pytest

from jotbot.assistant.llm_extractor import LLMItemExtractor
from jotbot.assistant.service import JournalAssistant
from jotbot.core.config import Config
from jotbot.journal.intent import Intent


def _llm(reply=None, error=None):
    client = MagicMock()
    if error is not None:
        client.complete.side_effect = error
    else:
        client.complete.return_value = reply
    return LLMItemExtractor(client), client


@pytest.fixture
def assistant(store):
    return JournalAssistant(store=store)


class TestDispatch:
    def test_add_without_llm_uses_fallback(self, assistant):
        reply = assistant.handle("Add eggs and milk to my shopping list")
        assert reply.intent is Intent.ADD
        assert reply.entry.items == ("egg", "milk")
        assert reply.source == "fallback"
        assert reply.warning is None
        assert reply.message.startswith("Saved to journal (fallback)")

    def test_query_lists_items(self, assistant):
        assistant.handle("Add eggs and milk to my shopping list")
        assistant.handle("I need bread for the grocery list")
        reply = assistant.handle("What's on my shopping list?")
        assert reply.intent is Intent.QUERY
        assert len(reply.results) == 2
        assert reply.items == ["bread", "egg", "milk"]
        assert reply.message == "Found 2 matching entries."
        assert reply.entry is None

    def test_query_does_not_store(self, assistant):
        assistant.handle("what's on my to-do list")
        assert len(assistant.store) == 0

    def test_plain_note(self, assistant):
        reply = assistant.handle("Had a lovely walk by the river")
        assert reply.intent is Intent.NOTE
        assert reply.entry.items == ()
        assert reply.entry.keywords == ("lovely", "walk", "river")

    def test_loose_verb_goes_to_add(self, assistant):
        reply = assistant.handle("remind me to buy bread")
        assert reply.intent is Intent.ADD
        assert reply.entry.items == ("bread",)

    def test_buy_question_shadowed_by_loose_add(self, assistant):
        # "buy" alone is enough for the add branch, so this list query is stored
        reply = assistant.handle("what should i buy")
        assert reply.intent is Intent.ADD
        assert len(assistant.store) == 1

    def test_strict_add_intent_keeps_buy_question_a_query(self, store):
        assistant = JournalAssistant(store=store, strict_add_intent=True)
        reply = assistant.handle("what should i buy")
        assert reply.intent is Intent.QUERY
        assert len(store) == 0

    def test_strict_add_intent(self, store):
        assistant = JournalAssistant(store=store, strict_add_intent=True)
        reply = assistant.handle("remind me to buy bread")
        assert reply.intent is Intent.NOTE
        assert reply.entry.items == ()

    def test_blank_message_rejected(self, assistant):
        with pytest.raises(ValueError, match="No message"):
            assistant.handle("   ")
        with pytest.raises(ValueError):
            assistant.handle(None)

    def test_message_is_trimmed(self, assistant):
        reply = assistant.handle("  a quiet evening  ")
        assert reply.entry.content == "a quiet evening"


class TestLLMPath:
    def test_llm_items_used(self, store):
        extractor, client = _llm('JSON_START {"items": ["Eggs", "Oat Milk"]} JSON_END')
        assistant = JournalAssistant(store=store, llm_extractor=extractor)
        reply = assistant.handle("Add eggs and oat milk to my shopping list")
        assert reply.source == "llm"
        assert reply.entry.items == ("eggs", "oat milk")
        assert reply.message == "Saved items: eggs, oat milk"
        client.complete.assert_called_once()

    def test_llm_failure_falls_back(self, store):
        extractor, _ = _llm(error=ConnectionError("down"))
        assistant = JournalAssistant(store=store, llm_extractor=extractor)
        reply = assistant.handle("Add eggs and milk to my shopping list")
        assert reply.source == "fallback"
        assert reply.entry.items == ("egg", "milk")
        assert "fallback" in reply.warning

    def test_unparseable_llm_output_falls_back(self, store):
        extractor, _ = _llm("Sure, eggs and milk!")
        assistant = JournalAssistant(store=store, llm_extractor=extractor)
        reply = assistant.handle("Add eggs and milk to my shopping list")
        assert reply.source == "fallback"
        assert reply.entry.items == ("egg", "milk")
        assert reply.warning

    def test_llm_not_called_for_notes_or_queries(self, store):
        extractor, client = _llm('{"items": []}')
        assistant = JournalAssistant(store=store, llm_extractor=extractor)
        assistant.handle("a quiet evening")
        assistant.handle("what's on my shopping list")
        client.complete.assert_not_called()


class TestQuickSave:
    def test_short_message_saved_with_items(self, store):
        assistant = JournalAssistant(store=store, quick_save_max_chars=30)
        reply = assistant.handle("milk")
        assert reply.intent is Intent.ADD
        assert reply.entry.items == ("milk",)
        assert reply.source == "fallback"

    def test_questions_skip_quick_save(self, store):
        assistant = JournalAssistant(store=store, quick_save_max_chars=30)
        reply = assistant.handle("what's on my list?")
        assert reply.intent is Intent.QUERY

    def test_disabled_by_default(self, assistant):
        reply = assistant.handle("milk")
        assert reply.intent is Intent.NOTE
        assert reply.entry.items == ()


class TestReplyToDict:
    def test_add_reply(self, assistant):
        data = assistant.handle("Add eggs to my shopping list").to_dict()
        assert data["intent"] == "add"
        assert data["entry"]["items"] == ["egg"]
        assert data["source"] == "fallback"
        assert "results" not in data

    def test_query_reply(self, assistant):
        assistant.handle("Add eggs to my shopping list")
        data = assistant.handle("shopping").to_dict()
        assert data["intent"] == "query"
        assert data["items"] == ["egg"]
        assert data["results"][0]["content"] == "Add eggs to my shopping list"


class TestFromConfig:
    def test_without_model(self):
        assistant = JournalAssistant.from_config(Config())
        assert assistant.llm_extractor is None
        assert assistant.quick_save_max_chars == 0

    def test_with_model_and_journal_settings(self):
        config = Config()
        config.set("llm.model", "gemini/gemini-2.5-flash")
        config.set("journal.fold_keywords", True)
        config.set("journal.max_fallback_items", 3)
        assistant = JournalAssistant.from_config(config)
        assert assistant.llm_extractor is not None
        assert assistant.llm_extractor.client.model == "gemini/gemini-2.5-flash"
        assert assistant.engine.config.fold_keywords is True
        assert assistant.extraction_config.max_scan_items == 3
