"""Message dispatch: turns a raw chat message into a stored entry or a list lookup."""

from .llm_extractor import LLMItemExtractor, parse_items_response
from .service import AssistantReply, JournalAssistant

__all__ = [
    "AssistantReply",
    "JournalAssistant",
    "LLMItemExtractor",
    "parse_items_response",
]
