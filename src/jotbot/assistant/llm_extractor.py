"""Item extraction through an LLM.

The model is an optional collaborator: :meth:`LLMItemExtractor.extract`
returns ``None`` whenever it cannot produce a usable item list, and the
caller falls back to the pattern extractor.
"""

from __future__ import annotations

import json
import re
from typing import Any, Protocol

from loguru import logger

from jotbot.core.exceptions import ExtractionError
from jotbot.core.utils.text import truncate_text

SYSTEM_PROMPT = (
    "You are a journaling assistant whose job is to extract item names from user text "
    "when the user wants to add things to a shopping or to-do list. "
    "Return JSON only when extracting items."
)

PROMPT_TEMPLATE = """User message:
\"\"\"{message}\"\"\"

Return EXACTLY one JSON object (no extra text) between JSON_START and JSON_END:

JSON_START
{{"items": ["item1", "item2", ...], "content": "original user text"}}
JSON_END

- Items should be lowercase, singular where possible.
- If none found, return {{"items": [], "content": "..."}}
"""

_MARKED_JSON = re.compile(r"JSON_START\s*(.*?)\s*JSON_END", re.DOTALL)
_BARE_JSON = re.compile(r"(\{.*\})", re.DOTALL)


class TextCompleter(Protocol):
    """Anything that turns a prompt into reply text (``LLMClient`` does)."""

    def complete(self, prompt: str) -> str: ...


def parse_items_response(raw: str, *, strict: bool = False) -> list[str] | None:
    """Pull the ``items`` list out of a model reply.

    Looks for a ``JSON_START ... JSON_END`` block first, then the widest
    ``{...}`` span.

    Args:
        raw: Model reply text.
        strict: Raise instead of returning ``None`` on unusable replies.

    Returns:
        Lowercased, trimmed, non-empty items (possibly an empty list), or
        ``None`` when the reply has no parseable ``items`` list.

    Raises:
        ExtractionError: In strict mode, when parsing fails.
    """
    raw = (raw or "").strip()
    match = _MARKED_JSON.search(raw) or _BARE_JSON.search(raw)
    if not match:
        if strict:
            raise ExtractionError("No JSON object in model response")
        return None

    try:
        parsed: Any = json.loads(match.group(1).strip())
    except json.JSONDecodeError as e:
        if strict:
            raise ExtractionError(f"Invalid JSON in model response: {e}") from e
        return None

    if not isinstance(parsed, dict) or not isinstance(parsed.get("items"), list):
        if strict:
            raise ExtractionError("Model response has no 'items' list")
        return None

    items: list[str] = []
    for item in parsed["items"]:
        if item is None:
            continue
        value = str(item).strip().lower()
        if value and value not in items:
            items.append(value)
    return items


class LLMItemExtractor:
    """Ask a model for the items in a message.

    Args:
        client: A :class:`TextCompleter`, normally :class:`jotbot.core.llm.LLMClient`.
    """

    def __init__(self, client: TextCompleter):
        self.client = client

    @staticmethod
    def build_prompt(message: str) -> str:
        return PROMPT_TEMPLATE.format(message=message)

    def extract(self, message: str) -> list[str] | None:
        """Return model-extracted items, or ``None`` if the call or parse failed."""
        try:
            raw = self.client.complete(self.build_prompt(message))
        except Exception as e:
            logger.error(f"LLM item extraction failed ({type(e).__name__}): {e}")
            return None

        logger.debug(f"LLM raw: {truncate_text(raw, 200)}")
        items = parse_items_response(raw)
        if items is None:
            logger.warning("Could not parse LLM output")
        return items
