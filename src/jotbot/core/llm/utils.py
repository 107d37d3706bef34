"""Utility functions for LLM response handling."""

from typing import Any

from loguru import logger


def safe_get_content(response: Any, default: str = "") -> str:
    """Safely extract text content from an LLM response.

    Guards against empty ``choices`` lists or missing ``message``/``content``
    attributes that can occur with malformed provider responses.
    """
    choices = getattr(response, "choices", None)
    if not choices:
        logger.warning("LLM response has no choices; returning default")
        return default
    message = getattr(choices[0], "message", None)
    if message is None:
        logger.warning("LLM response choice has no message; returning default")
        return default
    content = getattr(message, "content", None)
    if content is None:
        return default
    return extract_text_from_response(content)


def extract_text_from_response(content: Any) -> str:
    """Extract text from message content.

    LiteLLM normalises responses to OpenAI format, so this is usually a
    string; content-block lists (Gemini/Anthropic) are joined.
    """
    if isinstance(content, str):
        return content

    if isinstance(content, list):
        text_parts = []
        for part in content:
            if isinstance(part, str):
                text_parts.append(part)
            elif isinstance(part, dict):
                if part.get("type") in ("tool_use", "tool_result", "thinking"):
                    continue
                if "text" in part:
                    text_parts.append(part["text"])
            elif hasattr(part, "text"):
                text_parts.append(part.text)
        return "".join(text_parts)

    if hasattr(content, "text"):
        return content.text

    return str(content) if content else ""
