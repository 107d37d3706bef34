"""
LLM client and utilities — powered by LiteLLM.

Requires ``jotbot[llm]`` (i.e. ``litellm``).
"""

from .client import LLMClient
from .utils import extract_text_from_response, safe_get_content

__all__ = [
    "LLMClient",
    "extract_text_from_response",
    "safe_get_content",
]
