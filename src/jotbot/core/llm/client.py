"""
LLM Client — thin completion wrapper over LiteLLM.

Model names follow litellm conventions, e.g. ``"gemini/gemini-2.5-flash"``,
``"gpt-4o-mini"``, ``"anthropic/claude-sonnet-4-20250514"``,
``"ollama/llama3"``.
"""

from time import time
from typing import Any

from loguru import logger

from jotbot.core.exceptions import LLMError

from .utils import safe_get_content


class LLMClient:
    """Single-shot completion client backed by LiteLLM.

    Transient provider errors are retried ``num_retries`` times by litellm
    itself. Errors after the last retry propagate to the caller.
    """

    def __init__(
        self,
        model: str,
        system_prompt: str | None = None,
        temperature: float = 0.0,
        max_tokens: int = 300,
        timeout: int = 30,
        num_retries: int = 1,
    ):
        if not model or not model.strip():
            raise ValueError("LLMClient requires a model name")
        self.model = model.strip()
        self.system_prompt = system_prompt
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout = timeout
        self.num_retries = num_retries

        logger.debug(f"LLMClient: model={self.model}  max_tokens={self.max_tokens}  retries={self.num_retries}")

    @classmethod
    def from_config(cls, config, system_prompt: str | None = None) -> "LLMClient | None":
        """Build a client from ``llm.*`` config keys; None when no model is set."""
        model = (config.get("llm.model") or "").strip()
        if not model:
            return None
        return cls(
            model=model,
            system_prompt=system_prompt,
            temperature=float(config.get("llm.temperature", 0.0)),
            max_tokens=int(config.get("llm.max_tokens", 300)),
            timeout=int(config.get("llm.timeout", 30)),
            num_retries=int(config.get("llm.num_retries", 1)),
        )

    def completion(self, messages: list[dict[str, Any]]) -> Any:
        """Call ``litellm.completion`` and return the raw response.

        Raises:
            ImportError: If litellm is not installed.
        """
        try:
            import litellm
        except ImportError:
            raise ImportError("Install LLM support with: pip install jotbot[llm]") from None

        return litellm.completion(**self._build_completion_kwargs(messages))

    def complete(self, prompt: str) -> str:
        """Send one user prompt (plus the system prompt) and return the reply text.

        Raises:
            LLMError: If the model returns no text.
        """
        start = time()
        messages: list[dict[str, Any]] = []
        if self.system_prompt and self.system_prompt.strip():
            messages.append({"role": "system", "content": self.system_prompt})
        messages.append({"role": "user", "content": prompt})

        response = self.completion(messages)
        text = safe_get_content(response).strip()
        if not text:
            raise LLMError(f"Empty response from {self.model}")
        logger.debug(f"LLMClient: {len(text)} chars in {time() - start:.2f}s")
        return text

    def _build_completion_kwargs(self, messages: list[dict[str, Any]]) -> dict[str, Any]:
        return {
            "model": self.model,
            "messages": messages,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
            "timeout": self.timeout,
            "num_retries": self.num_retries,
        }
