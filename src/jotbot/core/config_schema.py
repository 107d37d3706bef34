"""Pydantic models for config validation.

Opt-in schema validation for ``Config.config_data``.  Call
``Config.validated()`` to obtain a typed ``JotbotConfig``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LLMSettings(BaseModel):
    """Settings for the optional item-extraction model."""

    model: str = ""
    temperature: float = Field(default=0.0, ge=0.0, le=2.0)
    max_tokens: int = Field(default=300, gt=0)
    timeout: int = Field(default=30, gt=0)
    num_retries: int = Field(default=1, ge=0)

    @property
    def enabled(self) -> bool:
        return bool(self.model.strip())


class JournalSettings(BaseModel):
    """Extraction and lookup knobs."""

    max_fallback_items: int = Field(default=6, ge=1)
    max_input_chars: int = Field(default=2000, gt=0)
    fold_keywords: bool = False
    quick_save_max_chars: int = Field(default=0, ge=0)
    strict_add_intent: bool = False


class LoggingSettings(BaseModel):
    level: str = "WARNING"
    file: str | None = None

    @field_validator("level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {v!r}")
        return level


class JotbotConfig(BaseModel):
    """Root configuration model.

    Uses ``extra="allow"`` so consumers can bolt on custom sections
    without touching this schema.
    """

    model_config = ConfigDict(extra="allow")

    llm: LLMSettings = LLMSettings()
    journal: JournalSettings = JournalSettings()
    logging: LoggingSettings = LoggingSettings()
