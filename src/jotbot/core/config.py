"""
Hierarchical configuration management.

Loads configuration from multiple sources with this precedence (highest wins):
    1. Environment variables (JOTBOT_SECTION__KEY)
    2. Config file (YAML or JSON)
    3. Built-in defaults

Usage:
    config = Config(config_file="jotbot.yaml")

    config.get("llm.model")                  # "" means no LLM collaborator
    config.get("journal.max_fallback_items")
"""

import json
import os
from typing import Any

import yaml

from .exceptions import ConfigurationError

_DEFAULT_ENV_PREFIX = "JOTBOT_"

# Env values arrive as strings; these keys are coerced back to their default's type.
_BOOL_STRINGS = {"1": True, "true": True, "yes": True, "on": True, "0": False, "false": False, "no": False, "off": False}


class Config:
    """
    Central configuration manager.

    Loads and merges configuration from defaults, a config file, and
    environment variables. Env vars use double-underscore to denote nesting:
    JOTBOT_LLM__MODEL=gemini/gemini-2.5-flash -> config["llm"]["model"]
    """

    def __init__(
        self,
        config_file: str | None = None,
        env_prefix: str = _DEFAULT_ENV_PREFIX,
        defaults: dict[str, Any] | None = None,
    ):
        """
        Args:
            config_file: Path to YAML or JSON configuration file.
            env_prefix: Prefix for environment variable overrides.
            defaults: Additional default values to merge (consumer-specific).
        """
        self.config_file = config_file
        self.env_prefix = env_prefix or ""
        self._extra_defaults = defaults or {}
        self.config_data: dict[str, Any] = {}

        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from all sources."""
        self.config_data = self._get_default_config()

        if self._extra_defaults:
            self._update_dict(self.config_data, self._extra_defaults)

        if self.config_file:
            if not os.path.exists(self.config_file):
                raise ConfigurationError(f"Config file not found: {self.config_file}")
            file_config = self._load_file(self.config_file)
            self._update_dict(self.config_data, file_config)

        # Env vars override everything
        self._load_from_env()

    @staticmethod
    def _get_default_config() -> dict[str, Any]:
        return {
            "llm": {
                "model": "",
                "temperature": 0.0,
                "max_tokens": 300,
                "timeout": 30,
                "num_retries": 1,
            },
            "journal": {
                "max_fallback_items": 6,
                "max_input_chars": 2000,
                "fold_keywords": False,
                "quick_save_max_chars": 0,
                "strict_add_intent": False,
            },
            "logging": {
                "level": "WARNING",
                "file": None,
            },
        }

    @staticmethod
    def _load_file(path: str) -> dict[str, Any]:
        """Load a YAML or JSON config file."""
        ext = os.path.splitext(path)[1].lower()
        with open(path) as f:
            try:
                if ext in (".yaml", ".yml"):
                    data = yaml.safe_load(f) or {}
                elif ext == ".json":
                    data = json.load(f)
                else:
                    raise ConfigurationError(f"Unsupported config file type: {ext or path}")
            except (yaml.YAMLError, json.JSONDecodeError) as e:
                raise ConfigurationError(f"Could not parse {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file must contain a mapping: {path}")
        return data

    def _update_dict(self, target: dict, source: dict) -> None:
        """Recursively merge source into target."""
        for key, value in source.items():
            if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                self._update_dict(target[key], value)
            else:
                target[key] = value

    def _load_from_env(self) -> None:
        """Override config values from environment variables."""
        if not self.env_prefix:
            return
        for env_key, env_value in os.environ.items():
            if not env_key.startswith(self.env_prefix):
                continue
            config_key = env_key[len(self.env_prefix) :].lower()
            key_parts = config_key.split("__")

            current = self.config_data
            for part in key_parts[:-1]:
                if not isinstance(current.get(part), dict):
                    current[part] = {}
                current = current[part]
            current[key_parts[-1]] = self._coerce(current.get(key_parts[-1]), env_value)

    @staticmethod
    def _coerce(existing: Any, raw: str) -> Any:
        if isinstance(existing, bool):
            lowered = raw.strip().lower()
            if lowered not in _BOOL_STRINGS:
                raise ConfigurationError(f"Expected a boolean, got {raw!r}")
            return _BOOL_STRINGS[lowered]
        if isinstance(existing, int):
            try:
                return int(raw)
            except ValueError as e:
                raise ConfigurationError(f"Expected an integer, got {raw!r}") from e
        if isinstance(existing, float):
            try:
                return float(raw)
            except ValueError as e:
                raise ConfigurationError(f"Expected a number, got {raw!r}") from e
        return raw

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a config value by dot-notation path.

        Args:
            key_path: e.g. "llm.model", "journal.fold_keywords"
            default: Returned when key is not found.
        """
        parts = key_path.split(".")
        current = self.config_data
        for part in parts:
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]
        return current

    def set(self, key_path: str, value: Any) -> None:
        """Set a config value by dot-notation path, creating intermediate dicts."""
        parts = key_path.split(".")
        current = self.config_data
        for part in parts[:-1]:
            if part not in current:
                current[part] = {}
            current = current[part]
        current[parts[-1]] = value

    def validated(self):
        """Return the config as a validated :class:`JotbotConfig`.

        Raises:
            ConfigurationError: If any section fails schema validation.
        """
        from pydantic import ValidationError

        from .config_schema import JotbotConfig

        try:
            return JotbotConfig.model_validate(self.config_data)
        except ValidationError as e:
            raise ConfigurationError(str(e)) from e


# Module-level singleton (CLI only; library objects take explicit configs)
_config_instance: Config | None = None


def get_config(config_file: str | None = None, env_prefix: str = _DEFAULT_ENV_PREFIX) -> Config:
    """Get or create the global Config singleton."""
    global _config_instance
    if _config_instance is None:
        _config_instance = Config(config_file=config_file, env_prefix=env_prefix)
    return _config_instance


def reset_config() -> None:
    """Reset the global Config singleton (useful for testing)."""
    global _config_instance
    _config_instance = None
