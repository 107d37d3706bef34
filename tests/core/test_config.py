"""Tests for jotbot.core.config and jotbot.core.config_schema."""

import json
import os

import pytest
import yaml

from jotbot.core.config import Config, get_config, reset_config
from jotbot.core.config_schema import JotbotConfig
from jotbot.core.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def _reset_singleton():
    """Reset config singleton between tests."""
    reset_config()
    yield
    reset_config()


class TestConfig:
    def test_defaults(self):
        config = Config()
        assert config.get("llm.model") == ""
        assert config.get("llm.num_retries") == 1
        assert config.get("journal.max_fallback_items") == 6
        assert config.get("journal.fold_keywords") is False

    def test_yaml_config_file(self, tmp_config_file):
        config = Config(config_file=tmp_config_file)
        assert config.get("llm.num_retries") == 2
        assert config.get("journal.max_fallback_items") == 4
        # untouched keys keep defaults
        assert config.get("llm.timeout") == 30

    def test_json_config_file(self, tmp_dir):
        path = os.path.join(tmp_dir, "config.json")
        with open(path, "w") as f:
            json.dump({"llm": {"model": "gpt-4o-mini"}}, f)
        config = Config(config_file=path)
        assert config.get("llm.model") == "gpt-4o-mini"

    def test_missing_file_raises(self, tmp_dir):
        with pytest.raises(ConfigurationError, match="not found"):
            Config(config_file=os.path.join(tmp_dir, "nope.yaml"))

    def test_unsupported_extension_raises(self, tmp_dir):
        path = os.path.join(tmp_dir, "config.toml")
        with open(path, "w") as f:
            f.write("x = 1")
        with pytest.raises(ConfigurationError, match="Unsupported"):
            Config(config_file=path)

    def test_non_mapping_file_raises(self, tmp_dir):
        path = os.path.join(tmp_dir, "config.yaml")
        with open(path, "w") as f:
            yaml.dump(["a", "b"], f)
        with pytest.raises(ConfigurationError, match="mapping"):
            Config(config_file=path)

    def test_env_overrides_file(self, tmp_config_file, monkeypatch):
        monkeypatch.setenv("JOTBOT_JOURNAL__MAX_FALLBACK_ITEMS", "5")
        monkeypatch.setenv("JOTBOT_JOURNAL__FOLD_KEYWORDS", "false")
        monkeypatch.setenv("JOTBOT_LLM__MODEL", "gemini/gemini-2.5-flash")
        config = Config(config_file=tmp_config_file)
        assert config.get("journal.max_fallback_items") == 5
        assert config.get("journal.fold_keywords") is False
        assert config.get("llm.model") == "gemini/gemini-2.5-flash"

    def test_env_float_and_new_keys(self, monkeypatch):
        monkeypatch.setenv("JOTBOT_LLM__TEMPERATURE", "0.5")
        monkeypatch.setenv("JOTBOT_CUSTOM__NAME", "value")
        config = Config()
        assert config.get("llm.temperature") == 0.5
        assert config.get("custom.name") == "value"

    def test_env_bad_bool_raises(self, monkeypatch):
        monkeypatch.setenv("JOTBOT_JOURNAL__FOLD_KEYWORDS", "maybe")
        with pytest.raises(ConfigurationError, match="boolean"):
            Config()

    def test_custom_env_prefix(self, monkeypatch):
        monkeypatch.setenv("MYAPP_LLM__MODEL", "gpt-4o")
        config = Config(env_prefix="MYAPP_")
        assert config.get("llm.model") == "gpt-4o"

    def test_get_missing_key(self):
        config = Config()
        assert config.get("nonexistent.key") is None
        assert config.get("nonexistent.key", "fallback") == "fallback"

    def test_set(self):
        config = Config()
        config.set("custom.nested.value", 42)
        assert config.get("custom.nested.value") == 42

    def test_extra_defaults(self):
        config = Config(defaults={"journal": {"strict_add_intent": True}})
        assert config.get("journal.strict_add_intent") is True
        assert config.get("journal.max_fallback_items") == 6


class TestValidated:
    def test_defaults_validate(self):
        settings = Config().validated()
        assert isinstance(settings, JotbotConfig)
        assert settings.llm.enabled is False
        assert settings.journal.max_fallback_items == 6
        assert settings.logging.level == "WARNING"

    def test_llm_enabled_with_model(self):
        config = Config()
        config.set("llm.model", "gpt-4o-mini")
        assert config.validated().llm.enabled is True

    def test_invalid_value_raises_configuration_error(self):
        config = Config()
        config.set("journal.max_fallback_items", 0)
        with pytest.raises(ConfigurationError):
            config.validated()

    def test_unknown_log_level(self):
        config = Config()
        config.set("logging.level", "chatty")
        with pytest.raises(ConfigurationError):
            config.validated()

    def test_log_level_uppercased(self):
        config = Config()
        config.set("logging.level", "debug")
        assert config.validated().logging.level == "DEBUG"


class TestGetConfig:
    def test_singleton(self):
        c1 = get_config()
        c2 = get_config()
        assert c1 is c2

    def test_reset_clears_singleton(self):
        c1 = get_config()
        reset_config()
        c2 = get_config()
        assert c1 is not c2
