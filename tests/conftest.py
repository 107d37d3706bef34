"""Shared test fixtures for jotbot."""

import os
import sys
import tempfile
from datetime import datetime, timedelta, timezone

import pytest
from loguru import logger

from jotbot.journal.store import EntryStore


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def tmp_config_file(tmp_dir):
    """Create a temporary YAML config file."""
    import yaml

    config_data = {
        "llm": {"model": "", "num_retries": 2},
        "journal": {"max_fallback_items": 4, "fold_keywords": True},
    }
    config_path = os.path.join(tmp_dir, "config.yaml")
    with open(config_path, "w") as f:
        yaml.dump(config_data, f)
    return config_path


@pytest.fixture(autouse=True)
def _clear_jotbot_env(monkeypatch):
    """Keep developer JOTBOT_* env vars out of tests."""
    for key in list(os.environ):
        if key.startswith("JOTBOT_"):
            monkeypatch.delenv(key)


@pytest.fixture
def fixed_clock():
    """A clock that advances one second per call."""
    start = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)
    ticks = iter(range(10_000))
    return lambda: start + timedelta(seconds=next(ticks))


@pytest.fixture
def store(fixed_clock):
    return EntryStore(clock=fixed_clock)


@pytest.fixture(autouse=True)
def _restore_loguru():
    """CLI tests point loguru at CliRunner's streams; put stderr back afterwards."""
    yield
    logger.remove()
    logger.add(sys.stderr, level="WARNING")
