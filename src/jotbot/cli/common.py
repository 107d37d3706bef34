"""Shared setup logic for CLI commands."""

from __future__ import annotations

import click

from jotbot.core.config import Config
from jotbot.core.exceptions import ConfigurationError
from jotbot.core.utils.logging import setup_logging


def load_config(config_file: str | None, log_level: str | None = None) -> Config:
    """Load and validate config, then configure logging from it."""
    try:
        config = Config(config_file=config_file)
        if log_level:
            config.set("logging.level", log_level)
        settings = config.validated()
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e

    setup_logging(level=settings.logging.level, log_file=settings.logging.file)
    return config


def create_assistant(config: Config):
    """Create a JournalAssistant for this process."""
    from jotbot.assistant import JournalAssistant

    return JournalAssistant.from_config(config)
