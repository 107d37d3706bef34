"""jotbot — a conversational journaling assistant with list extraction and lookup."""

__version__ = "0.1.0"
