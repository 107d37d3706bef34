"""
jotbot exception hierarchy.

All jotbot exceptions inherit from JotbotError. The text-understanding core
never raises; these cover configuration and the optional LLM collaborator.
"""


class JotbotError(Exception):
    """Base exception class for all jotbot errors."""


class ConfigurationError(JotbotError):
    """Raised for configuration errors (missing keys, invalid values)."""


class APIError(JotbotError):
    """Raised for API communication errors."""


class LLMError(APIError):
    """Raised for LLM API errors."""


class ExtractionError(JotbotError):
    """Raised when a model response cannot be parsed into a list of items."""
