"""Exceptions raised by Jaegerlite.

Decoding a trace context never raises: ``extract`` and ``from_stream``
catch ``HexParseError`` and return the invalid context instead. These
exceptions surface when building value types directly or loading config.
"""

from __future__ import annotations


class JaegerliteError(Exception):
    """Base exception; ``details`` holds the offending values."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class ConfigError(JaegerliteError):
    """
    Raised by ``load_config`` for unreadable TOML, environment variables
    that do not convert, or rates and header names that fail validation.
    """


class ValidationError(JaegerliteError):
    """Raised when a trace id word, span id, parent id or flags byte is out of range."""


class HexParseError(ValidationError):
    """Raised when a hex field is empty, longer than its width, or has a non-hex character."""
