"""Exception types raised by the formatter and the language registry."""
from __future__ import annotations


class TimeAgoError(Exception):
    """Base exception for the package."""


class UnsupportedLanguageError(TimeAgoError, LookupError):
    """Raised when a language code has no registered language pack."""

    def __init__(self, language: str):
        self.language = language
        super().__init__(f"Language '{language}' is not supported.")


class InvalidLanguagePackError(TimeAgoError, ValueError):
    """Raised when a language pack fails validation on registration."""

    def __init__(self, language: str, reason: str):
        self.language = language
        self.reason = reason
        super().__init__(f"Invalid language pack '{language}': {reason}")


__all__ = ["TimeAgoError", "UnsupportedLanguageError", "InvalidLanguagePackError"]
