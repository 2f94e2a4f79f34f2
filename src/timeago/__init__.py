"""Human-readable relative time phrases ("3 hours ago", "just now")."""
from .domain.errors import InvalidLanguagePackError, TimeAgoError, UnsupportedLanguageError
from .domain.formatter import TimeAgo
from .domain.language import (
    LanguagePack, get_language, is_supported, list_languages, register_language,
)

__all__ = [
    "TimeAgo", "LanguagePack", "register_language", "get_language",
    "is_supported", "list_languages", "TimeAgoError",
    "UnsupportedLanguageError", "InvalidLanguagePackError",
]
