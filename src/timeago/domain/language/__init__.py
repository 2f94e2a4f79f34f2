"""Import built-in packs to populate the translation table on package import."""
from .models import LanguagePack, UNITS
from .registry import (  # re-export
    register_language, get_language, is_supported, list_languages, translation_table,
)
from . import packs  # noqa: F401

__all__ = [
    'LanguagePack', 'UNITS', 'register_language', 'get_language',
    'is_supported', 'list_languages', 'translation_table',
]
