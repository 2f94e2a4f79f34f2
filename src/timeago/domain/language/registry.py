"""Translation table & lookup utilities."""
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Union
from pydantic import ValidationError

from ..errors import InvalidLanguagePackError, UnsupportedLanguageError
from .models import LanguagePack

_TABLE: Dict[str, LanguagePack] = {}


def normalize_code(code: str) -> str:
    return str(code or "").strip().lower()


def register_language(
    code: str,
    pack: Union[LanguagePack, Mapping[str, Any]],
    *,
    replace: bool = False,
) -> LanguagePack:
    key = normalize_code(code)
    if not key:
        raise ValueError("language code must be a non-empty string")
    if key in _TABLE and not replace:
        raise ValueError(f"Language '{key}' is already registered")
    if not isinstance(pack, LanguagePack):
        try:
            pack = LanguagePack.model_validate(dict(pack))
        except ValidationError as e:
            raise InvalidLanguagePackError(key, str(e)) from e
    _TABLE[key] = pack
    return pack


def get_language(code: str) -> LanguagePack:
    key = normalize_code(code)
    try:
        return _TABLE[key]
    except KeyError:
        raise UnsupportedLanguageError(code) from None


def is_supported(code: str) -> bool:
    return normalize_code(code) in _TABLE


def list_languages() -> List[str]:
    return sorted(_TABLE)


def translation_table() -> Mapping[str, LanguagePack]:
    """Read-only live view of the registered packs."""
    return MappingProxyType(_TABLE)


__all__ = [
    "register_language", "get_language", "is_supported",
    "list_languages", "translation_table", "normalize_code",
]
