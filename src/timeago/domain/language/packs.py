"""Built-in language packs, registered on import."""
from __future__ import annotations

from .registry import register_language

ENGLISH = register_language("en", {
    "year": ("year", "years"),
    "month": ("month", "months"),
    "week": ("week", "weeks"),
    "day": ("day", "days"),
    "hour": ("hour", "hours"),
    "minute": ("minute", "minutes"),
    "second": ("second", "seconds"),
    "ago": "ago",
    "just_now": "just now",
})

# Turkish does not inflect the unit after a numeral.
TURKISH = register_language("tr", {
    "year": ("yıl", "yıl"),
    "month": ("ay", "ay"),
    "week": ("hafta", "hafta"),
    "day": ("gün", "gün"),
    "hour": ("saat", "saat"),
    "minute": ("dakika", "dakika"),
    "second": ("saniye", "saniye"),
    "ago": "önce",
    "just_now": "az önce",
})

__all__ = ["ENGLISH", "TURKISH"]
