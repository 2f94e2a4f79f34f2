"""Relative time formatting.

Turns an epoch timestamp into a phrase such as ``"3 hours ago"`` or
``"just now"`` using a registered language pack. The tier thresholds are fixed
approximations (a month is 30 days, a year 365 days) and are not calendar
exact.
"""
from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Mapping, Optional, Tuple, Union

from ..config.settings import DEFAULT_LANGUAGE, TimeAgoSettings, load_settings
from ..infrastructure.clock import system_clock
from ..infrastructure.logging.structured_logging import error, init_logging, warning
from .errors import UnsupportedLanguageError
from .interfaces import Clock, DiagnosticSink
from .language import LanguagePack, translation_table
from .language.registry import normalize_code

MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800
MONTH = 2592000
YEAR = 31536000

# (exclusive upper bound, divisor, unit); the last tier is open-ended.
TIERS: Tuple[Tuple[Optional[int], int, str], ...] = (
    (HOUR, MINUTE, "minute"),
    (DAY, HOUR, "hour"),
    (WEEK, DAY, "day"),
    (MONTH, WEEK, "week"),
    (YEAR, MONTH, "month"),
    (None, YEAR, "year"),
)

Timestamp = Union[int, float, datetime]


def to_epoch_seconds(timestamp: Timestamp) -> int:
    """Coerce a supported timestamp value to whole epoch seconds.

    Naive datetimes are treated as UTC. Floats are truncated toward zero;
    NaN and infinities raise ValueError.
    """
    if isinstance(timestamp, bool):
        raise TypeError("timestamp must be an int, float or datetime, not bool")
    if isinstance(timestamp, datetime):
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=timezone.utc)
        return int(timestamp.timestamp())
    if isinstance(timestamp, float) and not math.isfinite(timestamp):
        raise ValueError(f"timestamp must be finite, got {timestamp!r}")
    if isinstance(timestamp, (int, float)):
        return int(timestamp)
    raise TypeError(f"timestamp must be an int, float or datetime, got {type(timestamp).__name__}")


def bucket(elapsed: int) -> Tuple[int, Optional[str]]:
    """Return ``(quantity, unit)``; unit is ``None`` for the just-now tier."""
    if elapsed < MINUTE:
        return 0, None
    for upper, divisor, unit in TIERS:
        if upper is None or elapsed < upper:
            return elapsed // divisor, unit
    raise AssertionError("unreachable")  # pragma: no cover


class TimeAgo:
    """Formats past timestamps relative to the current time."""

    def __init__(
        self,
        language: Optional[str] = None,
        language_support_enabled: bool = True,
        *,
        clock: Optional[Clock] = None,
        diagnostics: Optional[DiagnosticSink] = None,
        translations: Optional[Mapping[str, LanguagePack]] = None,
    ):
        self._language = normalize_code(language) if language is not None else DEFAULT_LANGUAGE
        self._language_support_enabled = bool(language_support_enabled)
        self._clock: Clock = clock or system_clock
        self._diagnostics: DiagnosticSink = diagnostics or warning
        if translations is None:
            translations = translation_table()
        elif DEFAULT_LANGUAGE not in translations:
            raise ValueError(f"translations must include the default language '{DEFAULT_LANGUAGE}'")
        self._translations = translations

    @classmethod
    def from_settings(cls, settings: Optional[TimeAgoSettings] = None, **kwargs) -> "TimeAgo":
        settings = settings or load_settings()
        init_logging(settings.log_level, json_output=settings.log_json)
        return cls(settings.language, settings.language_support_enabled, **kwargs)

    @property
    def language(self) -> str:
        return self._language

    @property
    def default_language(self) -> str:
        return DEFAULT_LANGUAGE

    @property
    def language_support_enabled(self) -> bool:
        return self._language_support_enabled

    def _resolve_pack(self) -> LanguagePack:
        if self._language_support_enabled:
            pack = self._translations.get(self._language)
            if pack is None:
                raise UnsupportedLanguageError(self._language)
            return pack
        if self._language != DEFAULT_LANGUAGE:
            try:
                self._diagnostics(
                    "language_support_disabled",
                    language=self._language,
                    fallback=DEFAULT_LANGUAGE,
                )
            except Exception as exc:  # noqa: BLE001
                error("diagnostic_sink_failed", sink=repr(self._diagnostics), error=repr(exc))
        return self._translations[DEFAULT_LANGUAGE]

    def format(self, timestamp: Timestamp) -> str:
        """Return the relative-time phrase for ``timestamp``.

        Raises UnsupportedLanguageError when language support is enabled and
        the configured language has no pack. Future timestamps render the
        just-now phrase.
        """
        pack = self._resolve_pack()
        now = int(self._clock())
        elapsed = max(0, now - to_epoch_seconds(timestamp))
        quantity, unit = bucket(elapsed)
        if unit is None:
            return pack.just_now
        return f"{quantity} {pack.unit_word(unit, quantity)} {pack.ago}"

    get_time_ago = format

    def __repr__(self) -> str:
        return (
            f"TimeAgo(language={self._language!r}, "
            f"language_support_enabled={self._language_support_enabled!r})"
        )


__all__ = ["TimeAgo", "TIERS", "bucket", "to_epoch_seconds", "Timestamp"]
