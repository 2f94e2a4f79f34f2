"""Language pack model"""
from __future__ import annotations

from typing import Tuple
from pydantic import BaseModel, ConfigDict, field_validator

UNITS: Tuple[str, ...] = ("year", "month", "week", "day", "hour", "minute", "second")

UnitForms = Tuple[str, str]


class LanguagePack(BaseModel):
    """Unit labels (singular, plural) plus the 'ago' suffix and 'just now' phrase."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    year: UnitForms
    month: UnitForms
    week: UnitForms
    day: UnitForms
    hour: UnitForms
    minute: UnitForms
    second: UnitForms
    ago: str
    just_now: str

    @field_validator(*UNITS, mode="after")
    def _forms_not_blank(cls, v: UnitForms):  # type: ignore[override]
        singular, plural = v
        if not singular.strip() or not plural.strip():
            raise ValueError("unit forms must be non-empty strings")
        return v

    @field_validator("ago", "just_now", mode="after")
    def _phrase_not_blank(cls, v: str):  # type: ignore[override]
        if not v.strip():
            raise ValueError("phrase must be a non-empty string")
        return v

    def unit_word(self, unit: str, quantity: int) -> str:
        if unit not in UNITS:
            raise KeyError(unit)
        singular, plural = getattr(self, unit)
        return singular if quantity == 1 else plural


__all__ = ["LanguagePack", "UnitForms", "UNITS"]
