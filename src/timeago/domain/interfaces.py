"""Injected capabilities used by the formatter.

Both are plain callables so tests can pass a lambda or a small recorder.
"""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    def __call__(self) -> float: ...  # noqa: D401,E701


@runtime_checkable
class DiagnosticSink(Protocol):
    def __call__(self, event: str, **fields: Any) -> None: ...  # noqa: E701


__all__ = ["Clock", "DiagnosticSink"]
