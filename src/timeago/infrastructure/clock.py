"""Wall-clock source used when no clock is injected."""
from __future__ import annotations
import time


def system_clock() -> float:
    return time.time()


__all__ = ["system_clock"]
