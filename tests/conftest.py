"""Shared fixtures: a fixed clock and a recording diagnostic sink."""
from __future__ import annotations

import pytest

from timeago.domain.language import registry

NOW = 1_700_000_000


class FakeClock:
    def __init__(self, now: float = NOW):
        self.now = now
        self.calls = 0

    def __call__(self) -> float:
        self.calls += 1
        return self.now


class RecordingSink:
    def __init__(self):
        self.events = []

    def __call__(self, event, **fields):
        self.events.append((event, fields))


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def isolated_registry(monkeypatch):
    """Give the test a private copy of the translation table."""
    table = dict(registry._TABLE)
    monkeypatch.setattr(registry, "_TABLE", table)
    return table
