"""Tests for structured logging helpers."""
import json
import logging

import pytest

from timeago.infrastructure.logging import structured_logging as slog


@pytest.fixture
def text_mode(monkeypatch):
    monkeypatch.setattr(slog, "_LOG_JSON", False)


@pytest.fixture
def json_mode(monkeypatch):
    monkeypatch.setattr(slog, "_LOG_JSON", True)


def test_text_output(text_mode, caplog):
    caplog.set_level(logging.WARNING, logger=slog.LOGGER_NAME)
    slog.warning("language_support_disabled", language="fr", fallback="en")
    assert caplog.records[-1].getMessage() == "language_support_disabled language=fr fallback=en"
    assert caplog.records[-1].levelno == logging.WARNING


def test_json_output(json_mode, caplog):
    caplog.set_level(logging.INFO, logger=slog.LOGGER_NAME)
    slog.info("formatted", language="tr")
    record = json.loads(caplog.records[-1].getMessage())
    assert record["event"] == "formatted"
    assert record["level"] == "INFO"
    assert record["language"] == "tr"
    assert "ts" in record


def test_disabled_level_is_skipped(text_mode, caplog):
    caplog.set_level(logging.WARNING, logger=slog.LOGGER_NAME)
    slog.debug("noise")
    assert not [r for r in caplog.records if r.getMessage() == "noise"]


def test_init_logging_sets_json_mode(monkeypatch):
    monkeypatch.setattr(slog, "_LOG_JSON", False)
    slog.init_logging("INFO", json_output=True)
    assert slog._LOG_JSON is True
