"""Tests for the diagnostic sink and decoder settings."""
import logging

import pytest
from pydantic import ValidationError

from mielelink.config import DecoderSettings, get_settings
from mielelink.const import DIAGNOSTICS_LOGGER_NAME
from mielelink.diagnostics import RingBufferHandler, create_logger, get_diagnostics, get_events
from mielelink.parsing.values import TimeParseFailurePolicy
from mielelink.selectors import dishwasher


def test_ring_buffer_keeps_latest_entries():
    handler = RingBufferHandler(max_entries=2)
    logger = logging.getLogger("mielelink.test.ring")
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    logger.propagate = False
    try:
        for i in range(3):
            logger.info("event_%d", i, extra={"details": {"i": i}})
    finally:
        logger.removeHandler(handler)

    events = handler.get_events()
    assert [e["event"] for e in events] == ["event_1", "event_2"]
    assert events[-1]["details"] == {"i": 2}
    assert events[-1]["level"] == "INFO"


def test_create_logger_is_idempotent():
    first = create_logger("mielelink.test.idempotent", 10)
    second = create_logger("mielelink.test.idempotent", 10)
    assert first is second
    assert len(first.handlers) == 1
    assert first.propagate is False


def test_shared_sink():
    assert get_diagnostics() is logging.getLogger(DIAGNOSTICS_LOGGER_NAME)


def test_failure_reported_to_injected_logger():
    logger = create_logger("mielelink.test.injected", 10)
    assert dishwasher.SWITCH.decode("bogus", logger=logger) is None
    events = get_events(logger)
    assert events[-1]["event"] == "decode_failed"
    assert events[-1]["details"]["selector"] == "SWITCH"
    assert get_events() == []


def test_settings_defaults():
    settings = DecoderSettings()
    assert settings.log_ring_size == 200
    assert settings.log_level == "INFO"
    assert settings.time_parse_failure_policy is TimeParseFailurePolicy.DEGRADE_TO_EPOCH


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("MIELELINK_LOG_LEVEL", "debug")
    monkeypatch.setenv("MIELELINK_TIME_PARSE_FAILURE_POLICY", "absent")
    get_settings.cache_clear()
    settings = get_settings()
    assert settings.log_level == "DEBUG"
    assert settings.time_parse_failure_policy is TimeParseFailurePolicy.ABSENT


def test_unknown_log_level_rejected(monkeypatch):
    monkeypatch.setenv("MIELELINK_LOG_LEVEL", "verbose")
    get_settings.cache_clear()
    with pytest.raises(ValidationError):
        get_settings()


def test_sink_follows_reloaded_level(monkeypatch):
    assert get_diagnostics().level == logging.INFO
    monkeypatch.setenv("MIELELINK_LOG_LEVEL", "debug")
    get_settings.cache_clear()
    assert get_diagnostics().level == logging.DEBUG

    dishwasher.START_TIME.decode("abc")
    assert [e["event"] for e in get_events()] == ["time_degraded"]
