"""Unit tests for the structured logging setup."""

import json
import logging

import pytest

from fraction_text.codec import FractionFormatter
from fraction_text.utils.logging import (
    MAX_LOGGED_VALUE_LENGTH,
    bind_context,
    get_logger,
    truncate_for_logging,
)


@pytest.mark.unit
def test_get_logger_name_preserved(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)

    logger = get_logger("my_test_logger")
    logger.info("test_event")

    log_data = json.loads(caplog.records[-1].message)
    assert log_data.get("logger") == "my_test_logger"


@pytest.mark.unit
def test_json_output_structure(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)

    get_logger("structure_test").info("structure_event", value="½")

    log_data = json.loads(caplog.records[-1].message)
    assert log_data["event"] == "structure_event"
    assert log_data["level"] == "info"
    assert "timestamp" in log_data
    assert log_data["value"] == "½"


@pytest.mark.unit
def test_context_binding_persists(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)

    logger = bind_context(locale="de_DE", style="built_up")
    logger.info("first_event", row=1)
    logger.info("second_event", row=2)

    for record in caplog.records[-2:]:
        log_data = json.loads(record.message)
        assert log_data["locale"] == "de_DE"
        assert log_data["style"] == "built_up"


@pytest.mark.unit
def test_truncate_for_logging_shortens_long_strings() -> None:
    data = {"text": "1" * 500, "short": "½", "count": 3, "nested": {"text": "2" * 300}}
    truncated = truncate_for_logging(data)

    assert len(truncated["text"]) == MAX_LOGGED_VALUE_LENGTH + 3
    assert truncated["text"].endswith("...")
    assert truncated["short"] == "½"
    assert truncated["count"] == 3
    assert truncated["nested"]["text"].endswith("...")
    assert len(data["text"]) == 500


@pytest.mark.unit
def test_parse_failure_logged_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG)

    assert FractionFormatter().parse_to_number("1/0") is None

    events = [json.loads(record.message) for record in caplog.records]
    failure = next(e for e in events if e["event"] == "fraction.parse_failed")
    assert failure["text"] == "1/0"
    assert failure["reason"] == "InvalidFraction"
    assert failure["level"] == "debug"


@pytest.mark.unit
def test_long_input_truncated_in_log_events(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG)

    FractionFormatter().parse_to_number("x" * 1000)

    events = [json.loads(record.message) for record in caplog.records]
    failure = next(e for e in events if e["event"] == "fraction.parse_failed")
    assert len(failure["text"]) == MAX_LOGGED_VALUE_LENGTH + 3
