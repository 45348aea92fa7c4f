"""Tests for structured logging."""
import json
import logging

from zonemap.utils.logging import log_error, log_structured
from zonemap.utils.timing import Timer


def test_log_structured_emits_json(caplog):
    with caplog.at_level(logging.INFO, logger="zonemap"):
        log_structured("info", "Camera command issued", label="Beirut", zoom=12)

    entry = json.loads(caplog.records[-1].getMessage())
    assert entry["level"] == "INFO"
    assert entry["message"] == "Camera command issued"
    assert entry["label"] == "Beirut"
    assert entry["zoom"] == 12
    assert "timestamp" in entry


def test_log_error_includes_context(caplog):
    try:
        raise ValueError("bad record")
    except ValueError as e:
        with caplog.at_level(logging.ERROR, logger="zonemap"):
            log_error(e, {"module": "json_provider", "data_path": "/tmp/x.json"})

    entry = json.loads(caplog.records[-1].getMessage())
    assert entry["level"] == "ERROR"
    assert entry["error_type"] == "ValueError"
    assert entry["module"] == "json_provider"
    assert "bad record" in entry["traceback"]


def test_timer_logs_elapsed(caplog):
    with caplog.at_level(logging.INFO, logger="zonemap"):
        with Timer("load gazetteer") as timer:
            pass

    assert timer.elapsed >= 0
    entry = json.loads(caplog.records[-1].getMessage())
    assert entry["operation"] == "load gazetteer"
    assert entry["elapsed_seconds"] == timer.elapsed
