# test/unit/test_logging_config.py

import json
import logging
import sys

import pytest

from storefront_e2e.config.logging_config import JsonFormatter, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def make_record(message="session ready", **extra):
    record = logging.LogRecord("storefront_e2e.core", logging.INFO, __file__, 10, message, (), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_fields():
    payload = json.loads(JsonFormatter().format(make_record()))

    assert payload["message"] == "session ready"
    assert payload["level"] == "INFO"
    assert payload["module"] == "storefront_e2e.core"
    assert payload["service"] == "storefront-e2e"
    assert "timestamp" in payload


def test_json_formatter_merges_extra_context():
    record = make_record(extra_context={"browser": "firefox", "selector": "#email"})

    payload = json.loads(JsonFormatter().format(record))

    assert payload["browser"] == "firefox"
    assert payload["selector"] == "#email"


def test_json_formatter_includes_exception():
    try:
        raise RuntimeError("driver crashed")
    except RuntimeError:
        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "boom", (), sys.exc_info())

    payload = json.loads(JsonFormatter().format(record))

    assert "driver crashed" in payload["exc_info"]


def test_setup_logging_json(restore_root_logger, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.delenv("LOG_FORMAT", raising=False)

    handler = setup_logging()

    assert restore_root_logger.level == logging.DEBUG
    assert restore_root_logger.handlers == [handler]
    assert isinstance(handler.formatter, JsonFormatter)
    assert logging.getLogger("selenium").level == logging.WARNING


def test_setup_logging_text(restore_root_logger):
    handler = setup_logging(level="WARNING", fmt="text")

    assert restore_root_logger.level == logging.WARNING
    assert not isinstance(handler.formatter, JsonFormatter)
