import json
import logging

import pytest

from escposkit.logging_config import JsonFormatter, configure_logging


@pytest.fixture
def restore_root():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)


def test_plain_formatter_by_default(monkeypatch, restore_root):
    monkeypatch.delenv("ESCPOSKIT_JSON_LOGS", raising=False)
    root = configure_logging("debug")
    assert root is restore_root
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert not isinstance(root.handlers[0].formatter, JsonFormatter)


def test_repeated_calls_do_not_duplicate_handlers(restore_root):
    configure_logging()
    configure_logging()
    assert len(restore_root.handlers) == 1


def test_json_formatter_from_environment(monkeypatch, restore_root):
    monkeypatch.setenv("ESCPOSKIT_JSON_LOGS", "true")
    root = configure_logging()
    formatter = root.handlers[0].formatter
    assert isinstance(formatter, JsonFormatter)
    record = logging.LogRecord("escposkit.session", logging.ERROR, __file__, 1, "write %s", ("failed",), None)
    payload = json.loads(formatter.format(record))
    assert payload["level"] == "ERROR"
    assert payload["logger"] == "escposkit.session"
    assert payload["msg"] == "write failed"
