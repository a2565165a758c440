"""Unit tests for structured logging."""
import sys
sys.path.insert(0, 'backend')

import json
import logging
import pytest
from logger import JSONFormatter, setup_logging


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after a test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)


def _record(message="hello", exc_info=None):
    return logging.LogRecord(
        name="services.tokenizer",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=exc_info,
    )


def test_json_formatter_fields():
    """Test that records are formatted as JSON with the core fields."""
    entry = json.loads(JSONFormatter().format(_record()))

    assert entry["level"] == "INFO"
    assert entry["logger"] == "services.tokenizer"
    assert entry["message"] == "hello"
    assert entry["timestamp"].endswith("Z")


def test_json_formatter_extra_fields():
    """Test that extra fields are merged into the entry."""
    record = _record()
    record.extra = {"sentences": 3, "tokens": 9}

    entry = json.loads(JSONFormatter().format(record))

    assert entry["sentences"] == 3
    assert entry["tokens"] == 9


def test_json_formatter_exception():
    """Test that exception info is included."""
    try:
        raise ValueError("bad input")
    except ValueError:
        record = _record(exc_info=sys.exc_info())

    entry = json.loads(JSONFormatter().format(record))

    assert "ValueError: bad input" in entry["exception"]


def test_setup_logging_does_not_stack_handlers(restore_root_logger):
    """Test that repeated setup replaces its own handler."""
    before = len(restore_root_logger.handlers)

    setup_logging("DEBUG")
    setup_logging("WARNING", "text")

    assert len(restore_root_logger.handlers) == before + 1
    assert restore_root_logger.level == logging.WARNING
    assert not isinstance(restore_root_logger.handlers[-1].formatter, JSONFormatter)


def test_setup_logging_json_default(restore_root_logger):
    """Test that the JSON formatter is the default."""
    setup_logging("info")

    assert isinstance(restore_root_logger.handlers[-1].formatter, JSONFormatter)
    assert restore_root_logger.level == logging.INFO
