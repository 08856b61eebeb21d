"""Unit tests for structured JSON logging."""
import json
import logging
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'backend'))

import pytest
from logger import JSONFormatter, setup_logging


def make_record(msg="hello %s", args=("world",), exc_info=None, **extra):
    record = logging.LogRecord("wordmeter.test", logging.INFO, __file__, 10, msg, args, exc_info)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    """Test suite for JSONFormatter."""

    def test_basic_fields(self):
        data = json.loads(JSONFormatter().format(make_record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "wordmeter.test"
        assert data["message"] == "hello world"
        assert data["timestamp"].endswith("Z")

    def test_extra_fields_included(self):
        record = make_record(error_code="FETCH_ERROR", error_details={"url": "https://example.com"})
        data = json.loads(JSONFormatter().format(record))

        assert data["error_code"] == "FETCH_ERROR"
        assert data["error_details"] == {"url": "https://example.com"}

    def test_exception_included(self):
        try:
            raise ValueError("bad value")
        except ValueError:
            record = make_record(exc_info=sys.exc_info())

        data = json.loads(JSONFormatter().format(record))
        assert "ValueError: bad value" in data["exception"]

    def test_standard_attributes_not_duplicated(self):
        data = json.loads(JSONFormatter().format(make_record()))
        assert "pathname" not in data
        assert "args" not in data


class TestSetupLogging:
    """Test suite for setup_logging."""

    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        yield
        root.handlers = handlers
        root.setLevel(level)

    def test_installs_single_json_handler(self):
        setup_logging("DEBUG")
        root = logging.getLogger()

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JSONFormatter)
