"""Tests for logging configuration."""

import json
import logging

from tweetspan.logging import DevelopmentFormatter, JSONFormatter, get_logger, setup_logging


def make_record(level=logging.INFO, msg="extracted %d entities", args=(3,), **extra):
    record = logging.LogRecord(
        name="tweetspan.test",
        level=level,
        pathname=__file__,
        lineno=10,
        msg=msg,
        args=args,
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_basic_fields(self):
        data = json.loads(JSONFormatter().format(make_record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "tweetspan.test"
        assert data["message"] == "extracted 3 entities"
        assert "timestamp" in data
        assert "source" not in data

    def test_extra_fields(self):
        data = json.loads(JSONFormatter().format(make_record(text_length=42)))

        assert data["text_length"] == 42

    def test_unserializable_extra_becomes_string(self):
        data = json.loads(JSONFormatter().format(make_record(kinds={"url"})))

        assert data["kinds"] == "{'url'}"

    def test_warning_includes_source(self):
        data = json.loads(JSONFormatter().format(make_record(level=logging.WARNING)))

        assert data["source"]["line"] == 10


class TestDevelopmentFormatter:
    """Tests for DevelopmentFormatter."""

    def test_plain_output(self):
        line = DevelopmentFormatter(use_colors=False).format(make_record(fragment="spaces"))

        assert "INFO" in line
        assert "[tweetspan.test] extracted 3 entities" in line
        assert line.endswith("fragment=spaces")

    def test_colors(self):
        line = DevelopmentFormatter(use_colors=True).format(make_record())

        assert "\033[32m" in line


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_text_handler(self):
        setup_logging("DEBUG")
        root = logging.getLogger()

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, DevelopmentFormatter)

    def test_json_handler(self):
        setup_logging("INFO", json_format=True)

        assert isinstance(logging.getLogger().handlers[0].formatter, JSONFormatter)

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "tweetspan.log"
        setup_logging("INFO", log_file=str(log_file))
        get_logger("tweetspan.test").info("written")

        for handler in logging.getLogger().handlers:
            handler.flush()

        assert json.loads(log_file.read_text().splitlines()[0])["message"] == "written"

    def test_get_logger(self):
        assert get_logger("tweetspan.x") is logging.getLogger("tweetspan.x")
