"""Tests for structured logging utilities."""

from __future__ import annotations

import json
import logging

import pytest

from utils import logging_utils


@pytest.fixture
def fresh_logging(monkeypatch):
    monkeypatch.setattr(logging_utils, "_active_log_file", None)
    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    for handler in saved_handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(saved_level)


def test_setup_logging_writes_json(tmp_path, fresh_logging):
    log_file = tmp_path / "structured.log"

    configured = logging_utils.setup_logging(log_file=log_file)
    assert configured == log_file

    logging.getLogger("tests.logging").info("hello world", extra={"event": "test", "handle": 3})

    contents = log_file.read_text().strip().splitlines()
    assert contents
    payload = json.loads(contents[-1])
    assert payload["message"] == "hello world"
    assert payload["event"] == "test"
    assert payload["handle"] == 3
    assert payload["level"] == "INFO"


def test_non_json_extras_are_stringified(tmp_path, fresh_logging):
    from hierarchy import Record

    log_file = tmp_path / "structured.log"
    logging_utils.setup_logging(log_file=log_file)

    logging.getLogger("tests.logging").warning("record", extra={"payload": Record("A", 1)})

    payload = json.loads(log_file.read_text().strip().splitlines()[-1])
    assert "A" in payload["payload"]


def test_setup_logging_is_idempotent(tmp_path, fresh_logging):
    first = logging_utils.setup_logging(log_file=tmp_path / "first.log")
    second = logging_utils.setup_logging(log_file=tmp_path / "second.log")

    assert first == second == tmp_path / "first.log"
    assert not (tmp_path / "second.log").exists()


def test_standard_record_attributes_are_not_repeated(tmp_path, fresh_logging):
    log_file = tmp_path / "structured.log"
    logging_utils.setup_logging(log_file=log_file)

    logging.getLogger("tests.logging").info("plain")

    payload = json.loads(log_file.read_text().strip().splitlines()[-1])
    assert set(payload) == {"timestamp", "level", "logger", "message"}
