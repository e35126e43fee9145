"""Test logging setup, formatters and context fields.

Tests for chromakit.utils.logging_config:
    - JSON and human formats carry the pushed context
    - push_context / pop_context
    - File output and idempotency of setup_logging
    - Error paths: unknown level, format mode, rotation mode
    - install_excepthook logs uncaught exceptions, lets Ctrl+C through

Run:
    pytest tests/test_logging_config.py -v
"""

import json
import logging
import logging.handlers
import sys

import pytest

from chromakit.utils import logging_config


@pytest.fixture(autouse=True)
def reset_logging():
    logging_config.pop_context()
    yield
    logging_config.pop_context()
    # Drop any handlers installed by the test
    logging_config.setup_logging(log_level="WARNING", to_stderr=False, capture_warnings=False)


def _record(msg="hello %s", args=("world",), level=logging.INFO):
    return logging.LogRecord("chromakit.test", level, __file__, 1, msg, args, None)


def test_json_format_includes_context():
    logging_config.push_context(command="blend", model="hcl")
    line = logging_config.ContextFormatter("json").format(_record())
    data = json.loads(line)
    assert data["msg"] == "hello world"
    assert data["lvl"] == "INFO"
    assert data["name"] == "chromakit.test"
    assert data["command"] == "blend"
    assert data["model"] == "hcl"


def test_human_format():
    logging_config.push_context(app="chromakit")
    line = logging_config.ContextFormatter("human", use_color=False).format(_record())
    assert "| INFO     |" in line
    assert "app=chromakit |" in line
    assert line.endswith("hello world")
    assert line[:23].count("-") == 2  # ISO date


def test_pop_context():
    logging_config.push_context(command="convert", model="lab")
    logging_config.pop_context(["model"])
    data = json.loads(logging_config.ContextFormatter("json").format(_record()))
    assert data["command"] == "convert"
    assert "model" not in data

    logging_config.pop_context()
    data = json.loads(logging_config.ContextFormatter("json").format(_record()))
    assert "command" not in data


def test_exception_is_formatted():
    try:
        raise ValueError("boom")
    except ValueError:
        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "failed", (), sys.exc_info())
    data = json.loads(logging_config.ContextFormatter("json").format(record))
    assert "ValueError: boom" in data["exc"]


def test_unknown_format_mode():
    with pytest.raises(ValueError, match="Unknown format mode"):
        logging_config.ContextFormatter("xml")


def test_file_output_and_idempotency(tmp_path):
    log_path = tmp_path / "logs" / "chromakit.log"
    for _ in range(2):
        info = logging_config.setup_logging(
            log_level="INFO",
            log_file=str(log_path),
            json=True,
            to_stderr=False,
            capture_warnings=False,
            context={"app": "test"},
        )
    assert len(info["handlers"]) == 1
    root = logging.getLogger()
    assert sum(1 for h in root.handlers if h in info["handlers"]) == 1

    logging_config.get_logger("chromakit.test").info("written once")
    for handler in info["handlers"]:
        handler.flush()

    lines = log_path.read_text(encoding="utf-8").strip().splitlines()
    assert len(lines) == 1
    data = json.loads(lines[0])
    assert data["msg"] == "written once"
    assert data["app"] == "test"


def test_size_rotation_handler(tmp_path):
    info = logging_config.setup_logging(
        log_file=str(tmp_path / "r.log"),
        to_stderr=False,
        capture_warnings=False,
        rotate={"mode": "size", "max_bytes": 1000, "backup_count": 2},
    )
    assert isinstance(info["handlers"][0], logging.handlers.RotatingFileHandler)


def test_unknown_log_level():
    with pytest.raises(ValueError, match="Unknown log level"):
        logging_config.setup_logging(log_level="LOUD", to_stderr=False)


def test_unknown_rotation_mode(tmp_path):
    with pytest.raises(ValueError, match="Unknown rotation mode"):
        logging_config.setup_logging(
            log_file=str(tmp_path / "x.log"),
            to_stderr=False,
            capture_warnings=False,
            rotate={"mode": "weekly"},
        )


def test_set_level():
    logging_config.setup_logging(log_level="WARNING", to_stderr=False, capture_warnings=False)
    logging_config.set_level("DEBUG")
    assert logging.getLogger().level == logging.DEBUG


def test_excepthook_logs_uncaught(monkeypatch, caplog):
    monkeypatch.setattr(sys, "excepthook", sys.__excepthook__)
    logging_config.install_excepthook()
    try:
        raise RuntimeError("unhandled")
    except RuntimeError:
        exc_info = sys.exc_info()
    with caplog.at_level(logging.CRITICAL):
        sys.excepthook(*exc_info)
    assert "Uncaught exception" in caplog.text
    assert caplog.records[-1].exc_info[1] is exc_info[1]


def test_excepthook_passes_keyboard_interrupt(monkeypatch):
    seen = []
    monkeypatch.setattr(sys, "excepthook", sys.__excepthook__)
    monkeypatch.setattr(sys, "__excepthook__", lambda *args: seen.append(args[0]))
    logging_config.install_excepthook()
    sys.excepthook(KeyboardInterrupt, KeyboardInterrupt(), None)
    assert seen == [KeyboardInterrupt]
