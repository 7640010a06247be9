"""Tests for verbose logging."""

import logging
from pathlib import Path

from softverify.queue import VerificationQueue
from softverify.verbose import setup_logger


def test_logger_creates_debug_log(tmp_path: Path):
    """Logger should always create debug.log file."""
    debug_file = tmp_path / "debug.log"
    logger = setup_logger(debug_file=debug_file, verbose=False)

    assert not logger.disabled
    assert logger.level == logging.DEBUG
    assert debug_file.exists()


def test_logger_writes_to_file(tmp_path: Path):
    debug_file = tmp_path / "debug.log"
    logger = setup_logger(debug_file=debug_file, verbose=False)

    logger.debug("test message")

    content = debug_file.read_text()
    assert "test message" in content
    assert "[" in content  # timestamp


def test_verbose_mode_adds_stderr_handler(tmp_path: Path):
    logger = setup_logger(debug_file=tmp_path / "debug.log", verbose=True)

    handler_types = [type(h).__name__ for h in logger.handlers]
    assert sorted(handler_types) == ["FileHandler", "StreamHandler"]


def test_non_verbose_mode_only_file_handler(tmp_path: Path):
    logger = setup_logger(debug_file=tmp_path / "debug.log", verbose=False)
    assert [type(h).__name__ for h in logger.handlers] == ["FileHandler"]


def test_setup_twice_does_not_duplicate_handlers(tmp_path: Path):
    setup_logger(debug_file=tmp_path / "a.log")
    logger = setup_logger(debug_file=tmp_path / "b.log")
    assert len(logger.handlers) == 1


def test_logger_creates_parent_directories(tmp_path: Path):
    debug_file = tmp_path / "nested" / "dir" / "debug.log"
    setup_logger(debug_file=debug_file, verbose=False)
    assert debug_file.exists()


def test_queue_messages_reach_debug_log(tmp_path: Path, outcome):
    debug_file = tmp_path / "debug.log"
    setup_logger(debug_file=debug_file)

    queue = VerificationQueue()
    queue.record(outcome(False, "fob"), "Value Equals", True, "foo", 0, 10)

    content = debug_file.read_text()
    assert "FAIL ::> Value Equals" in content
