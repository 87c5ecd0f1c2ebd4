"""Tests for logging helpers."""

from __future__ import annotations

import logging

import pytest
from rich.logging import RichHandler

from tzmoment import utils


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


@pytest.mark.parametrize(
    ("level", "expected"),
    [("debug", logging.DEBUG), ("INFO", logging.INFO), (logging.ERROR, logging.ERROR), ("nonsense", logging.WARNING)],
)
def test_setup_logging_resolves_levels(restore_root_logger, level, expected):
    logger = utils.setup_logging(level)

    assert logger.name == "tzmoment"
    assert restore_root_logger.level == expected
    assert any(isinstance(handler, RichHandler) for handler in restore_root_logger.handlers)


def test_setup_logging_adds_file_handler(restore_root_logger, tmp_path):
    log_file = tmp_path / "logs" / "tzmoment.log"

    utils.setup_logging("info", log_file)
    logging.getLogger("tzmoment.test").info("written to file")
    for handler in restore_root_logger.handlers:
        handler.flush()

    assert log_file.parent.is_dir()
    assert "written to file" in log_file.read_text(encoding="utf-8")


@pytest.mark.parametrize(
    ("level", "expected"),
    [(" warning ", logging.WARNING), ("Critical", logging.CRITICAL), (5, 5), ("Level 7", logging.WARNING)],
)
def test_resolve_level(level, expected):
    assert utils.resolve_level(level) == expected
