"""Logging helpers for the tzmoment command line."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from rich.logging import RichHandler

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def resolve_level(level: Union[int, str]) -> int:
    """Map a level name such as ``"debug"`` to its number, defaulting to WARNING."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else logging.WARNING


def _file_handler(log_file: Path) -> logging.Handler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    return handler


def setup_logging(level: Union[int, str] = logging.WARNING, log_file: Optional[Path] = None) -> logging.Logger:
    """Configure logging with Rich formatting and return the package logger."""
    handlers: list[logging.Handler] = [RichHandler(rich_tracebacks=True, show_path=False)]
    if log_file is not None:
        handlers.append(_file_handler(log_file))

    logging.basicConfig(
        level=resolve_level(level),
        format="%(message)s",
        datefmt="[%X]",
        handlers=handlers,
        force=True,
    )
    return logging.getLogger("tzmoment")


__all__ = ["resolve_level", "setup_logging"]
