# cmdbar/logging_config.py
"""
Logging helpers for the `cmdbar` logger hierarchy.

Library modules only call logging.getLogger(__name__); handlers are attached
here, once, by the entry point or by an embedding application.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOGGER_NAME = "cmdbar"

_FORMATS = {
    "default": "%(asctime)s %(levelname)s %(name)s: %(message)s",
    "detailed": "%(asctime)s %(levelname)s %(name)s [%(filename)s:%(lineno)d]: %(message)s",
}

_LOG_FILE = Path(".cmdbar") / "logs" / "cmdbar.log"

# Handlers installed by setup_logging(), removed again on the next call
_handlers: list[logging.Handler] = []


def get_log_file_path() -> Path:
    """Where setup_logging(file=True) writes."""
    return _LOG_FILE


def setup_logging(
    level: int | str = logging.INFO,
    *,
    console: bool = True,
    file: bool = False,
    format: str = "default",
    format_string: str | None = None,
    propagate: bool = True,
) -> logging.Logger:
    """
    Configure the `cmdbar` logger.

    Args:
        level: Level for the logger and its handlers (name or number)
        console: Attach a stderr handler
        file: Attach a file handler at get_log_file_path()
        format: "default" or "detailed"
        format_string: Explicit logging format, overrides `format`
        propagate: Whether records also reach the root logger

    Safe to call repeatedly; previous cmdbar handlers are replaced.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    for handler in _handlers:
        logger.removeHandler(handler)
        handler.close()
    _handlers.clear()

    formatter = logging.Formatter(format_string or _FORMATS.get(format, _FORMATS["default"]))

    if console:
        ch = logging.StreamHandler(sys.stderr)
        ch.setLevel(level)
        ch.setFormatter(formatter)
        logger.addHandler(ch)
        _handlers.append(ch)

    if file:
        _LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(_LOG_FILE, encoding="utf-8")
        fh.setLevel(level)
        fh.setFormatter(formatter)
        logger.addHandler(fh)
        _handlers.append(fh)

    logger.setLevel(level)
    logger.propagate = propagate
    logger.disabled = False
    return logger


def disable_logging() -> None:
    """Silence every cmdbar logger (useful in tests and embedding)."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in _handlers:
        logger.removeHandler(handler)
        handler.close()
    _handlers.clear()
    logger.disabled = True
