"""Logger for the read guard. Writes to stderr, never stdout."""

import logging
import sys
from pathlib import Path

from read_guard.config import DEFAULT_LOGGING

LOGGER_NAME = "read-guard"


def _level(value) -> tuple[int, str | None]:
    if isinstance(value, str) and isinstance(logging.getLevelName(value.upper()), int):
        return logging.getLevelName(value.upper()), None
    return logging.WARNING, f"unknown log level {value!r}, using WARNING"


def _formatter(fmt) -> tuple[logging.Formatter, str | None]:
    if isinstance(fmt, str):
        try:
            return logging.Formatter(fmt), None
        except ValueError as e:
            problem = f"bad log format {fmt!r} ({e}), using default"
    else:
        problem = f"bad log format {fmt!r}, using default"
    return logging.Formatter(DEFAULT_LOGGING["format"]), problem


def _file_handler(log_file) -> tuple[logging.Handler | None, str | None]:
    if not log_file:
        return None, None
    if not isinstance(log_file, (str, Path)):
        return None, f"bad log file {log_file!r}, logging to stderr only"
    try:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        return logging.FileHandler(log_path), None
    except OSError as e:
        return None, f"cannot open log file {log_file!r} ({e}), logging to stderr only"


def setup_logger(config: dict | None = None) -> logging.Logger:
    """
    Build the `read-guard` logger from the `logging` config section.

    Bad settings never raise: each one falls back to its default and a
    warning is logged once the stderr handler is in place.
    """
    config = config if isinstance(config, dict) else {}
    level, level_problem = _level(config.get("level", DEFAULT_LOGGING["level"]))
    formatter, format_problem = _formatter(config.get("format", DEFAULT_LOGGING["format"]))
    file_handler, file_problem = _file_handler(config.get("file"))

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = False

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(formatter)
    logger.addHandler(stderr_handler)
    if file_handler is not None:
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    for problem in (level_problem, format_problem, file_problem):
        if problem:
            logger.warning(problem)
    return logger
