# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Isoscribe contributors

"""Bridge from the standard library ``logging`` module into Isoscribe.

Third-party code (web servers, HTTP clients, ...) logs through stdlib
loggers. Attaching an IsoscribeHandler renders those records the same way
as the application's own Isoscribe output.
"""

import logging
from typing import Any, Dict, Iterable, Optional

from .factory import create_logger
from .levels import Level
from .logger import Isoscribe

STDLIB_LEVELS: Dict[Level, int] = {
    Level.TRACE: 5,
    Level.DEBUG: logging.DEBUG,
    Level.INFO: logging.INFO,
    Level.WARN: logging.WARNING,
    Level.ERROR: logging.ERROR,
    Level.FATAL: logging.CRITICAL,
}


def level_from_record(levelno: int) -> Level:
    """Map a stdlib level number onto an Isoscribe level.

    CRITICAL maps to error: Isoscribe's fatal level takes an exception,
    not a message.
    """
    if levelno >= logging.ERROR:
        return Level.ERROR
    if levelno >= logging.WARNING:
        return Level.WARN
    if levelno >= logging.INFO:
        return Level.INFO
    if levelno >= logging.DEBUG:
        return Level.DEBUG
    return Level.TRACE


class IsoscribeHandler(logging.Handler):
    """Logging handler that forwards records to an Isoscribe logger."""

    def __init__(self, target: Isoscribe, level: int = logging.NOTSET):
        """Initialize the handler.

        Args:
            target: Isoscribe logger that renders forwarded records
            level: Minimum stdlib level handled (Isoscribe still applies its own)
        """
        super().__init__(level=level)
        self.target = target

    def emit(self, record: logging.LogRecord) -> None:
        try:
            data: list[Any] = []
            if getattr(record, "extra", None):
                data.append(record.extra)  # type: ignore[attr-defined]
            if record.exc_info:
                data.append(logging.Formatter().formatException(record.exc_info))
            self.target.log(level_from_record(record.levelno), record.getMessage(), data)
        except Exception:
            self.handleError(record)


def create_handler(logger_name: str, log_level: str = "info") -> IsoscribeHandler:
    """Build a handler around a fresh Isoscribe logger (used by dictConfig)."""
    return IsoscribeHandler(create_logger(name=logger_name, level=log_level))


def create_log_config(
    logger_name: str,
    log_level: str = "info",
    loggers: Optional[Iterable[str]] = None,
) -> Dict[str, Any]:
    """Create a ``logging.config.dictConfig`` dictionary routed through Isoscribe.

    Args:
        logger_name: Name shown by the Isoscribe logger rendering the records
        log_level: Minimum level (trace, debug, info, warn, error, fatal)
        loggers: Stdlib logger names to route. When omitted the root logger
            is configured instead.

    Returns:
        Dictionary compatible with logging.config.dictConfig

    Example:
        >>> import logging.config
        >>> from isoscribe.stdlib_bridge import create_log_config
        >>>
        >>> logging.config.dictConfig(
        ...     create_log_config("api", "debug", loggers=["uvicorn", "uvicorn.error"])
        ... )
    """
    level = Level.parse(log_level)
    stdlib_level = STDLIB_LEVELS[level]

    config: Dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "handlers": {
            "isoscribe": {
                "()": create_handler,
                "logger_name": logger_name,
                "log_level": level.value,
            },
        },
    }

    if loggers is None:
        config["root"] = {"handlers": ["isoscribe"], "level": stdlib_level}
    else:
        config["loggers"] = {
            name: {
                "handlers": ["isoscribe"],
                "level": stdlib_level,
                "propagate": False,
            }
            for name in loggers
        }
    return config
