# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Isoscribe contributors

"""Factory functions for creating logger instances."""

import logging
import os

from .config import (
    DEFAULT_NAME,
    DEFAULT_PILL_COLOR,
    ENV_FORMAT,
    ENV_LEVEL,
    ENV_NAME,
    ENV_PILL_COLOR,
    IsoscribeOptions,
)
from .console import Console
from .environment import EnvironmentProbe
from .levels import Format, Level
from .logger import Isoscribe

logger = logging.getLogger(__name__)

_logger_registry: dict[str, Isoscribe] = {}


def _default(value: str | None, env_var: str, fallback: str) -> str:
    """Helper to pick an explicit value, then env var, then fallback."""
    return (value or os.getenv(env_var) or fallback)


def create_logger(
    name: str | None = None,
    level: Level | str | None = None,
    log_format: Format | str | None = None,
    pill_color: str | None = None,
    console: Console | None = None,
    probe: EnvironmentProbe | None = None,
) -> Isoscribe:
    """Factory function to create a logger instance.

    Args:
        name: Logger name. Defaults to LOG_NAME env or "isoscribe".
        level: Minimum level (trace, debug, info, warn, error, fatal).
            Defaults to LOG_LEVEL env or "info".
        log_format: Output format (string, json). Defaults to LOG_FORMAT env or "string".
        pill_color: Hex background of the browser name pill. Defaults to
            LOG_PILL_COLOR env or "#55daf0".
        console: Output sink (default: the host's console)
        probe: Environment probe (default: DefaultEnvironmentProbe)

    Returns:
        Isoscribe instance

    Raises:
        ValueError: If the level or format is not recognized

    Example:
        >>> # Human readable logger at DEBUG level
        >>> log = create_logger(name="sandbox", level="debug")
        >>>
        >>> # JSON records for log collectors
        >>> log = create_logger(name="api", log_format="json")
    """
    level_value = level.value if isinstance(level, Level) else level
    format_value = log_format.value if isinstance(log_format, Format) else log_format

    options = IsoscribeOptions(
        name=_default(name, ENV_NAME, DEFAULT_NAME),
        pill_color=_default(pill_color, ENV_PILL_COLOR, DEFAULT_PILL_COLOR),
        log_level=Level.parse(_default(level_value, ENV_LEVEL, Level.INFO.value)),
        log_format=Format.parse(_default(format_value, ENV_FORMAT, Format.STRING.value)),
    )
    return Isoscribe.from_config(options, console=console, probe=probe)


def get_logger(name: str) -> Isoscribe:
    """Get the logger registered under ``name``, creating it on first use.

    Loggers created here take their level and format from the environment
    (see create_logger).
    """
    if name not in _logger_registry:
        _logger_registry[name] = create_logger(name=name)
        logger.debug(f"Created isoscribe logger {name!r}")
    return _logger_registry[name]


def set_default_level(level: Level | str) -> None:
    """Set the minimum level on every logger obtained through get_logger.

    Raises:
        ValueError: If the level is not recognized
    """
    parsed = Level.parse(level)
    for registered in _logger_registry.values():
        registered.log_level = parsed
