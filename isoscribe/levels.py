# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Isoscribe contributors

"""Closed enumerations shared by the logger and its renderers."""

from enum import Enum
from typing import NoReturn


def exhaustive_match_guard(value: NoReturn) -> NoReturn:
    """Fail loudly when an enumeration member has no matching branch.

    Annotated with ``NoReturn`` so that type checkers report any branch chain
    that does not narrow the value away completely.

    Raises:
        AssertionError: Always
    """
    raise AssertionError(f"Unhandled enumeration member: {value!r}")


class Level(Enum):
    """Severity levels, ordered from least to most severe."""

    TRACE = "trace"
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    FATAL = "fatal"

    @property
    def priority(self) -> int:
        return _LEVEL_PRIORITY[self]

    @classmethod
    def parse(cls, value: "Level | str") -> "Level":
        """Coerce a level name (case-insensitive) or member into a Level.

        Raises:
            ValueError: If the value does not name a known level
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(
                f"Invalid log level: {value}. Must be one of {[level.value for level in cls]}"
            ) from None


_LEVEL_PRIORITY = {
    Level.TRACE: 0,
    Level.DEBUG: 1,
    Level.INFO: 2,
    Level.WARN: 3,
    Level.ERROR: 4,
    Level.FATAL: 5,
}


class Action(Enum):
    """Presentation tags. Several actions share a severity level."""

    TRACE = "trace"
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    FATAL = "fatal"
    SUCCESS = "success"
    WATCH = "watch"
    CHECKPOINT_START = "checkpoint:start"
    CHECKPOINT_END = "checkpoint:end"

    @classmethod
    def for_level(cls, level: Level) -> "Action":
        return cls(level.value)


class Format(Enum):
    """Output formats."""

    STRING = "string"
    JSON = "json"

    @classmethod
    def parse(cls, value: "Format | str") -> "Format":
        """Coerce a format name or member into a Format.

        Raises:
            ValueError: If the value does not name a known format
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(
                f"Invalid log format: {value}. Must be one of {[fmt.value for fmt in cls]}"
            ) from None


class Target(Enum):
    """Runtime environments the logger can render for."""

    BROWSER = "browser"
    SERVER = "server"


class RenderPath(Enum):
    """Combination of target environment and output format."""

    BROWSER_STRING = "browser-string"
    BROWSER_JSON = "browser-json"
    SERVER_STRING = "server-string"
    SERVER_JSON = "server-json"

    @classmethod
    def resolve(cls, target: Target, log_format: Format) -> "RenderPath":
        return cls(f"{target.value}-{log_format.value}")
