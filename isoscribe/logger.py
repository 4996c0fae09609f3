# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Isoscribe contributors

"""Isoscribe logger: severity gating, render path selection and output."""

import json
import logging
import math
import re
import traceback
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional, Sequence

from .colorize import c
from .config import DEFAULT_PILL_COLOR, IsoscribeOptions
from .console import Console, default_console
from .environment import DefaultEnvironmentProbe, EnvironmentProbe
from .levels import Action, Format, Level, RenderPath, Target, exhaustive_match_guard

logger = logging.getLogger(__name__)

CHECKPOINT_MESSAGE = "-- --"

LOG_ACTION: dict[Action, str] = {
    Action.TRACE: c.magenta(f"● {c.underline('trace')}"),
    Action.DEBUG: c.magenta(f"● {c.underline('debug')}"),
    Action.INFO: c.blue_bright(f"ℹ︎ {c.underline('info')}"),
    Action.WARN: c.yellow_bright(f"! {c.underline('warn')}"),
    Action.ERROR: c.red(f"✕ {c.underline('error')}"),
    Action.FATAL: c.red_bright(f"✕ {c.underline('fatal')}"),
    Action.SUCCESS: c.green(f"✓ {c.underline('success')}"),
    Action.WATCH: c.cyan(f"⦿ {c.underline('watching')}"),
    Action.CHECKPOINT_START: c.cyan_bright(f"➤ {c.underline('checkpoint:start')}"),
    Action.CHECKPOINT_END: c.cyan_bright(f"➤ {c.underline('checkpoint:end')}"),
}

LEVEL_NAME_CSS = "font-weight: bold"

_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})")


class TimestampFormat(Enum):
    """Supported timestamp renderings."""

    ISO = "iso"
    CLOCK = "clock"


def format_timestamp(moment: Optional[datetime] = None, fmt: TimestampFormat = TimestampFormat.ISO) -> str:
    """Render a timestamp.

    Args:
        moment: Instant to render (default: now). Naive values are taken as local time.
        fmt: ISO renders UTC with millisecond precision and a ``Z`` suffix
            (``2025-01-02T03:04:05.678Z``); CLOCK renders local
            ``h:mm:ss AM/PM`` (``3:04:05 PM``).

    Returns:
        Formatted timestamp
    """
    moment = moment or datetime.now(timezone.utc)

    if fmt is TimestampFormat.ISO:
        return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    elif fmt is TimestampFormat.CLOCK:
        local = moment.astimezone() if moment.tzinfo else moment
        hour = local.hour % 12 or 12
        meridiem = "AM" if local.hour < 12 else "PM"
        return f"{hour}:{local.minute:02d}:{local.second:02d} {meridiem}"
    else:
        exhaustive_match_guard(fmt)


def _relative_luminance(bg_color: str) -> float:
    digits = bg_color[1:]
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    rgb = int(digits, 16)
    r, g, b = (rgb >> 16) & 0xFF, (rgb >> 8) & 0xFF, rgb & 0xFF

    def linearize(channel: int) -> float:
        v = channel / 255
        return v / 12.92 if v <= 0.03928 else ((v + 0.055) / 1.055) ** 2.4

    return 0.2126 * linearize(r) + 0.7152 * linearize(g) + 0.0722 * linearize(b)


def get_pill_text_color(bg_color: str) -> str:
    """Pick black or white text for the best contrast against a hex background.

    Raises:
        ValueError: If bg_color is not a ``#rgb`` or ``#rrggbb`` hex color
    """
    if not _HEX_COLOR.fullmatch(bg_color):
        raise ValueError(f"Invalid pill color: {bg_color}. Expected a hex color like #55daf0")
    return "#000" if _relative_luminance(bg_color) > 0.179 else "#fff"


def get_pill_css(bg_color: str) -> str:
    """Build the CSS declaration list for the browser name pill."""
    styles = {
        "background": bg_color,
        "color": get_pill_text_color(bg_color),
        "font-weight": "bold",
        "padding": "2px 6px",
        "border-radius": "4px",
    }
    return "; ".join(f"{prop}: {value}" for prop, value in styles.items())


def format_stack(error: BaseException) -> str:
    """Format an exception's traceback without its ``Type: message`` summary line."""
    stack = "".join(traceback.format_exception(type(error), error, error.__traceback__))
    summary = "".join(traceback.format_exception_only(type(error), error))
    if stack.endswith(summary):
        stack = stack[: -len(summary)]
    return stack.rstrip("\n")


def _dump_record(log_entry: dict[str, Any]) -> str:
    return json.dumps(log_entry, separators=(",", ":"), ensure_ascii=False, allow_nan=False, default=str)


def _json_safe(value: Any, _seen: frozenset[int] = frozenset()) -> Any:
    """Coerce a value into something strict JSON can encode.

    Non-finite floats become ``None`` (``null``), keys that are not JSON
    scalars are stringified and a container nested inside itself is replaced
    by ``"[Circular]"``. Anything else is left for ``default=str``.
    """
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, (dict, list, tuple)):
        if id(value) in _seen:
            return "[Circular]"
        seen = _seen | {id(value)}
        if isinstance(value, dict):
            return {
                key if isinstance(key, (str, int, bool)) or key is None else str(key): _json_safe(item, seen)
                for key, item in value.items()
            }
        return [_json_safe(item, seen) for item in value]
    return value


class Isoscribe:
    """Named logger that renders for the browser or a server, as text or JSON.

    Example:
        >>> log = Isoscribe("billing", log_level="debug")
        >>> log.info("Invoice sent", {"invoice_id": 42})
        >>> log.log_level = "warn"
        >>> log.info("Suppressed")
    """

    def __init__(
        self,
        name: str,
        pill_color: str = DEFAULT_PILL_COLOR,
        log_level: Level | str = Level.INFO,
        log_format: Format | str = Format.STRING,
        console: Optional[Console] = None,
        probe: Optional[EnvironmentProbe] = None,
    ):
        """Initialize the logger.

        Args:
            name: Label shown in every rendered line (and as ``feature`` in JSON)
            pill_color: Hex background of the name pill in browser output
            log_level: Minimum level to emit
            log_format: ``string`` for human readable lines, ``json`` for records
            console: Output sink (default: the host's console)
            probe: Environment probe (default: DefaultEnvironmentProbe)

        Raises:
            ValueError: If the level, format or pill color is not recognized
        """
        self._name = name
        self._log_level = Level.parse(log_level)
        self._log_format = Format.parse(log_format)
        self._console = console if console is not None else default_console()
        self._probe = probe if probe is not None else DefaultEnvironmentProbe()
        self._level_label_width = max(len(f"[{level.value}]") for level in Level)
        self._pill_css = get_pill_css(pill_color)

    @classmethod
    def from_config(
        cls,
        options: IsoscribeOptions,
        console: Optional[Console] = None,
        probe: Optional[EnvironmentProbe] = None,
    ) -> "Isoscribe":
        """Create a logger from an IsoscribeOptions instance."""
        return cls(
            name=options.name,
            pill_color=options.pill_color,
            log_level=options.log_level,
            log_format=options.log_format,
            console=console,
            probe=probe,
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def log_format(self) -> Format:
        return self._log_format

    @property
    def pill_css(self) -> str:
        return self._pill_css

    @property
    def log_level(self) -> Level:
        return self._log_level

    @log_level.setter
    def log_level(self, level: Level | str) -> None:
        self._log_level = Level.parse(level)
        logger.debug(f"Isoscribe logger {self._name!r} level set to {self._log_level.value}")

    def should_log(self, level: Level | str) -> bool:
        """Return True if a call at ``level`` passes the current minimum level."""
        return Level.parse(level).priority >= self._log_level.priority

    def get_environment(self) -> Target:
        return self._probe.detect()

    def get_render_path(self) -> RenderPath:
        return RenderPath.resolve(self.get_environment(), self._log_format)

    def _get_log_fn(self, level: Level):
        """Map a level onto the sink function that writes it."""
        if level is Level.ERROR or level is Level.FATAL:
            return self._console.error
        elif level is Level.WARN:
            return self._console.warn
        elif level is Level.TRACE or level is Level.DEBUG or level is Level.INFO:
            return self._console.log
        else:
            exhaustive_match_guard(level)

    def _get_level_label(self, level: Level) -> str:
        return f"[{level.value.upper()}]".ljust(self._level_label_width)

    def log(
        self,
        level: Level | str,
        message: str,
        data: Sequence[Any] = (),
        action: Optional[Action] = None,
    ) -> None:
        """Emit one log event if ``level`` passes the minimum level.

        Args:
            level: Severity of the event
            message: The log message
            data: Ordered auxiliary values attached to the event
            action: Presentation tag selecting the glyph in string output
        """
        level = Level.parse(level)
        if not self.should_log(level):
            return

        write = self._get_log_fn(level)
        path = self.get_render_path()
        data = list(data)

        if path is RenderPath.BROWSER_STRING:
            timestamp = format_timestamp(fmt=TimestampFormat.CLOCK)
            write(
                f"{timestamp} %c{self._name} %c{self._get_level_label(level)}",
                self._pill_css,
                LEVEL_NAME_CSS,
                LOG_ACTION[action] if action else "",
                c.gray(message),
                *data,
            )
        elif path is RenderPath.SERVER_STRING:
            timestamp = c.gray(format_timestamp(fmt=TimestampFormat.CLOCK))
            log_action = LOG_ACTION[action] if action else ""
            line = f"{timestamp} {self._get_level_label(level)} {self._name} {log_action} {c.gray(message)}"
            if not data:
                write(line)
            else:
                write(line, data)
        elif path is RenderPath.BROWSER_JSON or path is RenderPath.SERVER_JSON:
            log_entry = {
                "timestamp": format_timestamp(fmt=TimestampFormat.ISO),
                "feature": self._name,
                "level": level.value,
                "message": message,
                "data": data,
            }
            try:
                payload = _dump_record(log_entry)
            except (TypeError, ValueError) as e:
                # Keep the record shape; only the data values are coerced
                logger.debug(f"Isoscribe data not JSON encodable, coercing: {e}")
                log_entry["data"] = [_json_safe(item) for item in data]
                payload = _dump_record(log_entry)
            write(payload)
        else:
            exhaustive_match_guard(path)

    def trace(self, message: str, *data: Any) -> None:
        self.log(Level.TRACE, message, data, action=Action.TRACE)

    def debug(self, message: str, *data: Any) -> None:
        self.log(Level.DEBUG, message, data, action=Action.DEBUG)

    def info(self, message: str, *data: Any) -> None:
        self.log(Level.INFO, message, data, action=Action.INFO)

    def warn(self, message: str, *data: Any) -> None:
        self.log(Level.WARN, message, data, action=Action.WARN)

    def error(self, message: str, *data: Any) -> None:
        self.log(Level.ERROR, message, data, action=Action.ERROR)

    def fatal(self, error: BaseException) -> None:
        """Log an exception at fatal level, then print its traceback.

        The traceback goes straight to the ``log`` sink as dimmed raw text,
        whatever the configured format, minus the ``Type: message`` line
        already carried by the fatal event.

        Raises:
            TypeError: If error is not an exception instance
        """
        if not isinstance(error, BaseException):
            raise TypeError(f"fatal() expects an exception instance, got {type(error).__name__}")

        self.log(Level.FATAL, str(error), action=Action.FATAL)
        if not self.should_log(Level.FATAL):
            return
        write = self._get_log_fn(Level.DEBUG)
        write(f"\n{c.gray(format_stack(error))}")

    def success(self, message: str, *data: Any) -> None:
        self.log(Level.INFO, message, data, action=Action.SUCCESS)

    def watch(self, message: str, *data: Any) -> None:
        self.log(Level.INFO, message, data, action=Action.WATCH)

    def checkpoint_start(self) -> None:
        self.log(Level.DEBUG, CHECKPOINT_MESSAGE, action=Action.CHECKPOINT_START)

    def checkpoint_end(self) -> None:
        self.log(Level.DEBUG, CHECKPOINT_MESSAGE, action=Action.CHECKPOINT_END)

    def __repr__(self) -> str:
        return (
            f"Isoscribe(name={self._name!r}, log_level={self._log_level.value!r}, "
            f"log_format={self._log_format.value!r})"
        )
