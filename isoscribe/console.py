# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Isoscribe contributors

"""Output sinks the logger writes to.

A sink mirrors the three console functions a host provides: a general
``log`` write, a ``warn`` write and an ``error`` write. Each accepts any
number of positional arguments.
"""

import functools
import importlib
import json
import logging
import sys
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


class Console(ABC):
    """Abstract base class for output sinks."""

    @abstractmethod
    def log(self, *args: Any) -> None:
        """Write general output (trace, debug and info levels)."""
        pass

    @abstractmethod
    def warn(self, *args: Any) -> None:
        """Write warning output."""
        pass

    @abstractmethod
    def error(self, *args: Any) -> None:
        """Write error output (error and fatal levels)."""
        pass


def _render_arg(value: Any) -> str:
    if isinstance(value, str):
        return value
    try:
        return json.dumps(value, default=str, ensure_ascii=False)
    except (TypeError, ValueError):
        # Circular references and the like
        return repr(value)


class StdioConsole(Console):
    """Sink that prints to the process's standard streams.

    ``log`` goes to stdout; ``warn`` and ``error`` go to stderr. Streams are
    looked up on every write so redirection (and test patching) of
    ``sys.stdout``/``sys.stderr`` is honoured.
    """

    def _write(self, stream: Any, args: tuple[Any, ...]) -> None:
        print(" ".join(_render_arg(arg) for arg in args), file=stream, flush=True)

    def log(self, *args: Any) -> None:
        self._write(sys.stdout, args)

    def warn(self, *args: Any) -> None:
        self._write(sys.stderr, args)

    def error(self, *args: Any) -> None:
        self._write(sys.stderr, args)


class JsConsole(Console):
    """Sink that forwards to a browser ``console`` object under Pyodide.

    Forwarding the arguments unchanged lets the browser perform its own
    ``%c`` style substitution.
    """

    def __init__(self, console: Any = None, convert: Optional[Callable[[Any], Any]] = None):
        """Initialize the JS console sink.

        Args:
            console: Object exposing log/warn/error. Defaults to ``js.console``.
            convert: Converter applied to non-string arguments before they
                cross into JavaScript. Defaults to ``pyodide.ffi.to_js`` with
                dicts converted to plain JS objects rather than ``Map``.
        """
        if console is None:
            console = importlib.import_module("js").console
        if convert is None:
            js = importlib.import_module("js")
            to_js = importlib.import_module("pyodide.ffi").to_js
            convert = functools.partial(to_js, dict_converter=js.Object.fromEntries)
        self._console = console
        self._convert = convert

    def _args(self, args: tuple[Any, ...]) -> list[Any]:
        return [arg if isinstance(arg, str) else self._convert(arg) for arg in args]

    def log(self, *args: Any) -> None:
        self._console.log(*self._args(args))

    def warn(self, *args: Any) -> None:
        self._console.warn(*self._args(args))

    def error(self, *args: Any) -> None:
        self._console.error(*self._args(args))


class RecordingConsole(Console):
    """Sink that keeps every call in memory without producing output.

    Useful for tests that need to inspect exactly which sink function was
    called and with which arguments.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    def log(self, *args: Any) -> None:
        self.calls.append(("log", args))

    def warn(self, *args: Any) -> None:
        self.calls.append(("warn", args))

    def error(self, *args: Any) -> None:
        self.calls.append(("error", args))

    def clear(self) -> None:
        """Clear all recorded calls."""
        self.calls.clear()

    def get_calls(self, sink: str | None = None) -> list[tuple[Any, ...]]:
        """Get recorded argument tuples, optionally filtered by sink name.

        Args:
            sink: Optional sink name to filter by (log, warn, error)

        Returns:
            List of argument tuples in call order
        """
        return [args for name, args in self.calls if sink is None or name == sink]

    def has_output(self, text: str, sink: str | None = None) -> bool:
        """Check if any string argument of a recorded call contains the text."""
        return any(
            isinstance(arg, str) and text in arg
            for args in self.get_calls(sink)
            for arg in args
        )


def default_console() -> Console:
    """Pick the host's console: the browser's under Pyodide, stdio otherwise."""
    if sys.platform == "emscripten":
        try:
            return JsConsole()
        except (ImportError, AttributeError) as e:
            logger.debug(f"Browser console unavailable, falling back to stdio: {e}")
    return StdioConsole()
