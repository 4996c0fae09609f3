# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Isoscribe contributors

"""ANSI color and style wrapping for terminal output.

Usage:
    >>> from isoscribe.colorize import c
    >>> c.red("failed")
    >>> c.bold.underline.cyan("heading")
    >>> c.select("bold", "green")("ok")

Only one color is active at a time (the last one selected wins), while
styles accumulate in the order they were selected.
"""

from typing import Optional

ANSI_COLORS = {
    "black": "\x1b[30m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "magenta": "\x1b[35m",
    "cyan": "\x1b[36m",
    "white": "\x1b[37m",
    "gray": "\x1b[90m",
    "red_bright": "\x1b[91m",
    "green_bright": "\x1b[92m",
    "yellow_bright": "\x1b[93m",
    "blue_bright": "\x1b[94m",
    "magenta_bright": "\x1b[95m",
    "cyan_bright": "\x1b[96m",
    "white_bright": "\x1b[97m",
}

ANSI_STYLES = {
    "bold": "\x1b[1m",
    "underline": "\x1b[4m",
    "bg": "\x1b[7m",
}

RESET = "\x1b[0m"


class Colorizer:
    """Immutable chain of color/style selections.

    Every selection returns a new Colorizer, so partially built chains can be
    shared safely (``warn = c.bold.yellow``).
    """

    __slots__ = ("_color", "_styles")

    def __init__(self, color: Optional[str] = None, styles: tuple[str, ...] = ()):
        self._color = color
        self._styles = styles

    def color(self, name: str) -> "Colorizer":
        """Select a color by name; unknown names leave the chain unchanged."""
        code = ANSI_COLORS.get(name)
        if code is None:
            return self
        return Colorizer(code, self._styles)

    def style(self, name: str) -> "Colorizer":
        """Append a style by name; unknown names leave the chain unchanged."""
        code = ANSI_STYLES.get(name)
        if code is None:
            return self
        return Colorizer(self._color, self._styles + (code,))

    def select(self, *names: str) -> "Colorizer":
        """Apply color and style selections in order."""
        chain = self
        for name in names:
            if name in ANSI_COLORS:
                chain = chain.color(name)
            else:
                chain = chain.style(name)
        return chain

    def __getattr__(self, name: str) -> "Colorizer":
        if name in ANSI_COLORS:
            return self.color(name)
        if name in ANSI_STYLES:
            return self.style(name)
        raise AttributeError(f"{type(self).__name__!r} has no color or style {name!r}")

    def __call__(self, text: object) -> str:
        return f"{''.join(self._styles)}{self._color or ''}{text}{RESET}"

    def __repr__(self) -> str:
        return f"Colorizer(color={self._color!r}, styles={self._styles!r})"


c = Colorizer()
