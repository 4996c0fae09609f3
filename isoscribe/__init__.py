# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Isoscribe contributors

"""Isoscribe structured logging.

A small logging façade that renders each message either as a colorized,
human readable line or as a JSON record, adapting its output to whether it
runs in a browser (Pyodide) or a server process.

Example:
    >>> from isoscribe import Isoscribe
    >>>
    >>> log = Isoscribe("billing", log_level="debug")
    >>> log.info("Invoice sent", {"invoice_id": 42})
    >>> log.success("Ledger balanced")
    >>>
    >>> # JSON records, configured from LOG_LEVEL / LOG_FORMAT / LOG_NAME
    >>> from isoscribe import create_logger
    >>> api_log = create_logger(name="api", log_format="json")
    >>> api_log.warn("Slow response", {"ms": 930})
"""

__version__ = "0.1.0"

from .colorize import Colorizer, c
from .config import IsoscribeOptions
from .console import Console, JsConsole, RecordingConsole, StdioConsole
from .environment import DefaultEnvironmentProbe, EnvironmentProbe, StaticEnvironmentProbe
from .factory import create_logger, get_logger, set_default_level
from .levels import Action, Format, Level, RenderPath, Target
from .logger import Isoscribe
from .stdlib_bridge import IsoscribeHandler, create_log_config
from .utils import BulletType, print_as_bullets

__all__ = [
    "__version__",
    "Action",
    "BulletType",
    "Colorizer",
    "Console",
    "DefaultEnvironmentProbe",
    "EnvironmentProbe",
    "Format",
    "Isoscribe",
    "IsoscribeHandler",
    "IsoscribeOptions",
    "JsConsole",
    "Level",
    "RecordingConsole",
    "RenderPath",
    "StaticEnvironmentProbe",
    "StdioConsole",
    "Target",
    "c",
    "create_log_config",
    "create_logger",
    "get_logger",
    "print_as_bullets",
    "set_default_level",
]
