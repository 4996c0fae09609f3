# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Isoscribe contributors

"""Runtime environment detection."""

import importlib
import logging
import sys
from abc import ABC, abstractmethod

from .levels import Target

logger = logging.getLogger(__name__)


class EnvironmentProbe(ABC):
    """Abstract base class for runtime environment probes."""

    @abstractmethod
    def detect(self) -> Target:
        """Report the environment output is currently rendered for.

        Returns:
            Target.BROWSER if a browser window global is reachable,
            otherwise Target.SERVER
        """
        pass


class DefaultEnvironmentProbe(EnvironmentProbe):
    """Probe for a browser ``window`` global exposed through Pyodide's ``js`` module.

    Any interpreter that is not running on emscripten is treated as a server.
    """

    def detect(self) -> Target:
        if sys.platform != "emscripten":
            return Target.SERVER

        try:
            js = importlib.import_module("js")
        except ImportError:
            logger.debug("emscripten runtime without a js module, rendering for server")
            return Target.SERVER

        if getattr(js, "window", None) is None:
            # Web workers expose js but no window
            return Target.SERVER
        return Target.BROWSER


class StaticEnvironmentProbe(EnvironmentProbe):
    """Probe that always reports the same target."""

    def __init__(self, target: Target | str):
        self.target = Target(target)

    def detect(self) -> Target:
        return self.target
