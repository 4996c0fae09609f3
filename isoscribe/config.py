# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Isoscribe contributors

"""Logger configuration."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .levels import Format, Level

DEFAULT_NAME = "isoscribe"
DEFAULT_PILL_COLOR = "#55daf0"

ENV_NAME = "LOG_NAME"
ENV_LEVEL = "LOG_LEVEL"
ENV_FORMAT = "LOG_FORMAT"
ENV_PILL_COLOR = "LOG_PILL_COLOR"


@dataclass(frozen=True)
class IsoscribeOptions:
    """Construction parameters for an Isoscribe logger.

    Attributes:
        name: Logger name shown in output
        pill_color: Hex background of the browser name pill
        log_level: Minimum level to emit
        log_format: Output format
    """
    name: str = DEFAULT_NAME
    pill_color: str = DEFAULT_PILL_COLOR
    log_level: Level = Level.INFO
    log_format: Format = Format.STRING

    def __post_init__(self) -> None:
        """Normalize string levels and formats into enum members."""
        object.__setattr__(self, "log_level", Level.parse(self.log_level))
        object.__setattr__(self, "log_format", Format.parse(self.log_format))

    @classmethod
    def from_env(
        cls,
        name: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "IsoscribeOptions":
        """Build options from environment variables.

        Reads LOG_NAME, LOG_LEVEL, LOG_FORMAT and LOG_PILL_COLOR. An explicit
        name takes precedence over LOG_NAME.

        Raises:
            ValueError: If LOG_LEVEL or LOG_FORMAT hold unknown values
        """
        env = environ if environ is not None else os.environ
        return cls(
            name=name or env.get(ENV_NAME) or DEFAULT_NAME,
            pill_color=env.get(ENV_PILL_COLOR) or DEFAULT_PILL_COLOR,
            log_level=Level.parse(env.get(ENV_LEVEL) or Level.INFO),
            log_format=Format.parse(env.get(ENV_FORMAT) or Format.STRING),
        )
