# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Isoscribe contributors

"""Render lists of strings as indented bullet points."""

from enum import Enum
from typing import Callable, Iterable

from ..levels import exhaustive_match_guard


class BulletType(Enum):
    """Bullet markers."""

    DASHES = "dashes"
    NUMBERS = "numbers"


def _bullet_factory(bullet_type: BulletType) -> Callable[[int], str]:
    if bullet_type is BulletType.DASHES:
        return lambda index: "-"
    elif bullet_type is BulletType.NUMBERS:
        return lambda index: f"{index + 1}."
    else:
        exhaustive_match_guard(bullet_type)


def print_as_bullets(items: Iterable[str], bullet_type: BulletType | str = BulletType.DASHES) -> str:
    """Format items as an indented bullet list, one ``\\n\\t<bullet> <item>`` per entry.

    Handy for appending lists of paths or names to a log message:

        >>> log.info(f"Watching{print_as_bullets(['src', 'tests'])}")

    Raises:
        ValueError: If bullet_type is not a known BulletType
    """
    get_bullet = _bullet_factory(BulletType(bullet_type))
    return "".join(f"\n\t{get_bullet(i)} {item}" for i, item in enumerate(items))
