# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Isoscribe contributors

"""Small formatting helpers for log messages."""

from .bullets import BulletType, print_as_bullets

__all__ = ["BulletType", "print_as_bullets"]
