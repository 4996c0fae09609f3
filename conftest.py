# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Isoscribe contributors

"""Root conftest.py to make the isoscribe package importable without installing it."""

import sys
from pathlib import Path

# Add repo root to sys.path so isoscribe can be imported from tests/
_repo_root = Path(__file__).parent
if str(_repo_root) not in sys.path:
    sys.path.insert(0, str(_repo_root))
