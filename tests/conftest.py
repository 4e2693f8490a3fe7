"""Pytest configuration for the `tests/` suite.

Puts the repository root on `sys.path` so the suite also runs from a
plain checkout without an editable install.
"""

from __future__ import annotations

import sys
from pathlib import Path

_REPO_ROOT = Path(__file__).resolve().parents[1]

if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))
