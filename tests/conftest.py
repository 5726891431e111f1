"""Pytest configuration.

Puts the repository root on `sys.path` so `import quickcalc...` works without installing the
package, and provides a fixed reference time for date-dependent tests.
"""

from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path
from zoneinfo import ZoneInfo

import pytest

# Ensure `import quickcalc...` works when running pytest without installing the package.
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def now() -> datetime:
    """Wednesday, 15 January 2025, mid-morning in Berlin."""

    return datetime(2025, 1, 15, 9, 30, tzinfo=ZoneInfo("Europe/Berlin"))
