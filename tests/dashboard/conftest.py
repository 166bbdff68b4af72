"""Shared fixtures for dashboard tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add dashboard to path so `shared` is importable
_dashboard_dir = str(Path(__file__).resolve().parent.parent.parent / "dashboard")
if _dashboard_dir not in sys.path:
    sys.path.insert(0, _dashboard_dir)


@pytest.fixture
def settings_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "settings.json"
