"""Shared pytest fixtures for the projection engine tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_settings():
    """Reload settings for every test so env overrides never leak."""

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
