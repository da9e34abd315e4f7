"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _isolated_strata_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear Strata environment overrides before each test."""
    monkeypatch.delenv("STRATA_RANDOM_SEED", raising=False)
    monkeypatch.delenv("STRATA_LOG_LEVEL", raising=False)
