"""Shared test fixtures for sf-cli tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def no_git_identity():
    """Git identity reader that never finds a value."""

    def _read(key: str, *, cwd: Path | None = None) -> str | None:
        del key, cwd
        return None

    return _read
