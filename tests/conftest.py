"""Shared fixtures for fsroutes tests."""

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def make_project(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory that creates empty files below a fresh project root."""

    def _make(*files: str) -> Path:
        root = tmp_path / "project"
        root.mkdir(exist_ok=True)
        for rel in files:
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.touch()
        return root

    return _make
