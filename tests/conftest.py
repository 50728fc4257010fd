"""Shared pytest fixtures for twill tests."""

from pathlib import Path

import pytest

from twill.tokens.colors import Color, ColorValue, Scale


@pytest.fixture
def blue_500() -> ColorValue:
    """Tailwind blue-500 as a resolved value."""
    return Color.blue(Scale.S500).compute()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """An empty project directory for settings files."""
    root = tmp_path / "project"
    root.mkdir()
    return root
