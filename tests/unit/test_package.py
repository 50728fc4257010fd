"""Tests for the top-level twill package."""

from __future__ import annotations

import tomllib
from pathlib import Path

import twill


class TestPackage:
    """Tests for package metadata and re-exports."""

    def test_version_matches_pyproject(self):
        pyproject = Path(__file__).resolve().parents[2] / "pyproject.toml"
        with pyproject.open("rb") as f:
            project = tomllib.load(f)["project"]
        assert project["name"] == twill.DISTRIBUTION_NAME
        assert twill.__version__ == project["version"]

    def test_public_names_resolve(self):
        for name in twill.__all__:
            assert hasattr(twill, name), name
