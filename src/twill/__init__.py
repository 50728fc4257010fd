"""
twill - design tokens and style composition.

Tailwind-flavoured design tokens, an OKLCH-aware color engine, semantic
light/dark themes and an immutable ``Style`` value with a field-wise merge.
"""

from __future__ import annotations

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path as _Path

from .components.button import Button, ButtonSize, ButtonVariant
from .core.errors import SettingsError, TwillError
from .core.settings import TwillSettings, load_settings
from .style.style import Style, merge, merge_all
from .tokens.colors import Color, ColorFamily, ColorValue, Scale
from .tokens.semantic import DynamicSemanticTheme, SemanticColor, SemanticThemeVars


DISTRIBUTION_NAME = "twill-style"


def _get_version() -> str:
    """Version of the surrounding source checkout, else of the installed distribution."""
    pyproject = _Path(__file__).resolve().parents[2] / "pyproject.toml"
    if pyproject.is_file():
        with pyproject.open("rb") as f:
            project = tomllib.load(f).get("project", {})
        # Only trust a pyproject.toml that describes this distribution.
        if project.get("name") == DISTRIBUTION_NAME and "version" in project:
            return str(project["version"])

    try:
        return _metadata_version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    "Button",
    "ButtonSize",
    "ButtonVariant",
    "Color",
    "ColorFamily",
    "ColorValue",
    "DynamicSemanticTheme",
    "Scale",
    "SemanticColor",
    "SemanticThemeVars",
    "SettingsError",
    "Style",
    "TwillError",
    "TwillSettings",
    "load_settings",
    "merge",
    "merge_all",
]
