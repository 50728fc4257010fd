"""
Theme registry, resolution and stylesheet generation.
"""

from .css_generator import generate_theme_css
from .presets import DEFAULT_THEME_PRESET, get_theme_preset, list_theme_presets
from .resolver import ResolvedTheme, resolve_preset, resolve_theme

__all__ = [
    "DEFAULT_THEME_PRESET",
    "ResolvedTheme",
    "generate_theme_css",
    "get_theme_preset",
    "list_theme_presets",
    "resolve_preset",
    "resolve_theme",
]
