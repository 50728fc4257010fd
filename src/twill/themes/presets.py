"""
Theme presets for twill.

Every preset is a compiled-in ``SemanticThemeVars`` built once at import time.
Settings and callers select presets by name; nothing here is mutable.
"""

from __future__ import annotations

from twill.tokens.semantic import (
    SHADCN_NEUTRAL,
    SHADCN_SLATE,
    SHADCN_STONE,
    SHADCN_ZINC,
    SemanticThemeVars,
)

DEFAULT_THEME_PRESET = SHADCN_NEUTRAL.name

_THEME_PRESETS: dict[str, SemanticThemeVars] = {
    SHADCN_NEUTRAL.name: SHADCN_NEUTRAL,
    SHADCN_SLATE.name: SHADCN_SLATE,
    SHADCN_ZINC.name: SHADCN_ZINC,
    SHADCN_STONE.name: SHADCN_STONE,
}


def get_theme_preset(name: str) -> SemanticThemeVars | None:
    """
    Get a theme preset by name.

    Args:
        name: Preset name ("shadcn-neutral", "shadcn-slate", ...)

    Returns:
        SemanticThemeVars if found, None otherwise
    """
    return _THEME_PRESETS.get(name)


def list_theme_presets() -> list[str]:
    """List available preset names in registration order."""
    return list(_THEME_PRESETS.keys())
