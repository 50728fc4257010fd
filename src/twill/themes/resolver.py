"""
Theme resolver for twill.

Turns a preset name and a mode into concrete role colors. Unknown preset
names fall back to shadcn-neutral with a warning rather than failing.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict

from twill.tokens.colors import ColorValue
from twill.tokens.semantic import SHADCN_NEUTRAL, SemanticColor, SemanticThemeVars

from .presets import get_theme_preset

logger = logging.getLogger(__name__)


class ResolvedTheme(BaseModel):
    """One mode of a theme with every role resolved to RGBA."""

    model_config = ConfigDict(frozen=True)

    name: str
    radius: str
    is_dark: bool = False
    colors: tuple[tuple[SemanticColor, ColorValue], ...] = ()

    def get(self, role: SemanticColor) -> ColorValue | None:
        for candidate, value in self.colors:
            if candidate is role:
                return value
        return None

    def css_variables(self, prefix: str = "") -> dict[str, str]:
        """``--<prefix><role>`` -> CSS color, plus ``--<prefix>radius``."""
        variables = {f"--{prefix}radius": self.radius}
        for role, value in self.colors:
            variables[f"--{prefix}{role.var_name}"] = value.to_css()
        return variables


def resolve_preset(preset_name: str) -> SemanticThemeVars:
    """The named preset, or shadcn-neutral when the name is unknown."""
    theme = get_theme_preset(preset_name)
    if theme is None:
        logger.warning(
            f"Unknown theme preset {preset_name!r}, falling back to {SHADCN_NEUTRAL.name}"
        )
        return SHADCN_NEUTRAL
    return theme


def resolve_theme(preset_name: str = SHADCN_NEUTRAL.name, is_dark: bool = False) -> ResolvedTheme:
    """
    Resolve a preset for one mode.

    Args:
        preset_name: Name of the preset ("shadcn-neutral", "shadcn-zinc", ...)
        is_dark: Resolve the dark table instead of the light one

    Returns:
        ResolvedTheme with every role the preset defines
    """
    theme = resolve_preset(preset_name)
    return ResolvedTheme(
        name=theme.name,
        radius=theme.radius,
        is_dark=is_dark,
        colors=theme.entries(is_dark),
    )
