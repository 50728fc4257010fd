"""
CSS generator for twill semantic themes.

Emits the light table as custom properties on ``:root`` and the dark table on
``.dark``, the selector shadcn/ui toggles.
"""

from __future__ import annotations

from twill.tokens.colors import ColorValue
from twill.tokens.semantic import DynamicSemanticTheme, SemanticColor, SemanticThemeVars

DARK_SELECTOR = ".dark"


def generate_theme_css(
    theme: SemanticThemeVars | DynamicSemanticTheme,
    prefix: str = "",
    root_font_px: int | None = None,
) -> str:
    """
    Generate a stylesheet for a semantic theme.

    Args:
        theme: Compiled-in or brand-derived theme
        prefix: Optional variable prefix (``"tw-"`` gives ``--tw-primary``)
        root_font_px: Root font size to pin on ``:root``; rem units scale from it

    Returns:
        CSS string with :root and .dark blocks
    """
    lines: list[str] = []

    lines.append(f"/* twill theme: {theme.name} */")
    lines.append("")

    lines.append(":root {")
    if root_font_px is not None:
        lines.append(f"  font-size: {root_font_px}px;")
    lines.append(f"  --{prefix}radius: {theme.radius};")
    lines.extend(_generate_color_lines(theme.entries(False), prefix, indent=2))
    lines.append("}")
    lines.append("")

    lines.append(f"{DARK_SELECTOR} {{")
    lines.extend(_generate_color_lines(theme.entries(True), prefix, indent=2))
    lines.append("}")
    lines.append("")

    return "\n".join(lines)


def _generate_color_lines(
    entries: tuple[tuple[SemanticColor, ColorValue], ...],
    prefix: str,
    indent: int = 0,
) -> list[str]:
    pad = " " * indent
    return [f"{pad}--{prefix}{role.var_name}: {value.to_css()};" for role, value in entries]
