"""
Shadow design tokens with the exact Tailwind literals.

Every shadow layer is drawn in translucent black. ``with_color`` re-tints the
layers with another color while keeping each layer's own alpha.
"""

from __future__ import annotations

import re
from enum import StrEnum

from twill.tokens.base import format_number
from twill.tokens.colors import ColorValue

_BLACK_LAYER = re.compile(r"rgb\(0 0 0 / (?P<alpha>[0-9.]+)\)")


def _tint(css: str, color: ColorValue) -> str:
    def replace(match: re.Match[str]) -> str:
        alpha = float(match.group("alpha")) * color.a
        return f"rgb({color.r} {color.g} {color.b} / {format_number(alpha)})"

    return _BLACK_LAYER.sub(replace, css)


class _ShadowToken(StrEnum):
    def to_css(self) -> str:
        return _SHADOW_CSS[self]

    def with_color(self, color: ColorValue) -> str:
        """CSS for this shadow with every layer tinted by ``color``."""
        return _tint(self.to_css(), color)


class Shadow(_ShadowToken):
    """Box shadow (``shadow-md``)."""

    XS2 = "2xs"
    XS = "xs"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"
    S2XL = "2xl"
    NONE = "none"


class InsetShadow(_ShadowToken):
    """Inner shadow (``inset-shadow-sm``)."""

    XS2 = "inset-2xs"
    XS = "inset-xs"
    SM = "inset-sm"
    NONE = "inset-none"


class DropShadow(_ShadowToken):
    """Filter drop shadow (``drop-shadow-lg``)."""

    XS = "drop-xs"
    SM = "drop-sm"
    MD = "drop-md"
    LG = "drop-lg"
    XL = "drop-xl"
    S2XL = "drop-2xl"
    NONE = "drop-none"


class TextShadow(_ShadowToken):
    """Text shadow (``text-shadow-sm``)."""

    XS2 = "text-2xs"
    XS = "text-xs"
    SM = "text-sm"
    MD = "text-md"
    LG = "text-lg"
    NONE = "text-none"


_SHADOW_CSS: dict[StrEnum, str] = {
    Shadow.XS2: "0 1px rgb(0 0 0 / 0.05)",
    Shadow.XS: "0 1px 2px 0 rgb(0 0 0 / 0.05)",
    Shadow.SM: "0 1px 3px 0 rgb(0 0 0 / 0.1), 0 1px 2px -1px rgb(0 0 0 / 0.1)",
    Shadow.MD: "0 4px 6px -1px rgb(0 0 0 / 0.1), 0 2px 4px -2px rgb(0 0 0 / 0.1)",
    Shadow.LG: "0 10px 15px -3px rgb(0 0 0 / 0.1), 0 4px 6px -4px rgb(0 0 0 / 0.1)",
    Shadow.XL: "0 20px 25px -5px rgb(0 0 0 / 0.1), 0 8px 10px -6px rgb(0 0 0 / 0.1)",
    Shadow.S2XL: "0 25px 50px -12px rgb(0 0 0 / 0.25)",
    Shadow.NONE: "none",
    InsetShadow.XS2: "inset 0 1px rgb(0 0 0 / 0.05)",
    InsetShadow.XS: "inset 0 1px 1px rgb(0 0 0 / 0.05)",
    InsetShadow.SM: "inset 0 2px 4px rgb(0 0 0 / 0.05)",
    InsetShadow.NONE: "none",
    DropShadow.XS: "drop-shadow(0 1px 1px rgb(0 0 0 / 0.05))",
    DropShadow.SM: "drop-shadow(0 1px 2px rgb(0 0 0 / 0.15))",
    DropShadow.MD: "drop-shadow(0 3px 3px rgb(0 0 0 / 0.12))",
    DropShadow.LG: "drop-shadow(0 4px 4px rgb(0 0 0 / 0.15))",
    DropShadow.XL: "drop-shadow(0 9px 7px rgb(0 0 0 / 0.1))",
    DropShadow.S2XL: "drop-shadow(0 25px 25px rgb(0 0 0 / 0.15))",
    DropShadow.NONE: "none",
    TextShadow.XS2: "0px 1px 0px rgb(0 0 0 / 0.15)",
    TextShadow.XS: "0px 1px 1px rgb(0 0 0 / 0.2)",
    TextShadow.SM: (
        "0px 1px 0px rgb(0 0 0 / 0.075), 0px 1px 1px rgb(0 0 0 / 0.075), "
        "0px 2px 2px rgb(0 0 0 / 0.075)"
    ),
    TextShadow.MD: (
        "0px 1px 1px rgb(0 0 0 / 0.1), 0px 1px 2px rgb(0 0 0 / 0.1), "
        "0px 2px 4px rgb(0 0 0 / 0.1)"
    ),
    TextShadow.LG: (
        "0px 1px 2px rgb(0 0 0 / 0.1), 0px 3px 2px rgb(0 0 0 / 0.1), "
        "0px 4px 8px rgb(0 0 0 / 0.1)"
    ),
    TextShadow.NONE: "none",
}
