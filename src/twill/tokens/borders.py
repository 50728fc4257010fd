"""
Border design tokens: radius, width, style, outline, ring and divide.
"""

from __future__ import annotations

from enum import StrEnum

from twill.tokens.base import CssToken


class BorderRadius(StrEnum):
    """Corner radius (``rounded-md``)."""

    NONE = "none"
    XS = "xs"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"
    S2XL = "2xl"
    S3XL = "3xl"
    S4XL = "4xl"
    FULL = "full"

    def to_css(self) -> str:
        return _RADIUS_CSS[self]


_RADIUS_CSS: dict[BorderRadius, str] = {
    BorderRadius.NONE: "0",
    BorderRadius.XS: "0.125rem",
    BorderRadius.SM: "0.25rem",
    BorderRadius.MD: "0.375rem",
    BorderRadius.LG: "0.5rem",
    BorderRadius.XL: "0.75rem",
    BorderRadius.S2XL: "1rem",
    BorderRadius.S3XL: "1.5rem",
    BorderRadius.S4XL: "2rem",
    BorderRadius.FULL: "9999px",
}


class _PixelWidth(StrEnum):
    """Stroke width whose value is the pixel count."""

    def to_px(self) -> int:
        return int(self.value)

    def to_css(self) -> str:
        px = self.to_px()
        return "0" if px == 0 else f"{px}px"


class BorderWidth(_PixelWidth):
    S0 = "0"
    S1 = "1"
    S2 = "2"
    S4 = "4"
    S8 = "8"


class DivideWidth(_PixelWidth):
    S0 = "0"
    S1 = "1"
    S2 = "2"
    S4 = "4"
    S8 = "8"


class BorderStyle(CssToken):
    SOLID = "solid"
    DASHED = "dashed"
    DOTTED = "dotted"
    DOUBLE = "double"
    HIDDEN = "hidden"
    NONE = "none"


class OutlineStyle(CssToken):
    NONE = "none"
    SOLID = "solid"
    DASHED = "dashed"
    DOTTED = "dotted"
    DOUBLE = "double"
    HIDDEN = "hidden"


class RingWidth(StrEnum):
    """Focus ring width (``ring-2``). ``INSET`` flips the ring inward."""

    NONE = "0"
    S1 = "1"
    S2 = "2"
    S4 = "4"
    S8 = "8"
    INSET = "inset"

    def to_px(self) -> int | None:
        if self is RingWidth.INSET:
            return None
        return int(self.value)

    def to_css(self) -> str:
        if self is RingWidth.INSET:
            return "inset"
        px = int(self.value)
        return "0" if px == 0 else f"{px}px"
