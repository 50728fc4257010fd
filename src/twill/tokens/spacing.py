"""
Spacing design tokens following the Tailwind spacing scale.

The scale is built on a 0.25rem (4px at a 16px root) base unit. Enum values
are the Tailwind class suffixes (``p-4`` -> ``Spacing("4")``).
"""

from __future__ import annotations

from enum import StrEnum

from twill.tokens.base import format_number, format_rem

DEFAULT_ROOT_FONT_PX = 16


class Spacing(StrEnum):
    """Tailwind spacing step."""

    S0 = "0"
    PX = "px"
    S0_5 = "0.5"
    S1 = "1"
    S1_5 = "1.5"
    S2 = "2"
    S2_5 = "2.5"
    S3 = "3"
    S3_5 = "3.5"
    S4 = "4"
    S5 = "5"
    S6 = "6"
    S7 = "7"
    S8 = "8"
    S9 = "9"
    S10 = "10"
    S11 = "11"
    S12 = "12"
    S14 = "14"
    S16 = "16"
    S20 = "20"
    S24 = "24"
    S28 = "28"
    S32 = "32"
    S36 = "36"
    S40 = "40"
    S44 = "44"
    S48 = "48"
    S52 = "52"
    S56 = "56"
    S60 = "60"
    S64 = "64"
    S72 = "72"
    S80 = "80"
    S96 = "96"
    AUTO = "auto"

    def to_rem(self) -> float | None:
        """Size in rem; ``None`` for ``px`` and ``auto``."""
        if self in (Spacing.PX, Spacing.AUTO):
            return None
        return float(self.value) * 0.25

    def to_px(self, root_font_px: int = DEFAULT_ROOT_FONT_PX) -> int | None:
        """Size in whole pixels at the given root font size; ``None`` for ``auto``."""
        if self is Spacing.PX:
            return 1
        rem = self.to_rem()
        if rem is None:
            return None
        return int(round(rem * root_font_px))

    def to_css(self) -> str:
        if self is Spacing.S0:
            return "0"
        if self is Spacing.PX:
            return "1px"
        if self is Spacing.AUTO:
            return "auto"
        return format_rem(self.to_rem() or 0.0)


class Percentage(StrEnum):
    """Fractional sizes (``w-1/2``) and intrinsic keywords."""

    S0 = "0"
    S1_2 = "1/2"
    S1_3 = "1/3"
    S2_3 = "2/3"
    S1_4 = "1/4"
    S2_4 = "2/4"
    S3_4 = "3/4"
    S1_5 = "1/5"
    S2_5 = "2/5"
    S3_5 = "3/5"
    S4_5 = "4/5"
    S1_6 = "1/6"
    S2_6 = "2/6"
    S3_6 = "3/6"
    S4_6 = "4/6"
    S5_6 = "5/6"
    FULL = "full"
    MIN = "min"
    MAX = "max"
    FIT = "fit"

    def to_css(self) -> str:
        if self is Percentage.S0:
            return "0%"
        keyword = _PERCENTAGE_KEYWORDS.get(self)
        if keyword is not None:
            return keyword
        numerator, denominator = (int(part) for part in self.value.split("/"))
        return f"{format_number(round(numerator / denominator * 100, 6))}%"


_PERCENTAGE_KEYWORDS: dict[Percentage, str] = {
    Percentage.FULL: "100%",
    Percentage.MIN: "min-content",
    Percentage.MAX: "max-content",
    Percentage.FIT: "fit-content",
}


class Container(StrEnum):
    """Container widths (``max-w-md``)."""

    S3XS = "3xs"
    S2XS = "2xs"
    XS = "xs"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"
    S2XL = "2xl"
    S3XL = "3xl"
    S4XL = "4xl"
    S5XL = "5xl"
    S6XL = "6xl"
    S7XL = "7xl"

    def to_rem(self) -> float:
        return _CONTAINER_REM[self]

    def to_css(self) -> str:
        return format_rem(self.to_rem())


_CONTAINER_REM: dict[Container, float] = {
    Container.S3XS: 16,
    Container.S2XS: 18,
    Container.XS: 20,
    Container.SM: 24,
    Container.MD: 28,
    Container.LG: 32,
    Container.XL: 36,
    Container.S2XL: 42,
    Container.S3XL: 48,
    Container.S4XL: 56,
    Container.S5XL: 64,
    Container.S6XL: 72,
    Container.S7XL: 80,
}
