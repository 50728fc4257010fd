"""
Typography design tokens following the Tailwind type scale.
"""

from __future__ import annotations

from enum import IntEnum, StrEnum

from pydantic import BaseModel, ConfigDict, Field

from twill.tokens.base import CssToken, format_number, format_rem


class FontFamily(StrEnum):
    SANS = "sans"
    SERIF = "serif"
    MONO = "mono"

    def to_css(self) -> str:
        return _FONT_STACKS[self]


_FONT_STACKS: dict[FontFamily, str] = {
    FontFamily.SANS: (
        'ui-sans-serif, system-ui, sans-serif, "Apple Color Emoji", '
        '"Segoe UI Emoji", "Segoe UI Symbol", "Noto Color Emoji"'
    ),
    FontFamily.SERIF: 'ui-serif, Georgia, Cambria, "Times New Roman", Times, serif',
    FontFamily.MONO: (
        'ui-monospace, SFMono-Regular, Menlo, Monaco, Consolas, "Liberation Mono", '
        '"Courier New", monospace'
    ),
}


class FontSize(StrEnum):
    """Font size step; each step carries its paired line height."""

    XS = "xs"
    SM = "sm"
    BASE = "base"
    LG = "lg"
    XL = "xl"
    S2XL = "2xl"
    S3XL = "3xl"
    S4XL = "4xl"
    S5XL = "5xl"
    S6XL = "6xl"
    S7XL = "7xl"
    S8XL = "8xl"
    S9XL = "9xl"

    def size_rem(self) -> float:
        return _FONT_SIZES[self][0]

    def line_height(self) -> float:
        """Unitless line height (leading rem divided by size rem)."""
        size, leading = _FONT_SIZES[self]
        return leading / size

    def to_px(self, root_font_px: int = 16) -> float:
        return self.size_rem() * root_font_px

    def to_css(self) -> str:
        return format_rem(self.size_rem())


# (font-size rem, line-height rem); a line height equal to the size means leading 1.
_FONT_SIZES: dict[FontSize, tuple[float, float]] = {
    FontSize.XS: (0.75, 1.0),
    FontSize.SM: (0.875, 1.25),
    FontSize.BASE: (1.0, 1.5),
    FontSize.LG: (1.125, 1.75),
    FontSize.XL: (1.25, 1.75),
    FontSize.S2XL: (1.5, 2.0),
    FontSize.S3XL: (1.875, 2.25),
    FontSize.S4XL: (2.25, 2.5),
    FontSize.S5XL: (3.0, 3.0),
    FontSize.S6XL: (3.75, 3.75),
    FontSize.S7XL: (4.5, 4.5),
    FontSize.S8XL: (6.0, 6.0),
    FontSize.S9XL: (8.0, 8.0),
}


class FontWeight(IntEnum):
    THIN = 100
    EXTRA_LIGHT = 200
    LIGHT = 300
    NORMAL = 400
    MEDIUM = 500
    SEMI_BOLD = 600
    BOLD = 700
    EXTRA_BOLD = 800
    BLACK = 900

    def to_css(self) -> str:
        return str(self.value)


class LetterSpacing(StrEnum):
    """Tracking; values are the em offsets."""

    TIGHTER = "-0.05em"
    TIGHT = "-0.025em"
    NORMAL = "0em"
    WIDE = "0.025em"
    WIDER = "0.05em"
    WIDEST = "0.1em"

    def to_em(self) -> float:
        return float(self.value.removesuffix("em"))

    def to_css(self) -> str:
        return str(self.value)


class LineHeight(StrEnum):
    """Leading keyword; values are the unitless multipliers."""

    TIGHT = "1.25"
    SNUG = "1.375"
    NORMAL = "1.5"
    RELAXED = "1.625"
    LOOSE = "2"

    def multiplier(self) -> float:
        return float(self.value)

    def to_css(self) -> str:
        return str(self.value)


class NumericLineHeight(BaseModel):
    """Numeric leading (``leading-3``) as an integer multiplier."""

    model_config = ConfigDict(frozen=True)

    value: int = Field(ge=0, le=255, description="Unitless line-height multiplier")

    @classmethod
    def of(cls, value: int) -> NumericLineHeight:
        return cls(value=value)

    def multiplier(self) -> float:
        return float(self.value)

    def to_css(self) -> str:
        return format_number(self.value)


class TextAlign(CssToken):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFY = "justify"
    START = "start"
    END = "end"


class TextDecoration(CssToken):
    NONE = "none"
    UNDERLINE = "underline"
    OVERLINE = "overline"
    LINE_THROUGH = "line-through"


class TextTransform(CssToken):
    NONE = "none"
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    CAPITALIZE = "capitalize"


class TextOverflow(CssToken):
    CLIP = "clip"
    ELLIPSIS = "ellipsis"


class WhiteSpace(CssToken):
    NORMAL = "normal"
    NO_WRAP = "nowrap"
    PRE = "pre"
    PRE_LINE = "pre-line"
    PRE_WRAP = "pre-wrap"


class WordBreak(CssToken):
    NORMAL = "normal"
    BREAK_ALL = "break-all"
    KEEP_ALL = "keep-all"
    BREAK_WORD = "break-word"
