"""
Color tokens and the resolved RGBA color value.

A ``Color`` is a ``(family, scale)`` token. ``Color.compute()`` resolves it to
a ``ColorValue`` through a fixed palette table that covers every family and
scale, so resolution never fails. ``ColorValue`` carries the perceptual
operations (OKLCH darken/lighten, scale generation) built on
:mod:`twill.tokens.oklch`.
"""

from __future__ import annotations

import logging
import math
import re
from enum import IntEnum, StrEnum

from pydantic import BaseModel, ConfigDict, Field

from twill.tokens import oklch
from twill.tokens.base import validated_copy

logger = logging.getLogger(__name__)


# =============================================================================
# Token domains
# =============================================================================


class Scale(IntEnum):
    """Lightness step within a color family, lightest (50) to darkest (950)."""

    S50 = 50
    S100 = 100
    S200 = 200
    S300 = 300
    S400 = 400
    S500 = 500
    S600 = 600
    S700 = 700
    S800 = 800
    S900 = 900
    S950 = 950

    @property
    def index(self) -> int:
        """Position of this step in ``SCALES`` (0 for 50, 10 for 950)."""
        return SCALES.index(self)


SCALES: tuple[Scale, ...] = tuple(Scale)


class ColorFamily(StrEnum):
    """Tailwind palette families."""

    BLACK = "black"
    WHITE = "white"
    SLATE = "slate"
    GRAY = "gray"
    ZINC = "zinc"
    NEUTRAL = "neutral"
    STONE = "stone"
    MAUVE = "mauve"
    OLIVE = "olive"
    MIST = "mist"
    TAUPE = "taupe"
    RED = "red"
    ORANGE = "orange"
    AMBER = "amber"
    YELLOW = "yellow"
    LIME = "lime"
    GREEN = "green"
    EMERALD = "emerald"
    TEAL = "teal"
    CYAN = "cyan"
    SKY = "sky"
    BLUE = "blue"
    INDIGO = "indigo"
    VIOLET = "violet"
    PURPLE = "purple"
    FUCHSIA = "fuchsia"
    PINK = "pink"
    ROSE = "rose"

    @property
    def is_constant(self) -> bool:
        """Black and white resolve to the same value at every scale."""
        return self in (ColorFamily.BLACK, ColorFamily.WHITE)


# The 22 classic families: five neutrals plus seventeen hues.
PALETTE_FAMILIES: tuple[ColorFamily, ...] = (
    ColorFamily.SLATE,
    ColorFamily.GRAY,
    ColorFamily.ZINC,
    ColorFamily.NEUTRAL,
    ColorFamily.STONE,
    ColorFamily.RED,
    ColorFamily.ORANGE,
    ColorFamily.AMBER,
    ColorFamily.YELLOW,
    ColorFamily.LIME,
    ColorFamily.GREEN,
    ColorFamily.EMERALD,
    ColorFamily.TEAL,
    ColorFamily.CYAN,
    ColorFamily.SKY,
    ColorFamily.BLUE,
    ColorFamily.INDIGO,
    ColorFamily.VIOLET,
    ColorFamily.PURPLE,
    ColorFamily.FUCHSIA,
    ColorFamily.PINK,
    ColorFamily.ROSE,
)


class SpecialColor(StrEnum):
    """Color keywords that are not palette entries."""

    TRANSPARENT = "transparent"
    CURRENT = "current"
    BLACK = "black"
    WHITE = "white"

    def to_css(self) -> str:
        return _SPECIAL_CSS[self]

    def color_value(self) -> ColorValue | None:
        """Concrete RGBA for this keyword, ``None`` for ``currentColor``."""
        if self is SpecialColor.TRANSPARENT:
            return TRANSPARENT
        if self is SpecialColor.BLACK:
            return Color.black().compute()
        if self is SpecialColor.WHITE:
            return Color.white().compute()
        return None


_SPECIAL_CSS: dict[SpecialColor, str] = {
    SpecialColor.TRANSPARENT: "transparent",
    SpecialColor.CURRENT: "currentColor",
    SpecialColor.BLACK: "#000000",
    SpecialColor.WHITE: "#ffffff",
}


# =============================================================================
# Color token
# =============================================================================


class Color(BaseModel):
    """
    A palette color token: one family at one scale step.

    Example:
        Color.blue(Scale.S500).compute().to_hex()  # "#3b82f6"
    """

    model_config = ConfigDict(frozen=True)

    family: ColorFamily = Field(description="Palette family")
    scale: Scale = Field(default=Scale.S500, description="Lightness step")

    @classmethod
    def of(cls, family: ColorFamily, scale: Scale = Scale.S500) -> Color:
        return cls(family=family, scale=scale)

    @classmethod
    def white(cls) -> Color:
        return cls(family=ColorFamily.WHITE, scale=Scale.S500)

    @classmethod
    def black(cls) -> Color:
        return cls(family=ColorFamily.BLACK, scale=Scale.S500)

    @classmethod
    def slate(cls, scale: Scale) -> Color:
        return cls(family=ColorFamily.SLATE, scale=scale)

    @classmethod
    def gray(cls, scale: Scale) -> Color:
        return cls(family=ColorFamily.GRAY, scale=scale)

    @classmethod
    def zinc(cls, scale: Scale) -> Color:
        return cls(family=ColorFamily.ZINC, scale=scale)

    @classmethod
    def neutral(cls, scale: Scale) -> Color:
        return cls(family=ColorFamily.NEUTRAL, scale=scale)

    @classmethod
    def stone(cls, scale: Scale) -> Color:
        return cls(family=ColorFamily.STONE, scale=scale)

    @classmethod
    def mauve(cls, scale: Scale) -> Color:
        return cls(family=ColorFamily.MAUVE, scale=scale)

    @classmethod
    def olive(cls, scale: Scale) -> Color:
        return cls(family=ColorFamily.OLIVE, scale=scale)

    @classmethod
    def mist(cls, scale: Scale) -> Color:
        return cls(family=ColorFamily.MIST, scale=scale)

    @classmethod
    def taupe(cls, scale: Scale) -> Color:
        return cls(family=ColorFamily.TAUPE, scale=scale)

    @classmethod
    def red(cls, scale: Scale) -> Color:
        return cls(family=ColorFamily.RED, scale=scale)

    @classmethod
    def orange(cls, scale: Scale) -> Color:
        return cls(family=ColorFamily.ORANGE, scale=scale)

    @classmethod
    def amber(cls, scale: Scale) -> Color:
        return cls(family=ColorFamily.AMBER, scale=scale)

    @classmethod
    def yellow(cls, scale: Scale) -> Color:
        return cls(family=ColorFamily.YELLOW, scale=scale)

    @classmethod
    def lime(cls, scale: Scale) -> Color:
        return cls(family=ColorFamily.LIME, scale=scale)

    @classmethod
    def green(cls, scale: Scale) -> Color:
        return cls(family=ColorFamily.GREEN, scale=scale)

    @classmethod
    def emerald(cls, scale: Scale) -> Color:
        return cls(family=ColorFamily.EMERALD, scale=scale)

    @classmethod
    def teal(cls, scale: Scale) -> Color:
        return cls(family=ColorFamily.TEAL, scale=scale)

    @classmethod
    def cyan(cls, scale: Scale) -> Color:
        return cls(family=ColorFamily.CYAN, scale=scale)

    @classmethod
    def sky(cls, scale: Scale) -> Color:
        return cls(family=ColorFamily.SKY, scale=scale)

    @classmethod
    def blue(cls, scale: Scale) -> Color:
        return cls(family=ColorFamily.BLUE, scale=scale)

    @classmethod
    def indigo(cls, scale: Scale) -> Color:
        return cls(family=ColorFamily.INDIGO, scale=scale)

    @classmethod
    def violet(cls, scale: Scale) -> Color:
        return cls(family=ColorFamily.VIOLET, scale=scale)

    @classmethod
    def purple(cls, scale: Scale) -> Color:
        return cls(family=ColorFamily.PURPLE, scale=scale)

    @classmethod
    def fuchsia(cls, scale: Scale) -> Color:
        return cls(family=ColorFamily.FUCHSIA, scale=scale)

    @classmethod
    def pink(cls, scale: Scale) -> Color:
        return cls(family=ColorFamily.PINK, scale=scale)

    @classmethod
    def rose(cls, scale: Scale) -> Color:
        return cls(family=ColorFamily.ROSE, scale=scale)

    @classmethod
    def parse(cls, token: str) -> Color | None:
        """Parse a Tailwind color name such as ``"blue-500"`` or ``"white"``.

        Unknown families or scales return ``None``.
        """
        text = token.strip().lower()
        try:
            if "-" not in text:
                family = ColorFamily(text)
                return cls(family=family, scale=Scale.S500) if family.is_constant else None
            family_name, _, scale_name = text.rpartition("-")
            return cls(family=ColorFamily(family_name), scale=Scale(int(scale_name)))
        except ValueError:
            logger.debug(f"Not a palette color token: {token!r}")
            return None

    @property
    def class_name(self) -> str:
        """Tailwind class suffix (``"blue-500"``, ``"white"``)."""
        if self.family.is_constant:
            return self.family.value
        return f"{self.family.value}-{self.scale.value}"

    def compute(self) -> ColorValue:
        """Resolve this token through the palette table."""
        return ColorValue.from_color(self)

    def to_css(self) -> str:
        return self.compute().to_hex()


# =============================================================================
# Resolved color value
# =============================================================================

_HEX_COLOR = re.compile(r"[0-9a-fA-F]{6}")


class ColorValue(BaseModel):
    """
    Resolved RGBA color: 8-bit channels plus a float alpha in [0, 1].

    Constructing one with out-of-range raw numbers raises
    ``pydantic.ValidationError``.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255, description="Red channel")
    g: int = Field(ge=0, le=255, description="Green channel")
    b: int = Field(ge=0, le=255, description="Blue channel")
    a: float = Field(default=1.0, ge=0.0, le=1.0, description="Alpha")

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> ColorValue:
        return cls(r=r, g=g, b=b, a=1.0)

    @classmethod
    def from_rgba(cls, r: int, g: int, b: int, a: float) -> ColorValue:
        return cls(r=r, g=g, b=b, a=a)

    @classmethod
    def from_color(cls, color: Color) -> ColorValue:
        r, g, b = palette_rgb(color.family, color.scale)
        return cls(r=r, g=g, b=b)

    @classmethod
    def from_oklch(cls, L: float, C: float, H: float, alpha: float = 1.0) -> ColorValue:
        """Build an opaque (or ``alpha``) color from OKLCH, clipping out-of-gamut channels."""
        r, g, b = oklch.oklch_to_rgb(L, C, H)
        return cls(r=r, g=g, b=b, a=_clamp_alpha(alpha))

    @classmethod
    def from_hex(cls, hex_str: str) -> ColorValue | None:
        """Parse ``#rrggbb`` or ``rrggbb``.

        Anything that is not exactly six hex digits after removing one leading
        ``#`` returns ``None``.
        """
        digits = hex_str[1:] if hex_str.startswith("#") else hex_str
        if not _HEX_COLOR.fullmatch(digits):
            logger.debug(f"Rejected hex color: {hex_str!r}")
            return None
        return cls(r=int(digits[0:2], 16), g=int(digits[2:4], 16), b=int(digits[4:6], 16))

    @classmethod
    def from_oklch_css(cls, css: str) -> ColorValue | None:
        """Parse a CSS ``oklch(...)`` string, ``None`` when malformed."""
        parsed = oklch.parse_oklch_css(css)
        if parsed is None:
            return None
        L, C, H, alpha = parsed
        return cls.from_oklch(L, C, H, alpha)

    def compute(self) -> ColorValue:
        return self

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def to_rgb_string(self) -> str:
        return f"rgb({self.r}, {self.g}, {self.b})"

    def to_css(self) -> str:
        """Hex when opaque, ``rgb(r g b / a)`` otherwise."""
        if self.a >= 1.0:
            return self.to_hex()
        return f"rgb({self.r} {self.g} {self.b} / {round(self.a, 3):g})"

    def with_alpha(self, a: float) -> ColorValue:
        return validated_copy(self, a=_clamp_alpha(a))

    # -------------------------------------------------------------------------
    # Perceptual operations
    # -------------------------------------------------------------------------

    def to_oklch(self) -> oklch.OklchTuple:
        """OKLCH ``(L, C, H)`` of the RGB channels; alpha is ignored."""
        return oklch.rgb_to_oklch(self.r, self.g, self.b)

    def oklch_css(self) -> str:
        L, C, H = self.to_oklch()
        return oklch.oklch_to_css(L, C, H, self.a)

    def darken_oklch(self, amount: float) -> ColorValue:
        L, C, H = self.to_oklch()
        r, g, b = oklch.darken(L, C, H, amount)
        return ColorValue(r=r, g=g, b=b, a=self.a)

    def lighten_oklch(self, amount: float) -> ColorValue:
        L, C, H = self.to_oklch()
        r, g, b = oklch.lighten(L, C, H, amount)
        return ColorValue(r=r, g=g, b=b, a=self.a)

    def with_oklch_lightness(self, lightness: float) -> ColorValue:
        """Same chroma and hue at a new OKLCH lightness."""
        _, C, H = self.to_oklch()
        r, g, b = oklch.oklch_to_rgb(lightness, C, H)
        return ColorValue(r=r, g=g, b=b, a=self.a)

    def perceived_lightness_oklch(self) -> float:
        return self.to_oklch()[0]

    def preferred_text_color(self) -> SpecialColor:
        """Black text on light backgrounds (OKLCH L above 0.6), white otherwise."""
        if self.perceived_lightness_oklch() > 0.6:
            return SpecialColor.BLACK
        return SpecialColor.WHITE

    def generate_scale_oklch(self) -> tuple[ColorValue, ...]:
        """Eleven colors (50..950) that keep this color's chroma and hue."""
        _, C, H = self.to_oklch()
        values = []
        for lightness in oklch.SCALE_LIGHTNESS_STOPS:
            r, g, b = oklch.oklch_to_rgb(lightness, C, H)
            values.append(ColorValue(r=r, g=g, b=b, a=self.a))
        return tuple(values)

    def generate_scale_map_oklch(self) -> tuple[tuple[Scale, ColorValue], ...]:
        return tuple(zip(SCALES, self.generate_scale_oklch(), strict=True))


TRANSPARENT = ColorValue(r=0, g=0, b=0, a=0.0)


def _clamp_alpha(a: float) -> float:
    if math.isnan(a):
        return 0.0
    return min(max(a, 0.0), 1.0)


# =============================================================================
# Palette table
# =============================================================================


def palette_rgb(family: ColorFamily, scale: Scale) -> tuple[int, int, int]:
    """RGB triple for a family and scale. Total over both enums."""
    if family is ColorFamily.BLACK:
        return (0, 0, 0)
    if family is ColorFamily.WHITE:
        return (255, 255, 255)
    return _PALETTE[family][scale.index]


# Rows are ordered 50, 100, 200, ..., 900, 950.
_PALETTE: dict[ColorFamily, tuple[tuple[int, int, int], ...]] = {
    ColorFamily.SLATE: (
        (248, 250, 252),
        (241, 245, 249),
        (226, 232, 240),
        (203, 213, 225),
        (148, 163, 184),
        (100, 116, 139),
        (71, 85, 105),
        (51, 65, 85),
        (30, 41, 59),
        (15, 23, 42),
        (2, 6, 23),
    ),
    ColorFamily.GRAY: (
        (249, 250, 251),
        (243, 244, 246),
        (229, 231, 235),
        (209, 213, 219),
        (156, 163, 175),
        (107, 114, 128),
        (75, 85, 99),
        (55, 65, 81),
        (31, 41, 55),
        (17, 24, 39),
        (3, 7, 18),
    ),
    ColorFamily.ZINC: (
        (250, 250, 250),
        (244, 244, 245),
        (228, 228, 231),
        (212, 212, 216),
        (161, 161, 170),
        (113, 113, 122),
        (82, 82, 91),
        (63, 63, 70),
        (39, 39, 42),
        (24, 24, 27),
        (9, 9, 11),
    ),
    ColorFamily.NEUTRAL: (
        (250, 250, 250),
        (245, 245, 245),
        (229, 229, 229),
        (212, 212, 212),
        (163, 163, 163),
        (115, 115, 115),
        (82, 82, 82),
        (64, 64, 64),
        (38, 38, 38),
        (23, 23, 23),
        (10, 10, 10),
    ),
    ColorFamily.STONE: (
        (250, 250, 249),
        (245, 245, 244),
        (231, 229, 228),
        (214, 211, 209),
        (168, 162, 158),
        (120, 113, 108),
        (87, 83, 78),
        (68, 64, 60),
        (41, 37, 36),
        (28, 25, 23),
        (12, 10, 9),
    ),
    ColorFamily.MAUVE: (
        (250, 250, 250),
        (243, 241, 243),
        (231, 228, 231),
        (215, 208, 215),
        (168, 158, 169),
        (121, 105, 123),
        (89, 76, 91),
        (70, 57, 71),
        (42, 33, 44),
        (29, 22, 30),
        (12, 9, 12),
    ),
    ColorFamily.OLIVE: (
        (251, 251, 249),
        (244, 244, 240),
        (232, 232, 227),
        (216, 216, 208),
        (171, 171, 156),
        (124, 124, 103),
        (91, 91, 75),
        (71, 71, 57),
        (43, 43, 34),
        (29, 29, 22),
        (12, 12, 9),
    ),
    ColorFamily.MIST: (
        (249, 251, 251),
        (241, 243, 243),
        (227, 231, 232),
        (208, 214, 216),
        (156, 168, 171),
        (103, 120, 124),
        (75, 88, 91),
        (57, 68, 71),
        (34, 41, 43),
        (22, 27, 29),
        (9, 11, 12),
    ),
    ColorFamily.TAUPE: (
        (251, 250, 249),
        (243, 241, 241),
        (232, 228, 227),
        (216, 210, 208),
        (171, 160, 156),
        (124, 109, 103),
        (91, 79, 75),
        (71, 60, 57),
        (43, 36, 34),
        (29, 24, 22),
        (12, 10, 9),
    ),
    ColorFamily.RED: (
        (254, 242, 242),
        (254, 226, 226),
        (254, 202, 202),
        (252, 165, 165),
        (248, 113, 113),
        (239, 68, 68),
        (220, 38, 38),
        (185, 28, 28),
        (153, 27, 27),
        (127, 29, 29),
        (69, 10, 10),
    ),
    ColorFamily.ORANGE: (
        (255, 247, 237),
        (255, 237, 213),
        (254, 215, 170),
        (253, 186, 116),
        (251, 146, 60),
        (249, 115, 22),
        (234, 88, 12),
        (194, 65, 12),
        (154, 52, 18),
        (124, 45, 18),
        (67, 20, 7),
    ),
    ColorFamily.AMBER: (
        (255, 251, 235),
        (254, 243, 199),
        (253, 230, 138),
        (252, 211, 77),
        (251, 191, 36),
        (245, 158, 11),
        (217, 119, 6),
        (180, 83, 9),
        (146, 64, 14),
        (120, 53, 15),
        (69, 26, 3),
    ),
    ColorFamily.YELLOW: (
        (254, 252, 232),
        (254, 249, 195),
        (254, 240, 138),
        (253, 224, 71),
        (250, 204, 21),
        (234, 179, 8),
        (202, 138, 4),
        (161, 98, 7),
        (133, 77, 14),
        (113, 63, 18),
        (66, 32, 6),
    ),
    ColorFamily.LIME: (
        (247, 254, 231),
        (236, 252, 203),
        (217, 249, 157),
        (190, 242, 100),
        (163, 230, 53),
        (132, 204, 22),
        (101, 163, 13),
        (77, 124, 15),
        (63, 98, 18),
        (54, 83, 20),
        (26, 46, 5),
    ),
    ColorFamily.GREEN: (
        (240, 253, 244),
        (220, 252, 231),
        (187, 247, 208),
        (134, 239, 172),
        (74, 222, 128),
        (34, 197, 94),
        (22, 163, 74),
        (21, 128, 61),
        (22, 101, 52),
        (20, 83, 45),
        (5, 46, 22),
    ),
    ColorFamily.EMERALD: (
        (236, 253, 245),
        (209, 250, 229),
        (167, 243, 208),
        (110, 231, 183),
        (52, 211, 153),
        (16, 185, 129),
        (5, 150, 105),
        (4, 120, 87),
        (6, 95, 70),
        (6, 78, 59),
        (2, 44, 34),
    ),
    ColorFamily.TEAL: (
        (240, 253, 250),
        (204, 251, 241),
        (153, 246, 228),
        (94, 234, 212),
        (45, 212, 191),
        (20, 184, 166),
        (13, 148, 136),
        (15, 118, 110),
        (17, 94, 89),
        (19, 78, 74),
        (4, 47, 46),
    ),
    ColorFamily.CYAN: (
        (236, 254, 255),
        (207, 250, 254),
        (165, 243, 252),
        (103, 232, 249),
        (34, 211, 238),
        (6, 182, 212),
        (8, 145, 178),
        (14, 116, 144),
        (21, 94, 117),
        (22, 78, 99),
        (8, 51, 68),
    ),
    ColorFamily.SKY: (
        (240, 249, 255),
        (224, 242, 254),
        (186, 230, 253),
        (125, 211, 252),
        (56, 189, 248),
        (14, 165, 233),
        (2, 132, 199),
        (3, 105, 161),
        (7, 89, 133),
        (12, 74, 110),
        (8, 47, 73),
    ),
    ColorFamily.BLUE: (
        (239, 246, 255),
        (219, 234, 254),
        (191, 219, 254),
        (147, 197, 253),
        (96, 165, 250),
        (59, 130, 246),
        (37, 99, 235),
        (29, 78, 216),
        (30, 64, 175),
        (30, 58, 138),
        (23, 37, 84),
    ),
    ColorFamily.INDIGO: (
        (238, 242, 255),
        (224, 231, 255),
        (199, 210, 254),
        (165, 180, 252),
        (129, 140, 248),
        (99, 102, 241),
        (79, 70, 229),
        (67, 56, 202),
        (55, 48, 163),
        (49, 46, 129),
        (30, 27, 75),
    ),
    ColorFamily.VIOLET: (
        (245, 243, 255),
        (237, 233, 254),
        (221, 214, 254),
        (196, 181, 253),
        (167, 139, 250),
        (139, 92, 246),
        (124, 58, 237),
        (109, 40, 217),
        (91, 33, 182),
        (76, 29, 149),
        (46, 16, 101),
    ),
    ColorFamily.PURPLE: (
        (250, 245, 255),
        (243, 232, 255),
        (233, 213, 255),
        (216, 180, 254),
        (192, 132, 252),
        (168, 85, 247),
        (147, 51, 234),
        (126, 34, 206),
        (107, 33, 168),
        (88, 28, 135),
        (59, 7, 100),
    ),
    ColorFamily.FUCHSIA: (
        (253, 244, 255),
        (250, 232, 255),
        (245, 208, 254),
        (240, 171, 252),
        (232, 121, 249),
        (217, 70, 239),
        (192, 38, 211),
        (162, 28, 175),
        (134, 25, 143),
        (112, 26, 117),
        (74, 4, 78),
    ),
    ColorFamily.PINK: (
        (253, 242, 248),
        (252, 231, 243),
        (251, 207, 232),
        (249, 168, 212),
        (244, 114, 182),
        (236, 72, 153),
        (219, 39, 119),
        (190, 24, 93),
        (157, 23, 77),
        (131, 24, 67),
        (80, 7, 36),
    ),
    ColorFamily.ROSE: (
        (255, 241, 242),
        (255, 228, 230),
        (254, 205, 211),
        (253, 164, 175),
        (251, 113, 133),
        (244, 63, 94),
        (225, 29, 72),
        (190, 18, 60),
        (159, 18, 57),
        (136, 19, 55),
        (76, 5, 25),
    ),
}
