"""
Design tokens: closed enumerations for every design primitive plus the color
engine that resolves palette tokens to RGBA.
"""

from twill.tokens.aspect_ratio import AspectRatio, CustomAspectRatio
from twill.tokens.blur import DEFAULT_BLUR, Blur, CustomBlur
from twill.tokens.borders import (
    BorderRadius,
    BorderStyle,
    BorderWidth,
    DivideWidth,
    OutlineStyle,
    RingWidth,
)
from twill.tokens.colors import (
    PALETTE_FAMILIES,
    SCALES,
    TRANSPARENT,
    Color,
    ColorFamily,
    ColorValue,
    Scale,
    SpecialColor,
    palette_rgb,
)
from twill.tokens.cursor import Cursor
from twill.tokens.gradient import gradient_oklch, interpolate_oklch, interpolate_rgb
from twill.tokens.motion import (
    AnimationToken,
    CustomDuration,
    Duration,
    Easing,
    MotionDefaults,
    TransitionDuration,
    TransitionProperty,
)
from twill.tokens.oklch import oklch_to_css, parse_oklch_css
from twill.tokens.perspective import CustomPerspective, Perspective
from twill.tokens.semantic import (
    SHADCN_NEUTRAL,
    SHADCN_SLATE,
    SHADCN_STONE,
    SHADCN_ZINC,
    DynamicSemanticTheme,
    SemanticColor,
    SemanticThemeVars,
    shadcn_neutral,
)
from twill.tokens.shadows import DropShadow, InsetShadow, Shadow, TextShadow
from twill.tokens.spacing import Container, Percentage, Spacing
from twill.tokens.typography import (
    FontFamily,
    FontSize,
    FontWeight,
    LetterSpacing,
    LineHeight,
    NumericLineHeight,
    TextAlign,
    TextDecoration,
    TextOverflow,
    TextTransform,
    WhiteSpace,
    WordBreak,
)

__all__ = [
    "AnimationToken",
    "AspectRatio",
    "Blur",
    "BorderRadius",
    "BorderStyle",
    "BorderWidth",
    "Color",
    "ColorFamily",
    "ColorValue",
    "Container",
    "Cursor",
    "CustomAspectRatio",
    "CustomBlur",
    "CustomDuration",
    "CustomPerspective",
    "DEFAULT_BLUR",
    "DivideWidth",
    "DropShadow",
    "Duration",
    "DynamicSemanticTheme",
    "Easing",
    "FontFamily",
    "FontSize",
    "FontWeight",
    "InsetShadow",
    "LetterSpacing",
    "LineHeight",
    "MotionDefaults",
    "NumericLineHeight",
    "OutlineStyle",
    "PALETTE_FAMILIES",
    "Percentage",
    "Perspective",
    "RingWidth",
    "SCALES",
    "SHADCN_NEUTRAL",
    "SHADCN_SLATE",
    "SHADCN_STONE",
    "SHADCN_ZINC",
    "Scale",
    "SemanticColor",
    "SemanticThemeVars",
    "Shadow",
    "Spacing",
    "SpecialColor",
    "TRANSPARENT",
    "TextAlign",
    "TextDecoration",
    "TextOverflow",
    "TextShadow",
    "TextTransform",
    "TransitionDuration",
    "TransitionProperty",
    "WhiteSpace",
    "WordBreak",
    "gradient_oklch",
    "interpolate_oklch",
    "interpolate_rgb",
    "oklch_to_css",
    "palette_rgb",
    "parse_oklch_css",
    "shadcn_neutral",
]
