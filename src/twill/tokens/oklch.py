"""
Pure-Python OKLCH color conversion.

Converts between sRGB bytes and the perceptually uniform OKLCH space
(lightness, chroma, hue) using Björn Ottosson's OKLab matrices. No external
color libraries required.

Out-of-gamut results are clamped per channel into displayable sRGB after the
inverse transform. That clamp is lossy on purpose: asking for an L/C/H
combination sRGB cannot show yields the nearest per-channel clip, not an error.
"""

from __future__ import annotations

import logging
import math
import re

from twill.tokens.base import format_number

logger = logging.getLogger(__name__)

OklchTuple = tuple[float, float, float]
RgbTuple = tuple[int, int, int]

# Chroma below this is treated as achromatic (hue carries no information).
ACHROMATIC_CHROMA = 1e-4

# Far outside the sRGB gamut, which tops out near 0.37.
MAX_CHROMA = 1.0

# Lightness stops for an 11-step scale, ordered 50 through 950.
SCALE_LIGHTNESS_STOPS: tuple[float, ...] = (
    0.985,  # 50
    0.955,  # 100
    0.91,  # 200
    0.84,  # 300
    0.74,  # 400
    0.64,  # 500
    0.54,  # 600
    0.44,  # 700
    0.34,  # 800
    0.26,  # 900
    0.18,  # 950
)


# =============================================================================
# Transfer functions
# =============================================================================


def _srgb_to_linear(channel: float) -> float:
    if channel <= 0.04045:
        return channel / 12.92
    return ((channel + 0.055) / 1.055) ** 2.4


def _linear_to_srgb(channel: float) -> float:
    if channel <= 0.0031308:
        return channel * 12.92
    return 1.055 * channel ** (1.0 / 2.4) - 0.055


def _clamp_unit(channel: float) -> float:
    # NaN comes from inf - inf on overflowed LMS values.
    if math.isnan(channel):
        return 0.0
    return min(max(channel, 0.0), 1.0)


def _to_byte(channel: float) -> int:
    # Clamp out-of-gamut channels into displayable sRGB.
    return int(round(_clamp_unit(channel) * 255.0))


def normalize_hue(hue: float) -> float:
    """Wrap a hue angle into [0, 360)."""
    if not math.isfinite(hue):
        return 0.0
    wrapped = hue % 360.0
    return 0.0 if wrapped >= 360.0 else wrapped


# =============================================================================
# OKLab / OKLCH
# =============================================================================


def rgb_to_oklab(r: int, g: int, b: int) -> OklchTuple:
    """Convert sRGB bytes to OKLab ``(L, a, b)``."""
    lr = _srgb_to_linear(r / 255.0)
    lg = _srgb_to_linear(g / 255.0)
    lb = _srgb_to_linear(b / 255.0)

    l_ = math.cbrt(0.4122214708 * lr + 0.5363325363 * lg + 0.0514459929 * lb)
    m_ = math.cbrt(0.2119034982 * lr + 0.6806995451 * lg + 0.1073969566 * lb)
    s_ = math.cbrt(0.0883024619 * lr + 0.2817188376 * lg + 0.6299787005 * lb)

    return (
        0.2104542553 * l_ + 0.7936177850 * m_ - 0.0040720468 * s_,
        1.9779984951 * l_ - 2.4285922050 * m_ + 0.4505937099 * s_,
        0.0259040371 * l_ + 0.7827717662 * m_ - 0.8086757660 * s_,
    )


def oklab_to_rgb(L: float, a: float, b: float) -> RgbTuple:
    """Convert OKLab to sRGB bytes, clamping each channel to [0, 255]."""
    l_ = L + 0.3963377774 * a + 0.2158037573 * b
    m_ = L - 0.1055613458 * a - 0.0638541728 * b
    s_ = L - 0.0894841775 * a - 1.2914855480 * b

    l3 = l_ * l_ * l_
    m3 = m_ * m_ * m_
    s3 = s_ * s_ * s_

    lr = +4.0767416621 * l3 - 3.3077115913 * m3 + 0.2309699292 * s3
    lg = -1.2684380046 * l3 + 2.6097574011 * m3 - 0.3413193965 * s3
    lb = -0.0041960863 * l3 - 0.7034186147 * m3 + 1.7076147010 * s3

    return (
        _to_byte(_linear_to_srgb(_clamp_unit(lr))),
        _to_byte(_linear_to_srgb(_clamp_unit(lg))),
        _to_byte(_linear_to_srgb(_clamp_unit(lb))),
    )


def rgb_to_oklch(r: int, g: int, b: int) -> OklchTuple:
    """Convert sRGB bytes into OKLCH ``(L, C, H)``.

    Hue is in degrees within [0, 360). A non-finite hue becomes 0.
    """
    L, a, b_ = rgb_to_oklab(r, g, b)
    chroma = math.hypot(a, b_)
    hue = normalize_hue(math.degrees(math.atan2(b_, a))) if chroma > 0.0 else 0.0
    return (L, chroma, hue)


def oklch_to_rgb(L: float, C: float, H: float) -> RgbTuple:
    """Convert OKLCH to sRGB bytes.

    Args:
        L: Lightness (0-1).
        C: Chroma (typically 0-0.4).
        H: Hue in degrees.

    Returns:
        ``(r, g, b)`` clamped per channel into [0, 255].

    Lightness is clamped to [0, 1] and chroma to [0, ``MAX_CHROMA``] first, so
    huge inputs cannot overflow the cubic LMS step.
    """
    L = min(max(L, 0.0), 1.0) if math.isfinite(L) else (1.0 if L > 0 else 0.0)
    C = min(max(C, 0.0), MAX_CHROMA) if math.isfinite(C) else 0.0
    radians = math.radians(H if math.isfinite(H) else 0.0)
    return oklab_to_rgb(L, C * math.cos(radians), C * math.sin(radians))


def darken(L: float, C: float, H: float, amount: float) -> RgbTuple:
    """Reduce OKLCH lightness by ``amount`` (floored at 0) and convert to sRGB."""
    return oklch_to_rgb(min(max(L - amount, 0.0), 1.0), C, H)


def lighten(L: float, C: float, H: float, amount: float) -> RgbTuple:
    """Increase OKLCH lightness by ``amount`` (capped at 1) and convert to sRGB."""
    return oklch_to_rgb(min(max(L + amount, 0.0), 1.0), C, H)


# =============================================================================
# CSS text
# =============================================================================


def oklch_to_css(L: float, C: float, H: float, alpha: float = 1.0) -> str:
    """Format OKLCH the way Tailwind v4 writes its palette.

    ``oklch_to_css(0.623, 0.214, 259.815)`` -> ``"oklch(62.3% 0.214 259.815)"``.
    Lightness becomes a percentage; translucent colors get a ``/ NN%`` alpha.
    """
    body = (
        f"{format_number(round(L * 100.0, 1))}% "
        f"{format_number(round(C, 3))} "
        f"{format_number(round(normalize_hue(H), 3))}"
    )
    if alpha < 1.0:
        return f"oklch({body} / {format_number(round(alpha * 100.0, 1))}%)"
    return f"oklch({body})"


_OKLCH_CSS = re.compile(r"^oklch\((?P<body>[^()]*)\)$", re.IGNORECASE)


def _parse_number(text: str) -> float | None:
    try:
        value = float(text)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def parse_oklch_css(css: str) -> tuple[float, float, float, float] | None:
    """Parse ``oklch(L C H)`` or ``oklch(L C H / A)`` into ``(L, C, H, alpha)``.

    Lightness may be a plain number or a percentage. Anything else, including
    the wrong number of components, returns ``None``.
    """
    match = _OKLCH_CSS.match(css.strip())
    if not match:
        logger.debug(f"Not an oklch() expression: {css!r}")
        return None

    body = match.group("body")
    alpha_text: str | None = None
    if "/" in body:
        body, alpha_text = body.split("/", 1)

    parts = body.split()
    if len(parts) != 3:
        logger.debug(f"oklch() needs three components, got {len(parts)} in {css!r}")
        return None

    lightness_text = parts[0]
    if lightness_text.endswith("%"):
        lightness = _parse_number(lightness_text[:-1])
        lightness = lightness / 100.0 if lightness is not None else None
    else:
        lightness = _parse_number(lightness_text)
    chroma = _parse_number(parts[1])
    hue = _parse_number(parts[2])
    if lightness is None or chroma is None or hue is None:
        logger.debug(f"Unparseable oklch() component in {css!r}")
        return None

    alpha = 1.0
    if alpha_text is not None:
        alpha_text = alpha_text.strip()
        if alpha_text.endswith("%"):
            parsed = _parse_number(alpha_text[:-1])
            parsed = parsed / 100.0 if parsed is not None else None
        else:
            parsed = _parse_number(alpha_text)
        if parsed is None:
            logger.debug(f"Unparseable oklch() alpha in {css!r}")
            return None
        alpha = min(max(parsed, 0.0), 1.0)

    return (lightness, chroma, hue, alpha)


def oklch_css_to_rgb(css: str) -> RgbTuple | None:
    """Convert a CSS ``oklch(...)`` string straight to sRGB bytes, or ``None``."""
    parsed = parse_oklch_css(css)
    if parsed is None:
        return None
    L, C, H, _alpha = parsed
    return oklch_to_rgb(L, C, H)
