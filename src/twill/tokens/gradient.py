"""
Color interpolation.

``interpolate_oklch`` blends lightness and chroma linearly and takes the
shortest arc between the two hues. When one endpoint is achromatic its hue is
meaningless, so the other endpoint's hue is used for the whole blend; this
keeps a white-to-blue ramp blue instead of sweeping through unrelated hues.

``interpolate_rgb`` is the naive per-channel blend, kept for comparison.
"""

from __future__ import annotations

from twill.tokens.colors import ColorValue
from twill.tokens.oklch import ACHROMATIC_CHROMA, normalize_hue, oklch_to_rgb


def _clamp_t(t: float) -> float:
    return min(max(t, 0.0), 1.0)


def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def interpolate_hue(h1: float, h2: float, t: float) -> float:
    """Interpolate two hue angles along the shorter arc of the hue circle."""
    delta = (h2 - h1) % 360.0
    if delta > 180.0:
        delta -= 360.0
    return normalize_hue(h1 + delta * t)


def interpolate_oklch(start: ColorValue, end: ColorValue, t: float) -> ColorValue:
    """Blend ``start`` toward ``end`` in OKLCH at ``t`` (clamped to [0, 1])."""
    t = _clamp_t(t)
    L1, C1, H1 = start.to_oklch()
    L2, C2, H2 = end.to_oklch()

    start_gray = C1 < ACHROMATIC_CHROMA
    end_gray = C2 < ACHROMATIC_CHROMA
    if start_gray and not end_gray:
        H1 = H2
    elif end_gray and not start_gray:
        H2 = H1

    r, g, b = oklch_to_rgb(_lerp(L1, L2, t), _lerp(C1, C2, t), interpolate_hue(H1, H2, t))
    return ColorValue(r=r, g=g, b=b, a=_lerp(start.a, end.a, t))


def interpolate_rgb(start: ColorValue, end: ColorValue, t: float) -> ColorValue:
    t = _clamp_t(t)
    return ColorValue(
        r=int(round(_lerp(start.r, end.r, t))),
        g=int(round(_lerp(start.g, end.g, t))),
        b=int(round(_lerp(start.b, end.b, t))),
        a=_lerp(start.a, end.a, t),
    )


def gradient_oklch(start: ColorValue, end: ColorValue, steps: int) -> list[ColorValue]:
    """Evenly spaced OKLCH stops from ``start`` to ``end`` inclusive.

    ``steps`` below 2 is raised to 2, so both endpoints are always present.
    """
    steps = max(steps, 2)
    return [interpolate_oklch(start, end, i / (steps - 1)) for i in range(steps)]
