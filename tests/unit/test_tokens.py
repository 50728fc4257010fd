"""Tests for scalar design tokens and their CSS literals."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from twill.tokens.aspect_ratio import AspectRatio, CustomAspectRatio
from twill.tokens.base import format_number, format_rem
from twill.tokens.blur import DEFAULT_BLUR, Blur, CustomBlur
from twill.tokens.borders import BorderRadius, BorderWidth, DivideWidth, RingWidth
from twill.tokens.colors import Color, Scale
from twill.tokens.cursor import Cursor
from twill.tokens.motion import (
    AnimationToken,
    CustomDuration,
    Easing,
    MotionDefaults,
    TransitionDuration,
    TransitionProperty,
    transition_property_css,
)
from twill.tokens.perspective import CustomPerspective, Perspective
from twill.tokens.shadows import DropShadow, InsetShadow, Shadow, TextShadow
from twill.tokens.spacing import Container, Percentage, Spacing
from twill.tokens.typography import (
    FontFamily,
    FontSize,
    FontWeight,
    LetterSpacing,
    LineHeight,
    NumericLineHeight,
)


class TestNumberFormatting:
    """Tests for CSS number formatting."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(0.5, "0.5"), (1.0, "1"), (0.0, "0"), (-0.0, "0"), (33.3333333, "33.333333"), (16, "16")],
    )
    def test_format_number(self, value, expected):
        assert format_number(value) == expected

    def test_format_rem(self):
        assert format_rem(0.25) == "0.25rem"


# =============================================================================
# Spacing
# =============================================================================


class TestSpacing:
    """Tests for spacing, percentage and container tokens."""

    @pytest.mark.parametrize(
        ("token", "css"),
        [
            (Spacing.S0, "0"),
            (Spacing.PX, "1px"),
            (Spacing.S0_5, "0.125rem"),
            (Spacing.S4, "1rem"),
            (Spacing.S2_5, "0.625rem"),
            (Spacing.S96, "24rem"),
            (Spacing.AUTO, "auto"),
        ],
    )
    def test_css(self, token, css):
        assert token.to_css() == css

    def test_rem_and_px(self):
        assert Spacing.S4.to_rem() == 1.0
        assert Spacing.S4.to_px() == 16
        assert Spacing.S4.to_px(root_font_px=20) == 20
        assert Spacing.PX.to_rem() is None
        assert Spacing.PX.to_px() == 1
        assert Spacing.AUTO.to_px() is None

    @pytest.mark.parametrize(
        ("token", "css"),
        [
            (Percentage.S0, "0%"),
            (Percentage.S1_2, "50%"),
            (Percentage.S1_3, "33.333333%"),
            (Percentage.S3_4, "75%"),
            (Percentage.FULL, "100%"),
            (Percentage.FIT, "fit-content"),
        ],
    )
    def test_percentage(self, token, css):
        assert token.to_css() == css

    def test_container(self):
        assert Container.MD.to_css() == "28rem"
        assert Container.S7XL.to_rem() == 80


# =============================================================================
# Borders and shadows
# =============================================================================


class TestBorders:
    """Tests for border and ring tokens."""

    def test_radius(self):
        assert BorderRadius.NONE.to_css() == "0"
        assert BorderRadius.MD.to_css() == "0.375rem"
        assert BorderRadius.FULL.to_css() == "9999px"

    def test_widths(self):
        assert BorderWidth.S0.to_css() == "0"
        assert BorderWidth.S2.to_css() == "2px"
        assert DivideWidth.S4.to_px() == 4
        assert RingWidth.S2.to_css() == "2px"
        assert RingWidth.INSET.to_px() is None


class TestShadows:
    """Tests for shadow literals and tinting."""

    def test_literals(self):
        assert Shadow.SM.to_css() == "0 1px 3px 0 rgb(0 0 0 / 0.1), 0 1px 2px -1px rgb(0 0 0 / 0.1)"
        assert Shadow.NONE.to_css() == "none"
        assert InsetShadow.SM.to_css() == "inset 0 2px 4px rgb(0 0 0 / 0.05)"
        assert DropShadow.MD.to_css() == "drop-shadow(0 3px 3px rgb(0 0 0 / 0.12))"
        assert TextShadow.XS.to_css() == "0px 1px 1px rgb(0 0 0 / 0.2)"

    def test_with_color(self):
        blue = Color.blue(Scale.S500).compute()
        assert Shadow.S2XL.with_color(blue) == "0 25px 50px -12px rgb(59 130 246 / 0.25)"

    def test_with_translucent_color(self):
        blue = Color.blue(Scale.S500).compute().with_alpha(0.5)
        assert Shadow.XS.with_color(blue) == "0 1px 2px 0 rgb(59 130 246 / 0.025)"

    @pytest.mark.parametrize("token", [*Shadow, *InsetShadow, *DropShadow, *TextShadow])
    def test_every_shadow_has_css(self, token):
        assert token.to_css()


# =============================================================================
# Typography
# =============================================================================


class TestTypography:
    """Tests for typography tokens."""

    def test_font_size(self):
        assert FontSize.SM.to_css() == "0.875rem"
        assert FontSize.SM.line_height() == pytest.approx(1.25 / 0.875)
        assert FontSize.BASE.line_height() == pytest.approx(1.5)
        assert FontSize.BASE.to_px() == 16
        assert FontSize.S9XL.to_css() == "8rem"

    def test_font_weight(self):
        assert FontWeight.MEDIUM.to_css() == "500"
        assert FontWeight.BLACK == 900

    def test_family_stack(self):
        assert FontFamily.MONO.to_css().endswith("monospace")

    def test_spacing_and_leading(self):
        assert LetterSpacing.TIGHT.to_em() == -0.025
        assert LetterSpacing.WIDEST.to_css() == "0.1em"
        assert LineHeight.SNUG.to_css() == "1.375"
        assert NumericLineHeight.of(7).to_css() == "7"


# =============================================================================
# Motion
# =============================================================================


class TestMotion:
    """Tests for motion tokens."""

    def test_durations(self):
        assert TransitionDuration.MS300.to_css() == "300ms"
        assert TransitionDuration.MS75.as_millis() == 75
        assert CustomDuration.of(250).to_css() == "250ms"
        with pytest.raises(ValidationError):
            CustomDuration(ms=-1)

    def test_easing(self):
        assert Easing.IN_OUT.to_css() == "cubic-bezier(0.4, 0, 0.2, 1)"
        assert Easing.LINEAR.to_css() == "linear"

    def test_animation(self):
        assert AnimationToken.PULSE.to_css() == "pulse 2s cubic-bezier(0.4, 0, 0.6, 1) infinite"
        assert AnimationToken.SPIN.to_css() == "spin 1s linear infinite"

    def test_transition_property(self):
        assert transition_property_css(TransitionProperty.SHADOW) == "box-shadow"
        assert transition_property_css("height, width") == "height, width"
        assert TransitionProperty.COLORS.to_css().startswith("color, background-color")

    def test_defaults(self):
        defaults = MotionDefaults()
        assert defaults.duration is TransitionDuration.MS150
        assert defaults.easing is Easing.IN_OUT


# =============================================================================
# Effects
# =============================================================================


class TestEffects:
    """Tests for blur, perspective, aspect ratio and cursor tokens."""

    def test_blur(self):
        assert Blur.MD.to_css() == "blur(12px)"
        assert Blur.BASE.radius_px() == Blur.SM.radius_px()
        assert DEFAULT_BLUR is Blur.SM
        assert CustomBlur.of(3).to_css() == "blur(3px)"

    def test_perspective(self):
        assert Perspective.NORMAL.to_css() == "500px"
        assert CustomPerspective.of(750).to_px() == 750

    def test_aspect_ratio(self):
        assert AspectRatio.VIDEO.to_css() == "16 / 9"
        assert AspectRatio.AUTO.ratio() is None
        assert CustomAspectRatio.of(4, 3).to_css() == "4 / 3"

    def test_custom_aspect_ratio_clamps(self):
        assert CustomAspectRatio.of(0, -5) == CustomAspectRatio.of(1, 1)
        with pytest.raises(ValidationError):
            CustomAspectRatio(width=0, height=1)

    def test_cursor(self):
        assert Cursor.NOT_ALLOWED.to_css() == "not-allowed"
