"""Tests for the Button preset."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from twill.components import Button, ButtonSize, ButtonVariant
from twill.tokens.base import validated_copy
from twill.tokens.borders import BorderRadius, BorderStyle, BorderWidth
from twill.tokens.colors import Color, Scale
from twill.tokens.shadows import Shadow
from twill.tokens.spacing import Spacing
from twill.tokens.typography import FontSize, FontWeight, TextAlign, TextDecoration
from twill.utilities.layout import Display, FlexContainer
from twill.utilities.spacing import Padding, Width

ALL_BUTTONS = [
    Button.primary,
    Button.secondary,
    Button.outline,
    Button.ghost,
    Button.destructive,
    Button.link,
]


class TestButtonConstruction:
    """Tests for Button factories and modifiers."""

    def test_defaults(self):
        button = Button.primary()
        assert button.variant is ButtonVariant.PRIMARY
        assert button.size is ButtonSize.MD
        assert button.is_disabled is False
        assert button.is_full_width is False

    def test_modifiers_return_new_buttons(self):
        button = Button.ghost()
        large = button.lg().disabled()
        assert button.size is ButtonSize.MD
        assert large.size is ButtonSize.LG
        assert large.is_disabled is True

    def test_size_helpers(self):
        assert Button.primary().sm().size is ButtonSize.SM
        assert Button.primary().lg().md().size is ButtonSize.MD
        assert Button.primary().icon().size is ButtonSize.ICON

    def test_copies_are_validated(self):
        with pytest.raises(ValidationError):
            validated_copy(Button.primary(), size="huge")
        assert validated_copy(Button.primary(), size="sm").size is ButtonSize.SM


class TestButtonStyle:
    """Tests for the layered Button style."""

    def test_base_layer(self):
        style = Button.ghost().style()
        assert style.display is Display.INLINE_FLEX
        assert style.flex == FlexContainer.centered_row()
        assert style.font_weight is FontWeight.MEDIUM
        assert style.text_align is TextAlign.CENTER

    def test_primary(self):
        style = Button.primary().style()
        assert style.background_color == Color.blue(Scale.S500)
        assert style.text_color == Color.slate(Scale.S50)
        assert style.box_shadow is Shadow.SM
        assert style.padding == Padding.symmetric(Spacing.S2, Spacing.S4)
        assert style.font_size is FontSize.SM
        assert style.border_radius is BorderRadius.MD

    def test_outline_border(self):
        style = Button.outline().style()
        assert style.border_width is BorderWidth.S1
        assert style.border_style is BorderStyle.SOLID
        assert style.border_color == Color.gray(Scale.S200)
        assert style.background_color is None

    def test_link(self):
        style = Button.link().style()
        assert style.text_decoration is TextDecoration.UNDERLINE
        assert style.text_color == Color.blue(Scale.S500)

    def test_size_radius_overrides_base(self):
        assert Button.primary().sm().style().border_radius is BorderRadius.SM
        assert Button.primary().lg().style().border_radius is BorderRadius.LG
        assert Button.primary().icon().style().padding == Padding.all(Spacing.S2)

    def test_size_keeps_variant_colors(self):
        style = Button.destructive().lg().style()
        assert style.background_color == Color.red(Scale.S500)
        assert style.font_size is FontSize.BASE

    @pytest.mark.parametrize("factory", ALL_BUTTONS)
    def test_full_width_always_applies(self, factory):
        """Full width wins regardless of variant styling."""
        assert factory().full_width().style().width == Width.full()
        assert factory().style().width is None

    @pytest.mark.parametrize("factory", ALL_BUTTONS)
    def test_disabled_always_applies(self, factory):
        """Disabled opacity wins regardless of variant styling."""
        assert factory().disabled().style().opacity == 0.5
        assert factory().style().opacity is None

    def test_to_css(self):
        css = Button.primary().disabled().to_css()
        assert css.startswith("display: inline-flex; flex-direction: row")
        assert "background-color: #3b82f6" in css
        assert "opacity: 0.5" in css
        assert "padding: 0.5rem 1rem" in css
