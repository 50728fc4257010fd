"""
Button preset: a base style overlaid by a variant style, then a size style.

Later layers win wherever they set a field, so a size's radius replaces the
base radius while the variant's colors survive untouched.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from twill.style.style import Style
from twill.tokens.base import validated_copy
from twill.tokens.borders import BorderRadius, BorderStyle, BorderWidth
from twill.tokens.colors import Color, Scale
from twill.tokens.shadows import Shadow
from twill.tokens.spacing import Spacing
from twill.tokens.typography import FontSize, FontWeight, TextAlign
from twill.utilities.layout import Display, FlexContainer
from twill.utilities.spacing import Padding, Width

DISABLED_OPACITY = 0.5


class ButtonVariant(StrEnum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    OUTLINE = "outline"
    GHOST = "ghost"
    DESTRUCTIVE = "destructive"
    LINK = "link"


class ButtonSize(StrEnum):
    SM = "sm"
    MD = "md"
    LG = "lg"
    ICON = "icon"


def _base_style() -> Style:
    return (
        Style()
        .with_display(Display.INLINE_FLEX)
        .with_flex(FlexContainer.centered_row())
        .with_font_weight(FontWeight.MEDIUM)
        .rounded(BorderRadius.MD)
        .with_text_align(TextAlign.CENTER)
    )


def _variant_style(variant: ButtonVariant) -> Style:
    if variant is ButtonVariant.PRIMARY:
        return Style().bg(Color.blue(Scale.S500)).text(Color.slate(Scale.S50)).shadow(Shadow.SM)
    if variant is ButtonVariant.SECONDARY:
        return Style().bg(Color.gray(Scale.S100)).text(Color.gray(Scale.S900))
    if variant is ButtonVariant.OUTLINE:
        return (
            Style()
            .text(Color.gray(Scale.S900))
            .border(BorderWidth.S1, BorderStyle.SOLID, Color.gray(Scale.S200))
        )
    if variant is ButtonVariant.GHOST:
        return Style().text(Color.gray(Scale.S900))
    if variant is ButtonVariant.DESTRUCTIVE:
        return Style().bg(Color.red(Scale.S500)).text(Color.slate(Scale.S50)).shadow(Shadow.SM)
    return Style().text(Color.blue(Scale.S500)).underline()


def _size_style(size: ButtonSize) -> Style:
    if size is ButtonSize.SM:
        return (
            Style()
            .with_padding(Padding.symmetric(Spacing.S1, Spacing.S3))
            .text_size(FontSize.SM)
            .rounded(BorderRadius.SM)
        )
    if size is ButtonSize.MD:
        return (
            Style().with_padding(Padding.symmetric(Spacing.S2, Spacing.S4)).text_size(FontSize.SM)
        )
    if size is ButtonSize.LG:
        return (
            Style()
            .with_padding(Padding.symmetric(Spacing.S3, Spacing.S6))
            .text_size(FontSize.BASE)
            .rounded(BorderRadius.LG)
        )
    return Style().with_padding(Padding.all(Spacing.S2))


class Button(BaseModel):
    """
    Button component description.

    Example:
        css = Button.destructive().lg().full_width().to_css()
    """

    model_config = ConfigDict(frozen=True)

    variant: ButtonVariant = ButtonVariant.PRIMARY
    size: ButtonSize = ButtonSize.MD
    is_disabled: bool = False
    is_full_width: bool = False

    @classmethod
    def new(cls, variant: ButtonVariant, size: ButtonSize) -> Button:
        return cls(variant=variant, size=size)

    @classmethod
    def primary(cls) -> Button:
        return cls.new(ButtonVariant.PRIMARY, ButtonSize.MD)

    @classmethod
    def secondary(cls) -> Button:
        return cls.new(ButtonVariant.SECONDARY, ButtonSize.MD)

    @classmethod
    def outline(cls) -> Button:
        return cls.new(ButtonVariant.OUTLINE, ButtonSize.MD)

    @classmethod
    def ghost(cls) -> Button:
        return cls.new(ButtonVariant.GHOST, ButtonSize.MD)

    @classmethod
    def destructive(cls) -> Button:
        return cls.new(ButtonVariant.DESTRUCTIVE, ButtonSize.MD)

    @classmethod
    def link(cls) -> Button:
        return cls.new(ButtonVariant.LINK, ButtonSize.MD)

    def sm(self) -> Button:
        return validated_copy(self, size=ButtonSize.SM)

    def md(self) -> Button:
        return validated_copy(self, size=ButtonSize.MD)

    def lg(self) -> Button:
        return validated_copy(self, size=ButtonSize.LG)

    def icon(self) -> Button:
        return validated_copy(self, size=ButtonSize.ICON)

    def disabled(self) -> Button:
        return validated_copy(self, is_disabled=True)

    def full_width(self) -> Button:
        return validated_copy(self, is_full_width=True)

    def style(self) -> Style:
        """Base, then variant, then size; full width and disabled applied last."""
        style = _base_style().merge(_variant_style(self.variant)).merge(_size_style(self.size))
        if self.is_full_width:
            style = style.with_width(Width.full())
        if self.is_disabled:
            style = style.with_opacity(DISABLED_OPACITY)
        return style

    def to_css(self) -> str:
        return self.style().to_css()
