"""
The ``Style`` aggregate: every style property, each independently optional.

A ``Style`` is immutable. Setters return a new ``Style`` with exactly the
named field(s) replaced. ``merge`` combines two styles field by field with the
overlay winning wherever it sets a value:

    merged.f = overlay.f if overlay.f is not None else base.f

``None`` always means "unspecified". It never stands for an explicit zero,
and merge preserves that distinction. Merge is order-sensitive (not
commutative); ``merge_all`` folds a sequence left to right, so later styles
take precedence.

Coupled properties (border width/style/color, outline width/style/color, ring
width/color, shadow kind/color) are set together through ``border``,
``outline``, ``ring`` and ``shadow_with_color``.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from twill.tokens.aspect_ratio import AspectRatio, CustomAspectRatio
from twill.tokens.base import format_number, validated_copy
from twill.tokens.blur import Blur, CustomBlur
from twill.tokens.borders import BorderRadius, BorderStyle, BorderWidth, OutlineStyle, RingWidth
from twill.tokens.colors import Color, ColorValue
from twill.tokens.cursor import Cursor
from twill.tokens.motion import (
    AnimationToken,
    Duration,
    Easing,
    TransitionProperty,
    transition_property_css,
)
from twill.tokens.perspective import CustomPerspective, Perspective
from twill.tokens.shadows import Shadow, TextShadow
from twill.tokens.spacing import Container, Spacing
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
from twill.utilities.layout import (
    AlignSelf,
    Columns,
    Display,
    FlexContainer,
    FlexItem,
    GridContainer,
    ObjectFit,
    Overflow,
    Position,
    Visibility,
    ZIndex,
)
from twill.utilities.spacing import Height, Margin, Padding, SizeConstraints, Width

logger = logging.getLogger(__name__)

ColorLike = Color | ColorValue


def _color_css(color: ColorLike) -> str:
    return color.compute().to_css()


class Style(BaseModel):
    """
    Backend-agnostic style description.

    Example:
        card = (
            Style()
            .with_padding(Padding.all(Spacing.S4))
            .bg(Color.white())
            .rounded(BorderRadius.LG)
            .shadow(Shadow.MD)
        )
    """

    model_config = ConfigDict(frozen=True)

    # Layout
    display: Display | None = None
    position: Position | None = None
    z_index: ZIndex | None = None
    overflow: Overflow | None = None
    overflow_x: Overflow | None = None
    overflow_y: Overflow | None = None
    visibility: Visibility | None = None
    aspect_ratio: AspectRatio | CustomAspectRatio | None = None
    columns: Columns | None = None
    object_fit: ObjectFit | None = None

    # Flex / grid
    flex: FlexContainer | None = None
    grid: GridContainer | None = None
    flex_item: FlexItem | None = None
    align_self: AlignSelf | None = None
    column_gap: Spacing | None = None

    # Spacing
    padding: Padding | None = None
    margin: Margin | None = None

    # Size
    width: Width | None = None
    height: Height | None = None
    constraints: SizeConstraints | None = None

    # Background
    background_color: ColorLike | None = None
    opacity: float | None = Field(default=None, ge=0.0, le=1.0)

    # Border
    border_radius: BorderRadius | None = None
    border_width: BorderWidth | None = None
    border_style: BorderStyle | None = None
    border_color: ColorLike | None = None

    # Outline / ring
    outline_width: BorderWidth | None = None
    outline_style: OutlineStyle | None = None
    outline_color: ColorLike | None = None
    ring_width: RingWidth | None = None
    ring_color: ColorLike | None = None

    # Shadow
    box_shadow: Shadow | None = None
    shadow_color: ColorLike | None = None

    # Typography
    font_family: FontFamily | None = None
    font_size: FontSize | None = None
    font_weight: FontWeight | None = None
    letter_spacing: LetterSpacing | None = None
    line_height: LineHeight | NumericLineHeight | None = None
    text_align: TextAlign | None = None
    text_decoration: TextDecoration | None = None
    text_transform: TextTransform | None = None
    text_color: ColorLike | None = None
    text_shadow: TextShadow | None = None
    text_overflow: TextOverflow | None = None
    white_space: WhiteSpace | None = None
    word_break: WordBreak | None = None

    # Effects
    blur: Blur | CustomBlur | None = None
    perspective: Perspective | CustomPerspective | None = None

    # Motion
    transition_property: TransitionProperty | str | None = None
    transition_duration: Duration | None = None
    transition_timing_function: Easing | None = None
    transition_delay: Duration | None = None
    animation: AnimationToken | None = None

    # Interaction
    cursor: Cursor | None = None

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def new(cls) -> Style:
        return cls()

    @classmethod
    def flex_row(cls) -> Style:
        return cls(display=Display.FLEX, flex=FlexContainer.row())

    @classmethod
    def flex_col(cls) -> Style:
        return cls(display=Display.FLEX, flex=FlexContainer.col())

    @classmethod
    def centered_row(cls) -> Style:
        return cls(display=Display.FLEX, flex=FlexContainer.centered_row())

    @classmethod
    def centered_col(cls) -> Style:
        return cls(display=Display.FLEX, flex=FlexContainer.centered_col())

    @classmethod
    def hidden(cls) -> Style:
        return cls(display=Display.HIDDEN)

    @classmethod
    def w_full(cls) -> Style:
        return cls(width=Width.full())

    @classmethod
    def h_full(cls) -> Style:
        return cls(height=Height.full())

    @classmethod
    def screen(cls) -> Style:
        return cls(width=Width.screen(), height=Height.screen())

    def _set(self, **fields: Any) -> Style:
        return validated_copy(self, **fields)

    # =========================================================================
    # Layout
    # =========================================================================

    def with_display(self, display: Display) -> Style:
        return self._set(display=display)

    def with_position(self, position: Position) -> Style:
        return self._set(position=position)

    def with_z_index(self, z_index: ZIndex) -> Style:
        return self._set(z_index=z_index)

    def with_overflow(self, overflow: Overflow) -> Style:
        return self._set(overflow=overflow)

    def with_overflow_x(self, overflow: Overflow) -> Style:
        return self._set(overflow_x=overflow)

    def with_overflow_y(self, overflow: Overflow) -> Style:
        return self._set(overflow_y=overflow)

    def with_visibility(self, visibility: Visibility) -> Style:
        return self._set(visibility=visibility)

    def with_aspect_ratio(self, ratio: AspectRatio | CustomAspectRatio) -> Style:
        return self._set(aspect_ratio=ratio)

    def with_object_fit(self, fit: ObjectFit) -> Style:
        return self._set(object_fit=fit)

    def with_columns(self, columns: Columns) -> Style:
        return self._set(columns=columns)

    def columns_count(self, n: int) -> Style:
        """``columns-<n>``; counts below 1 become 1."""
        return self._set(columns=Columns.count(n))

    def columns_width(self, container: Container) -> Style:
        return self._set(columns=Columns.container_width(container))

    def columns_width_px(self, px: int) -> Style:
        return self._set(columns=Columns.pixel_width(px))

    def columns_auto(self) -> Style:
        return self._set(columns=Columns.auto())

    def columns_max_count(self, n: int) -> Style:
        """Cap the column count of a width-based layout; values below 1 become 1."""
        base = self.columns if self.columns is not None else Columns.auto()
        return self._set(columns=base.with_max_count(n))

    # =========================================================================
    # Flex / grid
    # =========================================================================

    def with_flex(self, flex: FlexContainer) -> Style:
        return self._set(flex=flex)

    def with_grid(self, grid: GridContainer) -> Style:
        return self._set(grid=grid)

    def gap(self, spacing: Spacing) -> Style:
        """Set the gap on the grid container if one is set, otherwise on the flex container."""
        if self.grid is not None and self.flex is None:
            return self._set(grid=self.grid.with_gap(spacing))
        flex = self.flex if self.flex is not None else FlexContainer()
        return self._set(flex=flex.with_gap(spacing))

    def with_column_gap(self, spacing: Spacing) -> Style:
        return self._set(column_gap=spacing)

    def with_align_self(self, align: AlignSelf) -> Style:
        return self._set(align_self=align)

    def with_flex_item(self, item: FlexItem) -> Style:
        return self._set(flex_item=item)

    def flex_number(self, value: int) -> Style:
        return self._set(flex_item=FlexItem.number(value))

    def flex_fraction(self, numerator: int, denominator: int) -> Style:
        return self._set(flex_item=FlexItem.fraction(numerator, denominator))

    def flex_auto(self) -> Style:
        return self._set(flex_item=FlexItem.auto())

    def flex_initial(self) -> Style:
        return self._set(flex_item=FlexItem.initial())

    def flex_none(self) -> Style:
        return self._set(flex_item=FlexItem.none())

    def flex_custom_property(self, name: str) -> Style:
        return self._set(flex_item=FlexItem.custom_property(name))

    def flex_arbitrary(self, value: str) -> Style:
        return self._set(flex_item=FlexItem.arbitrary(value))

    # =========================================================================
    # Spacing / size
    # =========================================================================

    def with_padding(self, padding: Padding) -> Style:
        return self._set(padding=padding)

    def with_margin(self, margin: Margin) -> Style:
        return self._set(margin=margin)

    def with_width(self, width: Width) -> Style:
        return self._set(width=width)

    def with_height(self, height: Height) -> Style:
        return self._set(height=height)

    def with_constraints(self, constraints: SizeConstraints) -> Style:
        return self._set(constraints=constraints)

    # =========================================================================
    # Background
    # =========================================================================

    def bg(self, color: ColorLike) -> Style:
        return self._set(background_color=color)

    def background(self, color: ColorLike) -> Style:
        return self.bg(color)

    def with_background_color(self, color: ColorLike) -> Style:
        return self.bg(color)

    def with_opacity(self, opacity: float) -> Style:
        """Opacity clamped into [0, 1]."""
        return self._set(opacity=min(max(float(opacity), 0.0), 1.0))

    # =========================================================================
    # Border / outline / ring / shadow
    # =========================================================================

    def rounded(self, radius: BorderRadius) -> Style:
        return self._set(border_radius=radius)

    def with_border_radius(self, radius: BorderRadius) -> Style:
        return self.rounded(radius)

    def border(self, width: BorderWidth, style: BorderStyle, color: ColorLike) -> Style:
        return self._set(border_width=width, border_style=style, border_color=color)

    def outline(self, width: BorderWidth, style: OutlineStyle, color: ColorLike) -> Style:
        return self._set(outline_width=width, outline_style=style, outline_color=color)

    def ring(self, width: RingWidth, color: ColorLike) -> Style:
        return self._set(ring_width=width, ring_color=color)

    def shadow(self, shadow: Shadow) -> Style:
        return self._set(box_shadow=shadow)

    def with_box_shadow(self, shadow: Shadow) -> Style:
        return self.shadow(shadow)

    def shadow_with_color(self, shadow: Shadow, color: ColorLike) -> Style:
        return self._set(box_shadow=shadow, shadow_color=color)

    # =========================================================================
    # Typography
    # =========================================================================

    def font(self, family: FontFamily) -> Style:
        return self._set(font_family=family)

    def with_font_family(self, family: FontFamily) -> Style:
        return self.font(family)

    def text_size(self, size: FontSize) -> Style:
        return self._set(font_size=size)

    def with_font_size(self, size: FontSize) -> Style:
        return self.text_size(size)

    def with_font_weight(self, weight: FontWeight) -> Style:
        return self._set(font_weight=weight)

    def tracking(self, spacing: LetterSpacing) -> Style:
        return self._set(letter_spacing=spacing)

    def with_letter_spacing(self, spacing: LetterSpacing) -> Style:
        return self.tracking(spacing)

    def leading(self, height: LineHeight | NumericLineHeight) -> Style:
        return self._set(line_height=height)

    def with_line_height(self, height: LineHeight | NumericLineHeight) -> Style:
        return self.leading(height)

    def with_text_align(self, align: TextAlign) -> Style:
        return self._set(text_align=align)

    def with_text_decoration(self, decoration: TextDecoration) -> Style:
        return self._set(text_decoration=decoration)

    def underline(self) -> Style:
        return self._set(text_decoration=TextDecoration.UNDERLINE)

    def with_text_transform(self, transform: TextTransform) -> Style:
        return self._set(text_transform=transform)

    def uppercase(self) -> Style:
        return self._set(text_transform=TextTransform.UPPERCASE)

    def text(self, color: ColorLike) -> Style:
        return self._set(text_color=color)

    def with_text_color(self, color: ColorLike) -> Style:
        return self.text(color)

    def with_text_shadow(self, shadow: TextShadow) -> Style:
        return self._set(text_shadow=shadow)

    def with_text_overflow(self, overflow: TextOverflow) -> Style:
        return self._set(text_overflow=overflow)

    def with_white_space(self, white_space: WhiteSpace) -> Style:
        return self._set(white_space=white_space)

    def with_word_break(self, word_break: WordBreak) -> Style:
        return self._set(word_break=word_break)

    # =========================================================================
    # Effects / motion / interaction
    # =========================================================================

    def with_blur(self, blur: Blur | CustomBlur) -> Style:
        return self._set(blur=blur)

    def with_perspective(self, perspective: Perspective | CustomPerspective) -> Style:
        return self._set(perspective=perspective)

    def with_transition_property(self, prop: TransitionProperty | str) -> Style:
        return self._set(transition_property=prop)

    def with_transition_duration(self, duration: Duration) -> Style:
        return self._set(transition_duration=duration)

    def transition_ease(self, easing: Easing) -> Style:
        return self._set(transition_timing_function=easing)

    def with_transition_timing_function(self, easing: Easing) -> Style:
        return self.transition_ease(easing)

    def with_transition_delay(self, delay: Duration) -> Style:
        return self._set(transition_delay=delay)

    def animate(self, animation: AnimationToken) -> Style:
        return self._set(animation=animation)

    def with_animation(self, animation: AnimationToken) -> Style:
        return self.animate(animation)

    def with_cursor(self, cursor: Cursor) -> Style:
        return self._set(cursor=cursor)

    # =========================================================================
    # Merge and inspection
    # =========================================================================

    def merge(self, overlay: Style) -> Style:
        """Field-wise merge; every field set on ``overlay`` wins."""
        merged = {}
        for name in type(self).model_fields:
            value = getattr(overlay, name)
            merged[name] = value if value is not None else getattr(self, name)
        return validated_copy(self, **merged)

    def populated_fields(self) -> dict[str, Any]:
        """The fields that are set, in declaration order."""
        return {
            name: getattr(self, name)
            for name in type(self).model_fields
            if getattr(self, name) is not None
        }

    def is_empty(self) -> bool:
        return not self.populated_fields()

    # =========================================================================
    # CSS text
    # =========================================================================

    def _shadow_layers(self) -> list[str]:
        layers = []
        if self.ring_width is not None:
            color = _color_css(self.ring_color) if self.ring_color is not None else "currentColor"
            if self.ring_width is RingWidth.INSET:
                layers.append(f"inset 0 0 0 1px {color}")
            else:
                layers.append(f"0 0 0 {self.ring_width.to_css()} {color}")
        if self.box_shadow is not None:
            if self.shadow_color is not None and self.box_shadow is not Shadow.NONE:
                layers.append(self.box_shadow.with_color(self.shadow_color.compute()))
            elif self.box_shadow is not Shadow.NONE or not layers:
                layers.append(self.box_shadow.to_css())
        return layers

    def to_css(self) -> str:
        """Declarations for every populated field, joined with ``"; "``."""
        props: list[str] = []

        def add(declaration: str) -> None:
            if declaration:
                props.append(declaration)

        # Layout
        if self.display is not None:
            add(f"display: {self.display.to_css()}")
        if self.position is not None:
            add(f"position: {self.position.to_css()}")
        if self.z_index is not None:
            add(f"z-index: {self.z_index.to_css()}")
        if self.overflow is not None:
            add(f"overflow: {self.overflow.to_css()}")
        if self.overflow_x is not None:
            add(f"overflow-x: {self.overflow_x.to_css()}")
        if self.overflow_y is not None:
            add(f"overflow-y: {self.overflow_y.to_css()}")
        if self.visibility is not None:
            add(f"visibility: {self.visibility.to_css()}")
        if self.aspect_ratio is not None:
            add(f"aspect-ratio: {self.aspect_ratio.to_css()}")
        if self.columns is not None:
            add(f"columns: {self.columns.to_css()}")
        if self.object_fit is not None:
            add(f"object-fit: {self.object_fit.to_css()}")

        # Flex / grid
        if self.flex is not None:
            add(self.flex.to_css())
        if self.grid is not None:
            add(self.grid.to_css())
        if self.flex_item is not None:
            add(f"flex: {self.flex_item.to_css()}")
        if self.align_self is not None:
            add(f"align-self: {self.align_self.to_css()}")
        if self.column_gap is not None:
            add(f"column-gap: {self.column_gap.to_css()}")

        # Spacing / size
        if self.padding is not None:
            add(self.padding.to_css())
        if self.margin is not None:
            add(self.margin.to_css())
        if self.width is not None:
            add(self.width.to_css())
        if self.height is not None:
            add(self.height.to_css())
        if self.constraints is not None:
            add(self.constraints.to_css())

        # Background
        if self.background_color is not None:
            add(f"background-color: {_color_css(self.background_color)}")
        if self.opacity is not None:
            add(f"opacity: {format_number(self.opacity)}")

        # Border / outline
        if self.border_radius is not None:
            add(f"border-radius: {self.border_radius.to_css()}")
        if self.border_width is not None:
            add(f"border-width: {self.border_width.to_css()}")
        if self.border_style is not None:
            add(f"border-style: {self.border_style.to_css()}")
        if self.border_color is not None:
            add(f"border-color: {_color_css(self.border_color)}")
        if self.outline_width is not None:
            add(f"outline-width: {self.outline_width.to_css()}")
        if self.outline_style is not None:
            add(f"outline-style: {self.outline_style.to_css()}")
        if self.outline_color is not None:
            add(f"outline-color: {_color_css(self.outline_color)}")

        # Shadow (ring layers first, as Tailwind composes them)
        layers = self._shadow_layers()
        if layers:
            add(f"box-shadow: {', '.join(layers)}")

        # Typography
        if self.font_family is not None:
            add(f"font-family: {self.font_family.to_css()}")
        if self.font_size is not None:
            add(f"font-size: {self.font_size.to_css()}")
        if self.font_weight is not None:
            add(f"font-weight: {self.font_weight.to_css()}")
        if self.letter_spacing is not None:
            add(f"letter-spacing: {self.letter_spacing.to_css()}")
        if self.line_height is not None:
            add(f"line-height: {self.line_height.to_css()}")
        if self.text_align is not None:
            add(f"text-align: {self.text_align.to_css()}")
        if self.text_decoration is not None:
            add(f"text-decoration: {self.text_decoration.to_css()}")
        if self.text_transform is not None:
            add(f"text-transform: {self.text_transform.to_css()}")
        if self.text_color is not None:
            add(f"color: {_color_css(self.text_color)}")
        if self.text_shadow is not None:
            add(f"text-shadow: {self.text_shadow.to_css()}")
        if self.text_overflow is not None:
            add(f"text-overflow: {self.text_overflow.to_css()}")
        if self.white_space is not None:
            add(f"white-space: {self.white_space.to_css()}")
        if self.word_break is not None:
            add(f"word-break: {self.word_break.to_css()}")

        # Effects
        if self.blur is not None:
            add(f"filter: {self.blur.to_css()}")
        if self.perspective is not None:
            add(f"perspective: {self.perspective.to_css()}")

        # Motion
        if self.transition_property is not None:
            add(f"transition-property: {transition_property_css(self.transition_property)}")
        if self.transition_duration is not None:
            add(f"transition-duration: {self.transition_duration.to_css()}")
        if self.transition_timing_function is not None:
            add(f"transition-timing-function: {self.transition_timing_function.to_css()}")
        if self.transition_delay is not None:
            add(f"transition-delay: {self.transition_delay.to_css()}")
        if self.animation is not None:
            add(f"animation: {self.animation.to_css()}")

        if self.cursor is not None:
            add(f"cursor: {self.cursor.to_css()}")

        return "; ".join(props)

    def to_inline_style(self) -> str:
        """An HTML ``style="..."`` attribute."""
        return f'style="{self.to_css()}"'

    def to_class_content(self) -> str:
        """The body of a CSS rule: ``{ ... }``."""
        return f"{{ {self.to_css()} }}"


def merge(base: Style, overlay: Style) -> Style:
    return base.merge(overlay)


def merge_all(*styles: Style) -> Style:
    """Left fold of ``merge``: later styles take precedence."""
    result = Style()
    for style in styles:
        result = result.merge(style)
    return result
