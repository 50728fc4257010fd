"""
Spacing and sizing utilities: per-edge padding/margin and width/height.

Every edge of ``Padding`` and ``Margin`` is independently optional. An unset
edge means "leave as is", never zero.
"""

from __future__ import annotations

from enum import StrEnum
from typing import ClassVar, Self

from pydantic import BaseModel, ConfigDict

from twill.tokens.base import validated_copy
from twill.tokens.spacing import Percentage, Spacing


# =============================================================================
# Padding / Margin
# =============================================================================


class _Edges(BaseModel):
    model_config = ConfigDict(frozen=True)

    css_property: ClassVar[str] = ""

    top: Spacing | None = None
    right: Spacing | None = None
    bottom: Spacing | None = None
    left: Spacing | None = None

    @classmethod
    def all(cls, value: Spacing) -> Self:
        return cls(top=value, right=value, bottom=value, left=value)

    @classmethod
    def symmetric(cls, vertical: Spacing, horizontal: Spacing) -> Self:
        return cls(top=vertical, right=horizontal, bottom=vertical, left=horizontal)

    @classmethod
    def individual(cls, top: Spacing, right: Spacing, bottom: Spacing, left: Spacing) -> Self:
        return cls(top=top, right=right, bottom=bottom, left=left)

    @classmethod
    def x(cls, value: Spacing) -> Self:
        return cls(right=value, left=value)

    @classmethod
    def y(cls, value: Spacing) -> Self:
        return cls(top=value, bottom=value)

    @classmethod
    def only_top(cls, value: Spacing) -> Self:
        return cls(top=value)

    @classmethod
    def only_right(cls, value: Spacing) -> Self:
        return cls(right=value)

    @classmethod
    def only_bottom(cls, value: Spacing) -> Self:
        return cls(bottom=value)

    @classmethod
    def only_left(cls, value: Spacing) -> Self:
        return cls(left=value)

    def edges(self) -> tuple[Spacing | None, Spacing | None, Spacing | None, Spacing | None]:
        """Edges in CSS order: top, right, bottom, left."""
        return (self.top, self.right, self.bottom, self.left)

    def merge(self, overlay: Self) -> Self:
        """Per-edge merge: each edge set on ``overlay`` wins over this one."""
        return type(self)(
            top=overlay.top if overlay.top is not None else self.top,
            right=overlay.right if overlay.right is not None else self.right,
            bottom=overlay.bottom if overlay.bottom is not None else self.bottom,
            left=overlay.left if overlay.left is not None else self.left,
        )

    def to_css(self) -> str:
        top, right, bottom, left = self.edges()
        prop = self.css_property
        if None not in (top, right, bottom, left):
            if top == right == bottom == left:
                return f"{prop}: {top.to_css()}"
            if top == bottom and left == right:
                return f"{prop}: {top.to_css()} {right.to_css()}"
            return f"{prop}: {top.to_css()} {right.to_css()} {bottom.to_css()} {left.to_css()}"

        props = []
        for side, value in zip(("top", "right", "bottom", "left"), self.edges(), strict=True):
            if value is not None:
                props.append(f"{prop}-{side}: {value.to_css()}")
        return "; ".join(props)


class Padding(_Edges):
    css_property: ClassVar[str] = "padding"


class Margin(_Edges):
    css_property: ClassVar[str] = "margin"

    @classmethod
    def auto_x(cls) -> Margin:
        """Center horizontally."""
        return cls(right=Spacing.AUTO, left=Spacing.AUTO)

    @classmethod
    def auto_y(cls) -> Margin:
        return cls(top=Spacing.AUTO, bottom=Spacing.AUTO)

    @classmethod
    def auto(cls) -> Margin:
        return cls.all(Spacing.AUTO)


# =============================================================================
# Sizes
# =============================================================================


class SizeKind(StrEnum):
    SPACING = "spacing"
    PERCENTAGE = "percentage"
    AUTO = "auto"
    FULL = "full"
    PROSE = "prose"
    SCREEN_WIDTH = "screen_width"
    SCREEN_HEIGHT = "screen_height"
    MIN_CONTENT = "min_content"
    MAX_CONTENT = "max_content"
    FIT = "fit"


_SIZE_KEYWORDS: dict[SizeKind, str] = {
    SizeKind.AUTO: "auto",
    SizeKind.FULL: "100%",
    SizeKind.PROSE: "65ch",
    SizeKind.SCREEN_WIDTH: "100vw",
    SizeKind.SCREEN_HEIGHT: "100vh",
    SizeKind.MIN_CONTENT: "min-content",
    SizeKind.MAX_CONTENT: "max-content",
    SizeKind.FIT: "fit-content",
}


class Size(BaseModel):
    """A width/height value: a spacing step, a fraction or a keyword."""

    model_config = ConfigDict(frozen=True)

    kind: SizeKind
    spacing: Spacing | None = None
    percentage: Percentage | None = None

    @classmethod
    def of_spacing(cls, spacing: Spacing) -> Size:
        return cls(kind=SizeKind.SPACING, spacing=spacing)

    @classmethod
    def of_percentage(cls, percentage: Percentage) -> Size:
        return cls(kind=SizeKind.PERCENTAGE, percentage=percentage)

    @classmethod
    def auto(cls) -> Size:
        return cls(kind=SizeKind.AUTO)

    @classmethod
    def full(cls) -> Size:
        return cls(kind=SizeKind.FULL)

    @classmethod
    def prose(cls) -> Size:
        """Comfortable reading width (65ch)."""
        return cls(kind=SizeKind.PROSE)

    @classmethod
    def screen_width(cls) -> Size:
        return cls(kind=SizeKind.SCREEN_WIDTH)

    @classmethod
    def screen_height(cls) -> Size:
        return cls(kind=SizeKind.SCREEN_HEIGHT)

    @classmethod
    def min_content(cls) -> Size:
        return cls(kind=SizeKind.MIN_CONTENT)

    @classmethod
    def max_content(cls) -> Size:
        return cls(kind=SizeKind.MAX_CONTENT)

    @classmethod
    def fit(cls) -> Size:
        return cls(kind=SizeKind.FIT)

    def to_css(self) -> str:
        if self.kind is SizeKind.SPACING and self.spacing is not None:
            return self.spacing.to_css()
        if self.kind is SizeKind.PERCENTAGE and self.percentage is not None:
            return self.percentage.to_css()
        return _SIZE_KEYWORDS.get(self.kind, "auto")


class Width(BaseModel):
    model_config = ConfigDict(frozen=True)

    size: Size | None = None

    @classmethod
    def of(cls, size: Size) -> Width:
        return cls(size=size)

    @classmethod
    def full(cls) -> Width:
        return cls(size=Size.full())

    @classmethod
    def auto(cls) -> Width:
        return cls(size=Size.auto())

    @classmethod
    def screen(cls) -> Width:
        return cls(size=Size.screen_width())

    def to_css(self) -> str:
        if self.size is None:
            return ""
        return f"width: {self.size.to_css()}"


class Height(BaseModel):
    model_config = ConfigDict(frozen=True)

    size: Size | None = None

    @classmethod
    def of(cls, size: Size) -> Height:
        return cls(size=size)

    @classmethod
    def full(cls) -> Height:
        return cls(size=Size.full())

    @classmethod
    def auto(cls) -> Height:
        return cls(size=Size.auto())

    @classmethod
    def screen(cls) -> Height:
        return cls(size=Size.screen_height())

    def to_css(self) -> str:
        if self.size is None:
            return ""
        return f"height: {self.size.to_css()}"


class SizeConstraints(BaseModel):
    """Min/max width and height bounds."""

    model_config = ConfigDict(frozen=True)

    min_width: Size | None = None
    max_width: Size | None = None
    min_height: Size | None = None
    max_height: Size | None = None

    def with_min_width(self, size: Size) -> SizeConstraints:
        return validated_copy(self, min_width=size)

    def with_max_width(self, size: Size) -> SizeConstraints:
        return validated_copy(self, max_width=size)

    def with_min_height(self, size: Size) -> SizeConstraints:
        return validated_copy(self, min_height=size)

    def with_max_height(self, size: Size) -> SizeConstraints:
        return validated_copy(self, max_height=size)

    def to_css(self) -> str:
        props = []
        if self.min_width is not None:
            props.append(f"min-width: {self.min_width.to_css()}")
        if self.max_width is not None:
            props.append(f"max-width: {self.max_width.to_css()}")
        if self.min_height is not None:
            props.append(f"min-height: {self.min_height.to_css()}")
        if self.max_height is not None:
            props.append(f"max-height: {self.max_height.to_css()}")
        return "; ".join(props)
