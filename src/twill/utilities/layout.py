"""
Layout utilities: display, positioning, flexbox, grid, columns and overflow.

These values are descriptive only. Nothing here lays anything out; adapters
and stylesheet generation read them.
"""

from __future__ import annotations

import logging
import re
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from twill.tokens.base import CssToken, validated_copy
from twill.tokens.spacing import Container, Spacing

logger = logging.getLogger(__name__)


# =============================================================================
# Keyword tokens
# =============================================================================


class Display(CssToken):
    BLOCK = "block"
    INLINE_BLOCK = "inline-block"
    INLINE = "inline"
    FLEX = "flex"
    INLINE_FLEX = "inline-flex"
    GRID = "grid"
    INLINE_GRID = "inline-grid"
    HIDDEN = "none"
    CONTENTS = "contents"
    FLOW_ROOT = "flow-root"


class Position(CssToken):
    STATIC = "static"
    RELATIVE = "relative"
    ABSOLUTE = "absolute"
    FIXED = "fixed"
    STICKY = "sticky"


class FlexDirection(CssToken):
    ROW = "row"
    ROW_REVERSE = "row-reverse"
    COL = "column"
    COL_REVERSE = "column-reverse"

    @classmethod
    def from_tailwind_class(cls, class_name: str) -> FlexDirection | None:
        """Parse ``flex-row``, ``flex-col-reverse`` and friends; ``None`` otherwise."""
        direction = _DIRECTION_CLASSES.get(class_name.strip())
        if direction is None:
            logger.debug(f"Not a flex-direction class: {class_name!r}")
        return direction


_DIRECTION_CLASSES: dict[str, FlexDirection] = {
    "flex-row": FlexDirection.ROW,
    "flex-row-reverse": FlexDirection.ROW_REVERSE,
    "flex-col": FlexDirection.COL,
    "flex-col-reverse": FlexDirection.COL_REVERSE,
}


class FlexWrap(CssToken):
    WRAP = "wrap"
    WRAP_REVERSE = "wrap-reverse"
    NO_WRAP = "nowrap"


class JustifyContent(CssToken):
    START = "flex-start"
    END = "flex-end"
    CENTER = "center"
    BETWEEN = "space-between"
    AROUND = "space-around"
    EVENLY = "space-evenly"


class AlignItems(CssToken):
    START = "flex-start"
    END = "flex-end"
    CENTER = "center"
    BASELINE = "baseline"
    STRETCH = "stretch"


class AlignSelf(CssToken):
    AUTO = "auto"
    START = "flex-start"
    END = "flex-end"
    CENTER = "center"
    BASELINE = "baseline"
    STRETCH = "stretch"


class Overflow(CssToken):
    AUTO = "auto"
    HIDDEN = "hidden"
    CLIP = "clip"
    VISIBLE = "visible"
    SCROLL = "scroll"


class ZIndex(CssToken):
    AUTO = "auto"
    S0 = "0"
    S10 = "10"
    S20 = "20"
    S30 = "30"
    S40 = "40"
    S50 = "50"


class Visibility(CssToken):
    VISIBLE = "visible"
    HIDDEN = "hidden"
    COLLAPSE = "collapse"


class PlaceContent(CssToken):
    CENTER = "center"
    START = "start"
    END = "end"
    BETWEEN = "space-between"
    AROUND = "space-around"
    EVENLY = "space-evenly"
    BASELINE = "baseline"
    STRETCH = "stretch"


class PlaceItems(CssToken):
    CENTER = "center"
    START = "start"
    END = "end"
    BASELINE = "baseline"
    STRETCH = "stretch"


class JustifyItems(CssToken):
    NORMAL = "normal"
    CENTER = "center"
    START = "start"
    END = "end"
    STRETCH = "stretch"


class JustifySelf(CssToken):
    AUTO = "auto"
    START = "start"
    END = "end"
    CENTER = "center"
    STRETCH = "stretch"


class ObjectFit(CssToken):
    CONTAIN = "contain"
    COVER = "cover"
    FILL = "fill"
    NONE = "none"
    SCALE_DOWN = "scale-down"


# =============================================================================
# Flex container and item
# =============================================================================


class FlexContainer(BaseModel):
    """Flexbox container properties; unset fields are left to the renderer."""

    model_config = ConfigDict(frozen=True)

    direction: FlexDirection | None = None
    wrap: FlexWrap | None = None
    justify: JustifyContent | None = None
    align: AlignItems | None = None
    gap: Spacing | None = None
    row_gap: Spacing | None = None
    col_gap: Spacing | None = None

    @classmethod
    def row(cls) -> FlexContainer:
        return cls(direction=FlexDirection.ROW)

    @classmethod
    def col(cls) -> FlexContainer:
        return cls(direction=FlexDirection.COL)

    @classmethod
    def centered_row(cls) -> FlexContainer:
        return cls(
            direction=FlexDirection.ROW,
            justify=JustifyContent.CENTER,
            align=AlignItems.CENTER,
        )

    @classmethod
    def centered_col(cls) -> FlexContainer:
        return cls(
            direction=FlexDirection.COL,
            justify=JustifyContent.CENTER,
            align=AlignItems.CENTER,
        )

    def with_direction(self, direction: FlexDirection) -> FlexContainer:
        return validated_copy(self, direction=direction)

    def with_wrap(self, wrap: FlexWrap) -> FlexContainer:
        return validated_copy(self, wrap=wrap)

    def with_justify(self, justify: JustifyContent) -> FlexContainer:
        return validated_copy(self, justify=justify)

    def with_align(self, align: AlignItems) -> FlexContainer:
        return validated_copy(self, align=align)

    def with_gap(self, gap: Spacing) -> FlexContainer:
        return validated_copy(self, gap=gap)

    def with_row_gap(self, gap: Spacing) -> FlexContainer:
        return validated_copy(self, row_gap=gap)

    def with_col_gap(self, gap: Spacing) -> FlexContainer:
        return validated_copy(self, col_gap=gap)

    def to_css(self) -> str:
        props = []
        if self.direction is not None:
            props.append(f"flex-direction: {self.direction.to_css()}")
        if self.wrap is not None:
            props.append(f"flex-wrap: {self.wrap.to_css()}")
        if self.justify is not None:
            props.append(f"justify-content: {self.justify.to_css()}")
        if self.align is not None:
            props.append(f"align-items: {self.align.to_css()}")
        if self.gap is not None:
            props.append(f"gap: {self.gap.to_css()}")
        if self.row_gap is not None:
            props.append(f"row-gap: {self.row_gap.to_css()}")
        if self.col_gap is not None:
            props.append(f"column-gap: {self.col_gap.to_css()}")
        return "; ".join(props)


class FlexItemKind(StrEnum):
    NUMBER = "number"
    FRACTION = "fraction"
    AUTO = "auto"
    INITIAL = "initial"
    NONE = "none"
    CUSTOM_PROPERTY = "custom_property"
    ARBITRARY = "arbitrary"


_NUMBER_CLASS = re.compile(r"[0-9]+")
_FRACTION_CLASS = re.compile(r"(?P<num>[0-9]+)/(?P<den>[0-9]+)")


class FlexItem(BaseModel):
    """
    The ``flex`` shorthand on a flex child (``flex-1``, ``flex-1/2``,
    ``flex-auto``, ``flex-(--grow)``, ``flex-[2_1_0%]``).
    """

    model_config = ConfigDict(frozen=True)

    kind: FlexItemKind
    value: int | None = Field(default=None, ge=0)
    numerator: int | None = Field(default=None, ge=0)
    denominator: int | None = Field(default=None, ge=1)
    raw: str | None = None

    @classmethod
    def number(cls, value: int) -> FlexItem:
        return cls(kind=FlexItemKind.NUMBER, value=max(value, 0))

    @classmethod
    def fraction(cls, numerator: int, denominator: int) -> FlexItem:
        """``flex: calc(n/d * 100%)``; a denominator below 1 is raised to 1."""
        return cls(
            kind=FlexItemKind.FRACTION,
            numerator=max(numerator, 0),
            denominator=max(denominator, 1),
        )

    @classmethod
    def auto(cls) -> FlexItem:
        return cls(kind=FlexItemKind.AUTO)

    @classmethod
    def initial(cls) -> FlexItem:
        return cls(kind=FlexItemKind.INITIAL)

    @classmethod
    def none(cls) -> FlexItem:
        return cls(kind=FlexItemKind.NONE)

    @classmethod
    def custom_property(cls, name: str) -> FlexItem:
        """``flex: var(--name)``; the leading ``--`` is added when missing."""
        prop = name if name.startswith("--") else f"--{name}"
        return cls(kind=FlexItemKind.CUSTOM_PROPERTY, raw=prop)

    @classmethod
    def arbitrary(cls, value: str) -> FlexItem:
        """Raw shorthand; underscores stand for spaces as in Tailwind classes."""
        return cls(kind=FlexItemKind.ARBITRARY, raw=value)

    @classmethod
    def from_tailwind_class(cls, class_name: str) -> FlexItem | None:
        """Parse a ``flex-*`` item class. Unknown or malformed classes return ``None``."""
        text = class_name.strip()
        if not text.startswith("flex-"):
            logger.debug(f"Not a flex item class: {class_name!r}")
            return None
        rest = text[len("flex-") :]

        if rest == "auto":
            return cls.auto()
        if rest == "initial":
            return cls.initial()
        if rest == "none":
            return cls.none()
        if _NUMBER_CLASS.fullmatch(rest):
            return cls.number(int(rest))
        fraction = _FRACTION_CLASS.fullmatch(rest)
        if fraction:
            return cls.fraction(int(fraction.group("num")), int(fraction.group("den")))
        if rest.startswith("(") and rest.endswith(")"):
            inner = rest[1:-1]
            if inner.startswith("--") and len(inner) > 2:
                return cls.custom_property(inner)
        if rest.startswith("[") and rest.endswith("]") and len(rest) > 2:
            return cls.arbitrary(rest[1:-1])

        logger.debug(f"Unrecognized flex item class: {class_name!r}")
        return None

    def to_css(self) -> str:
        if self.kind is FlexItemKind.NUMBER:
            return str(self.value)
        if self.kind is FlexItemKind.FRACTION:
            return f"calc({self.numerator}/{self.denominator} * 100%)"
        if self.kind is FlexItemKind.AUTO:
            return "1 1 auto"
        if self.kind is FlexItemKind.INITIAL:
            return "0 1 auto"
        if self.kind is FlexItemKind.CUSTOM_PROPERTY:
            return f"var({self.raw})"
        if self.kind is FlexItemKind.ARBITRARY:
            return (self.raw or "").replace("_", " ")
        return "none"


# =============================================================================
# Grid
# =============================================================================


class GridTemplate(StrEnum):
    """Equal-width grid tracks (``grid-cols-3``)."""

    COLS_1 = "1"
    COLS_2 = "2"
    COLS_3 = "3"
    COLS_4 = "4"
    COLS_5 = "5"
    COLS_6 = "6"
    COLS_12 = "12"
    NONE = "none"

    def to_css(self) -> str:
        if self is GridTemplate.NONE:
            return "none"
        return f"repeat({self.value}, minmax(0, 1fr))"


class GridContainer(BaseModel):
    model_config = ConfigDict(frozen=True)

    columns: GridTemplate | None = None
    rows: GridTemplate | None = None
    gap: Spacing | None = None
    row_gap: Spacing | None = None
    col_gap: Spacing | None = None
    justify: JustifyContent | None = None
    align: AlignItems | None = None

    @classmethod
    def cols_2(cls) -> GridContainer:
        return cls(columns=GridTemplate.COLS_2)

    @classmethod
    def cols_3(cls) -> GridContainer:
        return cls(columns=GridTemplate.COLS_3)

    @classmethod
    def cols_4(cls) -> GridContainer:
        return cls(columns=GridTemplate.COLS_4)

    def with_columns(self, columns: GridTemplate) -> GridContainer:
        return validated_copy(self, columns=columns)

    def with_rows(self, rows: GridTemplate) -> GridContainer:
        return validated_copy(self, rows=rows)

    def with_gap(self, gap: Spacing) -> GridContainer:
        return validated_copy(self, gap=gap)

    def with_row_gap(self, gap: Spacing) -> GridContainer:
        return validated_copy(self, row_gap=gap)

    def with_col_gap(self, gap: Spacing) -> GridContainer:
        return validated_copy(self, col_gap=gap)

    def with_justify(self, justify: JustifyContent) -> GridContainer:
        return validated_copy(self, justify=justify)

    def with_align(self, align: AlignItems) -> GridContainer:
        return validated_copy(self, align=align)

    def to_css(self) -> str:
        props = []
        if self.columns is not None:
            props.append(f"grid-template-columns: {self.columns.to_css()}")
        if self.rows is not None:
            props.append(f"grid-template-rows: {self.rows.to_css()}")
        if self.gap is not None:
            props.append(f"gap: {self.gap.to_css()}")
        if self.row_gap is not None:
            props.append(f"row-gap: {self.row_gap.to_css()}")
        if self.col_gap is not None:
            props.append(f"column-gap: {self.col_gap.to_css()}")
        if self.justify is not None:
            props.append(f"justify-content: {self.justify.to_css()}")
        if self.align is not None:
            props.append(f"align-items: {self.align.to_css()}")
        return "; ".join(props)


# =============================================================================
# Multi-column layout
# =============================================================================


class ColumnsKind(StrEnum):
    COUNT = "count"
    WIDTH = "width"
    AUTO = "auto"


class Columns(BaseModel):
    """
    CSS multi-column layout (``columns-3``, ``columns-md``, ``columns-auto``).

    Counts are always at least 1: ``Columns.count(0) == Columns.count(1)``.
    Pixel widths are likewise raised to at least 1px.
    """

    model_config = ConfigDict(frozen=True)

    kind: ColumnsKind
    column_count: int | None = Field(default=None, ge=1)
    width: Container | int | None = None
    max_count: int | None = Field(default=None, ge=1)

    @classmethod
    def count(cls, n: int) -> Columns:
        return cls(kind=ColumnsKind.COUNT, column_count=max(n, 1))

    @classmethod
    def container_width(cls, container: Container) -> Columns:
        return cls(kind=ColumnsKind.WIDTH, width=container)

    @classmethod
    def pixel_width(cls, px: int) -> Columns:
        return cls(kind=ColumnsKind.WIDTH, width=max(px, 1))

    @classmethod
    def auto(cls) -> Columns:
        return cls(kind=ColumnsKind.AUTO)

    def with_max_count(self, n: int) -> Columns:
        return validated_copy(self, max_count=max(n, 1))

    def to_css(self) -> str:
        if self.kind is ColumnsKind.COUNT:
            return str(self.column_count)
        if self.kind is ColumnsKind.WIDTH:
            if isinstance(self.width, Container):
                base = self.width.to_css()
            else:
                base = f"{self.width}px"
        else:
            base = "auto"
        if self.max_count is not None:
            return f"{base} {self.max_count}"
        return base
