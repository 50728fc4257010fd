"""
Layout and spacing utilities built on the token set.
"""

from twill.utilities.layout import (
    AlignItems,
    AlignSelf,
    Columns,
    ColumnsKind,
    Display,
    FlexContainer,
    FlexDirection,
    FlexItem,
    FlexItemKind,
    FlexWrap,
    GridContainer,
    GridTemplate,
    JustifyContent,
    JustifyItems,
    JustifySelf,
    ObjectFit,
    Overflow,
    PlaceContent,
    PlaceItems,
    Position,
    Visibility,
    ZIndex,
)
from twill.utilities.spacing import (
    Height,
    Margin,
    Padding,
    Size,
    SizeConstraints,
    SizeKind,
    Width,
)

__all__ = [
    "AlignItems",
    "AlignSelf",
    "Columns",
    "ColumnsKind",
    "Display",
    "FlexContainer",
    "FlexDirection",
    "FlexItem",
    "FlexItemKind",
    "FlexWrap",
    "GridContainer",
    "GridTemplate",
    "Height",
    "JustifyContent",
    "JustifyItems",
    "JustifySelf",
    "Margin",
    "ObjectFit",
    "Overflow",
    "Padding",
    "PlaceContent",
    "PlaceItems",
    "Position",
    "Size",
    "SizeConstraints",
    "SizeKind",
    "Visibility",
    "Width",
    "ZIndex",
]
