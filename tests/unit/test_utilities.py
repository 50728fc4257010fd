"""Tests for layout and spacing utilities."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from twill.tokens.spacing import Container, Percentage, Spacing
from twill.utilities.layout import (
    Columns,
    Display,
    FlexContainer,
    FlexDirection,
    FlexItem,
    FlexItemKind,
    GridContainer,
    JustifyContent,
)
from twill.utilities.spacing import Height, Margin, Padding, Size, SizeConstraints, Width

# =============================================================================
# Padding / margin
# =============================================================================


class TestEdges:
    """Tests for padding and margin."""

    def test_all(self):
        assert Padding.all(Spacing.S4).to_css() == "padding: 1rem"

    def test_symmetric(self):
        assert Padding.symmetric(Spacing.S2, Spacing.S4).to_css() == "padding: 0.5rem 1rem"

    def test_individual(self):
        padding = Padding.individual(Spacing.S1, Spacing.S2, Spacing.S3, Spacing.S4)
        assert padding.to_css() == "padding: 0.25rem 0.5rem 0.75rem 1rem"

    def test_partial_edges_leave_others_unset(self):
        padding = Padding.x(Spacing.S2)
        assert padding.top is None
        assert padding.bottom is None
        assert padding.to_css() == "padding-right: 0.5rem; padding-left: 0.5rem"

    def test_margin_auto(self):
        assert Margin.auto_x().to_css() == "margin-right: auto; margin-left: auto"
        assert Margin.auto().to_css() == "margin: auto"

    def test_per_edge_merge(self):
        merged = Padding.all(Spacing.S4).merge(Padding.only_top(Spacing.S0))
        assert merged.edges() == (Spacing.S0, Spacing.S4, Spacing.S4, Spacing.S4)
        assert isinstance(Margin.y(Spacing.S1).merge(Margin.x(Spacing.S2)), Margin)


# =============================================================================
# Sizes
# =============================================================================


class TestSizes:
    """Tests for width, height and size constraints."""

    def test_width_keywords(self):
        assert Width.full().to_css() == "width: 100%"
        assert Width.screen().to_css() == "width: 100vw"
        assert Height.screen().to_css() == "height: 100vh"
        assert Width.of(Size.prose()).to_css() == "width: 65ch"

    def test_width_values(self):
        assert Width.of(Size.of_spacing(Spacing.S64)).to_css() == "width: 16rem"
        assert Width.of(Size.of_percentage(Percentage.S1_2)).to_css() == "width: 50%"
        assert Width().to_css() == ""

    def test_constraints(self):
        constraints = SizeConstraints().with_max_width(Size.prose()).with_min_height(Size.full())
        assert constraints.to_css() == "max-width: 65ch; min-height: 100%"


# =============================================================================
# Flex / grid
# =============================================================================


class TestFlex:
    """Tests for flex and grid containers and flex items."""

    def test_container_css(self):
        flex = FlexContainer.centered_col().with_gap(Spacing.S2)
        assert flex.to_css() == (
            "flex-direction: column; justify-content: center; align-items: center; gap: 0.5rem"
        )

    def test_display_none(self):
        assert Display.HIDDEN.to_css() == "none"
        assert JustifyContent.BETWEEN.to_css() == "space-between"

    def test_builders_validate(self):
        """Container builders reject values outside the token domain."""
        with pytest.raises(ValidationError):
            FlexContainer().with_direction("sideways")  # type: ignore[arg-type]
        with pytest.raises(ValidationError):
            GridContainer.cols_2().with_gap("seven")  # type: ignore[arg-type]
        column = FlexContainer().with_direction("column")  # type: ignore[arg-type]
        assert column.direction is FlexDirection.COL

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("flex-row", FlexDirection.ROW),
            ("flex-col", FlexDirection.COL),
            ("flex-col-reverse", FlexDirection.COL_REVERSE),
        ],
    )
    def test_direction_from_class(self, text, expected):
        assert FlexDirection.from_tailwind_class(text) is expected

    def test_direction_from_unknown_class(self):
        assert FlexDirection.from_tailwind_class("flex-diagonal") is None

    @pytest.mark.parametrize(
        ("text", "css"),
        [
            ("flex-1", "1"),
            ("flex-1/2", "calc(1/2 * 100%)"),
            ("flex-auto", "1 1 auto"),
            ("flex-initial", "0 1 auto"),
            ("flex-none", "none"),
            ("flex-(--grow)", "var(--grow)"),
            ("flex-[2_1_0%]", "2 1 0%"),
        ],
    )
    def test_item_from_class(self, text, css):
        item = FlexItem.from_tailwind_class(text)
        assert item is not None
        assert item.to_css() == css

    @pytest.mark.parametrize(
        "text",
        [
            "flex",
            "grow-1",
            "flex-",
            "flex-1/",
            "flex-()",
            "flex-(grow)",
            "flex-[]",
            "flex-x",
            "flex-²",
            "flex-1²",
            "flex-²/3",
            "flex-٣",
        ],
    )
    def test_item_from_bad_class(self, text):
        assert FlexItem.from_tailwind_class(text) is None

    def test_item_fraction_clamps_denominator(self):
        item = FlexItem.fraction(1, 0)
        assert item.denominator == 1
        assert item.kind is FlexItemKind.FRACTION

    def test_custom_property_prefix(self):
        assert FlexItem.custom_property("grow").to_css() == "var(--grow)"
        assert FlexItem.custom_property("--grow") == FlexItem.custom_property("grow")

    def test_grid(self):
        grid = GridContainer.cols_3().with_gap(Spacing.S4)
        assert grid.to_css() == "grid-template-columns: repeat(3, minmax(0, 1fr)); gap: 1rem"


# =============================================================================
# Columns
# =============================================================================


class TestColumns:
    """Tests for multi-column layout."""

    def test_count_clamps_to_one(self):
        assert Columns.count(0) == Columns.count(1)
        assert Columns.count(-4) == Columns.count(1)
        assert Columns.count(3).to_css() == "3"

    def test_width_forms(self):
        assert Columns.container_width(Container.S3XS).to_css() == "16rem"
        assert Columns.pixel_width(200).to_css() == "200px"
        assert Columns.pixel_width(0) == Columns.pixel_width(1)
        assert Columns.auto().to_css() == "auto"

    def test_max_count(self):
        columns = Columns.container_width(Container.S3XS).with_max_count(3)
        assert columns.to_css() == "16rem 3"
        assert Columns.auto().with_max_count(0).max_count == 1
