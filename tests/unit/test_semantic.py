"""Tests for semantic roles and light/dark theme tables."""

from __future__ import annotations

import pytest

from twill.tokens.colors import Color, ColorFamily, ColorValue, Scale
from twill.tokens.semantic import (
    DEFAULT_RADIUS,
    SHADCN_NEUTRAL,
    SHADCN_SLATE,
    SHADCN_STONE,
    SHADCN_ZINC,
    DynamicSemanticTheme,
    SemanticColor,
    readable_text_for,
    shadcn_neutral,
)

BUILT_IN = [SHADCN_NEUTRAL, SHADCN_SLATE, SHADCN_ZINC, SHADCN_STONE]


class TestShadcnNeutral:
    """Tests for the built-in shadcn tables."""

    def test_background(self):
        theme = shadcn_neutral()
        assert theme.resolve(SemanticColor.BACKGROUND, False) == Color.gray(Scale.S50)
        assert theme.resolve(SemanticColor.BACKGROUND, True) == Color.gray(Scale.S950)

    def test_singleton(self):
        assert shadcn_neutral() is shadcn_neutral()
        assert shadcn_neutral().name == "shadcn-neutral"
        assert shadcn_neutral().radius == DEFAULT_RADIUS

    def test_light_and_dark_helpers(self):
        theme = shadcn_neutral()
        assert theme.resolve_light(SemanticColor.DESTRUCTIVE) == Color.red(Scale.S600)
        assert theme.resolve_dark(SemanticColor.PRIMARY) == Color.gray(Scale.S200)
        assert theme.resolve_dark(SemanticColor.SIDEBAR_PRIMARY) == Color.indigo(Scale.S500)

    def test_deterministic(self):
        first = shadcn_neutral().resolve(SemanticColor.RING, True)
        assert all(shadcn_neutral().resolve(SemanticColor.RING, True) == first for _ in range(5))

    @pytest.mark.parametrize("theme", BUILT_IN, ids=lambda t: t.name)
    def test_built_ins_are_total(self, theme):
        assert theme.is_complete()
        for role in SemanticColor:
            assert theme.resolve(role, False) is not None
            assert theme.resolve(role, True) is not None

    def test_variants_use_their_neutral(self):
        assert SHADCN_ZINC.resolve_light(SemanticColor.BORDER) == Color.zinc(Scale.S200)
        assert SHADCN_STONE.resolve_light(SemanticColor.FOREGROUND).family is ColorFamily.STONE

    def test_var_names(self):
        assert SemanticColor.CARD_FOREGROUND.var_name == "card-foreground"
        assert len(SemanticColor) == 31


class TestCustomVariants:
    """Tests for derived semantic variants."""

    def test_with_overrides(self):
        custom = SHADCN_NEUTRAL.with_overrides(
            light={SemanticColor.PRIMARY: Color.violet(Scale.S600)},
            name="violet",
        )
        assert custom.name == "violet"
        assert custom.resolve_light(SemanticColor.PRIMARY) == Color.violet(Scale.S600)
        assert custom.resolve_dark(SemanticColor.PRIMARY) == Color.gray(Scale.S200)
        # The built-in table is untouched.
        assert SHADCN_NEUTRAL.resolve_light(SemanticColor.PRIMARY) == Color.gray(Scale.S900)

    def test_without_roles_resolves_to_none(self):
        """Removed roles resolve to None rather than raising."""
        partial = SHADCN_NEUTRAL.without_roles(SemanticColor.CHART_1, name="partial")
        assert partial.resolve(SemanticColor.CHART_1, False) is None
        assert partial.missing_roles(True) == [SemanticColor.CHART_1]
        assert not partial.is_complete()

    def test_resolve_value_fallback(self):
        partial = SHADCN_NEUTRAL.without_roles(SemanticColor.CHART_1)
        default = partial.resolve_value(SemanticColor.CHART_1, False)
        assert default == Color.gray(Scale.S500).compute()

        custom = ColorValue.from_rgb(1, 2, 3)
        assert partial.resolve_value(SemanticColor.CHART_1, False, fallback=custom) == custom

    def test_resolve_value_present(self):
        value = SHADCN_NEUTRAL.resolve_value(SemanticColor.BACKGROUND, False)
        assert value == Color.gray(Scale.S50).compute()

    def test_entries(self):
        entries = SHADCN_NEUTRAL.entries(False)
        assert len(entries) == 31
        assert entries[0] == (SemanticColor.BACKGROUND, Color.gray(Scale.S50).compute())


class TestDynamicTheme:
    """Tests for brand-derived themes."""

    def test_from_brand_hex(self):
        theme = DynamicSemanticTheme.from_brand_hex("#3b82f6")
        assert theme is not None
        assert theme.name == "brand-3b82f6"
        assert theme.resolve_light(SemanticColor.BACKGROUND) == Color.gray(Scale.S50).compute()
        assert len(theme.entries(False)) == 31
        assert len(theme.entries(True)) == 31

    def test_primary_keeps_brand_hue(self):
        brand = ColorValue.from_rgb(59, 130, 246)
        theme = DynamicSemanticTheme.from_brand(brand)
        primary = theme.resolve_light(SemanticColor.PRIMARY)
        assert primary is not None
        assert primary.to_oklch()[2] == pytest.approx(brand.to_oklch()[2], abs=10)

    def test_foreground_is_readable(self):
        theme = DynamicSemanticTheme.from_brand_hex("#facc15")
        assert theme is not None
        light_primary = theme.resolve_light(SemanticColor.PRIMARY)
        foreground = theme.resolve_light(SemanticColor.PRIMARY_FOREGROUND)
        assert foreground == readable_text_for(light_primary)

    @pytest.mark.parametrize("text", ["", "#12345", "blue", "#gggggg"])
    def test_bad_hex(self, text):
        assert DynamicSemanticTheme.from_brand_hex(text) is None

    def test_resolve_value_fallback(self):
        theme = DynamicSemanticTheme(name="empty")
        assert theme.resolve(SemanticColor.PRIMARY, False) is None
        assert theme.resolve_value(SemanticColor.PRIMARY, True) == Color.gray(Scale.S500).compute()
