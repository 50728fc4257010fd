"""Tests for the theme preset registry, resolver and CSS generator."""

from __future__ import annotations

import logging

from twill.themes import (
    DEFAULT_THEME_PRESET,
    generate_theme_css,
    get_theme_preset,
    list_theme_presets,
    resolve_preset,
    resolve_theme,
)
from twill.tokens.colors import Color, Scale
from twill.tokens.semantic import SHADCN_NEUTRAL, SHADCN_ZINC, DynamicSemanticTheme, SemanticColor


class TestPresets:
    """Tests for the preset registry."""

    def test_list(self):
        assert list_theme_presets() == [
            "shadcn-neutral",
            "shadcn-slate",
            "shadcn-zinc",
            "shadcn-stone",
        ]
        assert DEFAULT_THEME_PRESET == "shadcn-neutral"

    def test_get(self):
        assert get_theme_preset("shadcn-zinc") is SHADCN_ZINC
        assert get_theme_preset("nonexistent") is None


class TestResolver:
    """Tests for preset resolution."""

    def test_known_preset(self):
        resolved = resolve_theme("shadcn-zinc", is_dark=True)
        assert resolved.name == "shadcn-zinc"
        assert resolved.is_dark is True
        assert resolved.get(SemanticColor.BACKGROUND) == Color.zinc(Scale.S950).compute()

    def test_unknown_preset_falls_back(self, caplog):
        """Unknown names resolve to shadcn-neutral and log a warning."""
        with caplog.at_level(logging.WARNING, logger="twill.themes.resolver"):
            assert resolve_preset("neon") is SHADCN_NEUTRAL
        assert "neon" in caplog.text

    def test_default(self):
        resolved = resolve_theme()
        assert resolved.name == "shadcn-neutral"
        assert len(resolved.colors) == len(SemanticColor)

    def test_css_variables(self):
        variables = resolve_theme().css_variables(prefix="tw-")
        assert variables["--tw-radius"] == "0.625rem"
        assert variables["--tw-background"] == "#f9fafb"


class TestCssGenerator:
    """Tests for theme stylesheet generation."""

    def test_blocks(self):
        css = generate_theme_css(SHADCN_NEUTRAL)
        assert css.startswith("/* twill theme: shadcn-neutral */")
        assert ":root {\n  --radius: 0.625rem;\n  --background: #f9fafb;" in css
        assert ".dark {\n  --background: #030712;" in css
        assert css.count("}") == 2

    def test_every_role_emitted_twice(self):
        css = generate_theme_css(SHADCN_NEUTRAL)
        for role in SemanticColor:
            assert css.count(f"  --{role.var_name}: ") == 2

    def test_prefix(self):
        css = generate_theme_css(SHADCN_NEUTRAL, prefix="tw-")
        assert "--tw-primary: #111827;" in css
        assert "--primary:" not in css

    def test_root_font_size(self):
        assert "font-size" not in generate_theme_css(SHADCN_NEUTRAL)
        css = generate_theme_css(SHADCN_NEUTRAL, root_font_px=18)
        assert ":root {\n  font-size: 18px;\n  --radius: 0.625rem;" in css
        assert css.count("font-size") == 1

    def test_dynamic_theme(self):
        theme = DynamicSemanticTheme.from_brand_hex("#3b82f6")
        assert theme is not None
        css = generate_theme_css(theme)
        assert "/* twill theme: brand-3b82f6 */" in css
        assert "--background: #f9fafb;" in css
