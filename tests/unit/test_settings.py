"""Tests for twill.yaml settings loading."""

from __future__ import annotations

import logging

import pytest

from twill.core import (
    ColorMode,
    SettingsError,
    TwillError,
    TwillSettings,
    get_settings_path,
    load_settings,
    save_settings,
    settings_exist,
)
from twill.themes import resolve_theme
from twill.tokens.semantic import SHADCN_NEUTRAL, SHADCN_ZINC
from twill.tokens.spacing import Spacing
from twill.tokens.typography import FontSize


class TestTwillSettings:
    """Tests for the settings model."""

    def test_defaults(self):
        settings = TwillSettings()
        assert settings.theme == "shadcn-neutral"
        assert settings.mode is ColorMode.LIGHT
        assert settings.root_font_px == 16
        assert settings.css_variable_prefix == ""
        assert settings.is_dark is False

    def test_theme_variant(self):
        assert TwillSettings(theme="shadcn-zinc").theme_variant() is SHADCN_ZINC
        assert TwillSettings(theme="unknown").theme_variant() is SHADCN_NEUTRAL

    def test_dark(self):
        assert TwillSettings(mode="dark").is_dark is True

    def test_theme_css_uses_prefix_and_root_font(self):
        settings = TwillSettings(theme="shadcn-zinc", root_font_px=18, css_variable_prefix="tw-")
        css = settings.theme_css()
        assert css.startswith("/* twill theme: shadcn-zinc */")
        assert ":root {\n  font-size: 18px;\n  --tw-radius: " in css
        assert "--tw-primary: " in css
        assert "--primary:" not in css

    def test_css_variables_follow_mode(self):
        light = TwillSettings(css_variable_prefix="tw-").css_variables()
        dark = TwillSettings(mode="dark", css_variable_prefix="tw-").css_variables()
        assert light == resolve_theme("shadcn-neutral").css_variables("tw-")
        assert dark == resolve_theme("shadcn-neutral", is_dark=True).css_variables("tw-")
        assert light["--tw-background"] != dark["--tw-background"]

    def test_px_conversion_uses_root_font(self):
        settings = TwillSettings(root_font_px=20)
        assert settings.spacing_px(Spacing.S4) == 20
        assert settings.spacing_px(Spacing.PX) == 1
        assert settings.spacing_px(Spacing.AUTO) is None
        assert settings.font_size_px(FontSize.BASE) == pytest.approx(20.0)
        assert TwillSettings().spacing_px(Spacing.S4) == 16


class TestLoadSettings:
    """Tests for reading and writing twill.yaml."""

    def test_missing_file_uses_defaults(self, project_root):
        assert not settings_exist(project_root)
        assert load_settings(project_root) == TwillSettings()

    def test_missing_file_strict(self, project_root):
        with pytest.raises(SettingsError, match="not found"):
            load_settings(project_root, use_defaults=False)

    def test_empty_file_warns(self, project_root, caplog):
        """An empty file yields defaults with a warning."""
        get_settings_path(project_root).write_text("", encoding="utf-8")
        with caplog.at_level(logging.WARNING, logger="twill.core.settings"):
            assert load_settings(project_root) == TwillSettings()
        assert "Empty twill.yaml" in caplog.text

    def test_load(self, project_root):
        get_settings_path(project_root).write_text(
            "theme: shadcn-zinc\nmode: dark\nroot_font_px: 18\ncss_variable_prefix: tw-\n",
            encoding="utf-8",
        )
        settings = load_settings(project_root)
        assert settings.theme == "shadcn-zinc"
        assert settings.is_dark
        assert settings.root_font_px == 18
        assert settings.css_variable_prefix == "tw-"

    def test_invalid_yaml(self, project_root):
        get_settings_path(project_root).write_text("theme: [unclosed\n", encoding="utf-8")
        with pytest.raises(SettingsError, match="Invalid YAML"):
            load_settings(project_root)

    @pytest.mark.parametrize(
        "content",
        [
            "mode: sepia\n",
            "root_font_px: 40\n",
            "unknown_key: 1\n",
            "css_variable_prefix: 'Bad Prefix'\n",
        ],
    )
    def test_invalid_schema(self, project_root, content):
        get_settings_path(project_root).write_text(content, encoding="utf-8")
        with pytest.raises(SettingsError, match="Invalid settings"):
            load_settings(project_root)

    def test_non_mapping(self, project_root):
        get_settings_path(project_root).write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(SettingsError) as exc_info:
            load_settings(project_root)
        assert isinstance(exc_info.value, TwillError)
        assert exc_info.value.path == get_settings_path(project_root)

    def test_save_round_trip(self, project_root):
        settings = TwillSettings(theme="shadcn-stone", mode=ColorMode.DARK, root_font_px=14)
        path = save_settings(project_root, settings)
        assert path.exists()
        assert load_settings(project_root) == settings

    def test_loaded_settings_drive_theme_css(self, project_root):
        get_settings_path(project_root).write_text(
            "root_font_px: 14\ncss_variable_prefix: ui-\n", encoding="utf-8"
        )
        css = load_settings(project_root).theme_css()
        assert "  font-size: 14px;" in css
        assert "  --ui-radius: 0.625rem;" in css
