"""
Project settings for twill.

Settings live in ``twill.yaml`` at the project root and only select among the
compiled-in tables: which theme preset, light or dark mode, the root font
size used for rem -> px conversion and an optional CSS variable prefix.

Example twill.yaml:

    theme: shadcn-zinc
    mode: dark
    root_font_px: 16
    css_variable_prefix: tw-
"""

from __future__ import annotations

import logging
from enum import StrEnum
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from twill.core.errors import SettingsError
from twill.themes.css_generator import generate_theme_css
from twill.themes.presets import DEFAULT_THEME_PRESET
from twill.themes.resolver import ResolvedTheme, resolve_preset, resolve_theme
from twill.tokens.semantic import SemanticThemeVars
from twill.tokens.spacing import DEFAULT_ROOT_FONT_PX, Spacing
from twill.tokens.typography import FontSize

logger = logging.getLogger(__name__)

SETTINGS_FILE = "twill.yaml"


class ColorMode(StrEnum):
    LIGHT = "light"
    DARK = "dark"


class TwillSettings(BaseModel):
    """Resolved project settings."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    theme: str = Field(default=DEFAULT_THEME_PRESET, description="Theme preset name")
    mode: ColorMode = Field(default=ColorMode.LIGHT)
    root_font_px: int = Field(default=DEFAULT_ROOT_FONT_PX, ge=12, le=24)
    css_variable_prefix: str = Field(default="", pattern=r"^[a-z0-9-]*$")

    @property
    def is_dark(self) -> bool:
        return self.mode is ColorMode.DARK

    def theme_variant(self) -> SemanticThemeVars:
        """The selected preset, or shadcn-neutral when the name is unknown."""
        return resolve_preset(self.theme)

    def resolved_theme(self) -> ResolvedTheme:
        return resolve_theme(self.theme, is_dark=self.is_dark)

    def css_variables(self) -> dict[str, str]:
        """Role variables for the configured mode, named with the configured prefix."""
        return self.resolved_theme().css_variables(self.css_variable_prefix)

    def theme_css(self) -> str:
        """Stylesheet for the selected preset, sized and prefixed per these settings."""
        return generate_theme_css(
            self.theme_variant(),
            prefix=self.css_variable_prefix,
            root_font_px=self.root_font_px,
        )

    def spacing_px(self, spacing: Spacing) -> int | None:
        return spacing.to_px(self.root_font_px)

    def font_size_px(self, size: FontSize) -> float:
        return size.to_px(self.root_font_px)


# =============================================================================
# Path helpers
# =============================================================================


def get_settings_path(project_root: Path) -> Path:
    """Get the twill.yaml file path."""
    return project_root / SETTINGS_FILE


def settings_exist(project_root: Path) -> bool:
    return get_settings_path(project_root).exists()


# =============================================================================
# Loading / saving
# =============================================================================


def load_settings(project_root: Path, *, use_defaults: bool = True) -> TwillSettings:
    """Load settings from twill.yaml.

    Args:
        project_root: Directory containing twill.yaml.
        use_defaults: If True, return default settings when the file is missing or empty.

    Returns:
        TwillSettings instance.

    Raises:
        SettingsError: If the file is missing (when use_defaults=False) or invalid.
    """
    settings_path = get_settings_path(project_root)

    if not settings_path.exists():
        if use_defaults:
            logger.debug("No twill.yaml found, using defaults")
            return TwillSettings()
        raise SettingsError("settings file not found", path=settings_path)

    try:
        content = settings_path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)

        if not data:
            if use_defaults:
                logger.warning(f"Empty twill.yaml at {settings_path}, using defaults")
                return TwillSettings()
            raise SettingsError("empty settings file", path=settings_path)

        if not isinstance(data, dict):
            raise SettingsError("expected a mapping at the top level", path=settings_path)

        settings = TwillSettings(**data)
        logger.debug(f"Loaded settings from {settings_path}: theme={settings.theme}")
        return settings

    except yaml.YAMLError as e:
        raise SettingsError(f"Invalid YAML: {e}", path=settings_path) from e
    except ValidationError as e:
        raise SettingsError(f"Invalid settings: {e}", path=settings_path) from e


def save_settings(project_root: Path, settings: TwillSettings) -> Path:
    """Write settings to twill.yaml and return the path."""
    settings_path = get_settings_path(project_root)

    settings_path.write_text(
        yaml.dump(
            settings.model_dump(mode="json"),
            default_flow_style=False,
            sort_keys=False,
        ),
        encoding="utf-8",
    )

    logger.info(f"Saved settings to {settings_path}")
    return settings_path
