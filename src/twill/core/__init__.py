"""
Core infrastructure: errors and project settings.
"""

from twill.core.errors import SettingsError, TwillError
from twill.core.settings import (
    SETTINGS_FILE,
    ColorMode,
    TwillSettings,
    get_settings_path,
    load_settings,
    save_settings,
    settings_exist,
)

__all__ = [
    "SETTINGS_FILE",
    "ColorMode",
    "SettingsError",
    "TwillError",
    "TwillSettings",
    "get_settings_path",
    "load_settings",
    "save_settings",
    "settings_exist",
]
