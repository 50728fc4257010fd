"""
Component presets built from ``Style`` values.
"""

from twill.components.button import Button, ButtonSize, ButtonVariant

__all__ = ["Button", "ButtonSize", "ButtonVariant"]
