"""
Error types for twill.

Value operations never raise for in-domain tokens; these errors cover
configuration problems only.
"""

from __future__ import annotations

from pathlib import Path


class TwillError(Exception):
    """Base exception for all twill errors."""

    def __init__(self, message: str, path: Path | None = None):
        self.message = message
        self.path = path
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.path is not None:
            return f"{self.path}: {self.message}"
        return self.message


class SettingsError(TwillError):
    """
    Raised when twill.yaml cannot be read.

    Examples:
    - Invalid YAML
    - Unknown mode
    - root_font_px outside 12..24
    """

    pass
