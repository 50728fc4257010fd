"""
Aspect ratio tokens (``aspect-video``) and custom ``w / h`` ratios.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class AspectRatio(StrEnum):
    AUTO = "auto"
    SQUARE = "square"
    VIDEO = "video"

    def ratio(self) -> float | None:
        """Width divided by height; ``None`` for ``auto``."""
        if self is AspectRatio.SQUARE:
            return 1.0
        if self is AspectRatio.VIDEO:
            return 16 / 9
        return None

    def to_css(self) -> str:
        if self is AspectRatio.SQUARE:
            return "1 / 1"
        if self is AspectRatio.VIDEO:
            return "16 / 9"
        return "auto"


class CustomAspectRatio(BaseModel):
    """A ``width / height`` ratio; both sides are at least 1."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(ge=1, le=65535)
    height: int = Field(ge=1, le=65535)

    @classmethod
    def of(cls, width: int, height: int) -> CustomAspectRatio:
        """Build a ratio, raising sides below 1 up to 1."""
        return cls(width=max(width, 1), height=max(height, 1))

    def ratio(self) -> float:
        return self.width / self.height

    def to_css(self) -> str:
        return f"{self.width} / {self.height}"
