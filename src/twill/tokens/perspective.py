"""
Perspective tokens from the Tailwind v4 theme scale.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class Perspective(StrEnum):
    DRAMATIC = "dramatic"
    NEAR = "near"
    NORMAL = "normal"
    MIDRANGE = "midrange"
    DISTANT = "distant"

    def to_px(self) -> int:
        return _PERSPECTIVE_PX[self]

    def to_css(self) -> str:
        return f"{self.to_px()}px"


_PERSPECTIVE_PX: dict[Perspective, int] = {
    Perspective.DRAMATIC: 100,
    Perspective.NEAR: 300,
    Perspective.NORMAL: 500,
    Perspective.MIDRANGE: 800,
    Perspective.DISTANT: 1200,
}


class CustomPerspective(BaseModel):
    model_config = ConfigDict(frozen=True)

    px: int = Field(ge=0, le=65535, description="Perspective distance in pixels")

    @classmethod
    def of(cls, px: int) -> CustomPerspective:
        return cls(px=px)

    def to_px(self) -> int:
        return self.px

    def to_css(self) -> str:
        return f"{self.px}px"
