"""
Blur radius tokens (``blur-md``) plus arbitrary pixel radii.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class Blur(StrEnum):
    NONE = "none"
    XS = "xs"
    SM = "sm"
    # Legacy ``blur`` class; same radius as SM.
    BASE = "base"
    MD = "md"
    LG = "lg"
    XL = "xl"
    S2XL = "2xl"
    S3XL = "3xl"

    def radius_px(self) -> int:
        return _BLUR_PX[self]

    def to_css(self) -> str:
        return f"blur({self.radius_px()}px)"


_BLUR_PX: dict[Blur, int] = {
    Blur.NONE: 0,
    Blur.XS: 4,
    Blur.SM: 8,
    Blur.BASE: 8,
    Blur.MD: 12,
    Blur.LG: 16,
    Blur.XL: 24,
    Blur.S2XL: 40,
    Blur.S3XL: 64,
}

DEFAULT_BLUR = Blur.SM


class CustomBlur(BaseModel):
    model_config = ConfigDict(frozen=True)

    px: int = Field(ge=0, le=65535, description="Blur radius in pixels")

    @classmethod
    def of(cls, px: int) -> CustomBlur:
        return cls(px=px)

    def radius_px(self) -> int:
        return self.px

    def to_css(self) -> str:
        return f"blur({self.px}px)"
