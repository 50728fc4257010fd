"""
Motion design tokens adapted from Tailwind: durations, easings, animations
and transition properties.
"""

from __future__ import annotations

from enum import IntEnum, StrEnum

from pydantic import BaseModel, ConfigDict, Field


class TransitionDuration(IntEnum):
    """Standard duration steps in milliseconds (``duration-300``)."""

    MS0 = 0
    MS75 = 75
    MS100 = 100
    MS150 = 150
    MS200 = 200
    MS300 = 300
    MS500 = 500
    MS700 = 700
    MS1000 = 1000

    def as_millis(self) -> int:
        return int(self.value)

    def to_css(self) -> str:
        return f"{self.value}ms"


class CustomDuration(BaseModel):
    """Arbitrary duration (``duration-[250ms]``)."""

    model_config = ConfigDict(frozen=True)

    ms: int = Field(ge=0, le=65535, description="Duration in milliseconds")

    @classmethod
    def of(cls, ms: int) -> CustomDuration:
        return cls(ms=ms)

    def as_millis(self) -> int:
        return self.ms

    def to_css(self) -> str:
        return f"{self.ms}ms"


Duration = TransitionDuration | CustomDuration


class Easing(StrEnum):
    LINEAR = "linear"
    IN = "in"
    OUT = "out"
    IN_OUT = "in-out"

    def to_css(self) -> str:
        return _EASING_CSS[self]


_EASING_CSS: dict[Easing, str] = {
    Easing.LINEAR: "linear",
    Easing.IN: "cubic-bezier(0.4, 0, 1, 1)",
    Easing.OUT: "cubic-bezier(0, 0, 0.2, 1)",
    Easing.IN_OUT: "cubic-bezier(0.4, 0, 0.2, 1)",
}


class AnimationToken(StrEnum):
    NONE = "none"
    SPIN = "spin"
    PING = "ping"
    PULSE = "pulse"
    BOUNCE = "bounce"

    def to_css(self) -> str:
        return _ANIMATION_CSS[self]


_ANIMATION_CSS: dict[AnimationToken, str] = {
    AnimationToken.NONE: "none",
    AnimationToken.SPIN: "spin 1s linear infinite",
    AnimationToken.PING: "ping 1s cubic-bezier(0, 0, 0.2, 1) infinite",
    AnimationToken.PULSE: "pulse 2s cubic-bezier(0.4, 0, 0.6, 1) infinite",
    AnimationToken.BOUNCE: "bounce 1s infinite",
}


class TransitionProperty(StrEnum):
    """Which properties transition (``transition-colors``).

    Free-form property lists are plain strings wherever a
    ``TransitionProperty`` is accepted.
    """

    NONE = "none"
    ALL = "all"
    DEFAULT = "default"
    COLORS = "colors"
    OPACITY = "opacity"
    SHADOW = "shadow"
    TRANSFORM = "transform"

    def to_css(self) -> str:
        return _TRANSITION_PROPERTY_CSS[self]


_COLOR_PROPERTIES = "color, background-color, border-color, text-decoration-color, fill, stroke"

_TRANSITION_PROPERTY_CSS: dict[TransitionProperty, str] = {
    TransitionProperty.NONE: "none",
    TransitionProperty.ALL: "all",
    TransitionProperty.DEFAULT: (
        f"{_COLOR_PROPERTIES}, opacity, box-shadow, transform, filter, backdrop-filter"
    ),
    TransitionProperty.COLORS: _COLOR_PROPERTIES,
    TransitionProperty.OPACITY: "opacity",
    TransitionProperty.SHADOW: "box-shadow",
    TransitionProperty.TRANSFORM: "transform",
}


def transition_property_css(value: TransitionProperty | str) -> str:
    if isinstance(value, TransitionProperty):
        return value.to_css()
    return value


class MotionDefaults(BaseModel):
    """Tailwind's default transition: 150ms with the in-out curve."""

    model_config = ConfigDict(frozen=True)

    duration: Duration = Field(default=TransitionDuration.MS150)
    easing: Easing = Field(default=Easing.IN_OUT)
