"""
Shared helpers for design-token enums and models.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any, TypeVar

from pydantic import BaseModel

ModelT = TypeVar("ModelT", bound=BaseModel)


class CssToken(StrEnum):
    """A closed token domain whose enum value is its CSS literal."""

    def to_css(self) -> str:
        return str(self.value)


def validated_copy(model: ModelT, **update: Any) -> ModelT:
    """Copy ``model`` with ``update`` applied, validating every field.

    ``model_copy(update=...)`` stores update values unchecked, so a raw
    string could land in an enum-typed field. This raises ``ValidationError``
    instead.
    """
    return type(model).model_validate({**dict(model), **update})


def format_number(value: float) -> str:
    """Render a number with at most six decimals and no trailing zeros.

    ``1.0`` -> ``"1"``, ``0.875`` -> ``"0.875"``, ``33.3333333`` -> ``"33.333333"``.
    """
    text = f"{value:.6f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def format_rem(value: float) -> str:
    return f"{format_number(value)}rem"
