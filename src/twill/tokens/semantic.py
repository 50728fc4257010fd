"""
Semantic color roles resolved per light/dark mode.

A ``SemanticThemeVars`` is a named, immutable pair of tables mapping every
``SemanticColor`` role to a palette ``Color``. Built-in variants are module
constants created once at import time. Derived variants
(``with_overrides``, ``without_roles``) are new instances; nothing is mutated.

``DynamicSemanticTheme`` builds the same role tables from an arbitrary brand
color by generating an OKLCH scale around it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from twill.tokens.colors import Color, ColorFamily, ColorValue, Scale, SpecialColor

logger = logging.getLogger(__name__)

DEFAULT_RADIUS = "0.625rem"


class SemanticColor(StrEnum):
    """shadcn-style semantic roles; values are the CSS variable names."""

    BACKGROUND = "background"
    FOREGROUND = "foreground"
    CARD = "card"
    CARD_FOREGROUND = "card-foreground"
    POPOVER = "popover"
    POPOVER_FOREGROUND = "popover-foreground"
    PRIMARY = "primary"
    PRIMARY_FOREGROUND = "primary-foreground"
    SECONDARY = "secondary"
    SECONDARY_FOREGROUND = "secondary-foreground"
    MUTED = "muted"
    MUTED_FOREGROUND = "muted-foreground"
    ACCENT = "accent"
    ACCENT_FOREGROUND = "accent-foreground"
    DESTRUCTIVE = "destructive"
    BORDER = "border"
    INPUT = "input"
    RING = "ring"
    CHART_1 = "chart-1"
    CHART_2 = "chart-2"
    CHART_3 = "chart-3"
    CHART_4 = "chart-4"
    CHART_5 = "chart-5"
    SIDEBAR = "sidebar"
    SIDEBAR_FOREGROUND = "sidebar-foreground"
    SIDEBAR_PRIMARY = "sidebar-primary"
    SIDEBAR_PRIMARY_FOREGROUND = "sidebar-primary-foreground"
    SIDEBAR_ACCENT = "sidebar-accent"
    SIDEBAR_ACCENT_FOREGROUND = "sidebar-accent-foreground"
    SIDEBAR_BORDER = "sidebar-border"
    SIDEBAR_RING = "sidebar-ring"

    @property
    def var_name(self) -> str:
        return self.value


# Used by resolve_value when a role is absent and the caller gave no fallback.
DEFAULT_FALLBACK = Color.gray(Scale.S500)


def _lookup(table: Iterable[tuple[SemanticColor, object]], role: SemanticColor) -> object | None:
    for entry_role, value in table:
        if entry_role == role:
            return value
    return None


def _apply_overrides(
    table: tuple[tuple[SemanticColor, Color], ...],
    overrides: Mapping[SemanticColor, Color],
) -> tuple[tuple[SemanticColor, Color], ...]:
    updated = [(role, overrides.get(role, color)) for role, color in table]
    present = {role for role, _ in table}
    updated.extend((role, color) for role, color in overrides.items() if role not in present)
    return tuple(updated)


# =============================================================================
# Static semantic themes
# =============================================================================


class SemanticThemeVars(BaseModel):
    """
    A compiled-in semantic theme: light and dark role tables plus a radius.

    Attributes:
        name: Registry name (``"shadcn-neutral"``).
        radius: Value for the ``--radius`` variable.
        light: Role -> palette color pairs for light mode.
        dark: Role -> palette color pairs for dark mode.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Theme variant name")
    radius: str = Field(default=DEFAULT_RADIUS, description="Base corner radius")
    light: tuple[tuple[SemanticColor, Color], ...] = Field(default=())
    dark: tuple[tuple[SemanticColor, Color], ...] = Field(default=())

    def resolve(self, role: SemanticColor, is_dark: bool) -> Color | None:
        """Palette color for ``role``; ``None`` only when this variant omits it."""
        table = self.dark if is_dark else self.light
        return _lookup(table, role)  # type: ignore[return-value]

    def resolve_light(self, role: SemanticColor) -> Color | None:
        return self.resolve(role, False)

    def resolve_dark(self, role: SemanticColor) -> Color | None:
        return self.resolve(role, True)

    def resolve_value(
        self,
        role: SemanticColor,
        is_dark: bool,
        fallback: Color | ColorValue | None = None,
    ) -> ColorValue:
        """Concrete RGBA for ``role``, falling back when the role is absent."""
        color = self.resolve(role, is_dark)
        if color is None:
            substitute = fallback if fallback is not None else DEFAULT_FALLBACK
            logger.debug(f"Role {role.value!r} absent from {self.name!r}; using fallback")
            return substitute.compute()
        return color.compute()

    def entries(self, is_dark: bool) -> tuple[tuple[SemanticColor, ColorValue], ...]:
        table = self.dark if is_dark else self.light
        return tuple((role, color.compute()) for role, color in table)

    def missing_roles(self, is_dark: bool) -> list[SemanticColor]:
        table = self.dark if is_dark else self.light
        present = {role for role, _ in table}
        return [role for role in SemanticColor if role not in present]

    def is_complete(self) -> bool:
        """True when every role resolves in both light and dark tables."""
        return not self.missing_roles(False) and not self.missing_roles(True)

    def with_overrides(
        self,
        light: Mapping[SemanticColor, Color] | None = None,
        dark: Mapping[SemanticColor, Color] | None = None,
        name: str | None = None,
        radius: str | None = None,
    ) -> SemanticThemeVars:
        """A new variant with some roles remapped (or added)."""
        return SemanticThemeVars(
            name=name or self.name,
            radius=radius or self.radius,
            light=_apply_overrides(self.light, light or {}),
            dark=_apply_overrides(self.dark, dark or {}),
        )

    def without_roles(self, *roles: SemanticColor, name: str | None = None) -> SemanticThemeVars:
        """A new variant that omits ``roles`` from both tables."""
        dropped = set(roles)
        return SemanticThemeVars(
            name=name or self.name,
            radius=self.radius,
            light=tuple(entry for entry in self.light if entry[0] not in dropped),
            dark=tuple(entry for entry in self.dark if entry[0] not in dropped),
        )


def _shadcn_variant(name: str, neutral: ColorFamily) -> SemanticThemeVars:
    """The shadcn role mapping drawn on one neutral family."""

    def n(scale: Scale) -> Color:
        return Color.of(neutral, scale)

    light = (
        (SemanticColor.BACKGROUND, n(Scale.S50)),
        (SemanticColor.FOREGROUND, n(Scale.S900)),
        (SemanticColor.CARD, Color.white()),
        (SemanticColor.CARD_FOREGROUND, n(Scale.S900)),
        (SemanticColor.POPOVER, Color.white()),
        (SemanticColor.POPOVER_FOREGROUND, n(Scale.S900)),
        (SemanticColor.PRIMARY, n(Scale.S900)),
        (SemanticColor.PRIMARY_FOREGROUND, n(Scale.S50)),
        (SemanticColor.SECONDARY, n(Scale.S100)),
        (SemanticColor.SECONDARY_FOREGROUND, n(Scale.S900)),
        (SemanticColor.MUTED, n(Scale.S100)),
        (SemanticColor.MUTED_FOREGROUND, n(Scale.S500)),
        (SemanticColor.ACCENT, n(Scale.S100)),
        (SemanticColor.ACCENT_FOREGROUND, n(Scale.S900)),
        (SemanticColor.DESTRUCTIVE, Color.red(Scale.S600)),
        (SemanticColor.BORDER, n(Scale.S200)),
        (SemanticColor.INPUT, n(Scale.S200)),
        (SemanticColor.RING, n(Scale.S500)),
        (SemanticColor.CHART_1, Color.orange(Scale.S500)),
        (SemanticColor.CHART_2, Color.teal(Scale.S500)),
        (SemanticColor.CHART_3, Color.sky(Scale.S700)),
        (SemanticColor.CHART_4, Color.amber(Scale.S400)),
        (SemanticColor.CHART_5, Color.amber(Scale.S500)),
        (SemanticColor.SIDEBAR, n(Scale.S50)),
        (SemanticColor.SIDEBAR_FOREGROUND, n(Scale.S900)),
        (SemanticColor.SIDEBAR_PRIMARY, n(Scale.S900)),
        (SemanticColor.SIDEBAR_PRIMARY_FOREGROUND, n(Scale.S50)),
        (SemanticColor.SIDEBAR_ACCENT, n(Scale.S100)),
        (SemanticColor.SIDEBAR_ACCENT_FOREGROUND, n(Scale.S900)),
        (SemanticColor.SIDEBAR_BORDER, n(Scale.S200)),
        (SemanticColor.SIDEBAR_RING, n(Scale.S500)),
    )
    dark = (
        (SemanticColor.BACKGROUND, n(Scale.S950)),
        (SemanticColor.FOREGROUND, n(Scale.S50)),
        (SemanticColor.CARD, n(Scale.S900)),
        (SemanticColor.CARD_FOREGROUND, n(Scale.S50)),
        (SemanticColor.POPOVER, n(Scale.S800)),
        (SemanticColor.POPOVER_FOREGROUND, n(Scale.S50)),
        (SemanticColor.PRIMARY, n(Scale.S200)),
        (SemanticColor.PRIMARY_FOREGROUND, n(Scale.S900)),
        (SemanticColor.SECONDARY, n(Scale.S800)),
        (SemanticColor.SECONDARY_FOREGROUND, n(Scale.S50)),
        (SemanticColor.MUTED, n(Scale.S800)),
        (SemanticColor.MUTED_FOREGROUND, n(Scale.S400)),
        (SemanticColor.ACCENT, n(Scale.S700)),
        (SemanticColor.ACCENT_FOREGROUND, n(Scale.S50)),
        (SemanticColor.DESTRUCTIVE, Color.red(Scale.S500)),
        (SemanticColor.BORDER, n(Scale.S700)),
        (SemanticColor.INPUT, n(Scale.S700)),
        (SemanticColor.RING, n(Scale.S500)),
        (SemanticColor.CHART_1, Color.indigo(Scale.S500)),
        (SemanticColor.CHART_2, Color.emerald(Scale.S400)),
        (SemanticColor.CHART_3, Color.amber(Scale.S500)),
        (SemanticColor.CHART_4, Color.purple(Scale.S500)),
        (SemanticColor.CHART_5, Color.rose(Scale.S500)),
        (SemanticColor.SIDEBAR, n(Scale.S900)),
        (SemanticColor.SIDEBAR_FOREGROUND, n(Scale.S50)),
        (SemanticColor.SIDEBAR_PRIMARY, Color.indigo(Scale.S500)),
        (SemanticColor.SIDEBAR_PRIMARY_FOREGROUND, n(Scale.S50)),
        (SemanticColor.SIDEBAR_ACCENT, n(Scale.S800)),
        (SemanticColor.SIDEBAR_ACCENT_FOREGROUND, n(Scale.S50)),
        (SemanticColor.SIDEBAR_BORDER, n(Scale.S700)),
        (SemanticColor.SIDEBAR_RING, n(Scale.S600)),
    )
    return SemanticThemeVars(name=name, radius=DEFAULT_RADIUS, light=light, dark=dark)


SHADCN_NEUTRAL = _shadcn_variant("shadcn-neutral", ColorFamily.GRAY)
SHADCN_SLATE = _shadcn_variant("shadcn-slate", ColorFamily.SLATE)
SHADCN_ZINC = _shadcn_variant("shadcn-zinc", ColorFamily.ZINC)
SHADCN_STONE = _shadcn_variant("shadcn-stone", ColorFamily.STONE)


def shadcn_neutral() -> SemanticThemeVars:
    """The default neutral theme (a shared, never-mutated instance)."""
    return SHADCN_NEUTRAL


# =============================================================================
# Brand-derived semantic themes
# =============================================================================


def readable_text_for(background: ColorValue) -> ColorValue:
    """Black or white, whichever reads better on ``background``."""
    if background.preferred_text_color() is SpecialColor.BLACK:
        return Color.black().compute()
    return Color.white().compute()


class DynamicSemanticTheme(BaseModel):
    """
    Semantic roles resolved to concrete colors generated from a brand color.

    Neutral surfaces keep the gray palette; primary, accent, ring, chart and
    sidebar-primary roles come from an OKLCH scale built around the brand.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="brand")
    radius: str = Field(default=DEFAULT_RADIUS)
    light: tuple[tuple[SemanticColor, ColorValue], ...] = Field(default=())
    dark: tuple[tuple[SemanticColor, ColorValue], ...] = Field(default=())

    @classmethod
    def from_brand_hex(cls, hex_str: str) -> DynamicSemanticTheme | None:
        """Build light and dark tables from ``#rrggbb``; ``None`` for malformed hex."""
        brand = ColorValue.from_hex(hex_str)
        if brand is None:
            return None
        return cls.from_brand(brand, name=f"brand-{brand.to_hex().lstrip('#')}")

    @classmethod
    def from_brand(cls, brand: ColorValue, name: str = "brand") -> DynamicSemanticTheme:
        scale = dict(brand.generate_scale_map_oklch())

        def gray(step: Scale) -> ColorValue:
            return Color.gray(step).compute()

        white = Color.white().compute()

        light = (
            (SemanticColor.BACKGROUND, gray(Scale.S50)),
            (SemanticColor.FOREGROUND, gray(Scale.S900)),
            (SemanticColor.CARD, white),
            (SemanticColor.CARD_FOREGROUND, gray(Scale.S900)),
            (SemanticColor.POPOVER, white),
            (SemanticColor.POPOVER_FOREGROUND, gray(Scale.S900)),
            (SemanticColor.PRIMARY, scale[Scale.S500]),
            (SemanticColor.PRIMARY_FOREGROUND, readable_text_for(scale[Scale.S500])),
            (SemanticColor.SECONDARY, gray(Scale.S100)),
            (SemanticColor.SECONDARY_FOREGROUND, gray(Scale.S900)),
            (SemanticColor.MUTED, gray(Scale.S100)),
            (SemanticColor.MUTED_FOREGROUND, gray(Scale.S500)),
            (SemanticColor.ACCENT, scale[Scale.S100]),
            (SemanticColor.ACCENT_FOREGROUND, readable_text_for(scale[Scale.S100])),
            (SemanticColor.DESTRUCTIVE, Color.red(Scale.S600).compute()),
            (SemanticColor.BORDER, gray(Scale.S200)),
            (SemanticColor.INPUT, gray(Scale.S200)),
            (SemanticColor.RING, scale[Scale.S500]),
            (SemanticColor.CHART_1, scale[Scale.S500]),
            (SemanticColor.CHART_2, scale[Scale.S600]),
            (SemanticColor.CHART_3, scale[Scale.S700]),
            (SemanticColor.CHART_4, scale[Scale.S400]),
            (SemanticColor.CHART_5, scale[Scale.S300]),
            (SemanticColor.SIDEBAR, gray(Scale.S50)),
            (SemanticColor.SIDEBAR_FOREGROUND, gray(Scale.S900)),
            (SemanticColor.SIDEBAR_PRIMARY, scale[Scale.S600]),
            (SemanticColor.SIDEBAR_PRIMARY_FOREGROUND, readable_text_for(scale[Scale.S600])),
            (SemanticColor.SIDEBAR_ACCENT, scale[Scale.S100]),
            (SemanticColor.SIDEBAR_ACCENT_FOREGROUND, readable_text_for(scale[Scale.S100])),
            (SemanticColor.SIDEBAR_BORDER, gray(Scale.S200)),
            (SemanticColor.SIDEBAR_RING, scale[Scale.S500]),
        )
        dark = (
            (SemanticColor.BACKGROUND, gray(Scale.S950)),
            (SemanticColor.FOREGROUND, gray(Scale.S50)),
            (SemanticColor.CARD, gray(Scale.S900)),
            (SemanticColor.CARD_FOREGROUND, gray(Scale.S50)),
            (SemanticColor.POPOVER, gray(Scale.S800)),
            (SemanticColor.POPOVER_FOREGROUND, gray(Scale.S50)),
            (SemanticColor.PRIMARY, scale[Scale.S400]),
            (SemanticColor.PRIMARY_FOREGROUND, readable_text_for(scale[Scale.S400])),
            (SemanticColor.SECONDARY, gray(Scale.S800)),
            (SemanticColor.SECONDARY_FOREGROUND, gray(Scale.S50)),
            (SemanticColor.MUTED, gray(Scale.S800)),
            (SemanticColor.MUTED_FOREGROUND, gray(Scale.S400)),
            (SemanticColor.ACCENT, scale[Scale.S700]),
            (SemanticColor.ACCENT_FOREGROUND, readable_text_for(scale[Scale.S700])),
            (SemanticColor.DESTRUCTIVE, Color.red(Scale.S500).compute()),
            (SemanticColor.BORDER, gray(Scale.S700)),
            (SemanticColor.INPUT, gray(Scale.S700)),
            (SemanticColor.RING, scale[Scale.S400]),
            (SemanticColor.CHART_1, scale[Scale.S400]),
            (SemanticColor.CHART_2, scale[Scale.S500]),
            (SemanticColor.CHART_3, scale[Scale.S600]),
            (SemanticColor.CHART_4, scale[Scale.S300]),
            (SemanticColor.CHART_5, scale[Scale.S200]),
            (SemanticColor.SIDEBAR, gray(Scale.S900)),
            (SemanticColor.SIDEBAR_FOREGROUND, gray(Scale.S50)),
            (SemanticColor.SIDEBAR_PRIMARY, scale[Scale.S500]),
            (SemanticColor.SIDEBAR_PRIMARY_FOREGROUND, readable_text_for(scale[Scale.S500])),
            (SemanticColor.SIDEBAR_ACCENT, gray(Scale.S800)),
            (SemanticColor.SIDEBAR_ACCENT_FOREGROUND, gray(Scale.S50)),
            (SemanticColor.SIDEBAR_BORDER, gray(Scale.S700)),
            (SemanticColor.SIDEBAR_RING, scale[Scale.S400]),
        )
        return cls(name=name, light=light, dark=dark)

    def resolve(self, role: SemanticColor, is_dark: bool) -> ColorValue | None:
        table = self.dark if is_dark else self.light
        return _lookup(table, role)  # type: ignore[return-value]

    def resolve_light(self, role: SemanticColor) -> ColorValue | None:
        return self.resolve(role, False)

    def resolve_dark(self, role: SemanticColor) -> ColorValue | None:
        return self.resolve(role, True)

    def resolve_value(
        self,
        role: SemanticColor,
        is_dark: bool,
        fallback: Color | ColorValue | None = None,
    ) -> ColorValue:
        value = self.resolve(role, is_dark)
        if value is None:
            substitute = fallback if fallback is not None else DEFAULT_FALLBACK
            return substitute.compute()
        return value

    def entries(self, is_dark: bool) -> tuple[tuple[SemanticColor, ColorValue], ...]:
        return self.dark if is_dark else self.light
