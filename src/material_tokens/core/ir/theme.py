"""
Theme IR types shared by the color model, the renderers and the JSON export.

The JSON shapes mirror the Material Theme Builder export format: scheme roles
are camelCase, scheme and palette keys are hyphenated. Python attributes are
snake_case and map onto those names through aliases.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# =============================================================================
# Enums
# =============================================================================


class SchemeVariant(StrEnum):
    """Dynamic scheme derivation algorithm."""

    TONAL_SPOT = "tonal-spot"
    CONTENT = "content"
    EXPRESSIVE = "expressive"
    FIDELITY = "fidelity"
    MONOCHROME = "monochrome"
    NEUTRAL = "neutral"
    VIBRANT = "vibrant"


class ContrastLevel(StrEnum):
    """Contrast presets with associated float values."""

    STANDARD = "standard"
    MEDIUM = "medium"
    HIGH = "high"


# Mapping from preset to the engine's contrast scalar
CONTRAST_LEVEL_VALUES: dict[str, float] = {
    ContrastLevel.STANDARD: 0.0,
    ContrastLevel.MEDIUM: 0.5,
    ContrastLevel.HIGH: 1.0,
}


class ColorFormat(StrEnum):
    """CSS color literal syntax for generated tokens."""

    OKLCH = "oklch"
    HEX = "hex"
    HSL = "hsl"
    RGB = "rgb"


# Tone steps present in every tonal palette, in output order
TONE_STEPS: tuple[int, ...] = (0, 5, 10, 15, 20, 25, 30, 35, 40, 50, 60, 70, 80, 90, 95, 98, 99, 100)

TONE_KEYS: tuple[str, ...] = tuple(str(tone) for tone in TONE_STEPS)

VARIANT_LABELS: dict[str, str] = {
    SchemeVariant.TONAL_SPOT: "Tonal Spot",
    SchemeVariant.CONTENT: "Content",
    SchemeVariant.EXPRESSIVE: "Expressive",
    SchemeVariant.FIDELITY: "Fidelity",
    SchemeVariant.MONOCHROME: "Monochrome",
    SchemeVariant.NEUTRAL: "Neutral",
    SchemeVariant.VIBRANT: "Vibrant",
}


# =============================================================================
# Color values
# =============================================================================


class HCTColor(BaseModel):
    """Hue / chroma / tone decomposition of a color."""

    model_config = ConfigDict(frozen=True)

    hue: float = Field(ge=0.0, lt=360.0, description="Hue angle in degrees")
    chroma: float = Field(ge=0.0, description="Colorfulness")
    tone: float = Field(ge=0.0, le=100.0, description="CIE L* lightness")


class SchemeColors(BaseModel):
    """All named color roles of one dynamic scheme, as ``#RRGGBB`` strings."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    # Core colors
    primary: str
    surface_tint: str
    on_primary: str
    primary_container: str
    on_primary_container: str
    secondary: str
    on_secondary: str
    secondary_container: str
    on_secondary_container: str
    tertiary: str
    on_tertiary: str
    tertiary_container: str
    on_tertiary_container: str
    error: str
    on_error: str
    error_container: str
    on_error_container: str

    # Surface colors
    background: str
    on_background: str
    surface: str
    on_surface: str
    surface_variant: str
    on_surface_variant: str
    outline: str
    outline_variant: str

    # Utility colors
    shadow: str
    scrim: str
    inverse_surface: str
    inverse_on_surface: str
    inverse_primary: str

    # Fixed colors
    primary_fixed: str
    on_primary_fixed: str
    primary_fixed_dim: str
    on_primary_fixed_variant: str
    secondary_fixed: str
    on_secondary_fixed: str
    secondary_fixed_dim: str
    on_secondary_fixed_variant: str
    tertiary_fixed: str
    on_tertiary_fixed: str
    tertiary_fixed_dim: str
    on_tertiary_fixed_variant: str

    # Surface container hierarchy
    surface_dim: str
    surface_bright: str
    surface_container_lowest: str
    surface_container_low: str
    surface_container: str
    surface_container_high: str
    surface_container_highest: str

    def as_roles(self) -> dict[str, str]:
        """Return the camelCase role -> color mapping."""
        return self.model_dump(by_alias=True)


# camelCase role names in declaration order
SCHEME_ROLES: tuple[str, ...] = tuple(to_camel(name) for name in SchemeColors.model_fields)


def scheme_key(is_dark: bool, contrast: ContrastLevel = ContrastLevel.STANDARD) -> str:
    """Name of the scheme entry for a mode and contrast level.

    >>> scheme_key(True, ContrastLevel.HIGH)
    'dark-high-contrast'
    """
    mode = "dark" if is_dark else "light"
    if contrast == ContrastLevel.STANDARD:
        return mode
    return f"{mode}-{contrast.value}-contrast"


class Schemes(BaseModel):
    """The six light/dark x contrast scheme instances."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    light: SchemeColors
    light_medium_contrast: SchemeColors = Field(alias="light-medium-contrast")
    light_high_contrast: SchemeColors = Field(alias="light-high-contrast")
    dark: SchemeColors
    dark_medium_contrast: SchemeColors = Field(alias="dark-medium-contrast")
    dark_high_contrast: SchemeColors = Field(alias="dark-high-contrast")

    def get(self, is_dark: bool, contrast: ContrastLevel = ContrastLevel.STANDARD) -> SchemeColors:
        """Select the scheme for a mode and contrast level."""
        return getattr(self, scheme_key(is_dark, contrast).replace("-", "_"))


# Output order of the palette names in the JSON export
PALETTE_NAMES: tuple[str, ...] = ("primary", "secondary", "tertiary", "neutral", "neutral-variant")


def _check_tones(palette: dict[str, str] | None) -> dict[str, str] | None:
    if palette is None:
        return None
    missing = [key for key in TONE_KEYS if key not in palette]
    if missing:
        raise ValueError(f"palette is missing tone steps: {', '.join(missing)}")
    return {key: palette[key] for key in TONE_KEYS}


class Palettes(BaseModel):
    """Tonal palettes keyed by tone step ("0" .. "100").

    ``error`` is only populated for CSS output; the JSON export carries the
    five Material Theme Builder palettes.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    primary: dict[str, str]
    secondary: dict[str, str]
    tertiary: dict[str, str]
    neutral: dict[str, str]
    neutral_variant: dict[str, str] = Field(alias="neutral-variant")
    error: dict[str, str] | None = None

    @field_validator("primary", "secondary", "tertiary", "neutral", "neutral_variant", "error")
    @classmethod
    def _complete_tones(cls, value: dict[str, str] | None) -> dict[str, str] | None:
        return _check_tones(value)

    def as_palettes(self) -> dict[str, dict[str, str]]:
        """Return palette name -> tone mapping, omitting absent palettes."""
        return self.model_dump(by_alias=True, exclude_none=True)


class CoreColors(BaseModel):
    """Core colors as reported by the export."""

    model_config = ConfigDict(frozen=True)

    primary: str


class MaterialTheme(BaseModel):
    """A complete Material Theme Builder compatible document."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    description: str
    seed: str
    core_colors: CoreColors = Field(alias="coreColors")
    extended_colors: list[Any] = Field(default_factory=list, alias="extendedColors")
    schemes: Schemes
    palettes: Palettes

    def to_export_dict(self) -> dict[str, Any]:
        """Dump in export key order with export key names."""
        data = self.model_dump(by_alias=True, exclude={"palettes": {"error"}})
        data["palettes"] = {name: data["palettes"][name] for name in PALETTE_NAMES}
        return data


class VariantPreview(BaseModel):
    """A handful of role colors used to compare scheme variants."""

    model_config = ConfigDict(frozen=True)

    variant: SchemeVariant
    primary: str
    secondary: str
    tertiary: str
    surface: str
    on_surface: str
