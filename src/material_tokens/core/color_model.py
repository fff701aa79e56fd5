"""
Color model backed by the Material color utilities.

Wraps ``materialyoucolor`` (HCT, dynamic schemes, tonal palettes) behind a
small functional surface that speaks hex strings and IR models. All functions
are pure: identical inputs always produce identical outputs.
"""

from __future__ import annotations

from collections.abc import Sequence

from materialyoucolor.dynamiccolor.material_dynamic_colors import MaterialDynamicColors
from materialyoucolor.hct import Hct
from materialyoucolor.palettes.tonal_palette import TonalPalette
from materialyoucolor.scheme.dynamic_scheme import DynamicScheme
from materialyoucolor.scheme.scheme_content import SchemeContent
from materialyoucolor.scheme.scheme_expressive import SchemeExpressive
from materialyoucolor.scheme.scheme_fidelity import SchemeFidelity
from materialyoucolor.scheme.scheme_monochrome import SchemeMonochrome
from materialyoucolor.scheme.scheme_neutral import SchemeNeutral
from materialyoucolor.scheme.scheme_tonal_spot import SchemeTonalSpot
from materialyoucolor.scheme.scheme_vibrant import SchemeVibrant

from .errors import InvalidConfig
from .ir.theme import (
    CONTRAST_LEVEL_VALUES,
    SCHEME_ROLES,
    TONE_STEPS,
    ContrastLevel,
    HCTColor,
    Palettes,
    SchemeColors,
    SchemeVariant,
)
from .oklch import parse_hex

# =============================================================================
# ARGB <-> hex
# =============================================================================


def argb_from_hex(value: str) -> int:
    """Convert a hex color to an opaque ARGB integer."""
    r, g, b = parse_hex(value)
    return (0xFF << 24) | (r << 16) | (g << 8) | b


def hex_from_argb(argb: int) -> str:
    """Convert an ARGB integer to uppercase ``#RRGGBB``."""
    return f"#{argb & 0xFFFFFF:06X}"


# =============================================================================
# HCT
# =============================================================================


def source_hct(seed: str) -> Hct:
    """Engine HCT for a seed color."""
    return Hct.from_int(argb_from_hex(seed))


def derive_hct(seed: str) -> HCTColor:
    """Decompose a seed color into hue, chroma and tone.

    Raises:
        InvalidColor: If the seed is not a hex color.
    """
    hct = source_hct(seed)
    return HCTColor(
        hue=hct.hue % 360.0,
        chroma=max(hct.chroma, 0.0),
        tone=min(max(hct.tone, 0.0), 100.0),
    )


def hct_to_hex(hue: float, chroma: float, tone: float) -> str:
    """Construct the closest in-gamut color for HCT components."""
    return hex_from_argb(Hct.from_hct(hue, chroma, tone).to_int())


def hue_gradient(chroma: float, tone: float, steps: int = 36) -> list[str]:
    """Sweep hue 0-360 at fixed chroma and tone.

    Returns ``steps + 1`` hex stops, both ends included.
    """
    if steps < 1:
        raise ValueError(f"steps must be at least 1, got {steps}")
    return [hct_to_hex(i / steps * 360, chroma, tone) for i in range(steps + 1)]


# =============================================================================
# Schemes
# =============================================================================


def resolve_variant(variant: SchemeVariant | str) -> SchemeVariant:
    """Coerce a variant name to SchemeVariant.

    Raises:
        InvalidConfig: If the name is not a known variant.
    """
    try:
        return SchemeVariant(variant)
    except ValueError as e:
        valid = ", ".join(v.value for v in SchemeVariant)
        raise InvalidConfig(f"Unknown scheme variant {variant!r}. Valid options: {valid}") from e


def resolve_contrast(contrast: ContrastLevel | str) -> ContrastLevel:
    """Coerce a contrast name to ContrastLevel.

    Raises:
        InvalidConfig: If the name is not a known contrast level.
    """
    try:
        return ContrastLevel(contrast)
    except ValueError as e:
        valid = ", ".join(c.value for c in ContrastLevel)
        raise InvalidConfig(f"Unknown contrast level {contrast!r}. Valid options: {valid}") from e


def create_scheme(
    hct: Hct,
    variant: SchemeVariant,
    is_dark: bool,
    contrast: ContrastLevel = ContrastLevel.STANDARD,
) -> DynamicScheme:
    """Build the engine scheme for one variant, mode and contrast level."""
    level = CONTRAST_LEVEL_VALUES[contrast]
    match variant:
        case SchemeVariant.TONAL_SPOT:
            return SchemeTonalSpot(hct, is_dark, level)
        case SchemeVariant.CONTENT:
            return SchemeContent(hct, is_dark, level)
        case SchemeVariant.EXPRESSIVE:
            return SchemeExpressive(hct, is_dark, level)
        case SchemeVariant.FIDELITY:
            return SchemeFidelity(hct, is_dark, level)
        case SchemeVariant.MONOCHROME:
            return SchemeMonochrome(hct, is_dark, level)
        case SchemeVariant.NEUTRAL:
            return SchemeNeutral(hct, is_dark, level)
        case SchemeVariant.VIBRANT:
            return SchemeVibrant(hct, is_dark, level)
    raise InvalidConfig(f"Unknown scheme variant {variant!r}")


def role_hex(scheme: DynamicScheme, role: str) -> str:
    """Resolve one camelCase role of a scheme to hex."""
    dynamic_color = getattr(MaterialDynamicColors, role)
    return hex_from_argb(dynamic_color.get_hct(scheme).to_int())


def extract_scheme_colors(scheme: DynamicScheme) -> SchemeColors:
    """Read every named role from an engine scheme."""
    return SchemeColors.model_validate({role: role_hex(scheme, role) for role in SCHEME_ROLES})


def build_scheme_colors(
    seed: str,
    variant: SchemeVariant | str = SchemeVariant.TONAL_SPOT,
    is_dark: bool = False,
    contrast: ContrastLevel | str = ContrastLevel.STANDARD,
) -> SchemeColors:
    """Named color roles for a seed under one variant, mode and contrast level.

    Raises:
        InvalidColor: If the seed is not a hex color.
        InvalidConfig: If the variant or contrast level is unknown.
    """
    scheme = create_scheme(
        source_hct(seed), resolve_variant(variant), is_dark, resolve_contrast(contrast)
    )
    return extract_scheme_colors(scheme)


# =============================================================================
# Palettes
# =============================================================================


def hex_from_rgba(rgba: Sequence[int]) -> str:
    """Convert an engine RGBA list (as returned by TonalPalette.tone) to ``#RRGGBB``."""
    r, g, b = rgba[:3]
    return f"#{r:02X}{g:02X}{b:02X}"


def extract_tonal_palette(palette: TonalPalette) -> dict[str, str]:
    """Sample a tonal palette at every tone step."""
    return {str(tone): hex_from_rgba(palette.tone(tone)) for tone in TONE_STEPS}


def build_palettes(
    seed: str,
    variant: SchemeVariant | str = SchemeVariant.TONAL_SPOT,
    *,
    include_error: bool = False,
) -> Palettes:
    """Tonal palettes for a seed and variant.

    Palettes do not depend on mode or contrast, so they are always read from
    the light, standard-contrast scheme.

    Args:
        seed: Seed hex color.
        variant: Scheme variant.
        include_error: Also sample the error palette (CSS output only).
    """
    scheme = create_scheme(
        source_hct(seed), resolve_variant(variant), False, ContrastLevel.STANDARD
    )
    return Palettes(
        primary=extract_tonal_palette(scheme.primary_palette),
        secondary=extract_tonal_palette(scheme.secondary_palette),
        tertiary=extract_tonal_palette(scheme.tertiary_palette),
        neutral=extract_tonal_palette(scheme.neutral_palette),
        neutral_variant=extract_tonal_palette(scheme.neutral_variant_palette),
        error=extract_tonal_palette(scheme.error_palette) if include_error else None,
    )
