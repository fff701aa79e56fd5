"""
Material theme generation.

Builds the six scheme instances, the tonal palettes and the complete
Material Theme Builder compatible document for one seed and variant.
"""

from __future__ import annotations

from datetime import datetime

from .color_model import (
    build_palettes,
    create_scheme,
    extract_scheme_colors,
    resolve_contrast,
    resolve_variant,
    role_hex,
    source_hct,
)
from .css import export_timestamp
from .ir.theme import (
    ContrastLevel,
    CoreColors,
    MaterialTheme,
    Palettes,
    Schemes,
    SchemeVariant,
    VariantPreview,
    scheme_key,
)
from .oklch import normalize_hex

_MODES: tuple[bool, ...] = (False, True)


def generate_schemes(seed: str, variant: SchemeVariant | str = SchemeVariant.TONAL_SPOT) -> Schemes:
    """Generate all 6 schemes (light/dark x 3 contrast levels)."""
    hct = source_hct(seed)
    resolved = resolve_variant(variant)
    schemes = {
        scheme_key(is_dark, contrast): extract_scheme_colors(
            create_scheme(hct, resolved, is_dark, contrast)
        )
        for is_dark in _MODES
        for contrast in ContrastLevel
    }
    return Schemes.model_validate(schemes)


def generate_palettes(
    seed: str,
    variant: SchemeVariant | str = SchemeVariant.TONAL_SPOT,
    *,
    include_error: bool = False,
) -> Palettes:
    """Generate the tonal palettes for a seed and variant."""
    return build_palettes(seed, variant, include_error=include_error)


def generate_theme(
    seed: str,
    variant: SchemeVariant | str = SchemeVariant.TONAL_SPOT,
    *,
    now: datetime | None = None,
) -> MaterialTheme:
    """Generate a complete Material Theme from a seed color.

    Args:
        seed: Seed hex color, e.g. "#769CDF" or "769cdf".
        variant: Scheme variant.
        now: Export time, defaults to the current time.

    Returns:
        MaterialTheme ready for format_theme_json.

    Raises:
        InvalidColor: If the seed is not a hex color.
        InvalidConfig: If the variant is unknown.
    """
    normalized = normalize_hex(seed)
    return MaterialTheme(
        description=f"TYPE: CUSTOM\nMaterial Theme Builder export {export_timestamp(now)}",
        seed=normalized,
        core_colors=CoreColors(primary=normalized),
        extended_colors=[],
        schemes=generate_schemes(normalized, variant),
        palettes=generate_palettes(normalized, variant),
    )


def generate_variant_previews(
    seed: str,
    is_dark: bool = False,
    contrast: ContrastLevel | str = ContrastLevel.STANDARD,
) -> list[VariantPreview]:
    """Preview colors for every scheme variant, in declaration order."""
    hct = source_hct(seed)
    level = resolve_contrast(contrast)
    previews: list[VariantPreview] = []
    for variant in SchemeVariant:
        scheme = create_scheme(hct, variant, is_dark, level)
        previews.append(
            VariantPreview(
                variant=variant,
                primary=role_hex(scheme, "primary"),
                secondary=role_hex(scheme, "secondary"),
                tertiary=role_hex(scheme, "tertiary"),
                surface=role_hex(scheme, "surfaceContainer"),
                on_surface=role_hex(scheme, "onSurface"),
            )
        )
    return previews
