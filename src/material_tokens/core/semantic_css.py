"""
Semantic CSS generator.

Generates semantic.css, the application-facing token tier. Color roles are
emitted as ``light-dark()`` pairs so theme switching needs no recomputation,
only a color-scheme signal (media query or ``data-theme`` attribute).
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import NamedTuple

from .css import generate_header
from .ir.theme import ColorFormat
from .ir.tokenconfig import PrefixSpec, SemanticSpec
from .oklch import format_color, resolve_format, round_half_up

logger = logging.getLogger(__name__)


class ColorRole(NamedTuple):
    scheme_key: str
    semantic_name: str
    group: str


# Material camelCase role -> semantic kebab-case name; order is output order
COLOR_ROLE_MAP: tuple[ColorRole, ...] = (
    # Primary
    ColorRole("primary", "primary", "Primary"),
    ColorRole("onPrimary", "primary-on", "Primary"),
    ColorRole("primaryContainer", "primary-container", "Primary"),
    ColorRole("onPrimaryContainer", "primary-container-on", "Primary"),
    # Secondary
    ColorRole("secondary", "secondary", "Secondary"),
    ColorRole("onSecondary", "secondary-on", "Secondary"),
    ColorRole("secondaryContainer", "secondary-container", "Secondary"),
    ColorRole("onSecondaryContainer", "secondary-container-on", "Secondary"),
    # Tertiary
    ColorRole("tertiary", "tertiary", "Tertiary"),
    ColorRole("onTertiary", "tertiary-on", "Tertiary"),
    ColorRole("tertiaryContainer", "tertiary-container", "Tertiary"),
    ColorRole("onTertiaryContainer", "tertiary-container-on", "Tertiary"),
    # Surface
    ColorRole("surface", "surface", "Surface"),
    ColorRole("onSurface", "surface-on", "Surface"),
    ColorRole("surfaceVariant", "surface-variant", "Surface"),
    ColorRole("onSurfaceVariant", "surface-variant-on", "Surface"),
    ColorRole("surfaceContainer", "surface-container", "Surface"),
    ColorRole("surfaceContainerLow", "surface-container-low", "Surface"),
    ColorRole("surfaceContainerLowest", "surface-container-lowest", "Surface"),
    ColorRole("surfaceContainerHigh", "surface-container-high", "Surface"),
    ColorRole("surfaceContainerHighest", "surface-container-highest", "Surface"),
    ColorRole("surfaceDim", "surface-dim", "Surface"),
    ColorRole("surfaceBright", "surface-bright", "Surface"),
    # Background
    ColorRole("background", "background", "Background"),
    ColorRole("onBackground", "background-on", "Background"),
    # Error
    ColorRole("error", "error", "Error"),
    ColorRole("onError", "error-on", "Error"),
    ColorRole("errorContainer", "error-container", "Error"),
    ColorRole("onErrorContainer", "error-container-on", "Error"),
    # Outline
    ColorRole("outline", "outline", "Outline"),
    ColorRole("outlineVariant", "outline-variant", "Outline"),
    # Inverse
    ColorRole("inverseSurface", "inverse-surface", "Inverse"),
    ColorRole("inverseOnSurface", "inverse-surface-on", "Inverse"),
    ColorRole("inversePrimary", "inverse-primary", "Inverse"),
    # Utility
    ColorRole("scrim", "scrim", "Utility"),
    ColorRole("shadow", "shadow-color", "Utility"),
    ColorRole("surfaceTint", "surface-tint", "Utility"),
)

# Non-color categories: config key and comment header, in output order
SEMANTIC_CATEGORY_NAMES: tuple[tuple[str, str], ...] = (
    ("space", "Spacing Scale"),
    ("radius", "Border Radii"),
    ("shadow", "Shadows"),
    ("weight", "Font Weights"),
    ("leading", "Line Heights"),
    ("duration", "Durations"),
    ("ease", "Easings"),
    ("layer", "Z-Index Layers"),
)

# Size-like keys sort in this order; anything else follows alphabetically
SIZE_ORDER: tuple[str, ...] = ("none", "xs", "sm", "md", "base", "lg", "xl", "2xl", "3xl", "full")

_LEADING_DIGIT = re.compile(r"^\d")


def sort_semantic_keys(keys: list[str] | tuple[str, ...]) -> list[str]:
    """Order keys: known size names by SIZE_ORDER, then the rest lexicographically."""

    def rank(key: str) -> tuple[int, int, str]:
        if key in SIZE_ORDER:
            return (0, SIZE_ORDER.index(key), "")
        return (1, 0, key)

    return sorted(keys, key=rank)


def format_semantic_value(value: str, primitives_prefix: str) -> str:
    """Render one non-color semantic value.

    - "0" / "none" -> verbatim
    - "150ms", "1.5" (leading digit) -> verbatim
    - "size-3" -> var(--op-size-3)
    """
    if value in ("0", "none"):
        return value
    if _LEADING_DIGIT.match(value):
        return value
    return f"var(--{primitives_prefix}-{value})"


def generate_semantic_css(
    light: Mapping[str, str],
    dark: Mapping[str, str],
    semantic: SemanticSpec,
    prefixes: PrefixSpec,
    fmt: ColorFormat | str,
    seed_hue: float,
    *,
    generated_at: str | None = None,
) -> str:
    """Generate semantic.css content.

    Args:
        light: camelCase role -> hex for the light scheme (SchemeColors.as_roles).
        dark: camelCase role -> hex for the dark scheme.
        semantic: Category maps for spacing, radii, shadows, etc.
        prefixes: Tier prefixes.
        fmt: Color literal syntax.
        seed_hue: Seed hue in degrees, exposed for shadow tinting.
        generated_at: Header timestamp.

    Returns:
        CSS text wrapped in ``@layer ui.theme``.
    """
    fmt = resolve_format(fmt)
    ui = prefixes.semantic
    header = generate_header(
        "Semantic Tokens (Tier 2) - THE APPLICATION API",
        "Generated from seed color",
        f"Naming: --{ui}-[category]-[role]\n"
        "\n"
        "This is the ONLY file developers should reference.\n"
        f"All tokens start with --{ui}-\n"
        "\n"
        "Uses CSS light-dark() for reactive theming.",
        generated_at=generated_at,
    )

    lines: list[str] = [header]
    lines.append("@layer ui.theme {")
    lines.append("  :root {")
    lines.append("    color-scheme: light dark;")
    lines.append("")

    current_group = ""
    for role in COLOR_ROLE_MAP:
        light_value = light.get(role.scheme_key)
        dark_value = dark.get(role.scheme_key)
        if not light_value or not dark_value:
            # Sparse schemes are tolerated; see DESIGN.md
            logger.debug(f"Skipping color role {role.scheme_key}: missing light or dark value")
            continue

        if role.group != current_group:
            if current_group:
                lines.append("")
            lines.append(f"    /* {role.group} */")
            current_group = role.group

        lines.append(
            f"    --{ui}-color-{role.semantic_name}: "
            f"light-dark({format_color(light_value, fmt)}, {format_color(dark_value, fmt)});"
        )

    lines.append("")
    lines.append("    /* Shadow Color (for atomic shadows) */")
    lines.append(f"    --{ui}-color-shadow: light-dark(oklch(0 0 0 / 0.1), oklch(0 0 0 / 0.6));")

    lines.append("")
    lines.append("    /* Shadow Hue (derived from seed color) */")
    lines.append(f"    --{ui}-shadow-hue: {round_half_up(seed_hue)};")

    for category, display_name in SEMANTIC_CATEGORY_NAMES:
        tokens: Mapping[str, str] = getattr(semantic, category)
        if not tokens:
            continue

        lines.append("")
        lines.append(f"    /* {display_name} */")
        for key in sort_semantic_keys(list(tokens)):
            value = format_semantic_value(tokens[key], prefixes.primitives)
            lines.append(f"    --{ui}-{category}-{key}: {value};")

    lines.append("  }")
    lines.append("")

    lines.append("  /* Theme Toggles */")
    lines.append('  :root[data-theme="light"] { color-scheme: light; }')
    lines.append('  :root[data-theme="dark"] { color-scheme: dark; }')

    lines.append("}")
    lines.append("")
    return "\n".join(lines)
