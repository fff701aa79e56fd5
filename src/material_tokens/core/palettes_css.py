"""
Material palettes CSS generator.

Emits the raw color-primitive tier (``<palette_subdir>/palettes.css``): one
custom property per palette tone step.
"""

from __future__ import annotations

from collections.abc import Mapping

from .css import generate_header
from .ir.theme import TONE_KEYS, ColorFormat
from .ir.tokenconfig import PrefixSpec
from .oklch import format_color, hex_to_oklch, resolve_format

# Palette names in output order
PALETTE_ORDER: tuple[str, ...] = (
    "primary",
    "secondary",
    "tertiary",
    "error",
    "neutral",
    "neutral-variant",
)

# Display names for palette comments
PALETTE_DISPLAY_NAMES: dict[str, str] = {
    "primary": "Primary",
    "secondary": "Secondary",
    "tertiary": "Tertiary",
    "error": "Error",
    "neutral": "Neutral",
    "neutral-variant": "Neutral Variant",
}


def generate_palettes_css(
    palettes: Mapping[str, Mapping[str, str]],
    seed: str,
    prefixes: PrefixSpec,
    fmt: ColorFormat | str,
    *,
    generated_at: str | None = None,
) -> str:
    """Generate palettes.css content.

    Palettes or tone steps missing from ``palettes`` are skipped.

    Args:
        palettes: Palette name -> tone step -> hex color (see Palettes.as_palettes).
        seed: Seed hex color, shown in the header.
        prefixes: Tier prefixes.
        fmt: Color literal syntax.
        generated_at: Header timestamp.
    """
    fmt = resolve_format(fmt)
    header = generate_header(
        "Material Design Palettes (Tier 1 Primitives)",
        "Material Theme Builder",
        f"Seed: {seed} ({hex_to_oklch(seed)})\n"
        f"Format: {fmt.value.upper()}\n"
        f"Prefix: --{prefixes.palette}-palette-*",
        generated_at=generated_at,
    )

    lines: list[str] = [header, ":root {"]

    first = True
    for name in PALETTE_ORDER:
        palette = palettes.get(name)
        if not palette:
            continue

        if not first:
            lines.append("")
        first = False

        lines.append(f"  /* {PALETTE_DISPLAY_NAMES.get(name, name)} palette */")
        for step in TONE_KEYS:
            value = palette.get(step)
            if not value:
                continue
            lines.append(f"  --{prefixes.palette}-palette-{name}-{step}: {format_color(value, fmt)};")

    lines.append("}")
    lines.append("")
    return "\n".join(lines)
