"""
Pure-Python color literal formatting.

Parses hex colors and renders them as CSS oklch(), hex, hsl() or rgb()
literals. OKLab conversion follows Björn Ottosson's reference matrices
(https://bottosson.github.io/posts/oklab/). No external color libraries
required.
"""

from __future__ import annotations

import math
import re

from .errors import InvalidColor, InvalidConfig
from .ir.theme import ColorFormat

_HEX_RE = re.compile(r"^#?([0-9A-Fa-f]{6}|[0-9A-Fa-f]{3})$")

# Below this OKLCH chroma a color is treated as achromatic: hue is meaningless
# and is emitted as 0 together with a chroma of 0.
ACHROMATIC_CHROMA = 0.001


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves upward (262.5 -> 263)."""
    return math.floor(value + 0.5)


def is_valid_hex_color(value: str) -> bool:
    """Check for a 3 or 6 digit hex color, with or without a leading '#'."""
    return bool(_HEX_RE.match(value))


def parse_hex(value: str) -> tuple[int, int, int]:
    """Parse a hex color into 0-255 RGB channels.

    Args:
        value: "#RRGGBB", "RRGGBB", "#RGB" or "RGB" in any case.

    Returns:
        (red, green, blue) tuple.

    Raises:
        InvalidColor: If the value is not a hex color.
    """
    match = _HEX_RE.match(value.strip()) if isinstance(value, str) else None
    if not match:
        raise InvalidColor(f"Invalid hex color: {value!r}")
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def normalize_hex(value: str) -> str:
    """Normalize a hex color to uppercase ``#RRGGBB``.

    >>> normalize_hex("769cdf")
    '#769CDF'
    """
    r, g, b = parse_hex(value)
    return f"#{r:02X}{g:02X}{b:02X}"


def _srgb_to_linear(channel: float) -> float:
    if channel <= 0.04045:
        return channel / 12.92
    return ((channel + 0.055) / 1.055) ** 2.4


def hex_to_oklab(value: str) -> tuple[float, float, float]:
    """Convert a hex color to OKLab (L, a, b)."""
    r, g, b = (_srgb_to_linear(c / 255) for c in parse_hex(value))

    lms_l = 0.4122214708 * r + 0.5363325363 * g + 0.0514459929 * b
    lms_m = 0.2119034982 * r + 0.6806995451 * g + 0.1073969566 * b
    lms_s = 0.0883024619 * r + 0.2817188376 * g + 0.6299787005 * b

    l_ = math.cbrt(lms_l)
    m_ = math.cbrt(lms_m)
    s_ = math.cbrt(lms_s)

    return (
        0.2104542553 * l_ + 0.7936177850 * m_ - 0.0040720468 * s_,
        1.9779984951 * l_ - 2.4285922050 * m_ + 0.4505937099 * s_,
        0.0259040371 * l_ + 0.7827717662 * m_ - 0.8086757660 * s_,
    )


def hex_to_oklch_values(value: str) -> tuple[float, float, float]:
    """Convert a hex color to OKLCH (L 0-1, C, H 0-360)."""
    lightness, a, b = hex_to_oklab(value)
    chroma = math.hypot(a, b)
    hue = math.degrees(math.atan2(b, a)) % 360
    return lightness, chroma, hue


def oklch_to_css(L: float, C: float, H: float) -> str:
    """Format OKLCH components as a CSS string.

    L is rounded to 2 decimals, C to 3 decimals and H to a whole degree.
    Achromatic colors emit ``0 0`` for chroma and hue.
    """
    if C < ACHROMATIC_CHROMA:
        return f"oklch({L:.2f} 0 0)"
    return f"oklch({L:.2f} {C:.3f} {round_half_up(H) % 360})"


def hex_to_oklch(value: str) -> str:
    """Convert a hex color to an ``oklch(L C H)`` CSS string."""
    return oklch_to_css(*hex_to_oklch_values(value))


def _number(value: float) -> str:
    """Render a number the way JavaScript prints a 2-decimal rounded float."""
    rounded = round(value, 2) + 0.0
    if rounded == int(rounded):
        return str(int(rounded))
    return f"{rounded:g}"


def hex_to_hsl(value: str) -> str:
    """Convert a hex color to an ``hsl(H, S%, L%)`` CSS string."""
    r, g, b = (c / 255 for c in parse_hex(value))
    high = max(r, g, b)
    low = min(r, g, b)
    lightness = (high + low) / 2
    delta = high - low

    if delta == 0:
        hue = 0.0
        saturation = 0.0
    else:
        saturation = delta / (1 - abs(2 * lightness - 1))
        if high == r:
            hue = 60 * (((g - b) / delta) % 6)
        elif high == g:
            hue = 60 * ((b - r) / delta + 2)
        else:
            hue = 60 * ((r - g) / delta + 4)

    return f"hsl({_number(hue)}, {_number(saturation * 100)}%, {_number(lightness * 100)}%)"


def hex_to_rgb(value: str) -> str:
    """Convert a hex color to an ``rgb(R, G, B)`` CSS string."""
    r, g, b = parse_hex(value)
    return f"rgb({r}, {g}, {b})"


def resolve_format(fmt: ColorFormat | str) -> ColorFormat:
    """Coerce a format name to ColorFormat.

    Raises:
        InvalidConfig: If the name is not a supported format.
    """
    try:
        return ColorFormat(fmt)
    except ValueError as e:
        valid = ", ".join(f.value for f in ColorFormat)
        raise InvalidConfig(f"Unknown color format {fmt!r}. Valid formats: {valid}") from e


def format_color(value: str, fmt: ColorFormat | str) -> str:
    """Convert a hex color to the requested CSS literal syntax."""
    match resolve_format(fmt):
        case ColorFormat.OKLCH:
            return hex_to_oklch(value)
        case ColorFormat.HSL:
            return hex_to_hsl(value)
        case ColorFormat.RGB:
            return hex_to_rgb(value)
        case ColorFormat.HEX:
            return normalize_hex(value)


def get_hue(value: str) -> float:
    """OKLCH hue of a hex color in degrees, 0 for achromatic colors.

    Used to tint shadows after the seed color.
    """
    _, chroma, hue = hex_to_oklch_values(value)
    if chroma < ACHROMATIC_CHROMA:
        return 0.0
    return hue
