"""Core material-tokens functionality: IR, color model, theme export, CSS token tiers."""

from . import ir
from .color_model import build_palettes, build_scheme_colors, derive_hct
from .errors import (
    ErrorContext,
    FetchFailure,
    InvalidColor,
    InvalidConfig,
    ParseFailure,
    TokenError,
)
from .oklch import format_color, get_hue, hex_to_oklch, normalize_hex
from .theme_generator import generate_theme, generate_variant_previews
from .theme_json import format_theme_json, parse_theme_json
from .token_generator import (
    GeneratedFileSet,
    WriteReport,
    build_token_files,
    generate_tokens,
    write_file_set,
)
from .tokenconfig_loader import load_token_config, merge_config

__all__ = [
    "ir",
    "TokenError",
    "InvalidColor",
    "InvalidConfig",
    "FetchFailure",
    "ParseFailure",
    "ErrorContext",
    "build_palettes",
    "build_scheme_colors",
    "derive_hct",
    "format_color",
    "get_hue",
    "hex_to_oklch",
    "normalize_hex",
    "generate_theme",
    "generate_variant_previews",
    "format_theme_json",
    "parse_theme_json",
    "GeneratedFileSet",
    "WriteReport",
    "build_token_files",
    "generate_tokens",
    "write_file_set",
    "load_token_config",
    "merge_config",
]
