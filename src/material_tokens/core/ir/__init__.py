"""
material-tokens Intermediate Representation (IR) types.

Theme data (schemes, palettes, the JSON export document) and the resolved
token configuration.
"""

from .theme import (
    CONTRAST_LEVEL_VALUES,
    PALETTE_NAMES,
    SCHEME_ROLES,
    TONE_KEYS,
    TONE_STEPS,
    VARIANT_LABELS,
    ColorFormat,
    ContrastLevel,
    CoreColors,
    HCTColor,
    MaterialTheme,
    Palettes,
    SchemeColors,
    Schemes,
    SchemeVariant,
    VariantPreview,
    scheme_key,
)
from .tokenconfig import (
    DEFAULT_CONFIG,
    DEFAULT_OPENPROPS_BASE_URL,
    OPENPROPS_SOURCE_FILES,
    SEMANTIC_CATEGORIES,
    OpenPropsSpec,
    OutputSpec,
    PrefixSpec,
    SemanticSpec,
    TokenConfig,
)

__all__ = [
    # Theme
    "CONTRAST_LEVEL_VALUES",
    "PALETTE_NAMES",
    "SCHEME_ROLES",
    "TONE_KEYS",
    "TONE_STEPS",
    "VARIANT_LABELS",
    "ColorFormat",
    "ContrastLevel",
    "CoreColors",
    "HCTColor",
    "MaterialTheme",
    "Palettes",
    "SchemeColors",
    "Schemes",
    "SchemeVariant",
    "VariantPreview",
    "scheme_key",
    # Config
    "DEFAULT_CONFIG",
    "DEFAULT_OPENPROPS_BASE_URL",
    "OPENPROPS_SOURCE_FILES",
    "SEMANTIC_CATEGORIES",
    "OpenPropsSpec",
    "OutputSpec",
    "PrefixSpec",
    "SemanticSpec",
    "TokenConfig",
]
