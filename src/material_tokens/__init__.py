"""
material-tokens - Material Design themes and layered CSS design tokens.

Generates Material Theme Builder compatible JSON and a three-tier CSS token
system (palettes and Open Props primitives, semantic tokens, app tokens)
from a single seed color.
"""

from __future__ import annotations

from ._version import get_version

# Re-export commonly used types for convenience
from .core import ir
from .core.errors import FetchFailure, InvalidColor, InvalidConfig, ParseFailure, TokenError

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "TokenError",
    "InvalidColor",
    "InvalidConfig",
    "FetchFailure",
    "ParseFailure",
]
