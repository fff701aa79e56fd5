"""
Token configuration merging and persistence.

User overrides are merged onto the documented defaults one section at a
time. Unknown keys are rejected rather than passed through, and the result
is an immutable TokenConfig.

Config files are YAML documents holding the same override structure, e.g.::

    format: hex
    prefixes:
      semantic: app
    semantic:
      space:
        sm: size-2
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ValidationError

from .errors import make_config_error
from .ir.theme import ColorFormat
from .ir.tokenconfig import (
    DEFAULT_CONFIG,
    SEMANTIC_CATEGORIES,
    SemanticSpec,
    TokenConfig,
)

logger = logging.getLogger(__name__)

TOKENCONFIG_FILE = "tokens.yaml"

_SECTIONS: tuple[str, ...] = tuple(TokenConfig.model_fields)


# =============================================================================
# Merging
# =============================================================================


def _require_mapping(value: Any, key: str, source: str | None) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise make_config_error(
            f"expected a mapping, got {type(value).__name__}", source=source, key=key
        )
    return value


def _reject_unknown(keys: Any, allowed: tuple[str, ...], key: str, source: str | None) -> None:
    unknown = sorted(str(k) for k in keys if k not in allowed)
    if unknown:
        raise make_config_error(
            f"unknown key(s) {', '.join(unknown)}; expected one of {', '.join(allowed)}",
            source=source,
            key=key,
        )


def _merge_section(
    defaults: BaseModel,
    override: Any,
    key: str,
    source: str | None,
) -> dict[str, Any]:
    """Key-by-key merge of one flat section."""
    if override is None:
        return defaults.model_dump()
    section = _require_mapping(override, key, source)
    _reject_unknown(section, tuple(type(defaults).model_fields), key, source)
    return {**defaults.model_dump(), **section}


def _merge_semantic(defaults: SemanticSpec, override: Any, source: str | None) -> dict[str, Any]:
    """Per-category merge: a provided category map replaces the default map."""
    merged = defaults.model_dump()
    if override is None:
        return merged
    section = _require_mapping(override, "semantic", source)
    _reject_unknown(section, SEMANTIC_CATEGORIES, "semantic", source)
    for category, tokens in section.items():
        key = f"semantic.{category}"
        if tokens is None:
            merged[category] = {}
            continue
        tokens = _require_mapping(tokens, key, source)
        # YAML turns 0, 10 or 1000 into ints; token values are always text
        merged[category] = {str(name): str(value) for name, value in tokens.items()}
    return merged


def merge_config(
    overrides: Mapping[str, Any] | None = None,
    *,
    base: TokenConfig = DEFAULT_CONFIG,
    source: str | None = None,
) -> TokenConfig:
    """Merge user overrides onto a base configuration.

    Args:
        overrides: Partial configuration; sections may be omitted.
        base: Configuration to merge onto (the documented defaults).
        source: Optional file name for error messages.

    Returns:
        Resolved, immutable TokenConfig.

    Raises:
        InvalidConfig: On unknown keys, wrong types, unknown format or
            Open Props file names, or colliding tier prefixes.
    """
    overrides = _require_mapping(overrides or {}, "<root>", source)
    _reject_unknown(overrides, _SECTIONS, "<root>", source)

    data: dict[str, Any] = {
        "format": overrides.get("format", base.format),
        "prefixes": _merge_section(base.prefixes, overrides.get("prefixes"), "prefixes", source),
        "output": _merge_section(base.output, overrides.get("output"), "output", source),
        "openprops": _merge_section(
            base.openprops, overrides.get("openprops"), "openprops", source
        ),
        "semantic": _merge_semantic(base.semantic, overrides.get("semantic"), source),
    }

    try:
        return TokenConfig.model_validate(data)
    except ValidationError as e:
        raise make_config_error(f"Invalid token configuration: {e}", source=source) from e


def with_cli_overrides(
    config: TokenConfig,
    *,
    format: ColorFormat | str | None = None,
    output_dir: str | Path | None = None,
) -> TokenConfig:
    """Apply command-line flags on top of a resolved configuration."""
    overrides: dict[str, Any] = {}
    if format is not None:
        overrides["format"] = format
    if output_dir is not None:
        overrides["output"] = {"dir": str(output_dir)}
    if not overrides:
        return config
    return merge_config(overrides, base=config)


# =============================================================================
# Loading
# =============================================================================


def get_tokenconfig_path(project_root: Path) -> Path:
    """Get the default tokens.yaml path for a project."""
    return project_root / TOKENCONFIG_FILE


def load_token_config(path: Path | None = None) -> TokenConfig:
    """Load overrides from a YAML file and merge them onto the defaults.

    Args:
        path: YAML file. None returns the defaults.

    Returns:
        Resolved TokenConfig.

    Raises:
        InvalidConfig: If the file cannot be read or parsed, or holds
            invalid overrides.
    """
    if path is None:
        return DEFAULT_CONFIG

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise make_config_error(f"Cannot read config file: {e}", source=str(path)) from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise make_config_error(f"Invalid YAML: {e}", source=str(path)) from e

    if not data:
        logger.warning(f"Empty token config at {path}, using defaults")
        return DEFAULT_CONFIG

    config = merge_config(data, source=str(path))
    logger.debug(f"Loaded token config from {path}")
    return config


def save_token_config(config: TokenConfig, path: Path) -> Path:
    """Write a resolved configuration as YAML.

    Args:
        config: Configuration to save.
        path: Destination file.

    Returns:
        Path to the saved file.
    """
    data = config.model_dump(mode="json")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        yaml.dump(
            data,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        ),
        encoding="utf-8",
    )
    logger.info(f"Saved token config to {path}")
    return path

