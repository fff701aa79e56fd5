"""
Material Theme Builder JSON export and import.

The exported document matches the Material Theme Builder export format:
4-space indentation, camelCase scheme roles, hyphenated scheme/palette keys.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from .errors import ErrorContext, ParseFailure
from .ir.theme import MaterialTheme

REQUIRED_KEYS: tuple[str, ...] = ("seed", "schemes", "palettes")


def format_theme_json(theme: MaterialTheme) -> str:
    """Serialize a theme with 4-space indentation."""
    return json.dumps(theme.to_export_dict(), indent=4, ensure_ascii=False)


def parse_theme_json(text: str, *, source: str | None = None) -> MaterialTheme:
    """Parse an exported theme document.

    Args:
        text: JSON text.
        source: Optional file name for error messages.

    Returns:
        MaterialTheme instance.

    Raises:
        ParseFailure: If the JSON is malformed, a required top-level key is
            missing, or the document does not match the export schema.
    """
    context = ErrorContext(source=source) if source else None
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseFailure(f"Invalid theme JSON: {e}", context) from e

    if not isinstance(data, dict):
        raise ParseFailure("Invalid theme JSON: expected an object", context)

    missing = [key for key in REQUIRED_KEYS if not data.get(key)]
    if missing:
        raise ParseFailure(
            f"Invalid theme JSON: missing required fields: {', '.join(missing)}", context
        )

    try:
        return MaterialTheme.model_validate(data)
    except ValidationError as e:
        raise ParseFailure(f"Invalid theme JSON schema: {e}", context) from e


def export_theme_file(theme: MaterialTheme, output_path: Path) -> Path:
    """Write a theme export to a JSON file.

    Args:
        theme: Theme to export.
        output_path: Path to write.

    Returns:
        Path to the written file.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(format_theme_json(theme), encoding="utf-8")
    return output_path


def load_theme_file(path: Path) -> MaterialTheme:
    """Read a theme export from disk."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ParseFailure(f"Cannot read theme file: {e}", ErrorContext(source=str(path))) from e
    return parse_theme_json(text, source=str(path))
