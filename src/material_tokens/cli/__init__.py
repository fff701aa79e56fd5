"""
material-tokens CLI package.

- theme.py: Material Theme Builder JSON export (generate)
- tokens.py: CSS design tokens (tokens, config)
- preview.py: Scheme variant comparison (preview)
- utils.py: Shared utilities
"""

from __future__ import annotations

import typer

from material_tokens._version import get_version
from material_tokens.cli.preview import preview_command
from material_tokens.cli.theme import generate_command
from material_tokens.cli.tokens import config_command, tokens_command
from material_tokens.cli.utils import configure_logging, version_callback

__version__ = get_version()

# =============================================================================
# Main Application
# =============================================================================

app = typer.Typer(
    help="""material-tokens – Material Design themes and CSS design tokens

Commands:
  • generate: Material Theme Builder JSON export
  • tokens:   Three-tier CSS token set (palettes, Open Props, semantic)
  • preview:  Compare scheme variants for a seed
  • config:   Write a tokens.yaml with the defaults
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """material-tokens CLI main callback for global options."""
    configure_logging(verbose)


app.command(name="generate")(generate_command)
app.command(name="tokens")(tokens_command)
app.command(name="preview")(preview_command)
app.command(name="config")(config_command)


# =============================================================================
# Main Entry Point
# =============================================================================


def main() -> None:
    app()


__all__ = ["__version__", "app", "main"]
