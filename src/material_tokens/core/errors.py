"""
Error types for token generation, theme export, and configuration loading.
"""

from dataclasses import dataclass


class TokenError(Exception):
    """Base exception for all material-tokens errors."""

    def __init__(self, message: str, context: "ErrorContext | None" = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}: {self.message}"
        return self.message


class InvalidColor(TokenError):
    """
    Raised when a seed or color value cannot be parsed.

    Examples:
    - Seed with the wrong number of hex digits
    - Non-hex characters in a color literal
    """

    pass


class InvalidConfig(TokenError):
    """
    Raised when the token configuration is not acceptable.

    Examples:
    - Unknown scheme variant or output format
    - Unknown Open Props file name
    - Unknown keys in user overrides
    - Two tiers sharing the same custom-property prefix
    """

    pass


class FetchFailure(TokenError):
    """
    Raised when a third-party stylesheet cannot be fetched.

    Examples:
    - Network error
    - Non-success HTTP status
    - Request timeout
    """

    pass


class ParseFailure(TokenError):
    """
    Raised when a theme JSON document cannot be read back.

    Examples:
    - Malformed JSON
    - Missing seed, schemes or palettes
    """

    pass


@dataclass
class ErrorContext:
    """
    Where an error originated.

    Attributes:
        source: File path or URL the failing input came from
        key: Optional dotted key inside that source
    """

    source: str
    key: str | None = None

    def format(self) -> str:
        """Format as ``source`` or ``source [key]``."""
        if self.key:
            return f"{self.source} [{self.key}]"
        return self.source


def make_fetch_failure(message: str, url: str) -> FetchFailure:
    """
    Helper to create a FetchFailure pointing at the requested URL.

    Args:
        message: Error description
        url: URL that failed

    Returns:
        FetchFailure with the URL attached as context
    """
    return FetchFailure(message, ErrorContext(source=url))


def make_config_error(message: str, source: str | None = None, key: str | None = None) -> InvalidConfig:
    """
    Helper to create an InvalidConfig with optional context.

    Args:
        message: Error description
        source: Optional config file path
        key: Optional dotted config key

    Returns:
        InvalidConfig with context if a source is known
    """
    if source:
        return InvalidConfig(message, ErrorContext(source=source, key=key))
    if key:
        return InvalidConfig(f"{key}: {message}")
    return InvalidConfig(message)
