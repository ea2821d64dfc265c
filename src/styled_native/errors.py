"""
Error types for styled-native configuration and theme loading.

The transform engine itself never raises for bad style data; these errors
cover the surfaces around it (configuration objects and theme files).
"""

from pathlib import Path


class StyleError(Exception):
    """Base exception for all styled-native errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class StyleConfigError(StyleError):
    """
    Raised when a css() configuration cannot be built.

    Examples:
    - Negative max_variant_depth
    - Alias override that is not an alias entry
    """

    pass


class ThemeLoadError(StyleError):
    """
    Raised when a theme or style file cannot be read or parsed.

    Examples:
    - Missing file
    - Invalid YAML/JSON
    - Top-level value that is not a mapping
    """

    def __init__(self, message: str, path: Path | None = None):
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)
        self.message = message
