"""
styled-native theme support.

Usage:
    from styled_native.themes import get_theme_preset, load_theme, merge_themes

    # Start from a preset and apply project overrides
    theme = merge_themes(
        get_theme_preset("base"),
        load_theme("theme.yaml"),
    )
"""

from .loader import load_style, load_theme
from .presets import BASE_THEME, COMPACT_THEME, get_theme_preset, list_theme_presets
from .resolver import merge_themes

__all__ = [
    # Presets
    "BASE_THEME",
    "COMPACT_THEME",
    "get_theme_preset",
    "list_theme_presets",
    # Merging
    "merge_themes",
    # Loading
    "load_theme",
    "load_style",
]
