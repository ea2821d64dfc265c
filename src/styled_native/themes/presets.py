"""
Theme presets for styled-native.

Each preset is a complete theme mapping with the standard scales (space,
sizes, fontSizes, colors, ...) plus a few component variants.
"""

from __future__ import annotations

import copy
from typing import Any

# =============================================================================
# Base Theme
# =============================================================================

BASE_THEME: dict[str, Any] = {
    "colors": {
        "text": "#111111",
        "background": "#ffffff",
        "primary": "#0066cc",
        "secondary": "#6c757d",
        "muted": "#f4f4f5",
        "danger": "#dc2626",
    },
    "space": [0, 4, 8, 16, 32, 64, 128, 256, 512],
    "sizes": {
        "icon": 24,
        "avatar": 48,
        "sidebar": 320,
        "container": 960,
    },
    "fontSizes": [12, 14, 16, 20, 24, 32, 48, 64],
    "fonts": {
        "body": "System",
        "heading": "System",
        "monospace": "Menlo, monospace",
    },
    "fontWeights": {
        "body": "400",
        "heading": "700",
        "bold": "700",
    },
    "lineHeights": {
        "body": 1.5,
        "heading": 1.25,
    },
    "letterSpacings": ["0em", "0.01em", "0.02em", "0.05em"],
    "borderWidths": {
        "thin": 1,
        "thick": 2,
    },
    "radii": {
        "small": 4,
        "medium": 8,
        "large": 16,
        "round": 9999,
    },
    "zIndices": {
        "base": 0,
        "overlay": 10,
        "modal": 100,
    },
    "buttons": {
        "primary": {
            "px": 3,
            "py": 2,
            "fontWeight": "bold",
            "color": "background",
            "bg": "primary",
            "borderRadius": "medium",
        },
        "secondary": {
            "variant": "buttons.primary",
            "bg": "secondary",
        },
    },
    "text": {
        "heading": {
            "fontFamily": "heading",
            "fontWeight": "heading",
            "lineHeight": "heading",
            "fontSize": 4,
        },
        "caps": {
            "letterSpacing": 3,
            "textTransform": "uppercase",
        },
    },
}

# =============================================================================
# Compact Theme
# =============================================================================

COMPACT_THEME: dict[str, Any] = {
    **BASE_THEME,
    "space": [0, 2, 4, 8, 16, 32, 64, 128, 256],
    "fontSizes": [10, 12, 14, 16, 20, 24, 32, 48],
    "radii": {
        "small": 2,
        "medium": 4,
        "large": 8,
        "round": 9999,
    },
}

# =============================================================================
# Registry
# =============================================================================

_PRESETS: dict[str, dict[str, Any]] = {
    "base": BASE_THEME,
    "compact": COMPACT_THEME,
}


def get_theme_preset(name: str) -> dict[str, Any] | None:
    """
    Get a theme preset by name.

    Returns a deep copy so callers may modify it freely.
    """
    preset = _PRESETS.get(name)
    if preset is None:
        return None
    return copy.deepcopy(preset)


def list_theme_presets() -> list[str]:
    """List available theme preset names."""
    return list(_PRESETS.keys())
