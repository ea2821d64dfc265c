"""Shared pytest fixtures for styled-native tests."""

from typing import Any

import pytest


@pytest.fixture
def theme() -> dict[str, Any]:
    """Return a theme exercising ordered, keyed and variant data."""
    return {
        "colors": {
            "primary": "tomato",
            "secondary": "cyan",
            "background": "white",
            "text": "black",
        },
        "fontSizes": [12, 14, 16, 24, 36],
        "fonts": {"monospace": "Menlo, monospace"},
        "lineHeights": {"body": 1.5},
        "fontWeights": {"bold": "600"},
        "letterSpacings": ["-0.01em", "-0.02em", "0.01em"],
        "space": [0, 4, 8, 16, 32, 64, 128, 256, "512"],
        "sizes": {"small": 4, "medium": 8, "large": 16, "sidebar": 320},
        "buttons": {
            "primary": {
                "p": 3,
                "fontWeight": "bold",
                "color": "white",
                "bg": "primary",
                "borderRadius": 2,
            },
        },
        "text": {
            "caps": {
                "fontSize": [1, 2],
                "letterSpacing": "0.1em",
                "textTransform": "uppercase",
            },
            "title": {
                "fontSize": [3, 4],
                "letterSpacing": ["-0.01em", "-0.02em"],
            },
        },
        "borderWidths": {"thin": 1},
        "radii": {"small": 5},
    }
