"""
styled-native - theme-aware style resolution.

Turns declarative style descriptions that reference a theme into plain
style mappings:

    from styled_native import css

    theme = {"space": [0, 4, 8, 16], "colors": {"primary": "tomato"}}
    css(theme)({"mx": 2, "color": "primary"})
    # {"marginHorizontal": 8, "color": "tomato"}

This package provides:
- css: the transform engine (aliases, scales, variants, theme functions)
- get: safe dotted-path lookup into theme data
- themes: presets, theme merging and YAML/JSON loading
"""

__version__ = "0.1.0"

from styled_native.aliases import ALIASES, AliasEntry, resolve_alias
from styled_native.config import StyleConfig
from styled_native.engine import StyleTransformer, css
from styled_native.errors import StyleConfigError, StyleError, ThemeLoadError
from styled_native.paths import get
from styled_native.scales import KeyedScale, OrderedScale, as_scale, resolve_scale_value

__all__ = [
    "css",
    "get",
    "StyleTransformer",
    "StyleConfig",
    "ALIASES",
    "AliasEntry",
    "resolve_alias",
    "resolve_scale_value",
    "as_scale",
    "OrderedScale",
    "KeyedScale",
    "StyleError",
    "StyleConfigError",
    "ThemeLoadError",
]
