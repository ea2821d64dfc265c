"""
Style transform engine.

css(theme)(description) turns a theme-aware style description into a plain
style mapping:

    >>> theme = {"space": [0, 4, 8, 16], "colors": {"primary": "tomato"}}
    >>> css(theme)({"mx": 2, "color": "primary"})
    {'marginHorizontal': 8, 'color': 'tomato'}

Resolution order per call:
1. A callable description is invoked with the theme
2. ``variant`` is resolved from the theme and transformed first (base layer)
3. Remaining properties are dispatched in declaration order; later writes
   to the same output property win
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from .aliases import AliasEntry, resolve_alias
from .config import StyleConfig
from .paths import get
from .scales import resolve_scale_value

logger = logging.getLogger(__name__)

VARIANT_KEY = "variant"

StyleDescription = Mapping[str, Any] | Callable[[Mapping[str, Any]], Any]


def resolve_functional(value: Any, theme: Mapping[str, Any]) -> Any:
    """Invoke a theme function; other values are returned as-is."""
    if callable(value):
        return value(theme)
    return value


class StyleTransformer:
    """
    Resolves style descriptions against one captured theme.

    Instances hold no per-call state and can be shared across threads.
    """

    def __init__(self, config: StyleConfig):
        self.config = config
        self.theme = config.theme_or_empty()
        self.aliases = config.alias_table()

    def __call__(self, description: StyleDescription | None = None) -> dict[str, Any]:
        return self.transform(description, ())

    def transform(
        self,
        description: StyleDescription | None,
        variant_chain: tuple[str, ...],
    ) -> dict[str, Any]:
        """Resolve one description; ``variant_chain`` lists enclosing variant paths."""
        styles = resolve_functional(description, self.theme)
        if not isinstance(styles, Mapping):
            styles = {}

        result: dict[str, Any] = {}
        if VARIANT_KEY in styles:
            result.update(self._resolve_variant(styles[VARIANT_KEY], variant_chain))

        for name, value in styles.items():
            if name == VARIANT_KEY:
                continue
            result.update(self.dispatch(name, value))
        return result

    def dispatch(self, name: str, value: Any) -> dict[str, Any]:
        """Resolve a single declared property into its output properties."""
        value = resolve_functional(value, self.theme)
        entry = resolve_alias(name, self.aliases)
        resolved = self._resolve_value(entry, value)
        return {output: resolved for output in entry.outputs}

    def _resolve_value(self, entry: AliasEntry, value: Any) -> Any:
        scale = self.theme.get(entry.scale) if entry.scale else None
        return resolve_scale_value(scale, value, coerce_numerals=entry.coerce_numerals)

    def _resolve_variant(self, value: Any, variant_chain: tuple[str, ...]) -> dict[str, Any]:
        path = resolve_functional(value, self.theme)
        if not isinstance(path, str):
            return {}

        if path in variant_chain:
            logger.warning(
                "Variant cycle detected: %s -> %s; ignoring", " -> ".join(variant_chain), path
            )
            return {}
        if len(variant_chain) >= self.config.max_variant_depth:
            logger.warning(
                "Variant %r exceeds max depth %d; ignoring", path, self.config.max_variant_depth
            )
            return {}

        variant = get(self.theme, path, {})
        if not isinstance(variant, Mapping) and not callable(variant):
            logger.debug("Variant %r is not a style description; ignoring", path)
            return {}

        logger.debug("Resolving variant %r", path)
        return self.transform(variant, variant_chain + (path,))


def css(config: Any = None) -> StyleTransformer:
    """
    Capture a theme and return a style transform function.

    Args:
        config: Theme mapping, ``{"theme": theme}`` wrapper, StyleConfig, or
            None for raw passthrough

    Returns:
        Callable taking a style description (mapping or theme function) and
        returning the resolved style mapping.

    Raises:
        StyleConfigError: If the configuration is invalid
    """
    return StyleTransformer(StyleConfig.from_value(config))
