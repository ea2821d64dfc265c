"""
Theme merging for styled-native.

Builds a final theme from a base (usually a preset) and any number of
override mappings. Later overrides take precedence.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def merge_themes(base: Mapping[str, Any] | None, *overrides: Mapping[str, Any] | None) -> dict[str, Any]:
    """
    Merge override mappings into a base theme.

    Nested mappings are merged key by key. Sequences (ordered scales) and
    scalars replace the base value wholesale. Inputs are never mutated.

    Example:
        merge_themes(
            {"colors": {"primary": "tomato", "text": "black"}},
            {"colors": {"primary": "rebeccapurple"}, "space": [0, 2, 4]},
        )
        # {"colors": {"primary": "rebeccapurple", "text": "black"}, "space": [0, 2, 4]}
    """
    merged = _copy_mapping(base or {})
    for override in overrides:
        if override:
            _merge_into(merged, override)
    return merged


def _copy_mapping(source: Mapping[str, Any]) -> dict[str, Any]:
    return {
        key: _copy_mapping(value) if isinstance(value, Mapping) else value
        for key, value in source.items()
    }


def _merge_into(target: dict[str, Any], override: Mapping[str, Any]) -> None:
    for key, value in override.items():
        current = target.get(key)
        if isinstance(value, Mapping) and isinstance(current, dict):
            _merge_into(current, value)
        elif isinstance(value, Mapping):
            target[key] = _copy_mapping(value)
        else:
            target[key] = value
