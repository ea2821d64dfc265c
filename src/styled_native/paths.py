"""Safe dotted-path lookup into nested theme data."""

from __future__ import annotations

from collections.abc import Hashable, Mapping, Sequence
from typing import Any

_MISSING = object()


def _split_path(path: Any) -> list[Any]:
    if isinstance(path, str):
        return path.split(".")
    if isinstance(path, (list, tuple)):
        return list(path)
    return [path]


def _step(obj: Any, key: Any) -> Any:
    if isinstance(obj, Mapping):
        if not isinstance(key, Hashable):
            return _MISSING
        try:
            return obj.get(key, _MISSING)
        except TypeError:
            # hashable container holding an unhashable item
            return _MISSING
    if isinstance(obj, Sequence) and not isinstance(obj, (str, bytes)):
        if isinstance(key, str) and key.isdigit():
            key = int(key)
        if isinstance(key, int) and not isinstance(key, bool) and 0 <= key < len(obj):
            return obj[key]
    return _MISSING


def get(obj: Any, path: Any, fallback: Any = None) -> Any:
    """
    Look up a nested value by dotted path.

    Args:
        obj: Mapping or sequence to traverse (may be None)
        path: Dotted string ("buttons.primary"), pre-split sequence of keys,
            or a single non-string key
        fallback: Returned unchanged when any step is missing

    Returns:
        The value at the path, or ``fallback`` if it is absent or None.

    Example:
        >>> get({"space": [0, 4, 8]}, "space.2")
        8
        >>> get(None, 1, {})
        {}
    """
    for key in _split_path(path):
        if obj is None:
            return fallback
        obj = _step(obj, key)
        if obj is _MISSING:
            return fallback
    return fallback if obj is None else obj
