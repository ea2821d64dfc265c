"""
Scale value resolution.

A theme scale is either an ordered sequence addressed by index
(``space: [0, 4, 8]``) or a keyed mapping addressed by name
(``colors: {"primary": "tomato"}``). Values that cannot be resolved
against the scale are returned as raw values, never as errors.
"""

from __future__ import annotations

import re
from collections.abc import Hashable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from .paths import get

NUMERAL_PATTERN = re.compile(r"^-?\d+(\.\d+)?$")

_MISSING = object()


# =============================================================================
# Scale shapes
# =============================================================================


@dataclass(frozen=True)
class OrderedScale:
    """Scale addressed by non-negative integer index."""

    values: Sequence[Any]

    def lookup(self, key: Any) -> Any:
        if not _is_number(key) or not float(key).is_integer():
            return _MISSING
        index = int(key)
        if 0 <= index < len(self.values):
            value = self.values[index]
            return _MISSING if value is None else value
        return _MISSING


@dataclass(frozen=True)
class KeyedScale:
    """Scale addressed by key."""

    values: Mapping[Any, Any]

    def lookup(self, key: Any) -> Any:
        if not isinstance(key, Hashable):
            return _MISSING
        value = self.values.get(key)
        # Nested keyed entries such as "blue.3"
        if value is None and isinstance(key, str) and "." in key:
            value = get(self.values, key)
        # Theme files keyed by name store "2" rather than 2
        if value is None and isinstance(key, int) and not isinstance(key, bool):
            value = self.values.get(str(key))
        return _MISSING if value is None else value


Scale = OrderedScale | KeyedScale


def as_scale(raw: Any) -> Scale | None:
    """Wrap raw theme data in its scale shape, or None if it is not a scale."""
    if isinstance(raw, Mapping):
        return KeyedScale(raw)
    if isinstance(raw, Sequence) and not isinstance(raw, (str, bytes)):
        return OrderedScale(raw)
    return None


# =============================================================================
# Resolution
# =============================================================================


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def parse_numeral(value: str) -> int | float | None:
    """Parse a decimal numeral string ("2", "-1.5"); None if it is not one."""
    if not NUMERAL_PATTERN.match(value):
        return None
    if "." in value:
        return float(value)
    return int(value)


def negate(value: Any) -> Any:
    """
    Flip the sign of a resolved scale value.

    Numbers are negated; strings toggle a leading ``-`` so that
    ``"0.01em"`` becomes ``"-0.01em"`` and ``"-512"`` becomes ``"512"``.
    """
    if _is_number(value):
        return -value
    if isinstance(value, str):
        return value[1:] if value.startswith("-") else f"-{value}"
    return value


def _resolve_number(scale: Scale | None, value: int | float) -> Any:
    if scale is None:
        return value
    resolved = scale.lookup(value)
    return value if resolved is _MISSING else resolved


def _resolve_string(scale: Scale | None, value: str, coerce_numerals: bool) -> Any:
    if isinstance(scale, KeyedScale):
        resolved = scale.lookup(value)
        if resolved is not _MISSING:
            return resolved
    if coerce_numerals:
        number = parse_numeral(value)
        if number is not None:
            return number
    return value


def resolve_scale_value(scale: Any, value: Any, coerce_numerals: bool = True) -> Any:
    """
    Resolve a style value against a theme scale.

    Args:
        scale: Raw scale data from the theme or an already wrapped Scale
        value: Style value as written by the author (functional values must
            already be resolved)
        coerce_numerals: Whether numeral strings that miss the scale become
            numbers

    Returns:
        The scale entry the value refers to, or the raw value.

    Example:
        >>> resolve_scale_value([0, 4, 8, 16], -3)
        -16
        >>> resolve_scale_value({"bold": "600"}, "600", coerce_numerals=False)
        '600'
    """
    if not isinstance(scale, (OrderedScale, KeyedScale)):
        scale = as_scale(scale)

    if _is_number(value):
        if value < 0:
            return negate(_resolve_number(scale, -value))
        return _resolve_number(scale, value)

    if isinstance(value, str):
        return _resolve_string(scale, value, coerce_numerals)

    return value
