"""
Style property alias table.

Maps every theme-aware style property (including shorthands such as ``mx``
or ``bg``) to the theme scale it reads from and the output property
name(s) it writes. Properties missing from the table pass through under
their own name with no scale lookup.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_validator

# =============================================================================
# Alias Entry
# =============================================================================


class AliasEntry(BaseModel):
    """
    Alias configuration for one style property.

    Example:
        AliasEntry(scale="space", outputs=("marginHorizontal",))
    """

    model_config = ConfigDict(frozen=True)

    scale: str | None = Field(default=None, description="Theme scale name (e.g. 'space')")
    outputs: tuple[str, ...] = Field(description="Output property names, in write order")
    coerce_numerals: bool = Field(
        default=True,
        description="Convert numeral strings to numbers when the scale lookup misses",
    )

    @field_validator("outputs")
    @classmethod
    def _require_outputs(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("alias entry needs at least one output property")
        return value

    @property
    def is_multiple(self) -> bool:
        """True when one input property writes several outputs (e.g. ``size``)."""
        return len(self.outputs) > 1


# =============================================================================
# Table construction
# =============================================================================

_SIDES = ("Top", "Right", "Bottom", "Left")
_LOGICAL_SIDES = ("Start", "End")
_AXES = {"X": "Horizontal", "Y": "Vertical"}
_SHORT_SIDES = {"t": "Top", "r": "Right", "b": "Bottom", "l": "Left"}


def _spacing_aliases(prop: str, short: str) -> dict[str, AliasEntry]:
    entries: dict[str, AliasEntry] = {}

    def add(name: str, output: str) -> None:
        entries[name] = AliasEntry(scale="space", outputs=(output,))

    add(prop, prop)
    add(short, prop)
    for side in _SIDES + _LOGICAL_SIDES:
        add(f"{prop}{side}", f"{prop}{side}")
    for abbrev, side in _SHORT_SIDES.items():
        add(f"{short}{abbrev}", f"{prop}{side}")
    for axis, normalized in _AXES.items():
        add(f"{prop}{axis}", f"{prop}{normalized}")
        add(f"{short}{axis.lower()}", f"{prop}{normalized}")
        add(f"{prop}{normalized}", f"{prop}{normalized}")
    return entries


def _build_alias_table() -> dict[str, AliasEntry]:
    table: dict[str, AliasEntry] = {}

    def scaled(scale: str, *names: str, coerce_numerals: bool = True) -> None:
        for name in names:
            table[name] = AliasEntry(
                scale=scale, outputs=(name,), coerce_numerals=coerce_numerals
            )

    # Spacing
    table.update(_spacing_aliases("margin", "m"))
    table.update(_spacing_aliases("padding", "p"))
    scaled("space", "top", "right", "bottom", "left", "start", "end")
    scaled("space", "gap", "rowGap", "columnGap")

    # Colors
    scaled(
        "colors",
        "color",
        "backgroundColor",
        "borderColor",
        "shadowColor",
        "textShadowColor",
        "textDecorationColor",
        "tintColor",
        "overlayColor",
    )
    scaled("colors", *(f"border{side}Color" for side in _SIDES + _LOGICAL_SIDES))
    table["bg"] = AliasEntry(scale="colors", outputs=("backgroundColor",))

    # Typography
    scaled("fontSizes", "fontSize")
    scaled("fonts", "fontFamily")
    scaled("fontWeights", "fontWeight", coerce_numerals=False)
    scaled("lineHeights", "lineHeight")
    scaled("letterSpacings", "letterSpacing")

    # Sizing
    scaled("sizes", "width", "height", "minWidth", "maxWidth", "minHeight", "maxHeight")
    scaled("sizes", "flexBasis")
    table["size"] = AliasEntry(scale="sizes", outputs=("width", "height"))

    # Borders
    scaled("borderWidths", "borderWidth")
    scaled("borderWidths", *(f"border{side}Width" for side in _SIDES + _LOGICAL_SIDES))
    scaled("radii", "borderRadius")
    for vertical in ("Top", "Bottom"):
        for horizontal in ("Left", "Right") + _LOGICAL_SIDES:
            scaled("radii", f"border{vertical}{horizontal}Radius")

    # Stacking
    scaled("zIndices", "zIndex")

    return table


ALIASES: Mapping[str, AliasEntry] = MappingProxyType(_build_alias_table())


def resolve_alias(name: str, aliases: Mapping[str, AliasEntry] | None = None) -> AliasEntry:
    """
    Get the alias entry for a style property.

    Args:
        name: Style property name as written by the author
        aliases: Table to consult (defaults to ALIASES)

    Returns:
        The configured entry, or an identity entry with no scale for
        properties that are not theme-aware.
    """
    table = ALIASES if aliases is None else aliases
    entry = table.get(name)
    if entry is None:
        return AliasEntry(outputs=(name,))
    return entry
