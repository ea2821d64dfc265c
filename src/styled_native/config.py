"""
Configuration for the css() transform.

css() accepts a bare theme, a ``{"theme": ...}`` wrapper or a StyleConfig.
StyleConfig.from_value() normalises all three.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SkipValidation
from pydantic import ValidationError as PydanticValidationError

from .aliases import ALIASES, AliasEntry
from .errors import StyleConfigError

DEFAULT_MAX_VARIANT_DEPTH = 16


class StyleConfig(BaseModel):
    """
    Options captured once per css() call.

    Example:
        StyleConfig(
            theme={"space": [0, 4, 8], "colors": {"primary": "tomato"}},
            aliases={"elevation": AliasEntry(scale="shadows", outputs=("boxShadow",))},
            max_variant_depth=8,
        )
    """

    model_config = ConfigDict(frozen=True)

    theme: SkipValidation[Mapping[str, Any] | None] = Field(
        default=None, description="Theme mapping, kept as given"
    )
    aliases: dict[str, AliasEntry] | None = Field(
        default=None, description="Alias overrides merged over the default table"
    )
    max_variant_depth: int = Field(
        default=DEFAULT_MAX_VARIANT_DEPTH,
        ge=0,
        description="Maximum nesting of variant references",
    )

    @classmethod
    def from_value(cls, config: Any = None) -> StyleConfig:
        """
        Build a StyleConfig from any accepted css() argument.

        Raises:
            StyleConfigError: If the wrapper options fail validation
        """
        if config is None:
            return cls()
        if isinstance(config, StyleConfig):
            return config
        if not isinstance(config, Mapping):
            raise StyleConfigError(
                f"css() expects a theme mapping or StyleConfig, got {type(config).__name__}"
            )
        options = config if _is_wrapper(config) else {"theme": config}
        try:
            return cls(**options)
        except PydanticValidationError as e:
            raise StyleConfigError(f"Invalid style configuration: {e}") from e

    def alias_table(self) -> Mapping[str, AliasEntry]:
        """Default aliases with this config's overrides applied."""
        if not self.aliases:
            return ALIASES
        merged = dict(ALIASES)
        merged.update(self.aliases)
        return MappingProxyType(merged)

    def theme_or_empty(self) -> Mapping[str, Any]:
        return self.theme if self.theme is not None else {}


def _is_wrapper(config: Mapping[str, Any]) -> bool:
    """A wrapper carries a mapping (or None) under "theme" and only known options."""
    if "theme" not in config:
        return False
    theme = config["theme"]
    if theme is not None and not isinstance(theme, Mapping):
        return False
    return set(config) <= set(StyleConfig.model_fields)
