"""
Theme and style file loading.

Reads YAML (``.yaml``/``.yml``) or JSON files whose top level is a mapping.
Used by the CLI and by applications that keep their theme on disk.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from styled_native.errors import ThemeLoadError

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


def _read_mapping(path: Path) -> dict[str, Any]:
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ThemeLoadError(f"Cannot read file: {e}", path) from e

    try:
        if path.suffix.lower() in YAML_SUFFIXES:
            data = yaml.safe_load(content)
        else:
            data = json.loads(content)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ThemeLoadError(f"Invalid {path.suffix.lstrip('.') or 'file'} content: {e}", path) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ThemeLoadError(f"Expected a mapping at top level, got {type(data).__name__}", path)
    return data


def load_theme(path: Path | str) -> dict[str, Any]:
    """
    Load a theme mapping from a YAML or JSON file.

    Raises:
        ThemeLoadError: If the file is missing, unparsable, or not a mapping
    """
    path = Path(path)
    theme = _read_mapping(path)
    logger.debug("Loaded theme from %s (%d top-level keys)", path, len(theme))
    return theme


def load_style(path: Path | str) -> dict[str, Any]:
    """
    Load a style description from a YAML or JSON file.

    Raises:
        ThemeLoadError: If the file is missing, unparsable, or not a mapping
    """
    path = Path(path)
    style = _read_mapping(path)
    logger.debug("Loaded style description from %s", path)
    return style
