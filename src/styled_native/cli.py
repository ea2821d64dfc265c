"""
styled-native CLI.

Developer commands for checking how a style description resolves against a
theme without running the consuming UI:

    styled-native resolve button.yaml --preset base --theme theme.yaml
    styled-native presets
    styled-native alias mx
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from styled_native.aliases import ALIASES, resolve_alias
from styled_native.engine import css
from styled_native.errors import StyleError
from styled_native.themes import get_theme_preset, list_theme_presets, load_style, load_theme, merge_themes

app = typer.Typer(help="Resolve theme-aware style descriptions", no_args_is_help=True)
console = Console()


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _build_theme(preset: str | None, theme_file: Path | None) -> dict[str, Any] | None:
    base = None
    if preset:
        base = get_theme_preset(preset)
        if base is None:
            available = ", ".join(list_theme_presets())
            typer.echo(f"Unknown preset: {preset} (available: {available})", err=True)
            raise typer.Exit(code=1)
    if theme_file is None:
        return base
    return merge_themes(base, load_theme(theme_file))


@app.command("resolve")
def resolve_cmd(
    style_file: Path = typer.Argument(..., help="YAML or JSON style description"),
    theme_file: Path | None = typer.Option(None, "--theme", "-t", help="YAML or JSON theme file"),
    preset: str | None = typer.Option(None, "--preset", "-p", help="Theme preset to start from"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Resolve a style description and print the result as JSON."""
    _configure_logging(verbose)
    try:
        theme = _build_theme(preset, theme_file)
        description = load_style(style_file)
        result = css(theme)(description)
    except StyleError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(json.dumps(result, indent=2))


@app.command("presets")
def presets_cmd() -> None:
    """List available theme presets."""
    for name in list_theme_presets():
        typer.echo(name)


@app.command("alias")
def alias_cmd(
    name: str = typer.Argument(..., help="Style property name (e.g. mx, bg, size)"),
) -> None:
    """Show how a style property maps to a scale and output properties."""
    entry = resolve_alias(name)

    table = Table(title=f"Alias: {name}")
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("scale", entry.scale or "-")
    table.add_row("outputs", ", ".join(entry.outputs))
    table.add_row("coerce numerals", "yes" if entry.coerce_numerals else "no")
    table.add_row("known alias", "yes" if name in ALIASES else "no (passthrough)")
    console.print(table)


def main() -> None:
    app()
