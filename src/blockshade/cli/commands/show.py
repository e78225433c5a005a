# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Commands that decorate a source file."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Literal

import cyclopts

from rich.console import Console
from rich.table import Table

from blockshade.cli.utils import resolve_language, theme_state_for
from blockshade.host import CollectingSurface, DocumentHighlighter, RichSurface
from blockshade.syntax.ast_grep import parse_file


console = Console(markup=True, emoji=True)

type OutputFormat = Literal["table", "json"]


def show(
    file: Annotated[Path, cyclopts.Parameter(help="Source file to highlight")],
    *,
    theme: Annotated[
        str | None, cyclopts.Parameter(name=["--theme", "-t"], help="Theme preset name")
    ] = None,
    background: Annotated[
        str | None,
        cyclopts.Parameter(name=["--background", "-b"], help="Background color as #RRGGBB"),
    ] = None,
    language: Annotated[
        str | None, cyclopts.Parameter(help="Source language (default: from the file suffix)")
    ] = None,
) -> None:
    """Print a file with its block decorations painted in."""
    state = theme_state_for(theme, background)
    document = parse_file(file, resolve_language(file, language))
    surface = RichSurface(document.lines.text)
    DocumentHighlighter(document, surface, state).highlight()
    console.print(surface.text, style=f"on {state.background.to_hex()}", soft_wrap=True)


def decorations(
    file: Annotated[Path, cyclopts.Parameter(help="Source file to decorate")],
    *,
    output_format: Annotated[
        OutputFormat, cyclopts.Parameter(name=["--format", "-f"], help="Output format")
    ] = "table",
    theme: Annotated[
        str | None, cyclopts.Parameter(name=["--theme", "-t"], help="Theme preset name")
    ] = None,
    background: Annotated[
        str | None,
        cyclopts.Parameter(name=["--background", "-b"], help="Background color as #RRGGBB"),
    ] = None,
    language: Annotated[
        str | None, cyclopts.Parameter(help="Source language (default: from the file suffix)")
    ] = None,
) -> None:
    """List every decoration for a file."""
    state = theme_state_for(theme, background)
    document = parse_file(file, resolve_language(file, language))
    surface = CollectingSurface()
    DocumentHighlighter(document, surface, state).highlight()
    rows = [decoration.serialize_for_cli() for decoration in surface.decorations]

    if output_format == "json":
        console.print_json(data=rows)
        return

    table = Table(show_header=True, header_style="bold blue", title=f"Decorations for {file}")
    table.add_column("Line", style="cyan", justify="right")
    table.add_column("Start", justify="right")
    table.add_column("Length", justify="right")
    table.add_column("Category", style="white")
    table.add_column("Color", no_wrap=True)
    for row in rows:
        table.add_row(
            str(document.lines.line_number(min(int(row["start"]), len(document.lines))) + 1),
            str(row["start"]),
            str(row["length"]),
            str(row["category"]),
            f"[on {row['color']}]   [/] {row['color']}",
        )
    console.print(table)
    if surface.errors:
        console.print(f"[yellow]Skipped {len(surface.errors)} malformed node(s)[/yellow]")


__all__ = ("decorations", "show")
