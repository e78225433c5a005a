# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Commands for inspecting category colors."""

from __future__ import annotations

from typing import Annotated

import cyclopts

from rich.console import Console
from rich.table import Table

from blockshade.cli.utils import theme_state_for
from blockshade.engine.categories import HighlightCategory


console = Console(markup=True, emoji=True)


def blend(
    category: Annotated[str, cyclopts.Parameter(help="Highlight category, e.g. condition")],
    *,
    theme: Annotated[
        str | None, cyclopts.Parameter(name=["--theme", "-t"], help="Theme preset name")
    ] = None,
    background: Annotated[
        str | None,
        cyclopts.Parameter(name=["--background", "-b"], help="Background color as #RRGGBB"),
    ] = None,
) -> None:
    """Print the render color of a category over a background."""
    try:
        member = HighlightCategory.from_string(category)
    except ValueError:
        console.print(f"[red]Invalid category: {category}[/red]")
        console.print(f"Valid categories: {', '.join(c.value for c in HighlightCategory)}")
        raise SystemExit(1) from None
    color = theme_state_for(theme, background).snapshot().color_for(member)
    console.print(f"[on {color.to_hex()}]   [/] {color.to_hex()}")


def categories(
    *,
    theme: Annotated[
        str | None, cyclopts.Parameter(name=["--theme", "-t"], help="Theme preset name")
    ] = None,
    background: Annotated[
        str | None,
        cyclopts.Parameter(name=["--background", "-b"], help="Background color as #RRGGBB"),
    ] = None,
) -> None:
    """List highlight categories with their base and render colors."""
    current = theme_state_for(theme, background).snapshot()
    table = Table(
        show_header=True,
        header_style="bold blue",
        title=f"Categories over {current.background.to_hex()}",
    )
    table.add_column("Category", style="cyan", no_wrap=True)
    table.add_column("Base (RRGGBBAA)", style="white")
    table.add_column("Render", no_wrap=True)
    for category in HighlightCategory:
        render = current.color_for(category).to_hex()
        table.add_row(category.as_title, category.color.to_hex(), f"[on {render}]   [/] {render}")
    console.print(table)


__all__ = ("blend", "categories")
