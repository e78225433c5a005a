# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Helpers shared by CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

from blockshade.common import BLOCKSHADE_PREFIX
from blockshade.config.settings import get_settings, resolve_background
from blockshade.engine.color import RGB
from blockshade.engine.theme import ThemeState
from blockshade.syntax.ast_grep import language_for


if TYPE_CHECKING:
    from pathlib import Path

    from blockshade.exceptions import BlockShadeError


def theme_state_for(theme: str | None = None, background: str | None = None) -> ThemeState:
    """Build the starting theme from flags, falling back to settings.

    An explicit ``background`` wins over ``theme``; both win over settings.
    """
    settings = get_settings()
    if background:
        return ThemeState.from_background(RGB.from_hex(background), name=theme)
    if theme:
        settings = settings.model_copy(update={"theme_name": theme.strip().lower(), "background": None})
    return ThemeState.from_background(resolve_background(settings), name=settings.theme_name)


def resolve_language(file: Path, language: str | None = None) -> str:
    """Language flag first, then the file suffix, then settings."""
    return language or language_for(file) or get_settings().language


def print_error(console: Console, error: BlockShadeError) -> None:
    """Print an error and its suggestions."""
    console.print(f"{BLOCKSHADE_PREFIX} [bold red]Error:[/bold red] {escape(str(error))}")
    for suggestion in error.suggestions:
        console.print(f"  [dim]•[/dim] {escape(suggestion)}")


__all__ = ("print_error", "resolve_language", "theme_state_for")
