# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Render surfaces: where decorations end up.

A surface only needs `add` and `clear`. Surfaces that also define
`report_error` are told about nodes the dispatcher had to skip.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from rich.color import Color
from rich.style import Style
from rich.text import Text


if TYPE_CHECKING:
    from blockshade.engine.dispatcher import Decoration
    from blockshade.exceptions import BlockShadeError
    from blockshade.syntax.nodes import SyntaxNode


@runtime_checkable
class RenderSurface(Protocol):
    """Anything that can paint decorations and drop them again."""

    def add(self, decoration: Decoration) -> None:
        """Paint one decoration."""
        ...

    def clear(self) -> None:
        """Remove every decoration painted so far."""
        ...


@runtime_checkable
class ErrorReportingSurface(RenderSurface, Protocol):
    """A surface that wants to hear about skipped nodes."""

    def report_error(self, node: SyntaxNode, error: BlockShadeError) -> None:
        """Record that ``node`` was skipped because of ``error``."""
        ...


class CollectingSurface:
    """Keeps decorations (and skipped nodes) in lists."""

    def __init__(self) -> None:
        """Initialize an empty surface."""
        self.decorations: list[Decoration] = []
        self.errors: list[tuple[SyntaxNode, BlockShadeError]] = []

    def add(self, decoration: Decoration) -> None:
        """Append ``decoration``."""
        self.decorations.append(decoration)

    def clear(self) -> None:
        """Forget decorations and errors."""
        self.decorations.clear()
        self.errors.clear()

    def report_error(self, node: SyntaxNode, error: BlockShadeError) -> None:
        """Remember the skipped node."""
        self.errors.append((node, error))

    def __len__(self) -> int:
        return len(self.decorations)


class RichSurface:
    """Paints decorations as background colors on a `rich.text.Text`.

    Spans are applied in the order they arrive, so where two decorations
    overlap the later one is what shows.
    """

    def __init__(self, source: str, *, tab_size: int = 4) -> None:
        """Initialize with the plain source text."""
        self.source = source
        self.tab_size = tab_size
        self.text = Text(source, tab_size=tab_size, end="")

    def add(self, decoration: Decoration) -> None:
        """Apply ``decoration`` as a background style."""
        red, green, blue = decoration.color
        self.text.stylize(
            Style(bgcolor=Color.from_rgb(red, green, blue)),
            decoration.range.start,
            decoration.range.end,
        )

    def clear(self) -> None:
        """Drop every style, keeping the source."""
        self.text = Text(self.source, tab_size=self.tab_size, end="")


__all__ = ("CollectingSurface", "ErrorReportingSurface", "RenderSurface", "RichSurface")
