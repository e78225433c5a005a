# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Binding a document to a surface and keeping it in step with the theme."""

from __future__ import annotations

import logging

from typing import TYPE_CHECKING, Self

from blockshade.engine.dispatcher import TraversalDispatcher
from blockshade.syntax.ast_grep import ParsedDocument, parse
from blockshade.syntax.nodes import walk


if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

    from blockshade.engine.theme import Theme, ThemeReactor, ThemeState
    from blockshade.host.surfaces import RenderSurface


logger = logging.getLogger(__name__)


class DocumentHighlighter:
    """Decorates one document on one surface.

    With a `ThemeReactor`, the highlighter subscribes to theme changes and
    repaints the whole document each time: existing decorations are cleared
    and a fresh traversal runs against the new theme.
    """

    def __init__(
        self,
        document: ParsedDocument,
        surface: RenderSurface,
        state: ThemeState,
        reactor: ThemeReactor | None = None,
    ) -> None:
        """Initialize the highlighter and subscribe to ``reactor`` if given."""
        self.document = document
        self.surface = surface
        self.state = state
        self._unsubscribe: Callable[[], None] | None = (
            reactor.subscribe(self._on_theme_changed) if reactor is not None else None
        )

    @classmethod
    def from_source(
        cls,
        source: str,
        surface: RenderSurface,
        state: ThemeState,
        reactor: ThemeReactor | None = None,
        *,
        language: str = "java",
    ) -> Self:
        """Parse ``source`` and bind it."""
        return cls(parse(source, language), surface, state, reactor)

    def highlight(self) -> int:
        """Repaint the surface from scratch; return the number of decorations."""
        self.surface.clear()
        dispatcher = TraversalDispatcher(self.state, self.document.lines)
        return dispatcher.run(walk(self.document.root), self.surface)

    def _on_theme_changed(self, theme: Theme) -> None:
        count = self.highlight()
        logger.debug("Repainted %d decorations for theme %s", count, theme.name or "unnamed")

    def close(self) -> None:
        """Stop following theme changes."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()


__all__ = ("DocumentHighlighter",)
