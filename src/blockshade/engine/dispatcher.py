# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Traversal: from a stream of syntax nodes to a stream of decorations."""

from __future__ import annotations

import logging

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Annotated

from pydantic import Field

from blockshade.core.types.models import FROZEN_BASEDMODEL_CONFIG, BasedModel
from blockshade.engine.categories import HighlightCategory
from blockshade.engine.color import RGB
from blockshade.engine.extractor import RangeExtractor
from blockshade.engine.theme import Theme, ThemeState
from blockshade.exceptions import BlockShadeError
from blockshade.syntax.lines import LineIndexedText
from blockshade.syntax.nodes import ByteRange, SyntaxNode, walk


if TYPE_CHECKING:
    from blockshade.host import RenderSurface


logger = logging.getLogger(__name__)


class Decoration(BasedModel):
    """A colored span for the host to paint."""

    model_config = FROZEN_BASEDMODEL_CONFIG

    range: Annotated[ByteRange, Field(description="""The span to paint.""")]
    color: Annotated[RGB, Field(description="""Opaque render color.""")]
    category: Annotated[
        HighlightCategory, Field(description="""The category the color came from.""")
    ]

    def serialize_for_cli(self) -> dict[str, object]:
        """Flatten for table and JSON output."""
        return {
            "start": self.range.start,
            "length": self.range.length,
            "category": self.category.value,
            "color": self.color.to_hex(),
        }


class TraversalDispatcher:
    """Routes every visited node to its extraction rule and blends the results.

    The dispatcher doesn't walk the tree. It consumes whatever pre-order node
    sequence the host hands it, once. Each node is colored only by the rule for
    its own kind; statements inside a method body are reached because the host
    visits them, not because the method rule descends into them.
    """

    def __init__(self, state: ThemeState, lines: LineIndexedText | None = None) -> None:
        """Initialize the dispatcher for one document."""
        self.state = state
        self.extractor = RangeExtractor(lines)

    def dispatch(
        self, nodes: Iterable[SyntaxNode], surface: RenderSurface | None = None
    ) -> Iterator[Decoration]:
        """Yield the decorations for ``nodes`` in visiting order.

        Uses one theme snapshot for the whole pass. A node whose ranges turn out
        to be malformed is skipped (and reported to ``surface`` when it can take
        reports); the rest of the traversal continues.
        """
        theme = self.state.snapshot()
        visited = emitted = skipped = 0
        for node in nodes:
            visited += 1
            try:
                extracted = self.extractor.extract(node)
            except BlockShadeError as e:
                skipped += 1
                logger.warning("Skipping %r: %s", node, e)
                if surface is not None and (report := getattr(surface, "report_error", None)):
                    report(node, e)
                continue
            for span, category in extracted:
                emitted += 1
                yield self._decorate(span, category, theme)
        logger.debug(
            "Traversal visited %d nodes, emitted %d decorations, skipped %d nodes",
            visited,
            emitted,
            skipped,
        )

    def run(self, nodes: Iterable[SyntaxNode], surface: RenderSurface) -> int:
        """Send every decoration for ``nodes`` to ``surface``; return how many were sent."""
        count = 0
        for decoration in self.dispatch(nodes, surface):
            surface.add(decoration)
            count += 1
        return count

    @staticmethod
    def _decorate(span: ByteRange, category: HighlightCategory, theme: Theme) -> Decoration:
        return Decoration(range=span, color=theme.color_for(category), category=category)


def annotate(
    root: SyntaxNode, lines: LineIndexedText | None, state: ThemeState
) -> list[Decoration]:
    """All decorations for the tree under ``root``, in document order."""
    return list(TraversalDispatcher(state, lines).dispatch(walk(root)))


__all__ = ("Decoration", "TraversalDispatcher", "annotate")
