# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Per-construct extraction of the ranges to decorate.

Every node kind the engine colors has exactly one rule in `RangeExtractor`'s
dispatch table. A rule yields ``(range, category)`` pairs for the parts of the
construct it owns: keywords, names, punctuation and, for a few kinds, the
whole node. Kinds listed in `UNDECORATED_KINDS` have no rule and produce
nothing.

Keywords, modifier lists, return types and caught parameters are padded by one
position (`ByteRange.padded`) so the highlight runs into the following
separator and visually joins the next token. Names, punctuation and
conditions use their exact ranges.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from types import MappingProxyType

from blockshade.engine.categories import HighlightCategory
from blockshade.engine.indent import measure
from blockshade.syntax.lines import LineIndexedText
from blockshade.syntax.nodes import ByteRange, NodeKind, SyntaxNode


type Extraction = tuple[ByteRange, HighlightCategory]
type Rule = Callable[[RangeExtractor, SyntaxNode], Iterator[Extraction]]


def _exact(node: SyntaxNode | None, category: HighlightCategory) -> Iterator[Extraction]:
    if node is not None:
        yield node.range, category


def _padded(node: SyntaxNode | None, category: HighlightCategory) -> Iterator[Extraction]:
    if node is not None:
        yield node.range.padded(), category


def _parens(node: SyntaxNode, category: HighlightCategory) -> Iterator[Extraction]:
    yield from _exact(node.lparen, category)
    yield from _exact(node.rparen, category)


def _keywords(node: SyntaxNode, category: HighlightCategory) -> Iterator[Extraction]:
    for child in node.children:
        if child.kind is NodeKind.KEYWORD:
            yield child.range.padded(), category


def brace_ranges(block: SyntaxNode | None, category: HighlightCategory) -> Iterator[Extraction]:
    """Left and right braces of a code block; either may be missing."""
    if block is None:
        return
    yield from _exact(block.lbrace, category)
    yield from _exact(block.rbrace, category)


def indent_ranges(
    block: SyntaxNode, lines: LineIndexedText | None, category: HighlightCategory
) -> Iterator[Extraction]:
    """Leading whitespace of every line from the first to the last statement.

    Blocks without statements have no lines to mark and yield nothing, as does
    a missing line index.
    """
    statements = block.statements
    if lines is None or not statements:
        return
    span = ByteRange.between(statements[0].range.start, statements[-1].range.end)
    for indent in measure(lines, span):
        yield indent, category


class RangeExtractor:
    """Turns one syntax node into the ranges to decorate and their categories.

    The extractor is bound to a single document so the indent rule can find
    line boundaries. Without a line index the indent rule is skipped and
    everything else works the same.
    """

    def __init__(self, lines: LineIndexedText | None = None) -> None:
        """Initialize the extractor for a document."""
        self.lines = lines

    def extract(self, node: SyntaxNode) -> tuple[Extraction, ...]:
        """All ``(range, category)`` pairs for ``node``, in emission order.

        Raises:
            MalformedRangeError: a range taken from the tree is negative or
                falls outside the document.
        """
        rule = RULES.get(node.kind)
        if rule is None:
            return ()
        return tuple(
            (ByteRange.from_offsets(*span), category) for span, category in rule(self, node)
        )

    # ================================================
    # *                 Rules
    # ================================================

    def _import(self, node: SyntaxNode) -> Iterator[Extraction]:
        yield node.range, HighlightCategory.IMPORT

    def _class(self, node: SyntaxNode) -> Iterator[Extraction]:
        category = HighlightCategory.CLASS
        for child in node.children:
            if child.kind is NodeKind.MODIFIER_LIST or (
                child.kind is NodeKind.KEYWORD and child.text == "class"
            ):
                yield child.range.padded(), category
        yield from _exact(node.name, category)
        yield from _exact(node.lbrace, category)
        yield from _exact(node.rbrace, category)
        for field in node.fields:
            yield field.range, category

    def _method(self, node: SyntaxNode) -> Iterator[Extraction]:
        category = HighlightCategory.METHOD
        yield from _padded(node.modifiers, category)
        yield from _padded(node.return_type, category)
        yield from _exact(node.name, category)
        yield from _exact(node.parameters, category)
        yield from brace_ranges(node.body, category)

    def _branching(self, node: SyntaxNode, *, indent: bool) -> Iterator[Extraction]:
        """Keywords, block braces and the condition, shared by loops and ifs."""
        category = HighlightCategory.CONDITION
        for child in node.children:
            if child.kind is NodeKind.KEYWORD:
                yield child.range.padded(), category
            elif child.kind is NodeKind.BLOCK_STATEMENT and (block := child.code_block):
                yield from brace_ranges(block, category)
                if indent:
                    yield from indent_ranges(block, self.lines, category)
        yield from _exact(node.condition, category)

    def _conditional_loop(self, node: SyntaxNode) -> Iterator[Extraction]:
        category = HighlightCategory.CONDITION
        yield from self._branching(node, indent=False)
        if node.kind is NodeKind.FOR:
            yield from _exact(node.initializer, category)
            yield from _exact(node.update, category)
        yield from _parens(node, category)

    def _if(self, node: SyntaxNode) -> Iterator[Extraction]:
        yield from self._branching(node, indent=True)
        yield from _parens(node, HighlightCategory.CONDITION)

    def _try(self, node: SyntaxNode) -> Iterator[Extraction]:
        category = HighlightCategory.CONDITION
        yield from _keywords(node, category)
        yield from brace_ranges(node.try_block, category)
        for section in node.catch_sections:
            yield from _keywords(section, category)
            yield from _padded(section.parameter, category)
            yield from _parens(section, category)
            yield from brace_ranges(section.catch_block, category)

    def _statement(self, node: SyntaxNode) -> Iterator[Extraction]:
        yield node.range, HighlightCategory.STATEMENT


RULES: MappingProxyType[NodeKind, Rule] = MappingProxyType({
    NodeKind.IMPORT: RangeExtractor._import,
    NodeKind.CLASS_DECL: RangeExtractor._class,
    NodeKind.METHOD_DECL: RangeExtractor._method,
    NodeKind.IF: RangeExtractor._if,
    NodeKind.TRY: RangeExtractor._try,
    **{kind: RangeExtractor._conditional_loop for kind in NodeKind if kind.is_conditional_loop},
    **{kind: RangeExtractor._statement for kind in NodeKind if kind.is_flat_statement},
})
"""Dispatch table from node kind to extraction rule."""

UNDECORATED_KINDS: frozenset[NodeKind] = frozenset(set(NodeKind) - set(RULES))
"""Kinds that are only ever decorated through a parent's rule, or not at all."""


__all__ = (
    "RULES",
    "UNDECORATED_KINDS",
    "Extraction",
    "RangeExtractor",
    "brace_ranges",
    "indent_ranges",
)
