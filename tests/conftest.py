# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0

"""Global pytest configuration and fixtures for BlockShade tests."""

from __future__ import annotations

import os

from collections.abc import Iterator, Mapping, Sequence
from types import MappingProxyType

import pytest

from blockshade.config.settings import get_settings
from blockshade.engine.color import RGB
from blockshade.engine.theme import ThemeReactor, ThemeState
from blockshade.syntax.lines import LineIndexedText
from blockshade.syntax.nodes import ByteRange, NodeKind, SyntaxNode


# ===========================================================================
# *                    Hand-built syntax trees
# ===========================================================================


class NodeFactory:
    """Builds `SyntaxNode`s positioned on a real source string.

    Nodes are located by searching for their text, so tests can describe a tree
    without counting offsets by hand.
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self.lines = LineIndexedText(source)

    def span(self, text: str, nth: int = 0) -> ByteRange:
        """Range of the ``nth`` occurrence of ``text``."""
        start = -1
        for _ in range(nth + 1):
            start = self.source.index(text, start + 1)
        return ByteRange(start, len(text))

    def node(
        self,
        kind: NodeKind,
        text: str,
        *,
        nth: int = 0,
        children: Sequence[SyntaxNode] = (),
        roles: Mapping[str, SyntaxNode | None] | None = None,
        sequences: Mapping[str, Sequence[SyntaxNode]] | None = None,
    ) -> SyntaxNode:
        """A node covering the ``nth`` occurrence of ``text``."""
        return SyntaxNode(
            kind=kind,
            range=self.span(text, nth),
            text=text,
            children=tuple(children),
            roles=MappingProxyType({k: v for k, v in (roles or {}).items() if v is not None}),
            sequences=MappingProxyType({k: tuple(v) for k, v in (sequences or {}).items()}),
        )

    def token(self, text: str, nth: int = 0) -> SyntaxNode:
        """An unclassified leaf token."""
        return self.node(NodeKind.OTHER, text, nth=nth)

    def keyword(self, text: str, nth: int = 0) -> SyntaxNode:
        """A keyword leaf token."""
        return self.node(NodeKind.KEYWORD, text, nth=nth)

    def block(self, text: str, statements: Sequence[SyntaxNode] = (), nth: int = 0) -> SyntaxNode:
        """A braced code block whose first and last characters are its braces."""
        span = self.span(text, nth)
        lbrace = SyntaxNode(NodeKind.OTHER, ByteRange(span.start, 1), "{")
        rbrace = SyntaxNode(NodeKind.OTHER, ByteRange(span.end - 1, 1), "}")
        return SyntaxNode(
            kind=NodeKind.CODE_BLOCK,
            range=span,
            text=text,
            children=(lbrace, *statements, rbrace),
            roles=MappingProxyType({"lbrace": lbrace, "rbrace": rbrace}),
            sequences=MappingProxyType({"statements": tuple(statements)}),
        )

    def block_statement(self, block: SyntaxNode) -> SyntaxNode:
        """Wrap ``block`` the way statement bodies are wrapped."""
        return SyntaxNode(
            kind=NodeKind.BLOCK_STATEMENT,
            range=block.range,
            text=block.text,
            children=(block,),
            roles=MappingProxyType({"code_block": block}),
        )


@pytest.fixture
def factory_for() -> type[NodeFactory]:
    """The `NodeFactory` class; call it with a source string."""
    return NodeFactory


@pytest.fixture
def if_source() -> str:
    """A single-statement if on one line."""
    return "if (x > 0) { return x; }"


@pytest.fixture
def if_tree(if_source: str) -> tuple[SyntaxNode, NodeFactory]:
    """Hand-built tree for `if_source`, shaped the way the Java provider shapes it."""
    f = NodeFactory(if_source)
    statement = f.node(NodeKind.RETURN_STATEMENT, "return x;")
    body = f.block_statement(f.block("{ return x; }", [statement]))
    lparen, condition, rparen = f.token("("), f.token("x > 0"), f.token(")")
    node = f.node(
        NodeKind.IF,
        if_source,
        children=[f.keyword("if"), lparen, condition, rparen, body],
        roles={"lparen": lparen, "condition": condition, "rparen": rparen},
    )
    return node, f


# ===========================================================================
# *                    Theme and settings
# ===========================================================================


WHITE = RGB(0xFF, 0xFF, 0xFF)
BLACK = RGB(0x00, 0x00, 0x00)


@pytest.fixture
def theme_state() -> ThemeState:
    """A fresh theme state over a white background."""
    return ThemeState.from_background(WHITE, name="light")


@pytest.fixture
def reactor(theme_state: ThemeState) -> ThemeReactor:
    """A reactor bound to `theme_state`."""
    return ThemeReactor(theme_state)


@pytest.fixture(autouse=True)
def clean_settings(
    monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory
) -> Iterator[None]:
    """Isolate tests from BLOCKSHADE_* variables, `.env` files and the settings cache."""
    for key in tuple(os.environ):
        if key.startswith("BLOCKSHADE_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path_factory.mktemp("cwd"))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
