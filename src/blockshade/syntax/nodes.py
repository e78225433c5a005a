# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""The syntax tree the decoration engine reads.

Trees are built by a tree provider (see `blockshade.syntax.ast_grep`) and only
read afterwards. A node knows its `NodeKind`, its `ByteRange` in the source,
its ordered children, and a small set of *roles*: named, non-owning references
to sub-nodes such as a statement's condition or a block's braces. Every role is
optional; an absent role reads as `None` (or an empty tuple for the sequence
roles).
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Literal, NamedTuple

from blockshade.core.types.enum import BaseEnum
from blockshade.exceptions import MalformedRangeError


class NodeKind(str, BaseEnum):
    """Closed set of node kinds the engine distinguishes."""

    IMPORT = "import"
    CLASS_DECL = "class_decl"
    METHOD_DECL = "method_decl"
    FIELD = "field"
    WHILE = "while"
    DO_WHILE = "do_while"
    FOR = "for"
    IF = "if"
    TRY = "try"
    CATCH_SECTION = "catch_section"
    BLOCK_STATEMENT = "block_statement"
    """A statement that is nothing but a braced block, e.g. a loop body."""
    CODE_BLOCK = "code_block"
    """The braced block itself."""
    KEYWORD = "keyword"
    MODIFIER_LIST = "modifier_list"
    RETURN_TYPE_ELEMENT = "return_type_element"
    IDENTIFIER = "identifier"
    PARAMETER_LIST = "parameter_list"
    DECLARATION_STATEMENT = "declaration_statement"
    EXPRESSION_STATEMENT = "expression_statement"
    RETURN_STATEMENT = "return_statement"
    BREAK_STATEMENT = "break_statement"
    CONTINUE_STATEMENT = "continue_statement"
    OTHER = "other"

    __slots__ = ()

    @property
    def is_conditional_loop(self) -> bool:
        """While, do-while and for loops share one decoration rule."""
        return self in _CONDITIONAL_LOOPS

    @property
    def is_flat_statement(self) -> bool:
        """Statements decorated as a single whole-node range."""
        return self in _FLAT_STATEMENTS


_CONDITIONAL_LOOPS = frozenset({NodeKind.WHILE, NodeKind.DO_WHILE, NodeKind.FOR})

_FLAT_STATEMENTS = frozenset({
    NodeKind.DECLARATION_STATEMENT,
    NodeKind.EXPRESSION_STATEMENT,
    NodeKind.RETURN_STATEMENT,
    NodeKind.BREAK_STATEMENT,
    NodeKind.CONTINUE_STATEMENT,
})


class ByteRange(NamedTuple):
    """A ``(start, length)`` span of source offsets."""

    start: int
    length: int

    @classmethod
    def from_offsets(cls, start: int, length: int) -> ByteRange:
        """Build a range, refusing negative values instead of clamping them."""
        if start < 0 or length < 0:
            raise MalformedRangeError(
                "Tree provider supplied a negative range",
                details={"start": start, "length": length},
            )
        return cls(start, length)

    @classmethod
    def between(cls, start: int, end: int) -> ByteRange:
        """Build a range from start and (exclusive) end offsets."""
        return cls.from_offsets(start, end - start)

    @property
    def end(self) -> int:
        """Exclusive end offset."""
        return self.start + self.length

    def padded(self, extra: int = 1) -> ByteRange:
        """The same range grown by ``extra`` positions at the end."""
        return ByteRange.from_offsets(self.start, self.length + extra)


type SingleRole = Literal[
    "name",
    "modifiers",
    "return_type",
    "parameters",
    "body",
    "condition",
    "lparen",
    "rparen",
    "lbrace",
    "rbrace",
    "initializer",
    "update",
    "parameter",
    "try_block",
    "catch_block",
    "code_block",
]
type SequenceRole = Literal["catch_sections", "fields", "statements"]


@dataclass(slots=True, eq=False)
class SyntaxNode:
    """One node of a parsed syntax tree.

    The node owns its `children`. Roles point at nodes owned elsewhere in the
    same tree (usually a child or grandchild), so they are never walked.
    """

    kind: NodeKind
    range: ByteRange
    text: str = ""
    children: Sequence[SyntaxNode] = ()
    roles: Mapping[str, SyntaxNode] = field(default_factory=lambda: MappingProxyType({}))
    sequences: Mapping[str, Sequence[SyntaxNode]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def role(self, name: SingleRole) -> SyntaxNode | None:
        """Look up a single optional sub-node."""
        return self.roles.get(name)

    def role_sequence(self, name: SequenceRole) -> tuple[SyntaxNode, ...]:
        """Look up a sequence of sub-nodes; empty when absent."""
        return tuple(self.sequences.get(name, ()))

    @property
    def name(self) -> SyntaxNode | None:
        """Name identifier of a class or method."""
        return self.role("name")

    @property
    def modifiers(self) -> SyntaxNode | None:
        """Modifier list of a class or method."""
        return self.role("modifiers")

    @property
    def return_type(self) -> SyntaxNode | None:
        """Return type of a method; absent for constructors."""
        return self.role("return_type")

    @property
    def parameters(self) -> SyntaxNode | None:
        """Parameter list of a method."""
        return self.role("parameters")

    @property
    def body(self) -> SyntaxNode | None:
        """Body code block of a method."""
        return self.role("body")

    @property
    def condition(self) -> SyntaxNode | None:
        """Condition expression of a loop or if, without its parentheses."""
        return self.role("condition")

    @property
    def lparen(self) -> SyntaxNode | None:
        """Left parenthesis token."""
        return self.role("lparen")

    @property
    def rparen(self) -> SyntaxNode | None:
        """Right parenthesis token."""
        return self.role("rparen")

    @property
    def lbrace(self) -> SyntaxNode | None:
        """Left brace token."""
        return self.role("lbrace")

    @property
    def rbrace(self) -> SyntaxNode | None:
        """Right brace token."""
        return self.role("rbrace")

    @property
    def initializer(self) -> SyntaxNode | None:
        """Initialization statement of a for loop."""
        return self.role("initializer")

    @property
    def update(self) -> SyntaxNode | None:
        """Update statement of a for loop."""
        return self.role("update")

    @property
    def parameter(self) -> SyntaxNode | None:
        """Caught parameter of a catch section."""
        return self.role("parameter")

    @property
    def try_block(self) -> SyntaxNode | None:
        """Guarded block of a try statement."""
        return self.role("try_block")

    @property
    def catch_block(self) -> SyntaxNode | None:
        """Handler block of a catch section."""
        return self.role("catch_block")

    @property
    def code_block(self) -> SyntaxNode | None:
        """The block wrapped by a block statement."""
        return self.role("code_block")

    @property
    def catch_sections(self) -> tuple[SyntaxNode, ...]:
        """Catch sections of a try statement, in order."""
        return self.role_sequence("catch_sections")

    @property
    def fields(self) -> tuple[SyntaxNode, ...]:
        """Field declarations of a class body."""
        return self.role_sequence("fields")

    @property
    def statements(self) -> tuple[SyntaxNode, ...]:
        """Statements inside a code block, without braces or comments."""
        return self.role_sequence("statements")

    @property
    def is_leaf(self) -> bool:
        """Tokens have no children."""
        return not self.children

    def __repr__(self) -> str:
        snippet = self.text if len(self.text) <= 20 else f"{self.text[:17]}..."
        return f"SyntaxNode({self.kind.value}, {tuple(self.range)}, {snippet!r})"


def walk(root: SyntaxNode) -> Iterator[SyntaxNode]:
    """Yield every node of the tree once, in document pre-order."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


__all__ = ("ByteRange", "NodeKind", "SequenceRole", "SingleRole", "SyntaxNode", "walk")
