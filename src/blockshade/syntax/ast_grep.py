# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Build `SyntaxNode` trees from Java source with ast-grep.

ast-grep hands us tree-sitter-java's concrete syntax tree. Its shapes differ
from what the decoration rules expect in a few places, which we smooth over
while converting:

- A `parenthesized_expression` used as a condition is spliced into its
  statement, so ``(``, the bare condition and ``)`` become direct children
  (and the ``lparen``/``condition``/``rparen`` roles).
- A `block` that stands in statement position (a loop or ``if`` body, a nested
  block) becomes a `BLOCK_STATEMENT` wrapping a `CODE_BLOCK`. Method, try and
  catch bodies are plain `CODE_BLOCK`s.
- The ``finally`` keyword and block are lifted out of `finally_clause` into the
  try statement.
- A for loop's comma-separated init or update expressions share one
  ``initializer`` or ``update`` role spanning the whole list.
- Unnamed keyword tokens become `KEYWORD` nodes; everything we don't
  distinguish is `OTHER`.

Offsets come from ast-grep positions as ``line start + column``, so they index
the Python source string.
"""

from __future__ import annotations

import logging

from collections.abc import Callable, Iterable, Sequence
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, NamedTuple

from ast_grep_py import SgNode as AstGrepNode
from ast_grep_py import SgRoot as AstGrepRoot

from blockshade.exceptions import UnsupportedLanguageError
from blockshade.syntax.lines import LineIndexedText
from blockshade.syntax.nodes import ByteRange, NodeKind, SyntaxNode


if TYPE_CHECKING:
    from ast_grep_py import Pos


logger = logging.getLogger(__name__)

type NodeKey = tuple[str, int, int]

JAVA_KEYWORDS = frozenset({
    "abstract", "assert", "break", "case", "catch", "class", "continue", "default", "do",
    "else", "enum", "extends", "final", "finally", "for", "if", "implements", "import",
    "instanceof", "interface", "native", "new", "package", "private", "protected", "public",
    "record", "return", "static", "strictfp", "super", "switch", "synchronized", "this",
    "throw", "throws", "transient", "try", "volatile", "while",
})  # fmt: skip

COMMENT_KINDS = frozenset({"comment", "line_comment", "block_comment"})

JAVA_KINDS: MappingProxyType[str, NodeKind] = MappingProxyType({
    "import_declaration": NodeKind.IMPORT,
    "class_declaration": NodeKind.CLASS_DECL,
    "interface_declaration": NodeKind.CLASS_DECL,
    "enum_declaration": NodeKind.CLASS_DECL,
    "record_declaration": NodeKind.CLASS_DECL,
    "method_declaration": NodeKind.METHOD_DECL,
    "constructor_declaration": NodeKind.METHOD_DECL,
    "field_declaration": NodeKind.FIELD,
    "constant_declaration": NodeKind.FIELD,
    "while_statement": NodeKind.WHILE,
    "do_statement": NodeKind.DO_WHILE,
    "for_statement": NodeKind.FOR,
    "if_statement": NodeKind.IF,
    "try_statement": NodeKind.TRY,
    "try_with_resources_statement": NodeKind.TRY,
    "catch_clause": NodeKind.CATCH_SECTION,
    "local_variable_declaration": NodeKind.DECLARATION_STATEMENT,
    "expression_statement": NodeKind.EXPRESSION_STATEMENT,
    "return_statement": NodeKind.RETURN_STATEMENT,
    "break_statement": NodeKind.BREAK_STATEMENT,
    "continue_statement": NodeKind.CONTINUE_STATEMENT,
    "modifiers": NodeKind.MODIFIER_LIST,
    "formal_parameters": NodeKind.PARAMETER_LIST,
    "identifier": NodeKind.IDENTIFIER,
})
"""tree-sitter-java node kinds we classify; anything else is `NodeKind.OTHER`."""


def _key(node: AstGrepNode) -> NodeKey:
    node_range = node.range()
    return (node.kind(), node_range.start.index, node_range.end.index)


def _field_key(node: AstGrepNode, field: str) -> NodeKey | None:
    target = node.field(field)
    return _key(target) if target is not None else None


def _first(nodes: Iterable[SyntaxNode], text: str) -> SyntaxNode | None:
    return next((node for node in nodes if node.is_leaf and node.text == text), None)


def _last(nodes: Sequence[SyntaxNode], text: str) -> SyntaxNode | None:
    return _first(reversed(nodes), text)


class ParsedDocument(NamedTuple):
    """A syntax tree together with the line index of its source."""

    root: SyntaxNode
    lines: LineIndexedText


class JavaTreeBuilder:
    """Converts one Java source buffer into a `SyntaxNode` tree."""

    def __init__(self, source: str) -> None:
        """Initialize the builder for ``source``."""
        self.lines = LineIndexedText(source)

    def build(self) -> ParsedDocument:
        """Parse the source and convert the whole tree."""
        root = AstGrepRoot(self.lines.text, "java").root()
        return ParsedDocument(self._convert(root), self.lines)

    # ================================================
    # *             Conversion helpers
    # ================================================

    def _offset(self, pos: Pos) -> int:
        return self.lines.line_start(pos.line) + pos.column

    def _range(self, node: AstGrepNode) -> ByteRange:
        node_range = node.range()
        return ByteRange.between(self._offset(node_range.start), self._offset(node_range.end))

    @staticmethod
    def _kind_of(node: AstGrepNode) -> NodeKind:
        ts_kind = node.kind()
        if not node.is_named():
            return NodeKind.KEYWORD if ts_kind in JAVA_KEYWORDS else NodeKind.OTHER
        return JAVA_KINDS.get(ts_kind, NodeKind.OTHER)

    def _node(
        self,
        node: AstGrepNode,
        kind: NodeKind,
        children: Sequence[SyntaxNode],
        roles: dict[str, SyntaxNode | None] | None = None,
        sequences: dict[str, Sequence[SyntaxNode]] | None = None,
    ) -> SyntaxNode:
        return SyntaxNode(
            kind=kind,
            range=self._range(node),
            text=node.text(),
            children=tuple(children),
            roles=MappingProxyType({
                name: target for name, target in (roles or {}).items() if target is not None
            }),
            sequences=MappingProxyType({
                name: tuple(targets) for name, targets in (sequences or {}).items()
            }),
        )

    def _children(
        self,
        node: AstGrepNode,
        overrides: dict[NodeKey | None, Callable[[AstGrepNode], SyntaxNode]] | None = None,
    ) -> tuple[list[SyntaxNode], dict[NodeKey, SyntaxNode]]:
        """Convert children in order, using ``overrides`` for specific ones."""
        overrides = overrides or {}
        converted: list[SyntaxNode] = []
        by_key: dict[NodeKey, SyntaxNode] = {}
        for child in node.children():
            key = _key(child)
            factory = overrides.get(key, self._convert)
            converted.append(by_key.setdefault(key, factory(child)))
        return converted, by_key

    def _convert(self, node: AstGrepNode) -> SyntaxNode:
        if shape := _SHAPES.get(node.kind()):
            return shape(self, node)
        children, _ = self._children(node)
        return self._node(node, self._kind_of(node), children)

    def _clause(
        self, parts: Sequence[AstGrepNode], by_key: dict[NodeKey, SyntaxNode]
    ) -> SyntaxNode | None:
        """One node for a comma-separated for-loop clause.

        A single expression or declaration is returned as converted. Several
        expressions get a role-only node running from the first to the last.
        """
        if not parts:
            return None
        if len(parts) == 1:
            return by_key.get(_key(parts[0]))
        span = ByteRange.between(self._range(parts[0]).start, self._range(parts[-1]).end)
        return SyntaxNode(NodeKind.OTHER, span, self.lines.text_of(span))

    def _plain(self, kind: NodeKind) -> Callable[[AstGrepNode], SyntaxNode]:
        """A converter that forces ``kind`` onto a node."""

        def convert(node: AstGrepNode) -> SyntaxNode:
            children, _ = self._children(node)
            return self._node(node, kind, children)

        return convert

    # ================================================
    # *                 Shapes
    # ================================================

    def _code_block(self, node: AstGrepNode) -> SyntaxNode:
        children, _ = self._children(node)
        named = [
            converted
            for child, converted in zip(node.children(), children, strict=True)
            if child.is_named() and child.kind() not in COMMENT_KINDS
        ]
        return self._node(
            node,
            NodeKind.CODE_BLOCK,
            children,
            roles={"lbrace": _first(children, "{"), "rbrace": _last(children, "}")},
            sequences={"statements": named},
        )

    def _block_statement(self, node: AstGrepNode) -> SyntaxNode:
        block = self._code_block(node)
        return SyntaxNode(
            kind=NodeKind.BLOCK_STATEMENT,
            range=block.range,
            text=block.text,
            children=(block,),
            roles=MappingProxyType({"code_block": block}),
        )

    def _class(self, node: AstGrepNode) -> SyntaxNode:
        children, by_key = self._children(node)
        body_key = _field_key(node, "body")
        body = by_key.get(body_key) if body_key else None
        body_parts = body.children if body is not None else ()
        fields = [part for part in body_parts if part.kind is NodeKind.FIELD]
        # enum constants come first; the enum's own fields sit one level deeper
        fields.extend(
            member
            for part in body_parts
            if part.kind is NodeKind.OTHER and not part.is_leaf
            for member in part.children
            if member.kind is NodeKind.FIELD
        )
        name_key = _field_key(node, "name")
        return self._node(
            node,
            NodeKind.CLASS_DECL,
            children,
            roles={
                "name": by_key.get(name_key) if name_key else None,
                "modifiers": next((c for c in children if c.kind is NodeKind.MODIFIER_LIST), None),
                "lbrace": _first(body_parts, "{"),
                "rbrace": _last(body_parts, "}"),
            },
            sequences={"fields": fields},
        )

    def _method(self, node: AstGrepNode) -> SyntaxNode:
        type_key = _field_key(node, "type")
        body_key = _field_key(node, "body")
        children, by_key = self._children(
            node,
            overrides={
                type_key: self._plain(NodeKind.RETURN_TYPE_ELEMENT),
                body_key: self._code_block,
            },
        )

        def role(field: str) -> SyntaxNode | None:
            key = _field_key(node, field)
            return by_key.get(key) if key else None

        return self._node(
            node,
            NodeKind.METHOD_DECL,
            children,
            roles={
                "modifiers": next((c for c in children if c.kind is NodeKind.MODIFIER_LIST), None),
                "return_type": role("type"),
                "name": role("name"),
                "parameters": role("parameters"),
                "body": role("body"),
            },
        )

    def _branch(self, node: AstGrepNode) -> SyntaxNode:
        """Loops and ifs: splice a parenthesized condition into the statement."""
        condition_key = _field_key(node, "condition")
        children: list[SyntaxNode] = []
        roles: dict[str, SyntaxNode | None] = {}
        by_key: dict[NodeKey, SyntaxNode] = {}
        for child in node.children():
            key = _key(child)
            if key == condition_key and child.kind() == "parenthesized_expression":
                for part in child.children():
                    converted = self._convert(part)
                    children.append(converted)
                    if part.kind() == "(":
                        roles.setdefault("lparen", converted)
                    elif part.kind() == ")":
                        roles["rparen"] = converted
                    elif part.is_named() and part.kind() not in COMMENT_KINDS:
                        roles["condition"] = converted
                continue
            converted = by_key.setdefault(key, self._convert(child))
            children.append(converted)
            if key == condition_key:
                roles["condition"] = converted
            elif child.kind() == "(":
                roles.setdefault("lparen", converted)
            elif child.kind() == ")":
                roles.setdefault("rparen", converted)
        kind = self._kind_of(node)
        if kind is NodeKind.FOR:
            for role, field in (("initializer", "init"), ("update", "update")):
                roles[role] = self._clause(node.field_children(field), by_key)
        return self._node(node, kind, children, roles=roles)

    def _try(self, node: AstGrepNode) -> SyntaxNode:
        body_key = _field_key(node, "body")
        children: list[SyntaxNode] = []
        catch_sections: list[SyntaxNode] = []
        try_block: SyntaxNode | None = None
        for child in node.children():
            if child.kind() == "finally_clause":
                # the finally keyword and block belong to the try itself
                children.extend(
                    self._code_block(part) if part.kind() == "block" else self._convert(part)
                    for part in child.children()
                )
                continue
            if _key(child) == body_key:
                try_block = self._code_block(child)
                children.append(try_block)
                continue
            converted = self._convert(child)
            children.append(converted)
            if converted.kind is NodeKind.CATCH_SECTION:
                catch_sections.append(converted)
        return self._node(
            node,
            NodeKind.TRY,
            children,
            roles={"try_block": try_block},
            sequences={"catch_sections": catch_sections},
        )

    def _catch(self, node: AstGrepNode) -> SyntaxNode:
        body_key = _field_key(node, "body")
        children, by_key = self._children(node, overrides={body_key: self._code_block})
        return self._node(
            node,
            NodeKind.CATCH_SECTION,
            children,
            roles={
                "lparen": _first(children, "("),
                "rparen": _last(children, ")"),
                "parameter": next(
                    (
                        converted
                        for child, converted in zip(node.children(), children, strict=True)
                        if child.kind() == "catch_formal_parameter"
                    ),
                    None,
                ),
                "catch_block": by_key.get(body_key) if body_key else None,
            },
        )


_SHAPES: MappingProxyType[str, Callable[[JavaTreeBuilder, AstGrepNode], SyntaxNode]] = (
    MappingProxyType({
        "block": JavaTreeBuilder._block_statement,
        "class_declaration": JavaTreeBuilder._class,
        "interface_declaration": JavaTreeBuilder._class,
        "enum_declaration": JavaTreeBuilder._class,
        "record_declaration": JavaTreeBuilder._class,
        "method_declaration": JavaTreeBuilder._method,
        "constructor_declaration": JavaTreeBuilder._method,
        "while_statement": JavaTreeBuilder._branch,
        "do_statement": JavaTreeBuilder._branch,
        "for_statement": JavaTreeBuilder._branch,
        "if_statement": JavaTreeBuilder._branch,
        "try_statement": JavaTreeBuilder._try,
        "try_with_resources_statement": JavaTreeBuilder._try,
        "catch_clause": JavaTreeBuilder._catch,
    })
)
"""tree-sitter kinds that need more than a one-to-one conversion."""

_BUILDERS: MappingProxyType[str, Callable[[str], JavaTreeBuilder]] = MappingProxyType({
    "java": JavaTreeBuilder
})

SUFFIX_LANGUAGES: MappingProxyType[str, str] = MappingProxyType({".java": "java"})


def parse(source: str, language: str = "java") -> ParsedDocument:
    """Parse ``source`` into a syntax tree and line index."""
    builder = _BUILDERS.get(language.strip().lower())
    if builder is None:
        raise UnsupportedLanguageError(
            f"No tree provider for {language!r}",
            details={"language": language},
            suggestions=[f"Supported languages: {', '.join(sorted(_BUILDERS))}"],
        )
    document = builder(source).build()
    logger.debug("Parsed %d characters of %s", len(source), language)
    return document


def parse_java(source: str) -> ParsedDocument:
    """Parse Java ``source``."""
    return parse(source, "java")


def language_for(path: Path) -> str | None:
    """The language implied by a file suffix, if we know it."""
    return SUFFIX_LANGUAGES.get(path.suffix.lower())


def parse_file(path: Path, language: str | None = None) -> ParsedDocument:
    """Parse a file; the language defaults to the one implied by its suffix."""
    language = language or language_for(path) or path.suffix.lstrip(".")
    return parse(path.read_text(encoding="utf-8"), language)


__all__ = (
    "JAVA_KEYWORDS",
    "JAVA_KINDS",
    "SUFFIX_LANGUAGES",
    "JavaTreeBuilder",
    "ParsedDocument",
    "language_for",
    "parse",
    "parse_file",
    "parse_java",
)
