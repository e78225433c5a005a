# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Integration tests: real Java parsed with ast-grep, then decorated.

Assertions compare the *text* under each decoration, which keeps them
readable and independent of exact offsets.
"""

from __future__ import annotations

import pytest

from blockshade.engine.categories import HighlightCategory
from blockshade.engine.dispatcher import annotate
from blockshade.engine.extractor import RangeExtractor
from blockshade.engine.theme import ThemeState
from blockshade.exceptions import UnsupportedLanguageError
from blockshade.syntax.ast_grep import ParsedDocument, parse, parse_java
from blockshade.syntax.nodes import NodeKind, SyntaxNode, walk


pytestmark = [pytest.mark.integration]


def find(document: ParsedDocument, kind: NodeKind, nth: int = 0) -> SyntaxNode:
    return [node for node in walk(document.root) if node.kind is kind][nth]


def decorated_text(document: ParsedDocument, node: SyntaxNode) -> list[str]:
    extracted = RangeExtractor(document.lines).extract(node)
    return [document.lines.text_of(span) for span, _ in extracted]


def in_method(body: str) -> str:
    return f"class A {{\n  void m() {{\n{body}\n  }}\n}}\n"


class TestDeclarations:
    """Imports, classes, fields and methods."""

    def test_import(self) -> None:
        document = parse_java("import java.util.List;\n\nclass A {}\n")
        node = find(document, NodeKind.IMPORT)
        assert decorated_text(document, node) == ["import java.util.List;"]

    def test_class_with_modifiers_and_fields(self) -> None:
        source = "public class Foo {\n    private int x;\n    int y;\n}\n"
        document = parse_java(source)
        node = find(document, NodeKind.CLASS_DECL)

        assert decorated_text(document, node) == [
            "public ",
            "class ",
            "Foo",
            "{",
            "}",
            "private int x;",
            "int y;",
        ]

    def test_enum_fields_after_constants(self) -> None:
        document = parse_java("enum Color {\n  RED, GREEN;\n  private int code;\n}\n")
        node = find(document, NodeKind.CLASS_DECL)

        assert decorated_text(document, node) == ["Color", "{", "}", "private int code;"]

    def test_method(self) -> None:
        source = "class A {\n  public static int add(int a, int b) {\n    return a + b;\n  }\n}\n"
        document = parse_java(source)
        node = find(document, NodeKind.METHOD_DECL)

        assert decorated_text(document, node) == [
            "public static ",
            "int ",
            "add",
            "(int a, int b)",
            "{",
            "}",
        ]

    def test_constructor_has_no_return_type(self) -> None:
        document = parse_java("class P {\n  P() {}\n}\n")
        node = find(document, NodeKind.METHOD_DECL)

        assert node.return_type is None
        assert node.modifiers is None
        assert decorated_text(document, node) == ["P", "()", "{", "}"]

    def test_nested_class_is_its_own_declaration(self) -> None:
        document = parse_java("class Outer {\n  static class Inner {\n    int z;\n  }\n}\n")
        outer = find(document, NodeKind.CLASS_DECL)
        inner = find(document, NodeKind.CLASS_DECL, 1)

        assert outer.fields == ()
        assert [field.text for field in inner.fields] == ["int z;"]


class TestControlFlow:
    """Loops, ifs and try statements."""

    def test_single_statement_if(self) -> None:
        """`if (x > 0) { return x; }` gets keyword, braces, indent, condition, parens."""
        source = "class A {\n  int f(int x) {\n    if (x > 0) { return x; }\n    return 0;\n  }\n}\n"
        document = parse_java(source)
        node = find(document, NodeKind.IF)
        extracted = RangeExtractor(document.lines).extract(node)

        assert [document.lines.text_of(span) for span, _ in extracted] == [
            "if ",
            "{",
            "}",
            "    ",
            "x > 0",
            "(",
            ")",
        ]
        assert {category for _, category in extracted} == {HighlightCategory.CONDITION}

    def test_if_else_if_chain(self) -> None:
        document = parse_java(
            in_method("    if (a) {\n      x();\n    } else if (b) {\n      y();\n    }")
        )
        outer = find(document, NodeKind.IF)
        inner = find(document, NodeKind.IF, 1)

        assert decorated_text(document, outer) == ["if ", "{", "}", "      ", "else ", "a", "(", ")"]
        assert decorated_text(document, inner) == ["if ", "{", "}", "      ", "b", "(", ")"]

    def test_comments_are_not_statements(self) -> None:
        document = parse_java(in_method("    if (a) {\n      // why\n      b();\n    }"))
        node = find(document, NodeKind.IF)
        block = node.children[-1].code_block

        assert block is not None
        assert [statement.text for statement in block.statements] == ["b();"]
        assert decorated_text(document, node).count("      ") == 1

    def test_while(self) -> None:
        document = parse_java(in_method("    while (i < 10) { i++; }"))
        node = find(document, NodeKind.WHILE)

        assert decorated_text(document, node) == ["while ", "{", "}", "i < 10", "(", ")"]

    def test_do_while(self) -> None:
        document = parse_java(in_method("    do { i++; } while (i < 10);"))
        node = find(document, NodeKind.DO_WHILE)

        assert decorated_text(document, node) == [
            "do ",
            "{",
            "}",
            "while ",
            "i < 10",
            "(",
            ")",
        ]

    def test_for(self) -> None:
        document = parse_java(in_method("    for (int i = 0; i < n; i++) { s += i; }"))
        node = find(document, NodeKind.FOR)

        assert decorated_text(document, node) == [
            "for ",
            "{",
            "}",
            "i < n",
            "int i = 0;",
            "i++",
            "(",
            ")",
        ]

    def test_for_with_comma_separated_clauses(self) -> None:
        """Several init or update expressions are decorated as one span each."""
        document = parse_java(in_method("    for (i = 0, j = 0; i < n; i++, j--) { s += i; }"))
        node = find(document, NodeKind.FOR)

        assert node.initializer is not None
        assert node.initializer.text == "i = 0, j = 0"
        assert decorated_text(document, node) == [
            "for ",
            "{",
            "}",
            "i < n",
            "i = 0, j = 0",
            "i++, j--",
            "(",
            ")",
        ]

    def test_for_with_declaration_and_comma_update(self) -> None:
        document = parse_java(in_method("    for (int i = 0, j = n; i < j; i++, j--) { }"))
        node = find(document, NodeKind.FOR)

        assert decorated_text(document, node)[4:6] == ["int i = 0, j = n;", "i++, j--"]

    def test_try_catch_finally(self) -> None:
        document = parse_java(
            in_method("    try { a(); } catch (IOException e) { b(); } finally { c(); }")
        )
        node = find(document, NodeKind.TRY)

        assert decorated_text(document, node) == [
            "try ",
            "finally ",
            "{",
            "}",
            "catch ",
            "IOException e)",
            "(",
            ")",
            "{",
            "}",
        ]

    def test_flat_statements(self) -> None:
        document = parse_java(
            in_method(
                "    int a = 1;\n    a++;\n    for (;;) { break; }\n"
                "    while (a > 0) { continue; }\n    return;"
            )
        )
        statements = [
            node.text for node in walk(document.root) if node.kind.is_flat_statement
        ]

        assert statements == ["int a = 1;", "a++;", "break;", "continue;", "return;"]


class TestWholeDocument:
    """Full traversals over parsed files."""

    SOURCE = (
        "import java.io.IOException;\n"
        "\n"
        "public class Service {\n"
        "    private final int limit;\n"
        "\n"
        "    public Service(int limit) {\n"
        "        this.limit = limit;\n"
        "    }\n"
        "\n"
        "    int run(int[] items) throws IOException {\n"
        "        int total = 0;\n"
        "        for (int i = 0; i < items.length; i++) {\n"
        "            if (items[i] > limit) {\n"
        "                continue;\n"
        "            }\n"
        "            total += items[i];\n"
        "        }\n"
        "        try {\n"
        "            flush();\n"
        "        } catch (IllegalStateException e) {\n"
        "            return -1;\n"
        "        }\n"
        "        return total;\n"
        "    }\n"
        "}\n"
    )

    def test_every_decoration_lies_inside_the_document(self) -> None:
        document = parse_java(self.SOURCE)
        decorations = annotate(document.root, document.lines, ThemeState())

        assert decorations
        assert all(d.range.end <= len(document.lines) for d in decorations)
        assert {d.category for d in decorations} == set(HighlightCategory)

    def test_reparsing_gives_identical_decorations(self) -> None:
        state = ThemeState()
        first = parse_java(self.SOURCE)
        second = parse_java(self.SOURCE)

        assert annotate(first.root, first.lines, state) == annotate(
            second.root, second.lines, state
        )

    def test_walk_visits_each_construct_once(self) -> None:
        document = parse_java(self.SOURCE)
        kinds = [node.kind for node in walk(document.root)]

        assert kinds.count(NodeKind.METHOD_DECL) == 2
        assert kinds.count(NodeKind.IF) == 1
        assert kinds.count(NodeKind.TRY) == 1
        assert kinds.count(NodeKind.CATCH_SECTION) == 1


class TestNonAsciiSource:
    """Offsets index the Python string, not the UTF-8 bytes."""

    @pytest.mark.parametrize(
        "literal", ['"é"', '"日本語"', '"naïve café"'], ids=["latin", "cjk", "several"]
    )
    def test_statement_after_multibyte_text_on_the_same_line(self, literal: str) -> None:
        document = parse_java(in_method(f"    String s = {literal}; x++;"))
        decorations = annotate(document.root, document.lines, ThemeState())
        statements = [
            document.lines.text_of(d.range)
            for d in decorations
            if d.category is HighlightCategory.STATEMENT
        ]

        assert statements == [f"String s = {literal};", "x++;"]

    def test_multibyte_text_on_earlier_lines(self) -> None:
        document = parse_java("// ünïcödé\nimport a.B;\nclass Ä { int ö; }\n")

        assert decorated_text(document, find(document, NodeKind.IMPORT)) == ["import a.B;"]
        assert decorated_text(document, find(document, NodeKind.CLASS_DECL)) == [
            "class ",
            "Ä",
            "{",
            "}",
            "int ö;",
        ]


def test_unsupported_language() -> None:
    with pytest.raises(UnsupportedLanguageError) as exc_info:
        parse("IDENTIFICATION DIVISION.", "cobol")
    assert exc_info.value.suggestions == ["Supported languages: java"]
