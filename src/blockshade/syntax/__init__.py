# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Syntax trees, line indexes and the tree providers that build them."""

from blockshade.syntax.ast_grep import ParsedDocument, parse, parse_file, parse_java
from blockshade.syntax.lines import LineIndexedText
from blockshade.syntax.nodes import ByteRange, NodeKind, SyntaxNode, walk


__all__ = (
    "ByteRange",
    "LineIndexedText",
    "NodeKind",
    "ParsedDocument",
    "SyntaxNode",
    "parse",
    "parse_file",
    "parse_java",
    "walk",
)
