# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Leading-whitespace measurement for indent decorations."""

from __future__ import annotations

from blockshade.syntax.lines import LineIndexedText
from blockshade.syntax.nodes import ByteRange


INDENT_CHARACTERS = frozenset({" ", "\t"})


def indent_width(line: str) -> int:
    """Length of the leading run of spaces and tabs."""
    width = 0
    for char in line:
        if char not in INDENT_CHARACTERS:
            break
        width += 1
    return width


def measure(buffer: LineIndexedText, span: ByteRange) -> tuple[ByteRange, ...]:
    """One range per line touched by ``span``, covering that line's indent.

    The line holding ``span.end`` is included, so a span that ends right after
    the last character of a line still covers only that line. Lines without
    indentation produce zero-length ranges at the line start.
    """
    first_line = buffer.line_number(span.start)
    last_line = buffer.line_number(span.end)
    return tuple(
        ByteRange.from_offsets(buffer.line_start(line), indent_width(buffer.line_text(line)))
        for line in range(first_line, last_line + 1)
    )


__all__ = ("INDENT_CHARACTERS", "indent_width", "measure")
