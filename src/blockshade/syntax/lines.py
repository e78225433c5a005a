# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""A line-indexed view over a source buffer."""

from __future__ import annotations

from bisect import bisect_right
from functools import cached_property

from blockshade.exceptions import MalformedRangeError
from blockshade.syntax.nodes import ByteRange


class LineIndexedText:
    """Maps offsets to 0-based line numbers and back.

    Lines are separated by ``\\n``. A line's end offset excludes its newline, and
    a buffer ending in a newline has a final empty line, the same way editors
    count them.
    """

    def __init__(self, text: str) -> None:
        self.text = text

    @cached_property
    def _line_starts(self) -> tuple[int, ...]:
        starts = [0]
        starts.extend(index + 1 for index, char in enumerate(self.text) if char == "\n")
        return tuple(starts)

    @property
    def line_count(self) -> int:
        """Number of lines in the buffer (at least 1)."""
        return len(self._line_starts)

    def _check_offset(self, offset: int) -> None:
        if not 0 <= offset <= len(self.text):
            raise MalformedRangeError(
                "Offset lies outside the text buffer",
                details={"offset": offset, "length": len(self.text)},
            )

    def _check_line(self, line: int) -> None:
        if not 0 <= line < self.line_count:
            raise MalformedRangeError(
                "Line number lies outside the text buffer",
                details={"line_number": line},
            )

    def line_number(self, offset: int) -> int:
        """The line containing ``offset``."""
        self._check_offset(offset)
        return bisect_right(self._line_starts, offset) - 1

    def line_start(self, line: int) -> int:
        """Offset of the first character of ``line``."""
        self._check_line(line)
        return self._line_starts[line]

    def line_end(self, line: int) -> int:
        """Offset just past the last character of ``line``, before its newline."""
        self._check_line(line)
        if line + 1 < self.line_count:
            return self._line_starts[line + 1] - 1
        return len(self.text)

    def line_text(self, line: int) -> str:
        """The text of ``line`` without its newline."""
        return self.text[self.line_start(line) : self.line_end(line)]

    def text_of(self, span: ByteRange) -> str:
        """The text covered by ``span``."""
        self._check_offset(span.start)
        self._check_offset(span.end)
        return self.text[span.start : span.end]

    def __len__(self) -> int:
        return len(self.text)


__all__ = ("LineIndexedText",)
