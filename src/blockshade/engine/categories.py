# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Highlight categories and their base colors."""

from __future__ import annotations

from types import MappingProxyType

from blockshade.core.types.enum import BaseEnum
from blockshade.engine.color import RGBA


class HighlightCategory(str, BaseEnum):
    """The semantic buckets a decoration can belong to."""

    IMPORT = "import"
    """Import declarations."""
    METHOD = "method"
    """Method and constructor headers and body braces."""
    STATEMENT = "statement"
    """Declaration, expression, return, break and continue statements."""
    CLASS = "class"
    """Class headers, braces and fields."""
    CONDITION = "condition"
    """Loops, conditionals and try/catch scaffolding."""

    __slots__ = ()

    @property
    def color(self) -> RGBA:
        """The translucent base color of the category."""
        return BASE_COLORS[self]


BASE_COLORS: MappingProxyType[HighlightCategory, RGBA] = MappingProxyType({
    HighlightCategory.IMPORT: RGBA.from_argb(0x33F6F8F7),
    HighlightCategory.METHOD: RGBA.from_argb(0x33E59B05),
    HighlightCategory.STATEMENT: RGBA.from_argb(0x336FD2E5),
    HighlightCategory.CLASS: RGBA.from_argb(0x33A861E0),
    HighlightCategory.CONDITION: RGBA.from_argb(0x33E06185),
})


__all__ = ("BASE_COLORS", "HighlightCategory")
