# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""The decoration engine: classification, range extraction, blending, theming."""

from blockshade.engine.categories import BASE_COLORS, HighlightCategory
from blockshade.engine.color import RGB, RGBA, blend, blend_color
from blockshade.engine.dispatcher import Decoration, TraversalDispatcher, annotate
from blockshade.engine.extractor import RULES, UNDECORATED_KINDS, RangeExtractor
from blockshade.engine.indent import measure
from blockshade.engine.theme import Theme, ThemeListener, ThemeReactor, ThemeState


__all__ = (
    "BASE_COLORS",
    "RGB",
    "RGBA",
    "RULES",
    "UNDECORATED_KINDS",
    "Decoration",
    "HighlightCategory",
    "RangeExtractor",
    "Theme",
    "ThemeListener",
    "ThemeReactor",
    "ThemeState",
    "TraversalDispatcher",
    "annotate",
    "blend",
    "blend_color",
    "measure",
)
