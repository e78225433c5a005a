# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Host-side pieces: render surfaces and the document highlighter."""

from blockshade.host.highlighter import DocumentHighlighter
from blockshade.host.surfaces import (
    CollectingSurface,
    ErrorReportingSurface,
    RenderSurface,
    RichSurface,
)


__all__ = (
    "CollectingSurface",
    "DocumentHighlighter",
    "ErrorReportingSurface",
    "RenderSurface",
    "RichSurface",
)
