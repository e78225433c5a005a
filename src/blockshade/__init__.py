# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""BlockShade: background decorations for code blocks, by kind of construct."""

from blockshade._version import __version__
from blockshade.exceptions import (
    BlockShadeError,
    ColorFormatError,
    ConfigurationError,
    MalformedRangeError,
    UnsupportedLanguageError,
)


__all__ = (
    "BlockShadeError",
    "ColorFormatError",
    "ConfigurationError",
    "MalformedRangeError",
    "UnsupportedLanguageError",
    "__version__",
)
