# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Unified exception hierarchy for BlockShade.

All BlockShade exceptions inherit from BlockShadeError. A missing optional
syntax node is never an error; these exceptions cover contract violations by
collaborators (the tree provider, the theme host) and bad user input.
"""

from __future__ import annotations

from typing import Any


class BlockShadeError(Exception):
    """Base exception for all BlockShade errors.

    Provides structured error information including details and suggestions
    for resolution.
    """

    def __init__(
        self,
        message: str,
        *,
        details: dict[str, Any] | None = None,
        suggestions: list[str] | None = None,
    ) -> None:
        """Initialize BlockShade error.

        Args:
            message: Human-readable error message
            details: Additional context about the error
            suggestions: Actionable suggestions for resolving the error
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.suggestions = suggestions or []

    def __str__(self) -> str:
        """Return descriptive error message with context details."""
        parts = [self.message]
        if self.details:
            detail_parts = [
                f"{key.replace('_', ' ')}: {self.details[key]}"
                for key in ("file_path", "node_kind", "start", "length", "offset", "line_number")
                if key in self.details
            ]
            if detail_parts:
                parts.append(f"({', '.join(detail_parts)})")
        return " ".join(parts)


class ConfigurationError(BlockShadeError):
    """Configuration and settings errors.

    Raised when there are issues with settings values, environment variables,
    or theme presets.
    """


class ColorFormatError(BlockShadeError, ValueError):
    """Raised when a color string or integer can't be read as a color."""


class MalformedRangeError(BlockShadeError):
    """Inconsistent range from the tree provider.

    Raised instead of clamping when an offset or length is negative, or when an
    offset falls outside the text buffer.
    """


class UnsupportedLanguageError(BlockShadeError):
    """Raised when a tree provider is requested for a language we can't map."""


__all__ = (
    "BlockShadeError",
    "ColorFormatError",
    "ConfigurationError",
    "MalformedRangeError",
    "UnsupportedLanguageError",
)
