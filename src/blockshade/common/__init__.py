# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Cross-cutting helpers for BlockShade: logging and console markup."""

from blockshade.common.logging import get_rich_handler, parse_level, setup_logger


_MARKUP_TAG = "bold medium_purple"

BLOCKSHADE_PREFIX = f"[{_MARKUP_TAG}]BlockShade[/{_MARKUP_TAG}]"


__all__ = ("BLOCKSHADE_PREFIX", "get_rich_handler", "parse_level", "setup_logger")
