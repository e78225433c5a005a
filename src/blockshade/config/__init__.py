# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Configuration for BlockShade."""

from blockshade.config.settings import (
    THEME_PRESETS,
    BlockShadeSettings,
    get_settings,
    resolve_background,
)


__all__ = ("THEME_PRESETS", "BlockShadeSettings", "get_settings", "resolve_background")
