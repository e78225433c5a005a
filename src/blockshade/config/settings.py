# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""
BlockShade settings.

Configuration sources (priority order):
1. Explicit arguments (CLI flags, keyword arguments)
2. Environment variables and `.env`
3. Defaults below

Environment Variables:
    BLOCKSHADE_BACKGROUND: Background color as `#RRGGBB` (overrides the theme preset)
    BLOCKSHADE_THEME_NAME: Theme preset name (default: light)
    BLOCKSHADE_LANGUAGE: Source language of the documents (default: java)
    BLOCKSHADE_LOG_LEVEL: Log level name or number (default: WARNING)
    BLOCKSHADE_RICH_LOGGING: Use rich for log output (default: true)
"""

from __future__ import annotations

from functools import cache
from types import MappingProxyType
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from blockshade.engine.color import RGB
from blockshade.exceptions import ColorFormatError, ConfigurationError


THEME_PRESETS: MappingProxyType[str, RGB] = MappingProxyType({
    "light": RGB(0xFF, 0xFF, 0xFF),
    "dark": RGB(0x2B, 0x2B, 0x2B),
    "high-contrast": RGB(0x00, 0x00, 0x00),
})
"""Background colors of the built-in theme presets."""


class BlockShadeSettings(BaseSettings):
    """BlockShade configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="BLOCKSHADE_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    background: Annotated[
        str | None,
        Field(
            default=None,
            description="Background color as `#RRGGBB`. When unset, the theme preset's background is used.",
        ),
    ]

    theme_name: Annotated[
        str,
        Field(default="light", description="Name of the theme preset to start with."),
    ]

    language: Annotated[
        str,
        Field(default="java", description="Source language of the documents we decorate."),
    ]

    log_level: Annotated[
        str,
        Field(default="WARNING", description="Log level name (or number) for BlockShade loggers."),
    ]

    rich_logging: Annotated[
        bool,
        Field(default=True, description="Format log output with rich."),
    ]

    @field_validator("background")
    @classmethod
    def _check_background(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        try:
            return RGB.from_hex(value).to_hex()
        except ColorFormatError as e:
            raise ValueError(str(e)) from e

    @field_validator("theme_name")
    @classmethod
    def _normalize_theme_name(cls, value: str) -> str:
        return value.strip().lower()


def resolve_background(settings: BlockShadeSettings) -> RGB:
    """The background to start with: an explicit color wins over the theme preset.

    Raises:
        ConfigurationError: no background is set and the theme preset is unknown.
    """
    if settings.background:
        return RGB.from_hex(settings.background)
    if (preset := THEME_PRESETS.get(settings.theme_name)) is not None:
        return preset
    raise ConfigurationError(
        f"Unknown theme preset {settings.theme_name!r}",
        details={"theme_name": settings.theme_name},
        suggestions=[
            f"Use one of: {', '.join(THEME_PRESETS)}",
            "Or set BLOCKSHADE_BACKGROUND to an explicit #RRGGBB color",
        ],
    )


@cache
def get_settings() -> BlockShadeSettings:
    """Get cached settings instance."""
    return BlockShadeSettings()


__all__ = ("THEME_PRESETS", "BlockShadeSettings", "get_settings", "resolve_background")
