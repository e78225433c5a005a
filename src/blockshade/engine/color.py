# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Color values and alpha compositing.

Category colors are translucent (a small alpha over whatever the editor paints
underneath). Hosts want an opaque color, so we composite the category color
over the theme background ourselves:

    result[c] = color[c] * A + background[c] * (1 - A)

with every channel as a float in [0, 1] and `A` always taken from the category
color. The background's own alpha is ignored.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING, NamedTuple

from blockshade.exceptions import ColorFormatError


if TYPE_CHECKING:
    from blockshade.engine.categories import HighlightCategory


def _channel_to_float(value: int) -> float:
    return value / 255.0


def _float_to_channel(value: float) -> int:
    """Round a [0, 1] float to the nearest 8-bit channel, halves rounding up."""
    return max(0, min(255, int(value * 255 + 0.5)))


def _parse_hex(value: str, *, allowed: tuple[int, ...]) -> str:
    digits = value.strip().removeprefix("#")
    if len(digits) not in allowed:
        raise ColorFormatError(
            f"Can't read {value!r} as a color",
            details={"value": value},
            suggestions=["Use #RRGGBB, e.g. #1E1E1E"],
        )
    try:
        int(digits, 16)
    except ValueError as e:
        raise ColorFormatError(
            f"Can't read {value!r} as a color",
            details={"value": value},
            suggestions=["Hex colors only contain 0-9 and A-F"],
        ) from e
    return digits


class RGBA(NamedTuple):
    """An 8-bit-per-channel color with alpha."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    @classmethod
    def from_argb(cls, argb: int) -> RGBA:
        """Unpack a packed ``0xAARRGGBB`` integer."""
        if not 0 <= argb <= 0xFFFFFFFF:
            raise ColorFormatError(f"{argb:#x} is not a 32-bit ARGB value", details={"value": argb})
        return cls(
            red=(argb >> 16) & 0xFF, green=(argb >> 8) & 0xFF, blue=argb & 0xFF, alpha=(argb >> 24) & 0xFF
        )

    @classmethod
    def from_hex(cls, value: str) -> RGBA:
        """Parse ``#RRGGBB`` (opaque) or ``#RRGGBBAA``."""
        digits = _parse_hex(value, allowed=(6, 8))
        alpha = int(digits[6:8], 16) if len(digits) == 8 else 255
        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16), alpha)

    def as_floats(self) -> tuple[float, float, float]:
        """Color channels as floats in [0, 1]; see `opacity` for alpha."""
        return (
            _channel_to_float(self.red),
            _channel_to_float(self.green),
            _channel_to_float(self.blue),
        )

    @property
    def opacity(self) -> float:
        """Alpha as a float in [0, 1]."""
        return _channel_to_float(self.alpha)

    def to_hex(self) -> str:
        """Format as ``#RRGGBBAA``."""
        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}{self.alpha:02X}"


class RGB(NamedTuple):
    """An opaque 8-bit-per-channel color."""

    red: int
    green: int
    blue: int

    @classmethod
    def from_hex(cls, value: str) -> RGB:
        """Parse ``#RRGGBB``."""
        digits = _parse_hex(value, allowed=(6,))
        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    @classmethod
    def from_floats(cls, red: float, green: float, blue: float) -> RGB:
        """Build from [0, 1] float channels."""
        return cls(_float_to_channel(red), _float_to_channel(green), _float_to_channel(blue))

    def as_floats(self) -> tuple[float, float, float]:
        """Channels as floats in [0, 1]."""
        return (
            _channel_to_float(self.red),
            _channel_to_float(self.green),
            _channel_to_float(self.blue),
        )

    def to_rgba(self) -> RGBA:
        """The same color with full opacity."""
        return RGBA(self.red, self.green, self.blue, 255)

    def to_hex(self) -> str:
        """Format as ``#RRGGBB``."""
        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}"

    def __str__(self) -> str:
        return self.to_hex()


@lru_cache(maxsize=256)
def blend_color(color: RGBA, background: RGB) -> RGB:
    """Composite a translucent color over an opaque background."""
    alpha = color.opacity
    blended = (
        channel * alpha + bg_channel * (1 - alpha)
        for channel, bg_channel in zip(color.as_floats(), background.as_floats(), strict=True)
    )
    return RGB.from_floats(*blended)


def blend(category: HighlightCategory, background: RGB) -> RGB:
    """Render color for a highlight category drawn over ``background``."""
    return blend_color(category.color, background)


__all__ = ("RGB", "RGBA", "blend", "blend_color")
