# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Theme state and reaction to theme changes.

`ThemeState` is a single cell holding an immutable `Theme`. Writers replace the
whole theme under a lock; readers take a `snapshot()` reference and keep using
it for an entire pass, so a theme switch never shows up halfway through a
traversal.
"""

from __future__ import annotations

import logging
import threading

from collections.abc import Callable
from types import MappingProxyType
from typing import Annotated

from pydantic import Field

from blockshade.core.types.models import FROZEN_BASEDMODEL_CONFIG, BasedModel
from blockshade.engine.categories import HighlightCategory
from blockshade.engine.color import RGB, blend


logger = logging.getLogger(__name__)

type ThemeListener = Callable[[Theme], None]


class Theme(BasedModel):
    """A background color and the render colors blended over it."""

    model_config = FROZEN_BASEDMODEL_CONFIG

    background: Annotated[RGB, Field(description="""Default editor background.""")]
    name: Annotated[str | None, Field(description="""Name of the color scheme, if known.""")] = (
        None
    )
    render_colors: Annotated[
        dict[HighlightCategory, RGB],
        Field(description="""Opaque render color of every category over `background`."""),
    ]

    @classmethod
    def over(cls, background: RGB, name: str | None = None) -> Theme:
        """Build a theme, blending every category over ``background``."""
        return cls(
            background=background,
            name=name,
            render_colors={category: blend(category, background) for category in HighlightCategory},
        )

    def color_for(self, category: HighlightCategory) -> RGB:
        """Render color of ``category`` in this theme."""
        return self.render_colors[category]


class ThemeState:
    """Process-wide holder of the current theme.

    One writer at a time (`replace` takes a lock); any number of readers, who
    only ever see a complete `Theme`.
    """

    def __init__(self, theme: Theme | None = None) -> None:
        """Initialize with ``theme``, or a white background when not given."""
        self._theme = theme or Theme.over(RGB(255, 255, 255), name="light")
        self._write_lock = threading.Lock()

    @classmethod
    def from_background(cls, background: RGB, name: str | None = None) -> ThemeState:
        """Initialize from the host's active background color."""
        return cls(Theme.over(background, name=name))

    def snapshot(self) -> Theme:
        """The current theme."""
        return self._theme

    @property
    def background(self) -> RGB:
        """Background color of the current theme."""
        return self._theme.background

    def replace(self, theme: Theme) -> Theme:
        """Swap in ``theme`` and return the one it replaced."""
        with self._write_lock:
            previous, self._theme = self._theme, theme
        return previous


class ThemeReactor:
    """Applies theme-change notifications and asks hosts to re-render.

    Subscribers are called with the new theme after it has been installed. They
    are expected to throw away their decorations and run a full traversal again.
    """

    def __init__(self, state: ThemeState) -> None:
        """Initialize the reactor for ``state``."""
        self.state = state
        self._listeners: dict[int, ThemeListener] = {}
        self._next_token = 0

    @property
    def listeners(self) -> MappingProxyType[int, ThemeListener]:
        """Registered listeners by subscription token."""
        return MappingProxyType(self._listeners)

    def subscribe(self, listener: ThemeListener) -> Callable[[], None]:
        """Register ``listener``; call the returned function to unregister it."""
        token = self._next_token
        self._next_token += 1
        self._listeners[token] = listener

        def unsubscribe() -> None:
            self._listeners.pop(token, None)

        return unsubscribe

    def on_theme_changed(self, background: RGB, name: str | None = None) -> Theme:
        """Install a theme for ``background`` and notify every listener."""
        theme = Theme.over(background, name=name)
        previous = self.state.replace(theme)
        logger.info(
            "Theme changed from %s to %s (%s)",
            previous.background.to_hex(),
            background.to_hex(),
            name or "unnamed",
        )
        for token, listener in tuple(self._listeners.items()):
            try:
                listener(theme)
            except Exception:
                logger.exception("Theme listener %d failed to re-render", token)
        return theme


__all__ = ("Theme", "ThemeListener", "ThemeReactor", "ThemeState")
