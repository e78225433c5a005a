# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Unit tests for the color commands and CLI error handling."""

from __future__ import annotations

import logging
import sys

from collections.abc import Iterator

import pytest

from blockshade.cli.__main__ import main
from blockshade.cli.commands.colors import blend, categories
from blockshade.cli.utils import theme_state_for
from blockshade.engine.color import RGB
from blockshade.exceptions import ColorFormatError, ConfigurationError


pytestmark = [pytest.mark.unit, pytest.mark.cli]


@pytest.fixture
def restore_logger() -> Iterator[None]:
    """`main` configures the package logger; put it back afterwards."""
    logger = logging.getLogger("blockshade")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]


class TestThemeStateFor:
    """Tests for resolving the starting theme from flags."""

    def test_background_flag_wins(self) -> None:
        assert theme_state_for("dark", "#101010").background == RGB(16, 16, 16)

    def test_theme_flag(self) -> None:
        state = theme_state_for("Dark")
        assert state.background == RGB(0x2B, 0x2B, 0x2B)
        assert state.snapshot().name == "dark"

    def test_settings_fallback(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BLOCKSHADE_THEME_NAME", "high-contrast")
        assert theme_state_for().background == RGB(0, 0, 0)

    def test_unknown_theme(self) -> None:
        with pytest.raises(ConfigurationError):
            theme_state_for("solarized")

    def test_bad_background(self) -> None:
        with pytest.raises(ColorFormatError):
            theme_state_for(background="#12")


class TestBlendCommand:
    """Tests for `blockshade blend`."""

    def test_prints_render_color(self, capsys: pytest.CaptureFixture[str]) -> None:
        blend("condition", background="#FFFFFF")
        assert "#F9DFE7" in capsys.readouterr().out

    def test_category_lookup_is_forgiving(self, capsys: pytest.CaptureFixture[str]) -> None:
        blend("CONDITION", background="#000000")
        assert "#2D131B" in capsys.readouterr().out

    def test_unknown_category_exits(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            blend("loops")

        assert exc_info.value.code == 1
        out = capsys.readouterr().out
        assert "Invalid category" in out
        assert "condition" in out


def test_categories_lists_every_category(capsys: pytest.CaptureFixture[str]) -> None:
    categories(theme="dark")
    out = capsys.readouterr().out
    for title in ("Import", "Method", "Statement", "Class", "Condition"):
        assert title in out
    assert "#2B2B2B" in out


@pytest.mark.usefixtures("restore_logger")
def test_categories_command_runs_through_main(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """The lazily registered command renders its table and exits cleanly."""
    monkeypatch.setattr(sys, "argv", ["blockshade", "categories", "--background", "#FFFFFF"])

    try:
        main()
    except SystemExit as exc:
        assert exc.code in (0, None)

    out = capsys.readouterr().out
    assert "Condition" in out
    assert "#F9DFE7" in out


@pytest.mark.usefixtures("restore_logger")
def test_main_reports_errors_with_suggestions(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Library errors become a message, suggestions and exit status 1."""
    monkeypatch.setattr(sys, "argv", ["blockshade", "blend", "condition", "--background", "#12"])

    with pytest.raises(SystemExit) as exc_info:
        main()

    assert exc_info.value.code == 1
    out = capsys.readouterr().out
    assert "Can't read" in out
    assert "#RRGGBB" in out
