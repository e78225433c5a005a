# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Unit tests for forgiving enum lookups."""

from __future__ import annotations

import pytest

from blockshade.engine.categories import HighlightCategory
from blockshade.syntax.nodes import NodeKind


pytestmark = [pytest.mark.unit]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("do_while", NodeKind.DO_WHILE),
        ("DO_WHILE", NodeKind.DO_WHILE),
        ("do-while", NodeKind.DO_WHILE),
        ("DoWhile", NodeKind.DO_WHILE),
        ("Class Decl", NodeKind.CLASS_DECL),
        ("condition", HighlightCategory.CONDITION),
        ("CONDITION", HighlightCategory.CONDITION),
    ],
    ids=["value", "name", "kebab", "pascal", "title", "category-value", "category-name"],
)
def test_from_string(raw: str, expected: NodeKind | HighlightCategory) -> None:
    """Case and separator differences don't matter."""
    assert type(expected).from_string(raw) is expected


def test_unknown_member_raises_value_error() -> None:
    with pytest.raises(ValueError, match="not a valid HighlightCategory"):
        HighlightCategory.from_string("loops")
    assert not HighlightCategory.is_member("loops")
    assert HighlightCategory.is_member("Statement")


def test_calling_the_enum_uses_the_same_lookup() -> None:
    """`_missing_` routes through `from_string`."""
    assert NodeKind("Return-Statement") is NodeKind.RETURN_STATEMENT


def test_titles_and_values() -> None:
    assert HighlightCategory.CONDITION.as_title == "Condition"
    assert NodeKind.RETURN_TYPE_ELEMENT.variable == "return_type_element"
    assert list(HighlightCategory.values()) == ["import", "method", "statement", "class", "condition"]
