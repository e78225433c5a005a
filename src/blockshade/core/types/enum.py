# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0

"""Base enum classes for the BlockShade project."""

from __future__ import annotations

import contextlib

from collections.abc import Generator, Mapping
from enum import Enum, unique
from functools import cached_property
from types import MappingProxyType
from typing import Self, cast, override

import textcase


@unique
class BaseEnum(Enum):
    """An enum class that provides common functionality for all enums in the BlockShade project. Enum members must be unique and either all strings or all integers.

    BaseEnum provides convenience methods for converting between strings and enum members, checking membership, and retrieving members and members' values. Conversion is forgiving about case and separators, so `"do-while"`, `"DoWhile"` and `"DO_WHILE"` all find the same member.
    """

    @staticmethod
    def _deconstruct_string(value: str) -> list[str]:
        """Deconstruct a string into its component parts."""
        value = value.strip().lower().replace("-", "_").replace(" ", "_")
        for underscore_length in range(4, 0, -1):
            value = value.replace("_" * underscore_length, "_")
        return [v for v in value.split("_") if v]

    @staticmethod
    def _multiply_variations(s: str) -> set[str]:
        """Generate multiple variations of a string."""
        return {
            s,
            textcase.upper(s),
            textcase.lower(s),
            textcase.title(s),
            textcase.pascal(s),
            textcase.snake(s),
            textcase.kebab(s),
            textcase.camel(s),
        }

    @cached_property
    def aka(self) -> tuple[str, ...] | tuple[int, ...]:
        """Return the aliases for the enum member."""
        if isinstance(self.value, str):
            names: set[str] = {self.value, self.name, self.variable, self.as_title}
            names |= {n for name in names.copy() for n in self._multiply_variations(name)}
            return tuple(sorted(names))
        return (self.value, self.name, self.variable, self.as_title)

    @classmethod
    @override
    def _missing_(cls, value: object) -> Self | None:
        """Handle missing values when converting from string or int to enum member."""
        if not isinstance(value, str | int):
            return None
        with contextlib.suppress(ValueError):
            return cls.from_string(str(value))
        return None

    @classmethod
    def aliases(cls) -> MappingProxyType[int, Enum] | MappingProxyType[str, Enum]:
        """Provides a way to identify alternate names for a member, used in string conversion and identification."""
        if cls._value_type() is int:
            return MappingProxyType(cls._value2member_map_)
        alias_map: Mapping[str, Enum] = cls._value2member_map_.copy()
        alias_map.update({
            alias: member for member in cls for alias in member.aka if alias not in alias_map
        })
        return MappingProxyType(alias_map)

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Convert a string to the corresponding enum member. Flexibly handles different cases, dashes vs underscores, and some common variations."""
        if cls._value_type() is int and str(value).isdigit():
            return cls(int(value))
        lowered = str(value).lower()
        if literal_value := next(
            (
                member
                for member in cls
                if str(member.value).lower() == lowered or member.name.lower() == lowered
            ),
            None,
        ):
            return literal_value
        if found_member := next(
            (
                member
                for alias, member in cls.aliases().items()
                if str(alias).lower() == lowered
            ),
            None,
        ):
            return cast(Self, found_member)
        value_parts = cls._deconstruct_string(str(value))
        if found_member := next(
            (member for member in cls if cls._deconstruct_string(member.name) == value_parts), None
        ):
            return found_member
        raise ValueError(f"{value} is not a valid {cls.__qualname__} member")

    @classmethod
    def _value_type(cls) -> type[int | str]:
        """Return the type of the enum values."""
        if all(isinstance(member.value, str) for member in cls.__members__.values()):
            return str
        if all(isinstance(member.value, int) for member in cls.__members__.values()):
            return int
        raise TypeError(
            f"All members of {cls.__qualname__} must have the same value type and must be either str or int."
        )

    @classmethod
    def is_member(cls, value: str | int) -> bool:
        """Check if a value is a member of the enum."""
        try:
            cls.from_string(str(value))
        except ValueError:
            return False
        return True

    @property
    def value_type(self) -> type[int | str]:
        """Return the type of the enum member's value."""
        return type(self)._value_type()

    @property
    def variable(self) -> str:
        """Return the string representation of the enum member as a variable name."""
        return textcase.snake(self.value) if self.value_type is str else textcase.snake(self.name)

    @property
    def as_title(self) -> str:
        """Return the title-cased representation of the enum member."""
        return textcase.title(self.value) if self.value_type is str else textcase.title(self.name)

    @classmethod
    def values(cls) -> Generator[str | int]:
        """Return all enum member values."""
        yield from (member.value for member in cls)

    def __str__(self) -> str:
        """Return the string representation of the enum member."""
        return self.name.replace("_", " ").lower()

    def serialize_for_cli(self) -> str:
        """Serialize the enum member for CLI display."""
        return self.as_title


__all__ = ("BaseEnum",)
