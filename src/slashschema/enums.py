"""Enumeration types for slashschema."""

from enum import IntEnum
from typing import Self


class OptionType(IntEnum):
    """Kinds of command options, valued by their wire code."""

    UNKNOWN = -1
    SUB_COMMAND = 1
    SUB_COMMAND_GROUP = 2
    STRING = 3
    INTEGER = 4
    BOOLEAN = 5
    USER = 6
    CHANNEL = 7
    ROLE = 8
    MENTIONABLE = 9
    NUMBER = 10

    @property
    def key(self) -> int:
        """The numeric wire code."""
        return int(self.value)

    @property
    def supports_choices(self) -> bool:
        """Whether options of this kind can declare predefined choices."""
        return self in _CHOICE_TYPES

    @property
    def is_grouping(self) -> bool:
        """Whether this kind only groups other options."""
        return self in _GROUPING_TYPES

    @classmethod
    def from_key(cls, key: int) -> Self:
        """Resolve a wire code, falling back to UNKNOWN for unrecognised codes."""
        try:
            return cls(key)
        except ValueError:
            return cls.UNKNOWN


_CHOICE_TYPES: frozenset[OptionType] = frozenset(
    {OptionType.STRING, OptionType.INTEGER}
)
_GROUPING_TYPES: frozenset[OptionType] = frozenset(
    {OptionType.SUB_COMMAND, OptionType.SUB_COMMAND_GROUP}
)
