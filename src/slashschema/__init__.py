"""Schema model for slash command definitions.

Builders (``OptionBuilder``, ``CommandBuilder``) validate and serialize
command definitions for registration. The read model (``Command``, ``Option``,
``Choice``) decodes commands delivered by the platform.

Example:
    >>> from slashschema import OptionBuilder, OptionType
    >>> option = OptionBuilder(OptionType.INTEGER, "count", "How many")
    >>> option.set_required(True).add_choice("One", 1).to_data()["choices"]
    [{'name': 'One', 'value': 1}]
"""

from slashschema.build import CommandBuilder, OptionBuilder
from slashschema.commands import Choice, Command, Option
from slashschema.enums import OptionType
from slashschema.exceptions import (
    ArgumentError,
    ConfigError,
    ParsingError,
    SlashSchemaError,
)

__all__ = [
    "ArgumentError",
    "Choice",
    "Command",
    "CommandBuilder",
    "ConfigError",
    "Option",
    "OptionBuilder",
    "OptionType",
    "ParsingError",
    "SlashSchemaError",
]
