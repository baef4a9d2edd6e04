"""Mutable builders that validate and serialize slash command definitions."""

from slashschema.build._command import CommandBuilder
from slashschema.build._option import OptionBuilder

__all__ = [
    "CommandBuilder",
    "OptionBuilder",
]
