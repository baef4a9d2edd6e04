"""Immutable read model for slash commands decoded from platform payloads.

Example:
    >>> from slashschema.commands import Command
    >>> command = Command.from_data(
    ...     {"id": "123", "name": "ping", "description": "Check latency"}
    ... )
    >>> command
    C:ping(123)
"""

from slashschema.commands._choice import Choice
from slashschema.commands._command import UINT64_MAX, Command
from slashschema.commands._option import Option

__all__ = [
    "UINT64_MAX",
    "Choice",
    "Command",
    "Option",
]
