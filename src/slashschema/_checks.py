"""Argument checks shared by the builders.

Every check raises ArgumentError naming the offending argument, so a failed
builder call surfaces the same error shape no matter which rule it broke.
"""

import re

from slashschema.exceptions import ArgumentError

# =============================================================================
# Limits
# =============================================================================

MAX_NAME_LENGTH = 32
"""Maximum length of a command or option name."""

MAX_DESCRIPTION_LENGTH = 100
"""Maximum length of a command or option description."""

MAX_CHOICE_NAME_LENGTH = 100
"""Maximum length of a choice name."""

MAX_CHOICE_VALUE_LENGTH = 100
"""Maximum length of a string choice value."""

MAX_CHOICES = 25
"""Maximum number of choices per option."""

MAX_OPTIONS = 25
"""Maximum number of top-level options per command."""

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# =============================================================================
# Regex Patterns
# =============================================================================

ALPHANUMERIC_WITH_DASH = re.compile(r"^[A-Za-z0-9-]+$")
"""Pattern for names: ASCII letters, digits and dash."""


def not_none(value: object, argument: str) -> None:
    if value is None:
        msg = f"{argument} may not be None"
        raise ArgumentError(msg, argument=argument)


def not_empty(value: str | None, argument: str) -> None:
    """Reject a missing or empty string."""
    not_none(value, argument)
    if not value:
        msg = f"{argument} may not be empty"
        raise ArgumentError(msg, argument=argument)


def not_longer(value: str, max_length: int, argument: str) -> None:
    """Reject a string longer than ``max_length`` characters."""
    if len(value) > max_length:
        msg = f"{argument} may not be longer than {max_length} characters! Provided: {value!r}"
        raise ArgumentError(msg, argument=argument)


def matches(value: str, pattern: re.Pattern[str], argument: str) -> None:
    """Reject a string that does not fully match ``pattern``."""
    if pattern.fullmatch(value) is None:
        msg = f"{argument} must match regex {pattern.pattern}! Provided: {value!r}"
        raise ArgumentError(msg, argument=argument)


def is_lowercase(value: str, argument: str) -> None:
    """Reject a string containing uppercase characters."""
    if value.lower() != value:
        msg = f"{argument} must be lowercase only! Provided: {value!r}"
        raise ArgumentError(msg, argument=argument)


def check(condition: bool, message: str, argument: str | None = None) -> None:  # noqa: FBT001
    """Reject when ``condition`` is false."""
    if not condition:
        raise ArgumentError(message, argument=argument)


def check_name(name: str, argument: str = "Name") -> None:
    """Validate a command or option name: 1-32 lowercase letters, digits or dashes."""
    not_empty(name, argument)
    not_longer(name, MAX_NAME_LENGTH, argument)
    matches(name, ALPHANUMERIC_WITH_DASH, argument)
    is_lowercase(name, argument)


def check_description(description: str, argument: str = "Description") -> None:
    """Validate a description: 1-100 characters."""
    not_empty(description, argument)
    not_longer(description, MAX_DESCRIPTION_LENGTH, argument)
