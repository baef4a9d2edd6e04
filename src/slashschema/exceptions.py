"""slashschema exceptions."""

from typing import Any


class SlashSchemaError(Exception):
    """Base exception for slashschema errors."""


class ArgumentError(SlashSchemaError, ValueError):
    """Raised when a builder call receives an invalid argument.

    Signals a caller error. The builder the call was made on is left in the
    state it had before the call.

    Attributes:
        argument: Name of the offending argument, when known.
    """

    def __init__(self, message: str, *, argument: str | None = None) -> None:
        """Initialize with error message and argument context.

        Args:
            message: Human-readable error message.
            argument: Name of the offending argument.
        """
        super().__init__(message)
        self.argument: str | None = argument


class ParsingError(SlashSchemaError, ValueError):
    """Raised when an external payload is missing a field or has the wrong shape.

    Attributes:
        key: The payload key that failed to decode, when known.
        cause: The underlying exception that caused this error.
    """

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        """Initialize with error message and payload context.

        Args:
            message: Human-readable error message.
            key: The payload key that failed to decode.
            cause: The underlying exception that caused this error.
        """
        super().__init__(message)
        self.key: str | None = key
        self.cause: Exception | None = cause


class ConfigError(SlashSchemaError):
    """Raised when configuration values are invalid."""

    def __init__(
        self,
        message: str,
        *,
        key: str,
        value: Any,  # pyright: ignore[reportAny,reportExplicitAny]
        expected: str,
    ) -> None:
        """Initialize with error message and validation context."""
        super().__init__(message)
        self.key: str = key
        self.value: Any = value  # pyright: ignore[reportExplicitAny]
        self.expected: str = expected
