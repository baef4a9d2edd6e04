"""Builder for a single slash command option."""

from collections.abc import Mapping  # noqa: TC003
from typing import TYPE_CHECKING, ClassVar, Self

from pydantic import (
    BaseModel,
    ConfigDict,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
)

from slashschema import _checks
from slashschema._decode import decode_model
from slashschema.commands import Choice
from slashschema.enums import OptionType
from slashschema.exceptions import ArgumentError
from slashschema.utils import dumps_json, get_logger, loads_json

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger


# =============================================================================
# Choice storage
# =============================================================================


class _ChoiceTable:
    """Insertion-ordered choices of a choice-capable option.

    Re-adding an existing name replaces its value in place.
    """

    __slots__: ClassVar[tuple[str, ...]] = ("_entries",)

    enabled: ClassVar[bool] = True

    def __init__(self) -> None:
        self._entries: dict[str, int | str] = {}

    def put(self, name: str, value: int | str) -> None:
        _checks.check(
            len(self._entries) < _checks.MAX_CHOICES,
            f"Cannot have more than {_checks.MAX_CHOICES} choices for an option!",
            "choices",
        )
        self._entries[name] = value

    def snapshot(self) -> tuple[Choice, ...]:
        return tuple(
            Choice(name=name, value=value) for name, value in self._entries.items()
        )

    def __len__(self) -> int:
        return len(self._entries)


class _NoChoices:
    """Stand-in storage for option types that cannot carry choices."""

    __slots__: ClassVar[tuple[str, ...]] = ("_type",)

    enabled: ClassVar[bool] = False

    def __init__(self, option_type: OptionType) -> None:
        self._type: OptionType = option_type

    def put(self, name: str, value: int | str) -> None:  # noqa: ARG002
        msg = f"Cannot add choices for OptionType.{self._type.name}"
        raise ArgumentError(msg, argument="choices")

    def snapshot(self) -> tuple[Choice, ...]:
        return ()

    def __len__(self) -> int:
        return 0


type _ChoiceStorage = _ChoiceTable | _NoChoices


# =============================================================================
# Payload shape
# =============================================================================


class _ChoicePayload(BaseModel):
    """Shape of a serialized choice. Value rules are left to ``add_choice``."""

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="ignore")

    name: StrictStr
    value: StrictBool | StrictInt | StrictFloat | StrictStr


class _OptionPayload(BaseModel):
    """Shape of a serialized option as accepted by ``OptionBuilder.load``."""

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="ignore")

    type: StrictInt
    name: StrictStr
    description: StrictStr
    required: StrictBool = False
    choices: list[_ChoicePayload] | None = None


# =============================================================================
# Builder
# =============================================================================


class OptionBuilder:
    """Mutable builder for one command option.

    Every argument is validated when it is set. A failed call raises
    ArgumentError and leaves the builder unchanged.

    Example:
        >>> option = (
        ...     OptionBuilder(OptionType.STRING, "color", "pick a color")
        ...     .add_choice("Red", "red")
        ...     .add_choice("Blue", "blue")
        ... )
        >>> [choice.name for choice in option.choices]
        ['Red', 'Blue']
    """

    def __init__(self, option_type: OptionType, name: str, description: str) -> None:
        """Create an option builder. Options are not required by default.

        Args:
            option_type: The option type.
            name: The option name, 1-32 lowercase letters, digits or dashes.
            description: The option description, 1-100 characters.

        Raises:
            ArgumentError: If the type is missing or undefined, or the name or
                description breaks the limits above.
        """
        _checks.not_none(option_type, "Type")
        _checks.check(
            isinstance(option_type, OptionType) and option_type is not OptionType.UNKNOWN,
            f"Type must be a defined option type! Provided: {option_type!r}",
            "Type",
        )
        _checks.check_name(name)
        _checks.check_description(description)

        self._type: OptionType = option_type
        self._name: str = name
        self._description: str = description
        self._required: bool = False
        self._choices: _ChoiceStorage = (
            _ChoiceTable()
            if option_type.supports_choices
            else _NoChoices(option_type)
        )

    @property
    def type(self) -> OptionType:
        return self._type

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def required(self) -> bool:
        """Whether users must fill in this option when invoking the command."""
        return self._required

    @property
    def supports_choices(self) -> bool:
        return self._choices.enabled

    @property
    def choices(self) -> tuple[Choice, ...]:
        """Snapshot of the current choices, in insertion order."""
        return self._choices.snapshot()

    def set_required(self, required: bool) -> Self:  # noqa: FBT001
        """Configure whether users must fill in this option.

        Returns:
            This builder, for chaining.
        """
        self._required = required
        return self

    def add_choice(self, name: str, value: int | str) -> Self:
        """Add a predefined choice.

        Integer values are only accepted for INTEGER options, string values
        only for STRING options. Adding a name that already exists replaces
        its value and keeps its position.

        Args:
            name: The name shown to users, 1-100 characters.
            value: The value delivered when the choice is picked. Strings
                must be 1-100 characters; integers must fit 64 bits.

        Returns:
            This builder, for chaining.

        Raises:
            ArgumentError: If this option type cannot carry choices, the value
                kind does not match the type, a limit is broken, or 25
                choices are already present.
        """
        if not self._choices.enabled:
            self._choices.put(name, value)

        match value:
            case bool():
                msg = "Choice value must be an int or a str, not a bool"
                raise ArgumentError(msg, argument="Value")
            case int():
                self._check_int_choice(name, value)
            case str():
                self._check_string_choice(name, value)
            case _:
                msg = f"Choice value must be an int or a str! Provided: {value!r}"
                raise ArgumentError(msg, argument="Value")

        self._choices.put(name, value)
        return self

    def _check_choice_name(self, name: str) -> None:
        _checks.not_empty(name, "Name")
        _checks.not_longer(name, _checks.MAX_CHOICE_NAME_LENGTH, "Name")

    def _check_int_choice(self, name: str, value: int) -> None:
        self._check_choice_name(name)
        _checks.check(
            _checks.INT64_MIN <= value <= _checks.INT64_MAX,
            f"Value must fit a signed 64-bit integer! Provided: {value}",
            "Value",
        )
        if self._type is not OptionType.INTEGER:
            msg = f"Cannot add int choice for OptionType.{self._type.name}"
            raise ArgumentError(msg, argument="Value")

    def _check_string_choice(self, name: str, value: str) -> None:
        self._check_choice_name(name)
        _checks.not_empty(value, "Value")
        _checks.not_longer(value, _checks.MAX_CHOICE_VALUE_LENGTH, "Value")
        if self._type is not OptionType.STRING:
            msg = f"Cannot add string choice for OptionType.{self._type.name}"
            raise ArgumentError(msg, argument="Value")

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_data(self) -> dict[str, object]:
        """Serialize this option to its payload.

        ``required`` is left out for subcommands and subcommand groups, and
        ``choices`` is left out when there are none.
        """
        data: dict[str, object] = {
            "type": self._type.key,
            "name": self._name,
            "description": self._description,
        }
        if not self._type.is_grouping:
            data["required"] = self._required
        choices = self.choices
        if choices:
            data["choices"] = [choice.to_data() for choice in choices]
        return data

    def to_json(self) -> bytes:
        return dumps_json(self.to_data())

    @classmethod
    def load(
        cls,
        data: Mapping[str, object],
        *,
        logger: "FilteringBoundLogger | None" = None,
    ) -> Self:
        """Rebuild an option builder from its serialized payload.

        The reverse of ``to_data``. Every value goes through the same checks
        as when the builder is assembled by hand, and each choice is replayed
        through ``add_choice`` with its kind taken from the JSON value type.

        Args:
            data: The serialized option.
            logger: Logger for load events. Defaults to the shared logger.

        Returns:
            The rebuilt builder, which can be configured further.

        Raises:
            ParsingError: If a required field is missing or malformed.
            ArgumentError: If a value breaks a builder check.
        """
        log = logger if logger is not None else get_logger()
        payload = decode_model(_OptionPayload, data, kind="option", logger=log)

        option_type = OptionType.from_key(payload.type)
        try:
            option = cls(option_type, payload.name, payload.description)
            option.set_required(payload.required)
            for choice in payload.choices or ():
                option.add_choice(choice.name, choice.value)  # pyright: ignore[reportArgumentType]
        except ArgumentError as e:
            log.warning(
                "option_rejected",
                name=payload.name,
                type=payload.type,
                argument=e.argument,
                error=str(e),
            )
            raise

        log.debug(
            "option_loaded",
            name=option.name,
            type=option.type.name,
            required=option.required,
            choice_count=len(option._choices),  # noqa: SLF001
        )
        return option

    @classmethod
    def load_json(
        cls,
        raw: bytes | str,
        *,
        logger: "FilteringBoundLogger | None" = None,
    ) -> Self:
        """Rebuild an option builder from a JSON document.

        Raises:
            ParsingError: If the document is malformed or misses fields.
            ArgumentError: If a value breaks a builder check.
        """
        return cls.load(loads_json(raw), logger=logger)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OptionBuilder):
            return NotImplemented
        return (
            self._type is other._type
            and self._name == other._name
            and self._description == other._description
            and self._required == other._required
            and self.choices == other.choices
        )

    __hash__ = None  # pyright: ignore[reportAssignmentType]

    def __repr__(self) -> str:
        return (
            f"OptionBuilder(type={self._type.name}, name={self._name!r}, "
            f"required={self._required}, choices={len(self._choices)})"
        )
