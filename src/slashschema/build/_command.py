"""Builder for a top-level slash command."""

from collections.abc import Mapping  # noqa: TC003
from typing import TYPE_CHECKING, ClassVar, Self

from pydantic import BaseModel, ConfigDict, StrictStr

from slashschema import _checks
from slashschema._decode import decode_model
from slashschema.build._option import OptionBuilder
from slashschema.utils import dumps_json, get_logger, loads_json

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger


class _CommandPayload(BaseModel):
    model_config: ClassVar[ConfigDict] = ConfigDict(extra="ignore")

    name: StrictStr
    description: StrictStr
    options: list[dict[str, object]] | None = None


class CommandBuilder:
    """Mutable builder for a slash command and its top-level options.

    Names and descriptions follow the same limits as options. A command holds
    at most 25 options and option names must be unique within it.
    """

    def __init__(self, name: str, description: str) -> None:
        _checks.check_name(name)
        _checks.check_description(description)
        self._name: str = name
        self._description: str = description
        self._options: list[OptionBuilder] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def options(self) -> tuple[OptionBuilder, ...]:
        return tuple(self._options)

    def add_options(self, *options: OptionBuilder) -> Self:
        """Append options in order.

        Returns:
            This builder, for chaining.

        Raises:
            ArgumentError: If an option is missing, the total would exceed 25,
                or an option name is already used. Nothing is added then.
        """
        for option in options:
            _checks.not_none(option, "Option")
        _checks.check(
            len(self._options) + len(options) <= _checks.MAX_OPTIONS,
            f"Cannot have more than {_checks.MAX_OPTIONS} options for a command!",
            "options",
        )
        seen = {option.name for option in self._options}
        for option in options:
            _checks.check(
                option.name not in seen,
                f"Option with name {option.name!r} already exists",
                "options",
            )
            seen.add(option.name)
        self._options.extend(options)
        return self

    def to_data(self) -> dict[str, object]:
        data: dict[str, object] = {
            "name": self._name,
            "description": self._description,
        }
        if self._options:
            data["options"] = [option.to_data() for option in self._options]
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
        """Rebuild a command builder from its serialized payload.

        Raises:
            ParsingError: If a required field is missing or malformed.
            ArgumentError: If a value breaks a builder check.
        """
        log = logger if logger is not None else get_logger()
        payload = decode_model(_CommandPayload, data, kind="command", logger=log)
        command = cls(payload.name, payload.description)
        command.add_options(
            *(OptionBuilder.load(option, logger=log) for option in payload.options or ())
        )
        log.debug(
            "command_loaded",
            name=command.name,
            option_count=len(command.options),
        )
        return command

    @classmethod
    def load_json(
        cls,
        raw: bytes | str,
        *,
        logger: "FilteringBoundLogger | None" = None,
    ) -> Self:
        return cls.load(loads_json(raw), logger=logger)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CommandBuilder):
            return NotImplemented
        return (
            self._name == other._name
            and self._description == other._description
            and self._options == other._options
        )

    __hash__ = None  # pyright: ignore[reportAssignmentType]

    def __repr__(self) -> str:
        return f"CommandBuilder(name={self._name!r}, options={len(self._options)})"
