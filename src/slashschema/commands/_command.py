"""Read model for slash commands."""

from collections.abc import Mapping  # noqa: TC003
from typing import TYPE_CHECKING, ClassVar, Self

from pydantic import (
    BaseModel,
    ConfigDict,
    PrivateAttr,
    StrictInt,
    StrictStr,
    field_validator,
)

from slashschema._decode import decode_model
from slashschema.commands._option import Option
from slashschema.utils import get_logger, loads_json

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

UINT64_MAX = 2**64 - 1


class Command(BaseModel):
    """A registered slash command.

    Commands compare and hash by ``id``. The guild binding only records where
    the command lives (guild-specific or global) for callers that edit or
    delete it later.

    Attributes:
        id: The command identifier (unsigned 64-bit).
        name: The command name.
        description: The command description.
        options: Top-level options in payload order. For commands using
            subcommands these are the subcommands, for commands using
            subcommand groups these are the groups.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    id: StrictInt
    name: StrictStr
    description: StrictStr
    options: tuple[Option, ...] = ()

    _guild_id: int | None = PrivateAttr(default=None)

    @field_validator("id", mode="before")
    @classmethod
    def _parse_snowflake(cls, value: object) -> int:
        match value:
            case bool():
                msg = "id must be an unsigned 64-bit integer, not a boolean"
                raise ValueError(msg)
            case str() if value.isascii() and value.isdecimal():
                parsed = int(value)
            case int():
                parsed = value
            case _:
                msg = f"id must be an unsigned 64-bit integer in decimal form, got {value!r}"
                raise ValueError(msg)
        if not 0 <= parsed <= UINT64_MAX:
            msg = f"id {parsed} is outside the unsigned 64-bit range"
            raise ValueError(msg)
        return parsed

    @field_validator("options", mode="before")
    @classmethod
    def _null_as_absent(cls, value: object) -> object:
        return () if value is None else value

    @classmethod
    def from_data(
        cls,
        data: Mapping[str, object],
        guild_id: int | None = None,
        *,
        logger: "FilteringBoundLogger | None" = None,
    ) -> Self:
        """Decode a command from its payload.

        Args:
            data: The command payload.
            guild_id: The guild the command belongs to, or None for a global
                command.
            logger: Logger for parse events. Defaults to the shared logger.

        Raises:
            ParsingError: If a required field is missing or malformed anywhere
                in the command or its option tree.
        """
        log = logger if logger is not None else get_logger()
        command = decode_model(cls, data, kind="command", logger=log)
        command._guild_id = guild_id
        log.debug(
            "command_parsed",
            command_id=command.id,
            name=command.name,
            option_count=len(command.options),
            guild_id=guild_id,
        )
        return command

    @classmethod
    def from_json(
        cls,
        raw: bytes | str,
        guild_id: int | None = None,
        *,
        logger: "FilteringBoundLogger | None" = None,
    ) -> Self:
        """Decode a command from a JSON document.

        Raises:
            ParsingError: If the document is malformed or not a valid command.
        """
        return cls.from_data(loads_json(raw), guild_id, logger=logger)

    @property
    def guild_id(self) -> int | None:
        """The owning guild, or None for a global command."""
        return self._guild_id

    @property
    def is_global(self) -> bool:
        return self._guild_id is None

    def to_data(self) -> dict[str, object]:
        data: dict[str, object] = {
            "id": str(self.id),
            "name": self.name,
            "description": self.description,
        }
        if self.options:
            data["options"] = [option.to_data() for option in self.options]
        return data

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Command):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"C:{self.name}({self.id})"

    def __str__(self) -> str:
        return repr(self)
