"""Read model for command options, subcommands and subcommand groups."""

from collections.abc import Mapping  # noqa: TC003
from typing import TYPE_CHECKING, ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator

from slashschema._decode import decode_model
from slashschema.commands._choice import Choice
from slashschema.enums import OptionType

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger


class Option(BaseModel):
    """An option node of a command's schema tree.

    Mirrors the payload it was decoded from. Field contents are not checked
    against the builder limits; only presence and JSON shape are enforced.

    If this is a subcommand, ``options`` holds its parameters. If this is a
    subcommand group, ``options`` holds the subcommands of the group.

    Attributes:
        name: The option, subcommand, or group name.
        description: The description.
        type_raw: The raw numeric type code.
        options: Nested options in payload order (empty if none).
        choices: Predefined choices in payload order (empty if none).
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    name: StrictStr
    description: StrictStr
    type_raw: StrictInt = Field(..., alias="type")
    options: tuple["Option", ...] = ()
    choices: tuple[Choice, ...] = ()

    @field_validator("options", "choices", mode="before")
    @classmethod
    def _null_as_absent(cls, value: object) -> object:
        return () if value is None else value

    @classmethod
    def from_data(
        cls,
        data: Mapping[str, object],
        *,
        logger: "FilteringBoundLogger | None" = None,
    ) -> Self:
        """Decode an option tree from its payload.

        Raises:
            ParsingError: If a required field is missing or malformed anywhere
                in the tree.
        """
        return decode_model(cls, data, kind="option", logger=logger)

    @property
    def type(self) -> OptionType:
        """The option type, UNKNOWN for codes this library does not define."""
        return OptionType.from_key(self.type_raw)

    def to_data(self) -> dict[str, object]:
        data: dict[str, object] = {
            "type": self.type_raw,
            "name": self.name,
            "description": self.description,
        }
        if self.options:
            data["options"] = [option.to_data() for option in self.options]
        if self.choices:
            data["choices"] = [choice.to_data() for choice in self.choices]
        return data
