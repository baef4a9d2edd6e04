"""Predefined choice values for string and integer options."""

from collections.abc import Mapping  # noqa: TC003
from typing import TYPE_CHECKING, Any, ClassVar, Self

from pydantic import (
    BaseModel,
    ConfigDict,
    PrivateAttr,
    StrictInt,
    StrictStr,
    field_validator,
)

from slashschema._checks import INT64_MAX, INT64_MIN
from slashschema._decode import decode_model

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger


class Choice(BaseModel):
    """A predefined value a user may pick for an option.

    The value is either an integer or a string. Both projections are always
    available: ``as_int`` is 0 for a string choice, and ``as_str`` is the
    decimal rendering of an integer choice. Whole JSON numbers such as
    ``5.0`` decode as integers; fractional ones are kept as their decimal text.

    Attributes:
        name: The readable name shown to users.
        value: The value as it appears on the wire.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    name: StrictStr
    value: StrictInt | StrictStr

    _string_value: str = PrivateAttr(default="")

    @field_validator("value", mode="before")
    @classmethod
    def _match_value_shape(cls, value: object) -> int | str:
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        match value:
            case bool():
                msg = "choice value must be a number or a string, not a boolean"
                raise ValueError(msg)
            case int() if INT64_MIN <= value <= INT64_MAX:
                return value
            case int():
                msg = f"choice value {value} does not fit a signed 64-bit integer"
                raise ValueError(msg)
            case float():
                # Fractional numbers are kept as their decimal text.
                return str(value)
            case str():
                return value
            case _:
                msg = f"choice value must be a number or a string, got {type(value).__name__}"
                raise ValueError(msg)

    def model_post_init(self, context: Any, /) -> None:  # pyright: ignore[reportAny,reportExplicitAny]
        # Integer choices also carry their decimal rendering. Kept for
        # compatibility with consumers that only read the string form.
        match self.value:
            case int():
                self._string_value = str(self.value)
            case str():
                self._string_value = self.value

    @classmethod
    def from_data(
        cls,
        data: Mapping[str, object],
        *,
        logger: "FilteringBoundLogger | None" = None,
    ) -> Self:
        """Decode a choice from its ``{"name", "value"}`` payload.

        Raises:
            ParsingError: If ``name`` or ``value`` is missing or malformed.
        """
        return decode_model(cls, data, kind="choice", logger=logger)

    @property
    def is_int(self) -> bool:
        """Whether this choice originated from an integer value."""
        return isinstance(self.value, int)

    @property
    def as_int(self) -> int:
        """The integer value, or 0 for a string choice."""
        match self.value:
            case int():
                return self.value
            case _:
                return 0

    @property
    def as_str(self) -> str:
        """The string value, or the decimal rendering of an integer choice."""
        return self._string_value

    def to_data(self) -> dict[str, object]:
        return {"name": self.name, "value": self.value}
