"""Translation of pydantic validation failures into ParsingError."""

from typing import TYPE_CHECKING

from pydantic import BaseModel, ValidationError

from slashschema.exceptions import ParsingError
from slashschema.utils import get_logger

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger


def decode_model[M: BaseModel](
    model: type[M],
    data: object,
    *,
    kind: str,
    logger: "FilteringBoundLogger | None" = None,
) -> M:
    """Validate ``data`` against ``model``.

    Args:
        model: The pydantic model describing the payload shape.
        data: The decoded JSON payload.
        kind: Payload kind used in messages and log events ("option", ...).
        logger: Logger for rejected payloads. Defaults to the shared logger.

    Returns:
        The validated model instance.

    Raises:
        ParsingError: If a required field is missing or has the wrong shape.
            ``key`` holds the dotted path of the first offending field.
    """
    try:
        return model.model_validate(data)
    except ValidationError as e:
        error = e.errors()[0]
        key = ".".join(str(part) for part in error["loc"]) or None
        log = logger if logger is not None else get_logger()
        log.warning(
            "payload_rejected",
            kind=kind,
            key=key,
            error=error["msg"],
            error_count=e.error_count(),
        )
        msg = f"Invalid {kind} payload at {key or '<root>'}: {error['msg']}"
        raise ParsingError(msg, key=key, cause=e) from e
