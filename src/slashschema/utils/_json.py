from typing import cast

import orjson

from slashschema.exceptions import ParsingError


def loads_json(raw: bytes | str) -> dict[str, object]:
    """Parse a JSON document whose top level must be an object.

    Args:
        raw: The JSON document as bytes or text.

    Returns:
        The decoded object.

    Raises:
        ParsingError: If the document is malformed or not an object.
    """
    try:
        data = orjson.loads(raw)
    except orjson.JSONDecodeError as e:
        msg = f"Malformed JSON payload: {e}"
        raise ParsingError(msg, cause=e) from e
    if not isinstance(data, dict):
        msg = f"Expected a JSON object, got {type(data).__name__}"
        raise ParsingError(msg)
    return cast("dict[str, object]", data)


def dumps_json(data: dict[str, object]) -> bytes:
    """Serialize a payload to compact JSON bytes."""
    return orjson.dumps(data)
