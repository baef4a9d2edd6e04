"""Shared utilities for slashschema."""

from ._json import dumps_json, loads_json
from ._logging import LogFormatType, create_logger, get_logger

__all__ = [
    "LogFormatType",
    "create_logger",
    "dumps_json",
    "get_logger",
    "loads_json",
]
