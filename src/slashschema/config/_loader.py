"""Environment-based configuration loading."""

import os
from collections.abc import Mapping
from enum import StrEnum

from slashschema.config._models import LogFormat, LoggingConfig, LogLevel
from slashschema.exceptions import ConfigError

ENV_PREFIX = "SLASHSCHEMA_"


def _choice_from_env(
    environ: Mapping[str, str],
    key: str,
    enum_type: type[StrEnum],
) -> StrEnum | None:
    raw = environ.get(key, "").strip()
    if not raw:
        return None
    try:
        return enum_type(raw.lower())
    except ValueError as e:
        expected = " | ".join(member.value for member in enum_type)
        msg = f"Invalid value for {key}: {raw!r} (expected {expected})"
        raise ConfigError(msg, key=key, value=raw, expected=expected) from e


def load_logging_config(environ: Mapping[str, str] | None = None) -> LoggingConfig:
    """Load logging configuration from environment variables.

    Reads ``SLASHSCHEMA_LOG_LEVEL``, ``SLASHSCHEMA_LOG_FORMAT`` and
    ``SLASHSCHEMA_LOG_FILE``. ``SLASHSCHEMA_DEBUG`` set to any non-empty value
    forces the debug level regardless of ``SLASHSCHEMA_LOG_LEVEL``.

    Args:
        environ: Mapping to read from. Defaults to ``os.environ``.

    Returns:
        The resolved LoggingConfig. Unset variables keep their defaults.

    Raises:
        ConfigError: If a level or format value is not recognised.
    """
    env = os.environ if environ is None else environ
    values: dict[str, object] = {}

    level = _choice_from_env(env, f"{ENV_PREFIX}LOG_LEVEL", LogLevel)
    if env.get(f"{ENV_PREFIX}DEBUG", "").strip():
        level = LogLevel.DEBUG
    if level is not None:
        values["level"] = level

    log_format = _choice_from_env(env, f"{ENV_PREFIX}LOG_FORMAT", LogFormat)
    if log_format is not None:
        values["format"] = log_format

    log_file = env.get(f"{ENV_PREFIX}LOG_FILE", "").strip()
    if log_file:
        values["file"] = log_file

    return LoggingConfig.model_validate(values)
