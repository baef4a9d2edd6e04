"""slashschema configuration.

Example:
    >>> from slashschema.config import load_logging_config
    >>> load_logging_config({"SLASHSCHEMA_LOG_LEVEL": "debug"}).level
    <LogLevel.DEBUG: 'debug'>
"""

from slashschema.exceptions import ConfigError

from ._loader import ENV_PREFIX, load_logging_config
from ._models import LogFormat, LoggingConfig, LogLevel

__all__ = [
    "ENV_PREFIX",
    "ConfigError",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "load_logging_config",
]
