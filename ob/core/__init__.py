"""Core domain types and logic."""

from .config import Config, ConfigInvalid, EnvSettings, load_config, load_config_or_default
from .errors import ErrorCode
from .mode import ExecutionMode
from .result import Err, Ok, Result
from .version import VersionNotFound, parse_version, resolve_version

__all__ = [
    # config
    "Config",
    "ConfigInvalid",
    "EnvSettings",
    "load_config",
    "load_config_or_default",
    # errors
    "ErrorCode",
    # mode
    "ExecutionMode",
    # result
    "Err",
    "Ok",
    "Result",
    # version
    "VersionNotFound",
    "parse_version",
    "resolve_version",
]
