"""
Typed accessors for environment variables and configuration trees.
"""

from .domain import Kind, ValueSource, kind_of
from .helpers import typed_config, typed_env, typed_env_string
from .providers import ConfigProvider, EnvProvider, EnvStringProvider
from .registry import TypedRegistry
from .repository import ConfigRepository
from .utils import (
    ErrorCode,
    MissingKeyError,
    RegistryError,
    RegistryTypeError,
    cast_numeric,
    configure_logging,
    get_logger,
)

__all__ = [
    "TypedRegistry",
    "ValueSource",
    "Kind",
    "kind_of",
    "EnvProvider",
    "EnvStringProvider",
    "ConfigProvider",
    "ConfigRepository",
    "typed_env",
    "typed_env_string",
    "typed_config",
    "ErrorCode",
    "RegistryError",
    "MissingKeyError",
    "RegistryTypeError",
    "cast_numeric",
    "configure_logging",
    "get_logger",
]
