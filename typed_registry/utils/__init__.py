from .env import fold_env_value, read_env
from .errors import ErrorCode, MissingKeyError, RegistryError, RegistryTypeError, describe
from .logger import (
    JsonFormatter,
    PlainFormatter,
    configure_logging,
    get_logger,
)
from .numeric import INT_MAX, INT_MIN, cast_numeric, is_numeric, normalize_whole

__all__ = [
    "ErrorCode",
    "RegistryError",
    "MissingKeyError",
    "RegistryTypeError",
    "describe",
    "fold_env_value",
    "read_env",
    "cast_numeric",
    "is_numeric",
    "normalize_whole",
    "INT_MAX",
    "INT_MIN",
    "configure_logging",
    "get_logger",
    "JsonFormatter",
    "PlainFormatter",
]
