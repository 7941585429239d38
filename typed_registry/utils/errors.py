from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Registry error codes."""
    MISSING_KEY = "missing_key"
    TYPE_MISMATCH = "type_mismatch"


def describe(value: Any) -> str:
    """Renders a raw value for error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return f"'{value}'"
    if isinstance(value, (int, float)):
        return repr(value)
    return type(value).__name__


class RegistryError(LookupError):
    """Base error for typed registry lookups."""

    code: ErrorCode = ErrorCode.TYPE_MISMATCH

    def __init__(self, key: str, expected: str, actual: Any = None) -> None:
        self.key = key
        self.expected = expected
        self.actual = actual
        super().__init__(self._message())

    def _message(self) -> str:
        return f"key '{self.key}' must be {self.expected}, got {describe(self.actual)}"


class MissingKeyError(RegistryError):
    """The source has no value for a required key."""

    code = ErrorCode.MISSING_KEY

    def _message(self) -> str:
        return f"key '{self.key}' is missing, expected {self.expected}"


class RegistryTypeError(RegistryError, TypeError):
    """The source value does not have the requested kind."""

    code = ErrorCode.TYPE_MISMATCH
