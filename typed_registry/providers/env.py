from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..utils import cast_numeric, read_env


class EnvProvider:
    """
    Environment-backed value source with numeric casting.

    Boolean, empty and null tokens are folded by read_env; remaining strings
    are narrowed to int or float when they are numeric.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def get(self, key: str) -> Any:
        value = read_env(key, self._environ)
        if not isinstance(value, str):
            return value
        return cast_numeric(value)


class EnvStringProvider:
    """
    Environment-backed value source returning every scalar as a string.

    Keeps all-digit secrets and tokens as text. True becomes "1", False "".
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def get(self, key: str) -> Any:
        value = read_env(key, self._environ)
        if isinstance(value, bool):
            return "1" if value else ""
        if value is None:
            return None
        return str(value)
