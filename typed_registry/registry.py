from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .domain import Kind, ValueSource, kind_of
from .utils import MissingKeyError, RegistryError, RegistryTypeError


class TypedRegistry:
    """
    Strongly-typed getters over a ValueSource.

    Values are never coerced here: the raw value must already carry the
    requested kind. Required getters raise MissingKeyError or
    RegistryTypeError, *_or getters fall back to the caller's default.
    """

    __slots__ = ("_source",)

    def __init__(self, source: ValueSource) -> None:
        self._source = source

    @property
    def source(self) -> ValueSource:
        return self._source

    def _required(self, key: str, kind: Kind) -> Any:
        value = self._source.get(key)
        if value is None:
            raise MissingKeyError(key, kind.value)
        if kind_of(value) is not kind:
            raise RegistryTypeError(key, kind.value, value)
        return value

    def _nullable(self, key: str, kind: Kind) -> Any:
        value = self._source.get(key)
        if value is None:
            return None
        if kind_of(value) is not kind:
            raise RegistryTypeError(key, kind.value, value)
        return value

    def _or(self, key: str, kind: Kind, default: Any) -> Any:
        try:
            return self._required(key, kind)
        except RegistryError:
            return default

    def _list(self, key: str, kind: Kind) -> list[Any]:
        expected = f"list<{kind.value}>"
        value = self._source.get(key)
        if value is None:
            raise MissingKeyError(key, expected)
        if kind_of(value) is not Kind.LIST:
            raise RegistryTypeError(key, expected, value)
        for i, item in enumerate(value):
            if kind_of(item) is not kind:
                raise RegistryTypeError(f"{key}[{i}]", kind.value, item)
        return list(value)

    def _map(self, key: str, kind: Kind) -> dict[str, Any]:
        expected = f"map<string,{kind.value}>"
        value = self._source.get(key)
        if value is None:
            raise MissingKeyError(key, expected)
        if not isinstance(value, Mapping):
            raise RegistryTypeError(key, expected, value)
        for k, item in value.items():
            if not isinstance(k, str):
                raise RegistryTypeError(key, expected, k)
            if kind_of(item) is not kind:
                raise RegistryTypeError(f"{key}[{k}]", kind.value, item)
        return dict(value)

    def get_string(self, key: str) -> str:
        return self._required(key, Kind.STRING)

    def get_int(self, key: str) -> int:
        return self._required(key, Kind.INT)

    def get_bool(self, key: str) -> bool:
        return self._required(key, Kind.BOOL)

    def get_float(self, key: str) -> float:
        return self._required(key, Kind.FLOAT)

    def get_nullable_string(self, key: str) -> str | None:
        return self._nullable(key, Kind.STRING)

    def get_nullable_int(self, key: str) -> int | None:
        return self._nullable(key, Kind.INT)

    def get_nullable_bool(self, key: str) -> bool | None:
        return self._nullable(key, Kind.BOOL)

    def get_nullable_float(self, key: str) -> float | None:
        return self._nullable(key, Kind.FLOAT)

    def get_string_or(self, key: str, default: str) -> str:
        return self._or(key, Kind.STRING, default)

    def get_int_or(self, key: str, default: int) -> int:
        return self._or(key, Kind.INT, default)

    def get_bool_or(self, key: str, default: bool) -> bool:
        return self._or(key, Kind.BOOL, default)

    def get_float_or(self, key: str, default: float) -> float:
        return self._or(key, Kind.FLOAT, default)

    def get_string_list(self, key: str) -> list[str]:
        return self._list(key, Kind.STRING)

    def get_int_list(self, key: str) -> list[int]:
        return self._list(key, Kind.INT)

    def get_bool_list(self, key: str) -> list[bool]:
        return self._list(key, Kind.BOOL)

    def get_float_list(self, key: str) -> list[float]:
        return self._list(key, Kind.FLOAT)

    def get_string_map(self, key: str) -> dict[str, str]:
        return self._map(key, Kind.STRING)

    def get_int_map(self, key: str) -> dict[str, int]:
        return self._map(key, Kind.INT)

    def get_bool_map(self, key: str) -> dict[str, bool]:
        return self._map(key, Kind.BOOL)

    def get_float_map(self, key: str) -> dict[str, float]:
        return self._map(key, Kind.FLOAT)
