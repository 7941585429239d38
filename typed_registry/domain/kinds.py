from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any


class Kind(str, Enum):
    """Closed set of tags for raw source values."""
    NULL = "null"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STRING = "string"
    LIST = "list"
    MAP = "map"
    UNKNOWN = "unknown"


SCALAR_KINDS = (Kind.STRING, Kind.INT, Kind.BOOL, Kind.FLOAT)


def kind_of(value: Any) -> Kind:
    """Tags a raw value. bool is checked before int."""
    if value is None:
        return Kind.NULL
    if isinstance(value, bool):
        return Kind.BOOL
    if isinstance(value, int):
        return Kind.INT
    if isinstance(value, float):
        return Kind.FLOAT
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, (list, tuple)):
        return Kind.LIST
    if isinstance(value, Mapping):
        return Kind.MAP
    return Kind.UNKNOWN
