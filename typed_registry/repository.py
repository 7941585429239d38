from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

_MISSING = object()


class ConfigRepository:
    """
    In-memory configuration tree with dot-notation access.

    A key present verbatim at the current level wins over splitting it on
    dots, so {"a.b": 1} is reachable as "a.b".
    """

    def __init__(self, items: Mapping[str, Any] | None = None) -> None:
        self._items: dict[str, Any] = copy.deepcopy(dict(items or {}))

    def _lookup(self, key: str) -> Any:
        node: Any = self._items
        if key in node:
            return node[key]
        for segment in key.split("."):
            if isinstance(node, Mapping) and segment in node:
                node = node[segment]
            else:
                return _MISSING
        return node

    def get(self, key: str, default: Any = None) -> Any:
        """Returns the value at a dot path, or default when any segment is absent."""
        value = self._lookup(key)
        return default if value is _MISSING else value

    def has(self, key: str) -> bool:
        return self._lookup(key) is not _MISSING

    def set(self, key: str | Mapping[str, Any], value: Any = None) -> None:
        """Sets one dot path, or every path of a mapping, creating parents as needed."""
        updates = key if isinstance(key, Mapping) else {key: value}
        for path, item in updates.items():
            keys = path.split(".")
            node = self._items
            for k in keys[:-1]:
                if not isinstance(node.get(k), dict):
                    node[k] = {}
                node = node[k]
            node[keys[-1]] = item

    def all(self) -> dict[str, Any]:
        return copy.deepcopy(self._items)
