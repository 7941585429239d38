"""
Domain ports for the typed registry.
Value sources implement these so accessors stay independent of where values live.
"""

from __future__ import annotations

from typing import Any, Protocol


class ValueSource(Protocol):
    def get(self, key: str) -> Any: ...


class ConfigStore(Protocol):
    def get(self, key: str, default: Any = None) -> Any: ...
