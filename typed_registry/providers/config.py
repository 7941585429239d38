from __future__ import annotations

from typing import Any

from ..domain import ConfigStore


class ConfigProvider:
    """Configuration-backed value source. Values are returned exactly as stored."""

    def __init__(self, repository: ConfigStore) -> None:
        self._repository = repository

    def get(self, key: str) -> Any:
        return self._repository.get(key)
