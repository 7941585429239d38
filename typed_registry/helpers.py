from __future__ import annotations

from .domain import ConfigStore
from .providers import ConfigProvider, EnvProvider, EnvStringProvider
from .registry import TypedRegistry


def typed_env() -> TypedRegistry:
    """Typed access to environment variables, numeric strings cast to int/float."""
    return TypedRegistry(EnvProvider())


def typed_env_string() -> TypedRegistry:
    """Typed access to environment variables, every scalar kept as a string."""
    return TypedRegistry(EnvStringProvider())


def typed_config(repository: ConfigStore) -> TypedRegistry:
    """Strict typed access to a configuration tree."""
    return TypedRegistry(ConfigProvider(repository))
