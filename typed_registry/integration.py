"""
FastAPI integration: publishes typed accessors on app.state and exposes them
as dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from .providers import ConfigProvider, EnvProvider, EnvStringProvider
from .registry import TypedRegistry
from .repository import ConfigRepository
from .utils import get_logger

CONFIG_BINDING = "typed-registry.config"
ENV_BINDING = "typed-registry.env"
ENV_STRING_BINDING = "typed-registry.env-string"

log = get_logger("typed_registry.integration")


@dataclass(frozen=True)
class RegistryBindings:
    """Accessors published under stable names."""
    config: TypedRegistry
    env: TypedRegistry
    env_string: TypedRegistry

    def resolve(self, name: str) -> TypedRegistry:
        bindings = {
            CONFIG_BINDING: self.config,
            ENV_BINDING: self.env,
            ENV_STRING_BINDING: self.env_string,
        }
        if name not in bindings:
            raise KeyError(f"unknown binding: {name}")
        return bindings[name]

    @staticmethod
    def provides() -> list[str]:
        return [CONFIG_BINDING, ENV_BINDING, ENV_STRING_BINDING]


def install_typed_registry(app: FastAPI, repository: ConfigRepository | None = None) -> RegistryBindings:
    """Builds the accessors once and stores them on app.state.typed_registry."""
    repo = repository if repository is not None else ConfigRepository()
    bindings = RegistryBindings(
        config=TypedRegistry(ConfigProvider(repo)),
        env=TypedRegistry(EnvProvider()),
        env_string=TypedRegistry(EnvStringProvider()),
    )
    app.state.typed_registry = bindings
    log.info("typed registry installed", extra={"bindings": bindings.provides()})
    return bindings


def _bindings(request: Request) -> RegistryBindings:
    bindings = getattr(request.app.state, "typed_registry", None)
    if bindings is None:
        raise RuntimeError("typed registry not installed; call install_typed_registry(app) first")
    return bindings


def get_typed_config(request: Request) -> TypedRegistry:
    return _bindings(request).resolve(CONFIG_BINDING)


def get_typed_env(request: Request) -> TypedRegistry:
    return _bindings(request).resolve(ENV_BINDING)


def get_typed_env_string(request: Request) -> TypedRegistry:
    return _bindings(request).resolve(ENV_STRING_BINDING)


TypedConfig = Annotated[TypedRegistry, Depends(get_typed_config)]
TypedEnv = Annotated[TypedRegistry, Depends(get_typed_env)]
TypedEnvString = Annotated[TypedRegistry, Depends(get_typed_env_string)]
