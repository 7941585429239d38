from .config import ConfigProvider
from .env import EnvProvider, EnvStringProvider

__all__ = [
    "EnvProvider",
    "EnvStringProvider",
    "ConfigProvider",
]
