import pytest

from typed_registry import ConfigRepository


@pytest.fixture
def repository():
    return ConfigRepository({
        "app": {
            "name": "Laravel",
            "debug": True,
            "port": 8080,
            "timeout": 2.5,
        },
        "database": {
            "default": "mysql",
            "connections": {
                "mysql": {
                    "host": "localhost",
                    "port": 3306,
                    "database": "test_db",
                },
            },
        },
        "features": {
            "enabled": ["auth", "api", "admin"],
        },
        "labels": {
            "env": "production",
            "tier": "web",
        },
    })
