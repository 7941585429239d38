import pytest

from typed_registry import EnvStringProvider, TypedRegistry

VAR = "TYPED_REGISTRY_TEST_VAR"


@pytest.fixture
def provider():
    return EnvStringProvider()


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("123456", "123456"),
        ("3.14", "3.14"),
        ("abc123", "abc123"),
        ("042", "042"),
        ("", ""),
        ("true", "1"),
        ("(true)", "1"),
        ("false", ""),
        ("empty", ""),
    ],
)
def test_scalars_become_strings(monkeypatch, provider, raw, expected):
    monkeypatch.setenv(VAR, raw)
    assert provider.get(VAR) == expected


def test_null_stays_null(monkeypatch, provider):
    monkeypatch.setenv(VAR, "null")
    assert provider.get(VAR) is None
    assert provider.get("NONEXISTENT_KEY") is None


def test_registry_reads_numeric_secret_as_string(monkeypatch, provider):
    monkeypatch.setenv("API_PASSWORD", "123456")
    registry = TypedRegistry(provider)

    assert registry.get_string("API_PASSWORD") == "123456"
    assert registry.get_string_or("API_PASSWORD", "") == "123456"
    assert registry.get_int_or("API_PASSWORD", 0) == 0
