from typed_registry.utils import ErrorCode, MissingKeyError, RegistryTypeError, describe


def test_describe_values():
    assert describe(None) == "null"
    assert describe(True) == "true"
    assert describe(False) == "false"
    assert describe("8080") == "'8080'"
    assert describe(8080) == "8080"
    assert describe(2.5) == "2.5"
    assert describe(["a"]) == "list"
    assert describe({"a": 1}) == "dict"


def test_type_error_message_and_fields():
    err = RegistryTypeError("test.port", "int", "8080")
    assert str(err) == "key 'test.port' must be int, got '8080'"
    assert err.key == "test.port"
    assert err.expected == "int"
    assert err.actual == "8080"
    assert err.code is ErrorCode.TYPE_MISMATCH
    assert isinstance(err, TypeError)


def test_missing_key_message_and_fields():
    err = MissingKeyError("APP_PORT", "int")
    assert str(err) == "key 'APP_PORT' is missing, expected int"
    assert err.code is ErrorCode.MISSING_KEY
    assert err.code == "missing_key"
    assert isinstance(err, LookupError)
    assert not isinstance(err, TypeError)
