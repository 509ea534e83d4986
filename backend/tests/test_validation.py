"""Tests for registration field validation"""

import pytest

from locations_api.services.validation import FailureKind, validate_registration


def test_valid_payload():
    """Test a payload that passes every rule"""

    assert validate_registration({"username": "bob", "password": "secret1"}) is None


@pytest.mark.parametrize("payload,field", [
    ({"password": "secret1"}, "username"),
    ({"username": "bob"}, "password"),
    ({}, "username"),
])
def test_missing_field(payload, field):
    """Test missing fields are reported by name"""

    failure = validate_registration(payload)

    assert failure.kind is FailureKind.MISSING_FIELD
    assert failure.field == field
    assert failure.message == "Missing field"


def test_presence_checked_before_type():
    """Test a wrong-typed field does not mask a missing one"""

    failure = validate_registration({"username": 42})

    assert failure.kind is FailureKind.MISSING_FIELD
    assert failure.field == "password"


def test_non_object_payload_is_missing_username():
    """Test a body that is not a JSON object"""

    failure = validate_registration(["bob", "secret1"])

    assert failure.kind is FailureKind.MISSING_FIELD
    assert failure.field == "username"


@pytest.mark.parametrize("payload,field", [
    ({"username": 42, "password": "secret1"}, "username"),
    ({"username": "bob", "password": None}, "password"),
    ({"username": ["bob"], "password": 1234}, "username"),
])
def test_invalid_type(payload, field):
    """Test non-string fields"""

    failure = validate_registration(payload)

    assert failure.kind is FailureKind.INVALID_TYPE
    assert failure.field == field
    assert failure.message == "Incorrect field type: expected string"


@pytest.mark.parametrize("payload,field", [
    ({"username": " bob", "password": "secret1"}, "username"),
    ({"username": "bob", "password": "secret1 "}, "password"),
    ({"username": "\tbob\n", "password": " x"}, "username"),
    ({"username": "   ", "password": "secret1"}, "username"),
])
def test_untrimmed_value(payload, field):
    """Test boundary whitespace is rejected, not trimmed"""

    failure = validate_registration(payload)

    assert failure.kind is FailureKind.UNTRIMMED_VALUE
    assert failure.field == field
    assert failure.message == "Cannot start or end with whitespace"


def test_untrimmed_checked_before_length():
    """Test whitespace is reported even when the value is also too short"""

    failure = validate_registration({"username": "bob", "password": " ab"})

    assert failure.kind is FailureKind.UNTRIMMED_VALUE


def test_empty_username_too_short():
    """Test username minimum length"""

    failure = validate_registration({"username": "", "password": "secret1"})

    assert failure.kind is FailureKind.TOO_SHORT
    assert failure.field == "username"
    assert failure.bound == 1
    assert failure.message == "Must be at least 1 characters long"


@pytest.mark.parametrize("password", ["", "a", "ab", "abc"])
def test_short_password(password):
    """Test password minimum length"""

    failure = validate_registration({"username": "bob", "password": password})

    assert failure.kind is FailureKind.TOO_SHORT
    assert failure.field == "password"
    assert failure.bound == 4
    assert failure.message == "Must be at least 4 characters long"


def test_password_length_bounds_inclusive():
    """Test 4 and 72 characters are accepted"""

    assert validate_registration({"username": "bob", "password": "abcd"}) is None
    assert validate_registration({"username": "bob", "password": "x" * 72}) is None


def test_long_password():
    """Test password maximum length"""

    failure = validate_registration({"username": "bob", "password": "x" * 73})

    assert failure.kind is FailureKind.TOO_LONG
    assert failure.field == "password"
    assert failure.bound == 72
    assert failure.message == "Must be at most 72 characters long"


def test_multibyte_password_over_byte_limit():
    """Test the password limit also applies to its UTF-8 length"""

    password = "\u00e4" * 40  # 40 characters, 80 bytes

    failure = validate_registration({"username": "bob", "password": password})

    assert failure.kind is FailureKind.TOO_LONG
    assert failure.field == "password"
    assert failure.bound == 72


def test_multibyte_password_within_byte_limit():
    """Test multi-byte passwords up to 72 bytes are accepted"""

    assert validate_registration({"username": "bob", "password": "\u00e4" * 36}) is None


def test_too_short_reported_before_too_long():
    """Test the tie-break between a short username and a long password"""

    failure = validate_registration({"username": "", "password": "x" * 100})

    assert failure.kind is FailureKind.TOO_SHORT
    assert failure.field == "username"


def test_failure_converts_to_validation_error():
    """Test the error carries the client-facing body"""

    error = validate_registration({"username": "bob"}).to_error()

    assert error.to_dict() == {
        "code": 422,
        "reason": "ValidationError",
        "message": "Missing field",
        "location": "password",
    }
