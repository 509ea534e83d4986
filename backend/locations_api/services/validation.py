"""Field validation for registration payloads"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from ..errors import ValidationError


class FailureKind(str, Enum):
    """Kinds of validation failure, in the order they are checked"""
    MISSING_FIELD = "MissingField"
    INVALID_TYPE = "InvalidType"
    UNTRIMMED_VALUE = "UntrimmedValue"
    TOO_SHORT = "TooShort"
    TOO_LONG = "TooLong"


REQUIRED_FIELDS = ("username", "password")
STRING_FIELDS = ("username", "password")

# Credentials are rejected rather than silently trimmed, so users know
# exactly what they will have to type at login.
EXPLICITLY_TRIMMED_FIELDS = ("username", "password")

SIZED_FIELDS: Dict[str, Dict[str, int]] = {
    "username": {"min": 1},
    # bcrypt only uses the first 72 bytes; storing more would only look secure
    "password": {"min": 4, "max": 72},
}


def _too_long(value: str, maximum: int) -> bool:
    # Multi-byte characters count against the byte limit too
    return len(value) > maximum or len(value.encode("utf-8")) > maximum


@dataclass(frozen=True)
class FieldValidationFailure:
    """The first rule a payload violated"""

    kind: FailureKind
    field: str
    bound: Optional[int] = None

    @property
    def message(self) -> str:
        if self.kind is FailureKind.MISSING_FIELD:
            return "Missing field"
        if self.kind is FailureKind.INVALID_TYPE:
            return "Incorrect field type: expected string"
        if self.kind is FailureKind.UNTRIMMED_VALUE:
            return "Cannot start or end with whitespace"
        if self.kind is FailureKind.TOO_SHORT:
            return f"Must be at least {self.bound} characters long"
        return f"Must be at most {self.bound} characters long"

    def to_error(self) -> ValidationError:
        return ValidationError(self.message, location=self.field)


def validate_registration(payload: Any) -> Optional[FieldValidationFailure]:
    """
    Check a registration payload

    Rules run in a fixed order and the first violation wins: presence,
    type, boundary whitespace, then length bounds on the trimmed value.
    A too-short field is reported ahead of a too-long one.

    Args:
        payload: Decoded request body

    Returns:
        None when the payload is valid, otherwise the first failure
    """
    if not isinstance(payload, dict):
        return FieldValidationFailure(FailureKind.MISSING_FIELD, REQUIRED_FIELDS[0])

    missing = next((f for f in REQUIRED_FIELDS if f not in payload), None)
    if missing:
        return FieldValidationFailure(FailureKind.MISSING_FIELD, missing)

    non_string = next(
        (f for f in STRING_FIELDS if f in payload and not isinstance(payload[f], str)),
        None
    )
    if non_string:
        return FieldValidationFailure(FailureKind.INVALID_TYPE, non_string)

    untrimmed = next(
        (f for f in EXPLICITLY_TRIMMED_FIELDS if payload[f].strip() != payload[f]),
        None
    )
    if untrimmed:
        return FieldValidationFailure(FailureKind.UNTRIMMED_VALUE, untrimmed)

    too_short = next(
        (
            f for f, bounds in SIZED_FIELDS.items()
            if "min" in bounds and len(payload[f].strip()) < bounds["min"]
        ),
        None
    )
    too_long = next(
        (
            f for f, bounds in SIZED_FIELDS.items()
            if "max" in bounds and _too_long(payload[f].strip(), bounds["max"])
        ),
        None
    )
    if too_short:
        return FieldValidationFailure(FailureKind.TOO_SHORT, too_short, SIZED_FIELDS[too_short]["min"])
    if too_long:
        return FieldValidationFailure(FailureKind.TOO_LONG, too_long, SIZED_FIELDS[too_long]["max"])

    return None
