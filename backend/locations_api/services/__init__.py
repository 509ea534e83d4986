"""Business operations over the user store"""

from .validation import FailureKind, FieldValidationFailure, validate_registration
from .registration import register_user
from . import locations

__all__ = [
    "FailureKind",
    "FieldValidationFailure",
    "validate_registration",
    "register_user",
    "locations",
]
