"""Error taxonomy shared by services and the HTTP layer"""

from typing import Any, Dict, Optional


class ApiError(Exception):
    """
    Base class for errors that map onto an HTTP outcome

    Attributes:
        code: HTTP status code
        reason: Error category shown to clients
        message: Human readable message
        location: Name of the offending field, if any
    """

    code: int = 500
    reason: str = "InternalError"

    def __init__(self, message: str = "", location: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.location = location

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {
            "code": self.code,
            "reason": self.reason,
            "message": self.message,
        }
        if self.location is not None:
            body["location"] = self.location
        return body


class ValidationError(ApiError):
    """Client-caused error, safe to show to the end user verbatim"""

    code = 422
    reason = "ValidationError"

    def __init__(self, message: str, location: str):
        super().__init__(message, location)


class NotFoundError(ApiError):
    """Lookup by id yielded no record"""

    code = 404
    reason = "NotFound"

    def __init__(self, message: str = "Not Found"):
        super().__init__(message)


class AuthenticationError(ApiError):
    """Missing, invalid or expired credentials"""

    code = 401
    reason = "AuthenticationError"

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class InternalError(ApiError):
    """Anything unexpected. The message never carries internal detail."""

    code = 500
    reason = "InternalError"

    def __init__(self):
        super().__init__("Internal server error")

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": self.message}
