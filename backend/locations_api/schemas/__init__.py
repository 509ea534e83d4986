"""Pydantic schemas for request/response validation"""

from .user import UserResponse, LocationResponse, LocationCreate, LocationDelete, MetricUpdate
from .auth import LoginRequest, TokenResponse, RefreshTokenRequest

__all__ = [
    "UserResponse",
    "LocationResponse",
    "LocationCreate",
    "LocationDelete",
    "MetricUpdate",
    "LoginRequest",
    "TokenResponse",
    "RefreshTokenRequest",
]
