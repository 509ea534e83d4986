"""Authentication schemas"""

from pydantic import BaseModel, ConfigDict, Field

from ..config import settings


class LoginRequest(BaseModel):
    """Login request schema"""
    username: str
    password: str


class TokenResponse(BaseModel):
    """Token response schema"""
    auth_token: str = Field(..., alias="authToken")
    refresh_token: str = Field(..., alias="refreshToken")
    token_type: str = Field("bearer", alias="tokenType")
    expires_in: int = Field(settings.JWT_EXPIRY_MINUTES * 60, alias="expiresIn")

    model_config = ConfigDict(populate_by_name=True)


class RefreshTokenRequest(BaseModel):
    """Refresh token request schema"""
    refresh_token: str = Field(..., alias="refreshToken")

    model_config = ConfigDict(populate_by_name=True)
