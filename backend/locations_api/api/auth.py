"""Authentication API endpoints"""

from fastapi import APIRouter, Depends
from starlette.concurrency import run_in_threadpool

from ..errors import AuthenticationError
from ..repositories.user_store import UserStore
from ..schemas.auth import LoginRequest, RefreshTokenRequest, TokenResponse
from ..schemas.user import UserResponse
from ..models import User
from ..utils.auth import (
    create_access_token,
    create_refresh_token,
    decode_token,
    verify_password,
    verify_token_type,
)
from ..utils.dependencies import get_current_user, get_user_store

router = APIRouter()


def _issue_tokens(user_id: str) -> TokenResponse:
    return TokenResponse(
        auth_token=create_access_token(data={"sub": user_id}),
        refresh_token=create_refresh_token(data={"sub": user_id})
    )


@router.post("/login", response_model=TokenResponse)
async def login(login_data: LoginRequest, store: UserStore = Depends(get_user_store)):
    """
    Login and get access token

    Authenticates user and returns JWT tokens.
    """
    user = await store.find_by_username(login_data.username)
    if not user:
        raise AuthenticationError("Incorrect username or password")

    if not await run_in_threadpool(verify_password, login_data.password, user.password):
        raise AuthenticationError("Incorrect username or password")

    return _issue_tokens(user.id)


@router.post("/refresh", response_model=TokenResponse)
async def refresh_token(refresh_data: RefreshTokenRequest, store: UserStore = Depends(get_user_store)):
    """
    Refresh access token using refresh token

    Returns a new token pair for a valid refresh token whose user still exists.
    """
    payload = decode_token(refresh_data.refresh_token)
    verify_token_type(payload, "refresh")

    user_id = payload.get("sub")
    if user_id is None or await store.find_by_id(user_id) is None:
        raise AuthenticationError("Invalid refresh token")

    return _issue_tokens(user_id)


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(current_user: User = Depends(get_current_user)):
    """Returns the authenticated user's profile."""
    return current_user
