"""Request-scoped dependencies for FastAPI"""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from .auth import decode_token, verify_token_type
from .database import get_db
from ..errors import AuthenticationError
from ..models import User
from ..repositories.user_store import UserStore

security = HTTPBearer(auto_error=False)


async def get_user_store(db: AsyncSession = Depends(get_db)) -> UserStore:
    """User store bound to the request's database session"""
    return UserStore(db)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    store: UserStore = Depends(get_user_store)
) -> User:
    """
    Get the current authenticated user from JWT token

    Args:
        credentials: HTTP Bearer token
        store: User store

    Returns:
        Current user object

    Raises:
        AuthenticationError: If authentication fails
    """
    if credentials is None:
        raise AuthenticationError()

    payload = decode_token(credentials.credentials)
    verify_token_type(payload, "access")

    user_id: Optional[str] = payload.get("sub")
    if user_id is None:
        raise AuthenticationError("Could not validate credentials")

    user = await store.find_by_id(user_id)
    if user is None:
        raise AuthenticationError("User not found")

    return user
