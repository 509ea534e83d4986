"""Endpoints that require a valid bearer token"""

from typing import List

from fastapi import APIRouter, Depends

from ..models import User
from ..repositories.user_store import UserStore
from ..schemas.user import LocationResponse
from ..services import locations
from ..utils.dependencies import get_current_user, get_user_store

router = APIRouter()


@router.get("/{user_id}", response_model=List[LocationResponse])
async def get_protected_locations(
    user_id: str,
    current_user: User = Depends(get_current_user),
    store: UserStore = Depends(get_user_store)
):
    """Get a user's locations for an authenticated caller"""
    return await locations.list_locations(store, user_id)
