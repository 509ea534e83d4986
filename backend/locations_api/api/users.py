"""User API endpoints"""

from typing import Any, List

from fastapi import APIRouter, Body, Depends, status

from ..repositories.user_store import UserStore
from ..schemas.user import LocationCreate, LocationDelete, LocationResponse, MetricUpdate, UserResponse
from ..services import locations
from ..services.registration import register_user
from ..utils.dependencies import get_user_store

router = APIRouter()


@router.post("/", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(payload: Any = Body(None), store: UserStore = Depends(get_user_store)):
    """
    Register a new user

    The raw body is handed to the registration workflow so that every
    field error comes back in the ValidationError shape.
    """
    return await register_user(store, payload)


@router.get("/locations/{user_id}", response_model=List[LocationResponse])
async def get_user_locations(user_id: str, store: UserStore = Depends(get_user_store)):
    """Get a user's saved locations"""
    return await locations.list_locations(store, user_id)


@router.post("/newlocation/{user_id}", response_model=UserResponse)
async def add_location(user_id: str, location: LocationCreate, store: UserStore = Depends(get_user_store)):
    """Append a location to a user's list"""
    return await locations.add_location(store, user_id, location.name)


@router.delete("/deletelocation/{user_id}", response_model=UserResponse)
async def delete_location(user_id: str, location: LocationDelete, store: UserStore = Depends(get_user_store)):
    """Remove a location from a user's list"""
    return await locations.remove_location(store, user_id, location.location_id)


@router.get("/metric/{user_id}", response_model=bool)
async def get_metric(user_id: str, store: UserStore = Depends(get_user_store)):
    """Get a user's metric/imperial preference"""
    return await locations.get_metric(store, user_id)


@router.put("/metric/{user_id}", response_model=UserResponse)
async def set_metric(user_id: str, update: MetricUpdate, store: UserStore = Depends(get_user_store)):
    """Set a user's metric/imperial preference"""
    return await locations.set_metric(store, user_id, update.metric)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: str, store: UserStore = Depends(get_user_store)):
    """Get a specific user"""
    return await locations.get_user(store, user_id)
