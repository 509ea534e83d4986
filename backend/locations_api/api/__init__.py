"""API routes"""

from fastapi import APIRouter
from .users import router as users_router
from .auth import router as auth_router
from .protected import router as protected_router

api_router = APIRouter()

api_router.include_router(users_router, prefix="/users", tags=["users"])
api_router.include_router(auth_router, prefix="/auth", tags=["auth"])
api_router.include_router(protected_router, prefix="/protected", tags=["protected"])
