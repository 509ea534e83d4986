"""Database models"""

from .base import Base
from .user import User
from .location import Location

__all__ = [
    "Base",
    "User",
    "Location",
]
