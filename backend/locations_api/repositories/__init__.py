"""Persistence adapters"""

from .user_store import DuplicateUsernameError, UserStore

__all__ = ["DuplicateUsernameError", "UserStore"]
