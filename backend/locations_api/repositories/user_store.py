"""
Persistence for user records.

Every mutation is a single targeted statement (INSERT or DELETE of one
location row, UPDATE of one column) so concurrent edits to other fields of
the same user are never clobbered. Lookups return ``None`` when the id does
not resolve; every other failure propagates as an exception.
"""

import asyncio
from typing import Awaitable, Optional, TypeVar

from sqlalchemy import delete, func, insert, literal, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import settings
from ..models import Location, User
from ..models.base import new_id
from ..utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

users_table = User.__table__
locations_table = Location.__table__


def _is_username_conflict(exc: IntegrityError) -> bool:
    """True when the unique constraint on users.username fired"""
    # SQLite: "UNIQUE constraint failed: users.username"
    # PostgreSQL: duplicate key ... "ix_users_username" (username)=...
    detail = str(exc.orig).lower()
    return "username" in detail and ("unique" in detail or "duplicate" in detail)


class DuplicateUsernameError(Exception):
    """The unique constraint on users.username rejected an insert"""

    def __init__(self, username: str):
        super().__init__(f"username {username!r} already exists")
        self.username = username


class UserStore:
    """Async repository over the users and locations tables"""

    def __init__(self, db: AsyncSession, timeout: Optional[float] = None):
        self.db = db
        self.timeout = timeout if timeout is not None else settings.STORE_TIMEOUT_SECONDS

    async def _bounded(self, operation: Awaitable[T]) -> T:
        return await asyncio.wait_for(operation, timeout=self.timeout)

    # Lookups

    async def find_by_id(self, user_id: str) -> Optional[User]:
        return await self._bounded(self._load(user_id))

    async def find_by_username(self, username: str) -> Optional[User]:
        result = await self._bounded(
            self.db.execute(select(User).where(User.username == username))
        )
        return result.scalars().first()

    async def count_by_username(self, username: str) -> int:
        result = await self._bounded(
            self.db.execute(select(func.count(User.id)).where(User.username == username))
        )
        return result.scalar_one()

    # Writes

    async def create(self, username: str, password_hash: str) -> User:
        """
        Persist a new user

        Raises:
            DuplicateUsernameError: If the username is already stored
        """
        return await self._bounded(self._create(username, password_hash))

    async def push_location(self, user_id: str, name: str) -> Optional[User]:
        """Append a location to the end of the user's list"""
        return await self._bounded(self._push_location(user_id, name))

    async def pull_location(self, user_id: str, location_id: str) -> Optional[User]:
        """Remove a location; removing an absent location is a no-op"""
        return await self._bounded(self._pull_location(user_id, location_id))

    async def set_metric(self, user_id: str, metric: bool) -> Optional[User]:
        return await self._bounded(self._set_metric(user_id, metric))

    # Statement helpers

    async def _load(self, user_id: str) -> Optional[User]:
        result = await self.db.execute(
            select(User)
            .where(User.id == user_id)
            .execution_options(populate_existing=True)
        )
        return result.scalars().first()

    async def _create(self, username: str, password_hash: str) -> User:
        user = User(id=new_id(), username=username, password=password_hash, metric=False, locations=[])
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError as exc:
            await self.db.rollback()
            if not _is_username_conflict(exc):
                raise
            raise DuplicateUsernameError(username)
        return user

    async def _push_location(self, user_id: str, name: str) -> Optional[User]:
        next_position = (
            select(func.coalesce(func.max(locations_table.c.position), -1) + 1)
            .where(locations_table.c.user_id == user_id)
            .scalar_subquery()
        )
        # INSERT ... SELECT FROM users keeps the existence check and the
        # append in one statement.
        stmt = insert(locations_table).from_select(
            ["id", "user_id", "name", "position"],
            select(
                literal(new_id()),
                users_table.c.id,
                literal(name),
                next_position
            ).where(users_table.c.id == user_id)
        )
        result = await self.db.execute(stmt)
        await self.db.commit()
        if result.rowcount == 0:
            return None
        logger.debug("Location appended", user_id=user_id)
        return await self._load(user_id)

    async def _pull_location(self, user_id: str, location_id: str) -> Optional[User]:
        result = await self.db.execute(
            delete(locations_table).where(
                locations_table.c.id == location_id,
                locations_table.c.user_id == user_id
            )
        )
        await self.db.commit()
        logger.debug("Location pulled", user_id=user_id, removed=result.rowcount)
        return await self._load(user_id)

    async def _set_metric(self, user_id: str, metric: bool) -> Optional[User]:
        result = await self.db.execute(
            update(users_table).where(users_table.c.id == user_id).values(metric=metric)
        )
        await self.db.commit()
        if result.rowcount == 0:
            return None
        return await self._load(user_id)
