"""Location and unit preference operations for an identified user"""

from typing import Awaitable, List, Optional

from ..errors import InternalError, NotFoundError
from ..models import Location, User
from ..repositories.user_store import UserStore
from ..utils.logging import get_logger
from ..utils.metrics import record_mutation

logger = get_logger(__name__)


async def _resolve(operation: str, user_id: str, pending: Awaitable[Optional[User]]) -> User:
    """
    Turn a store result into a user or an error

    A ``None`` result means the id did not resolve; any exception from
    the store is logged and reported as an internal error.
    """
    try:
        user = await pending
    except Exception:
        logger.exception("Store operation failed", operation=operation, user_id=user_id)
        record_mutation(operation, "error")
        raise InternalError()

    if user is None:
        record_mutation(operation, "not_found")
        raise NotFoundError()

    record_mutation(operation, "ok")
    return user


async def get_user(store: UserStore, user_id: str) -> User:
    return await _resolve("get_user", user_id, store.find_by_id(user_id))


async def list_locations(store: UserStore, user_id: str) -> List[Location]:
    user = await _resolve("list_locations", user_id, store.find_by_id(user_id))
    return list(user.locations)


async def add_location(store: UserStore, user_id: str, name: str) -> User:
    """Append a location; the store assigns its id"""
    return await _resolve("add_location", user_id, store.push_location(user_id, name))


async def remove_location(store: UserStore, user_id: str, location_id: str) -> User:
    """Remove a location. Removing one that is already gone is a no-op."""
    return await _resolve("remove_location", user_id, store.pull_location(user_id, location_id))


async def get_metric(store: UserStore, user_id: str) -> bool:
    user = await _resolve("get_metric", user_id, store.find_by_id(user_id))
    return bool(user.metric)


async def set_metric(store: UserStore, user_id: str, metric: bool) -> User:
    return await _resolve("set_metric", user_id, store.set_metric(user_id, metric))
