"""User registration workflow"""

from typing import Any

from starlette.concurrency import run_in_threadpool

from ..errors import InternalError, ValidationError
from ..models import User
from ..repositories.user_store import DuplicateUsernameError, UserStore
from ..utils.auth import get_password_hash
from ..utils.logging import get_logger
from ..utils.metrics import record_registration
from .validation import validate_registration

logger = get_logger(__name__)

USERNAME_TAKEN = "Username already taken"


async def register_user(store: UserStore, payload: Any) -> User:
    """
    Register a new user

    Validate -> check uniqueness -> hash password -> create. Validation
    failures never touch the store. The count query is only the fast path
    for a friendly error; the unique constraint on users.username is what
    actually prevents duplicates when two registrations race.

    Args:
        store: User store bound to the request's session
        payload: Decoded JSON request body

    Returns:
        The created user

    Raises:
        ValidationError: Invalid payload or username already taken
        InternalError: Anything unexpected (store or hashing failure)
    """
    failure = validate_registration(payload)
    if failure:
        record_registration("invalid")
        raise failure.to_error()

    # Values are already known to be trimmed at this point
    username = payload["username"]
    password = payload["password"]

    try:
        if await store.count_by_username(username) > 0:
            raise ValidationError(USERNAME_TAKEN, location="username")

        password_hash = await run_in_threadpool(get_password_hash, password)

        try:
            user = await store.create(username, password_hash)
        except DuplicateUsernameError:
            raise ValidationError(USERNAME_TAKEN, location="username")
    except ValidationError:
        record_registration("duplicate")
        raise
    except Exception:
        logger.exception("Registration failed", username=username)
        record_registration("error")
        raise InternalError()

    logger.info("User registered", user_id=user.id)
    record_registration("created")
    return user
