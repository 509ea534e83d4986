"""Tests for the user store"""

import asyncio
from datetime import datetime, timezone

import pytest
import pytest_asyncio
from sqlalchemy.exc import IntegrityError
from sqlalchemy.pool import NullPool

from locations_api.models import Location
from locations_api.repositories.user_store import DuplicateUsernameError, UserStore
from locations_api.utils.database import build_engine, build_sessionmaker, dispose_db, init_db


@pytest_asyncio.fixture
async def session_factory(tmp_path):
    """Create a test database and return its session factory"""

    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'store.db'}", poolclass=NullPool)
    await init_db(engine)

    yield build_sessionmaker(engine)

    await dispose_db(engine)


@pytest_asyncio.fixture
async def store(session_factory):
    async with session_factory() as db:
        yield UserStore(db)


@pytest.mark.asyncio
async def test_create_and_find(store):
    """Test creating a user and looking it up"""

    user = await store.create("alice", "hash")

    assert user.id
    assert user.locations == []
    assert user.metric is False

    found = await store.find_by_id(user.id)
    assert found.username == "alice"
    assert (await store.find_by_username("alice")).id == user.id
    assert await store.count_by_username("alice") == 1
    assert await store.count_by_username("bob") == 0


@pytest.mark.asyncio
async def test_unique_constraint(session_factory):
    """Test the database rejects a duplicate username"""

    async with session_factory() as db:
        await UserStore(db).create("alice", "hash")

    async with session_factory() as db:
        with pytest.raises(DuplicateUsernameError):
            await UserStore(db).create("alice", "other-hash")


@pytest.mark.asyncio
async def test_find_missing(store):
    """Test lookups for unknown ids"""

    assert await store.find_by_id("missing") is None
    assert await store.find_by_username("missing") is None


@pytest.mark.asyncio
async def test_push_and_pull_location(store):
    """Test targeted array updates"""

    user = await store.create("alice", "hash")

    updated = await store.push_location(user.id, "Paris")
    updated = await store.push_location(user.id, "Rome")
    assert [loc.name for loc in updated.locations] == ["Paris", "Rome"]

    paris = updated.locations[0]
    updated = await store.pull_location(user.id, paris.id)
    assert [loc.name for loc in updated.locations] == ["Rome"]

    again = await store.pull_location(user.id, paris.id)
    assert [loc.name for loc in again.locations] == ["Rome"]


@pytest.mark.asyncio
async def test_pull_only_touches_own_locations(session_factory):
    """Test a location id belonging to another user is left alone"""

    async with session_factory() as db:
        store = UserStore(db)
        alice = await store.create("alice", "hash")
        bob = await store.create("bob", "hash")
        alice = await store.push_location(alice.id, "Paris")

        bob = await store.pull_location(bob.id, alice.locations[0].id)
        alice = await store.find_by_id(alice.id)

    assert bob.locations == []
    assert [loc.name for loc in alice.locations] == ["Paris"]


@pytest.mark.asyncio
async def test_mutations_on_missing_user(store):
    """Test targeted updates report an unknown id as None"""

    assert await store.push_location("missing", "Paris") is None
    assert await store.pull_location("missing", "loc") is None
    assert await store.set_metric("missing", True) is None


@pytest.mark.asyncio
async def test_set_metric(store):
    """Test the scalar update"""

    user = await store.create("alice", "hash")
    await store.push_location(user.id, "Paris")

    updated = await store.set_metric(user.id, True)

    assert updated.metric is True
    assert [loc.name for loc in updated.locations] == ["Paris"]


@pytest.mark.asyncio
async def test_operations_are_bounded(session_factory):
    """Test a slow store call surfaces as a timeout"""

    async with session_factory() as db:
        store = UserStore(db, timeout=0.01)
        with pytest.raises(asyncio.TimeoutError):
            await store._bounded(asyncio.sleep(1))


@pytest.mark.asyncio
async def test_other_integrity_errors_propagate(store):
    """Test only the username constraint is reported as a duplicate"""

    with pytest.raises(IntegrityError):
        await store.create("alice", None)


@pytest.mark.asyncio
async def test_equal_positions_ordered_by_creation(session_factory):
    """Test locations sharing a position fall back to creation time"""

    async with session_factory() as db:
        store = UserStore(db)
        user = await store.create("alice", "hash")
        db.add_all([
            Location(
                id="0" * 32, user_id=user.id, name="Second", position=0,
                created_at=datetime(2024, 1, 2, tzinfo=timezone.utc)
            ),
            Location(
                id="f" * 32, user_id=user.id, name="First", position=0,
                created_at=datetime(2024, 1, 1, tzinfo=timezone.utc)
            ),
        ])
        await db.commit()

        found = await store.find_by_id(user.id)

    assert [loc.name for loc in found.locations] == ["First", "Second"]
