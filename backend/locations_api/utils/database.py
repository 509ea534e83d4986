"""Database connection and session management"""

from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from ..config import settings
from ..models.base import Base


def build_engine(url: str, **kwargs) -> AsyncEngine:
    """
    Create an async engine for the given URL

    SQLite URLs get the connect args aiosqlite needs; every other driver
    gets a pre-pinged pool.
    """
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    else:
        kwargs.setdefault("pool_pre_ping", True)
        kwargs.setdefault("pool_size", 10)
        kwargs.setdefault("max_overflow", 20)
    return create_async_engine(url, echo=settings.DATABASE_ECHO, **kwargs)


def build_sessionmaker(bind: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(bind=bind, autoflush=False, expire_on_commit=False)


# Create database engine
engine = build_engine(settings.DATABASE_URL)

# Create session factory
SessionLocal = build_sessionmaker(engine)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency for FastAPI

    Yields a database session and ensures it's closed after use.
    """

    async with SessionLocal() as db:
        yield db


async def init_db(bind: AsyncEngine = engine) -> None:
    """
    Initialize database tables

    Creates all tables defined in models.
    """

    # Import all models to ensure they're registered
    from ..models import User, Location  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def check_db(bind: AsyncEngine = engine) -> bool:
    """Run a trivial query against the database"""

    async with bind.connect() as conn:
        await conn.execute(text("SELECT 1"))
    return True


async def dispose_db(bind: AsyncEngine = engine) -> None:
    """Close every pooled connection"""
    await bind.dispose()
