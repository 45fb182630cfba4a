"""
Async database engine, session factory and declarative base.
"""
from typing import AsyncGenerator

from loguru import logger
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from evoting.core.config import settings


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""


engine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DATABASE_ECHO,
)

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


def enable_sqlite_foreign_keys(async_engine) -> None:
    """SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection."""
    if async_engine.dialect.name != "sqlite":
        return

    @event.listens_for(async_engine.sync_engine, "connect")
    def _set_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


enable_sqlite_foreign_keys(engine)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield one session per request."""
    async with async_session_maker() as session:
        yield session


async def init_db() -> None:
    """Create tables and seed the default admin."""
    # Registers every model on Base.metadata
    import evoting.models  # noqa: F401
    from evoting.services.auth_service import AuthService

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ready ({})", engine.url.render_as_string(hide_password=True))

    async with async_session_maker() as session:
        await AuthService(session).ensure_default_admin()


async def close_db() -> None:
    """Dispose of the engine's connection pool."""
    await engine.dispose()
    logger.debug("Database engine disposed")
