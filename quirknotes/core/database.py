"""
Database Configuration.

SQLAlchemy async engine and session management. The engine is created
once in the application lifespan and disposed at shutdown; request
handlers receive a session through the get_db_session dependency.
"""

from collections.abc import AsyncGenerator

from fastapi import Request
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from quirknotes.core.config_schema import DatabaseSchema
from quirknotes.core.logging import get_logger
from quirknotes.models.base import Base

logger = get_logger(__name__)


def create_engine(url: str, db_config: DatabaseSchema | None = None) -> AsyncEngine:
    """
    Create the async SQLAlchemy engine.

    Pool sizing from database.yaml applies to server databases only;
    SQLite uses the dialect's default pool.
    """
    parsed = make_url(url)
    options: dict = {}
    if db_config is not None:
        options["echo"] = db_config.echo
        if parsed.get_backend_name() != "sqlite":
            options.update(
                pool_size=db_config.pool_size,
                max_overflow=db_config.max_overflow,
                pool_timeout=db_config.pool_timeout,
                pool_recycle=db_config.pool_recycle,
                pool_pre_ping=True,
            )

    engine = create_async_engine(url, **options)
    logger.debug(
        "Database engine created",
        extra={"backend": parsed.get_backend_name(), "host": parsed.host},
    )
    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the session factory bound to engine."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def create_tables(engine: AsyncEngine) -> None:
    """Create all tables and indexes that do not exist yet."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ensured")


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency that provides a database session.

    Commits when the handler returns, rolls back when it raises.

    Usage in endpoints:
        @router.get("/items")
        async def get_items(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    session_factory: async_sessionmaker[AsyncSession] = request.app.state.session_factory
    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
