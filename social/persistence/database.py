"""Async engine and session factory for PostgreSQL."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from social.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the pooled engine shared by every request.

    Concurrency is bounded here: at most pool_size + max_overflow requests
    hold a connection, the rest wait up to pool_timeout seconds and then fail
    with sqlalchemy's TimeoutError (answered as 503).
    """
    db = settings.database
    return create_async_engine(
        db.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=db.pool_size,
        max_overflow=db.max_overflow,
        pool_timeout=db.pool_timeout,
        # Shows up in pg_stat_activity
        connect_args={"server_settings": {"application_name": "social-comments"}},
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Sessions keep loaded rows usable after commit and flush only on demand."""
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
