"""
Database connection management.

Provides the async SQLAlchemy engine and session factory used by the
document store adapter. The engine is created once at startup and owned
by the application lifespan; nothing here is cached at module level.

Dependencies: sqlalchemy, backend.configs
System role: Database connection lifecycle management
"""

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from backend.configs.database import DatabaseSettings


def get_async_engine(db_config: DatabaseSettings) -> AsyncEngine:
    """
    Create async SQLAlchemy engine.

    PostgreSQL engines get a sized connection pool with pre-ping so stale
    connections are detected before use. SQLite engines share a single
    connection so in-memory databases survive across sessions.

    Args:
        db_config: Database settings

    Returns:
        AsyncEngine: Configured async SQLAlchemy engine

    Raises:
        ArgumentError: If database URL is invalid or engine creation fails

    Usage:
        engine = get_async_engine(get_settings().database)
        async with engine.connect() as conn:
            result = await conn.execute(text("SELECT 1"))
    """
    url = db_config.async_database_url

    if db_config.is_sqlite:
        return create_async_engine(
            url,
            echo=db_config.echo_sql,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    return create_async_engine(
        url,
        echo=db_config.echo_sql,
        pool_size=db_config.pool_size,
        max_overflow=db_config.max_overflow,
        pool_timeout=db_config.pool_timeout,
        pool_pre_ping=True,
    )


def get_async_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    """
    Create async session factory bound to an engine.

    autoflush=False and expire_on_commit=False keep loaded rows readable
    after the transaction that fetched them commits.

    Args:
        engine: Async engine to bind

    Returns:
        async_sessionmaker: Async session factory

    Usage:
        SessionFactory = get_async_session_factory(engine)
        async with SessionFactory() as session, session.begin():
            session.add(obj)
    """
    return async_sessionmaker(
        bind=engine,
        autoflush=False,
        expire_on_commit=False,
    )
