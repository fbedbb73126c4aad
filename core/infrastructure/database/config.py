"""
Database configuration.

Settings, engine and session factory for the order tables. The engine is
created once by core.bootstrap.start() and disposed at shutdown.
"""
from typing import Optional
import logging

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine


logger = logging.getLogger(__name__)


class DatabaseSettings(BaseSettings):
    """
    Order database settings.

    Loaded from DB_* environment variables or the .env file.
    """

    model_config = SettingsConfigDict(env_file=".env", env_prefix="DB_", extra="ignore")

    database_url: str = "sqlite+aiosqlite:///./shopmesh.db"
    echo_sql: bool = False

    # False makes the order store report no transaction support, so
    # order creation runs in best-effort mode.
    transactions_enabled: bool = True


def create_engine(settings: Optional[DatabaseSettings] = None) -> AsyncEngine:
    """
    Create the async engine.

    Args:
        settings: Database settings (read from the environment if omitted)
    """
    settings = settings or DatabaseSettings()
    engine = create_async_engine(
        settings.database_url,
        echo=settings.echo_sql,
        pool_pre_ping=True,
    )
    logger.info(f"Database engine created: {engine.url}")
    return engine


def get_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    """Session factory bound to `engine`. Loaded objects stay usable after commit."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def init_database(engine: AsyncEngine) -> None:
    """Create the order tables if they do not exist."""
    from core.infrastructure.database.models import Base

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("✅ Database initialized successfully")
