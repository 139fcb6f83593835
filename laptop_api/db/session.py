from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from laptop_api.core.config import Settings


def build_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine for the configured store.

    ``NullPool`` makes every session open a fresh connection and close it on
    release; there is no connection reuse between requests.
    """
    return create_async_engine(settings.sqlalchemy_database_uri, echo=False, poolclass=NullPool)


def build_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine,
        expire_on_commit=False,
        class_=AsyncSession,
    )
