from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import NullPool

import storefront.config as config
from storefront.utils.logger import get_current_logger


class DatabaseConnection:
    """
    Async connection manager using SQLAlchemy.

    Every session checks out a fresh connection which is closed again when the
    session ends; connections are never pooled or shared between requests.
    """

    def __init__(self, url: str):
        """
        Initialize the async engine.

        Args:
            url: SQLAlchemy database URL (sqlite+aiosqlite or postgresql+asyncpg)
        """
        self.url = url
        self._build(url)

    def _build(self, url: str) -> None:
        logger = get_current_logger()
        self.engine = create_async_engine(
            url,
            poolclass=NullPool,
            echo=config.DATABASE_ECHO,
        )
        self.AsyncSessionLocal = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False
        )
        logger.info(f"Database engine initialized: {self.engine.url.render_as_string(hide_password=True)}")

    def get_session(self) -> AsyncSession:
        """
        Get a new async database session.

        Returns:
            SQLAlchemy AsyncSession object
        """
        return self.AsyncSessionLocal()

    async def reconfigure(self, url: str) -> None:
        """Dispose the current engine and point the connection at ``url``."""
        await self.engine.dispose()
        self.url = url
        self._build(url)

    async def create_all(self) -> None:
        """Create every table registered on the declarative base."""
        from storefront.data.models import Base
        import storefront.data.models.db_entity  # noqa: F401  registers the tables

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def close(self):
        """Close database engine and cleanup resources."""
        logger = get_current_logger()
        await self.engine.dispose()
        logger.info("Database engine disposed")


db_connection = DatabaseConnection(config.DATABASE_URL)
