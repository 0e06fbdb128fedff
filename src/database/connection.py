import logging

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from src.database.models import Base
from src.utils.settings.database import DatabaseSettings

logger = logging.getLogger(__name__)

_settings = DatabaseSettings()

async_engine = create_async_engine(
    _settings.DATABASE_URL_ASYNC, echo=_settings.DATABASE_ECHO
)
AsyncSessionLocal = async_sessionmaker(
    bind=async_engine, class_=AsyncSession, expire_on_commit=False
)


async def init_models(engine: AsyncEngine = async_engine) -> None:
    """Create the identifications and feedback tables if they do not exist."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ready")

