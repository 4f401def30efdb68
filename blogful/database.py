import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.orm import DeclarativeBase

from blogful.config import settings
from blogful.exceptions import StoreFailure

logger = logging.getLogger(__name__)

# Module-level engine variable allows tests to override with a test engine.
engine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.SQL_ECHO,
    pool_pre_ping=True,
)

async_session = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    pass


async def get_db():
    async with async_session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def flush_or_fail(db: AsyncSession) -> None:
    """
    Flush pending changes, translating any driver / integrity error into
    ``StoreFailure`` so the HTTP layer answers with a generic 500.
    """
    try:
        await db.flush()
    except SQLAlchemyError as exc:
        logger.exception("Store flush failed")
        raise StoreFailure() from exc
