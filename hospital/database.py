"""
Database engine, session factory and the get_db FastAPI dependency.
"""
import uuid
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.orm import declarative_base
from hospital.config import get_settings

settings = get_settings()

engine = create_async_engine(settings.database_url)

async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

Base = declarative_base()


def generate_id() -> str:
    """Store-assigned record id."""
    return uuid.uuid4().hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


async def get_db():
    """
    Yield one session per request. Committed when the handler returns,
    rolled back if it raises.
    """
    async with async_session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
