"""Async SQLAlchemy engine, session scopes, declarative base and column helpers."""

import uuid
from collections.abc import AsyncGenerator, AsyncIterator
from contextlib import asynccontextmanager
from datetime import datetime
from decimal import Decimal

from sqlalchemy import Column, Numeric, func
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from revportal.config import settings

engine = create_async_engine(
    settings.async_database_url,
    echo=settings.debug,
    pool_pre_ping=True,
    pool_size=settings.db_pool_size,
    max_overflow=settings.db_max_overflow,
)

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Base class for all portal tables."""

    pass


class CreatedAtMixin:
    """Server-stamped insert time. Reporting rows are insert-only and carry just this."""

    created_at: Mapped[datetime] = mapped_column(server_default=func.now())


class TimestampMixin(CreatedAtMixin):
    """Adds updated_at for the editable tables (users, strategies, tactics)."""

    updated_at: Mapped[datetime] = mapped_column(
        server_default=func.now(),
        onupdate=func.now(),
    )


class UUIDPrimaryKeyMixin:
    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)


def numeric_max(column: Column) -> Decimal:
    """Largest magnitude a ``Numeric(precision, scale)`` column can hold.

    ``Numeric(6, 2)`` gives ``9999.99``.
    """
    if not isinstance(column.type, Numeric) or column.type.precision is None:
        raise TypeError(f"{column.name} is not a fixed-precision numeric column")
    scale = column.type.scale or 0
    return Decimal(10) ** (column.type.precision - scale) - Decimal(1).scaleb(-scale)


@asynccontextmanager
async def unit_of_work(
    factory: async_sessionmaker[AsyncSession] = async_session_factory,
) -> AsyncIterator[AsyncSession]:
    """One session, committed when the block exits cleanly and rolled back otherwise."""
    async with factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Request-scoped session for FastAPI dependency injection.

    Each request owns exactly one unit of work::

        @router.get("/hotels")
        async def list_hotels(db: AsyncSession = Depends(get_db)):
            ...
    """
    async with unit_of_work() as session:
        yield session
