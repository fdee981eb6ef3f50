"""Async SQLite storage: engine factory, request sessions, schema creation."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import AsyncGenerator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from homewatt.config import settings
from homewatt.models import Base

logger = logging.getLogger(__name__)

MEMORY_URL = "sqlite+aiosqlite:///:memory:"

_PRAGMAS = (
    "journal_mode=WAL",
    "synchronous=NORMAL",
    "cache_size=-8000",  # 8 MB
    "foreign_keys=ON",  # device links to analyses are SET NULL on delete
)


def _apply_pragmas(dbapi_conn, _connection_record):
    cursor = dbapi_conn.cursor()
    for pragma in _PRAGMAS:
        cursor.execute(f"PRAGMA {pragma}")
    cursor.close()


def sqlite_url(path: str | Path) -> str:
    """aiosqlite URL for a database file, creating its directory."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    return f"sqlite+aiosqlite:///{path}"


def build_engine(url: str, echo: bool = False) -> AsyncEngine:
    """Engine with the HomeWatt PRAGMAs set on every connection.

    In-memory databases live in a single shared connection, so the pool
    limits only apply to file databases.
    """
    if url == MEMORY_URL:
        engine = create_async_engine(url, echo=echo)
    else:
        engine = create_async_engine(
            url,
            echo=echo,
            pool_size=settings.max_db_connections,
            max_overflow=0,
        )
    event.listen(engine.sync_engine, "connect", _apply_pragmas)
    return engine


def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


engine = build_engine(
    sqlite_url(settings.database_path),
    echo=settings.debug and settings.log_level == "DEBUG",
)
async_session = session_factory(engine)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: one session per request."""
    async with async_session() as session:
        yield session


async def init_db(bind: AsyncEngine | None = None) -> None:
    """Create missing tables on ``bind`` (the application engine by default)."""
    bind = bind or engine
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables created/verified (%s)", bind.url)
