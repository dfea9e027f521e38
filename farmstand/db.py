# farmstand/db.py
from __future__ import annotations

from sqlalchemy import text
from sqlalchemy.engine.url import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from farmstand.logging import get_logger
from farmstand.models.base import Base


def _apply_asyncpg_scheme(database_url: str) -> str:
    if database_url.startswith("postgresql+psycopg://"):
        return database_url.replace("postgresql+psycopg://", "postgresql+asyncpg://", 1)
    if database_url.startswith("postgresql+psycopg2://"):
        return database_url.replace("postgresql+psycopg2://", "postgresql+asyncpg://", 1)
    if database_url.startswith("postgresql://"):
        return database_url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if database_url.startswith("postgres://"):
        return database_url.replace("postgres://", "postgresql+asyncpg://", 1)
    return database_url


def _create_engine(database_url: str) -> AsyncEngine:
    url = make_url(database_url)
    connect_args: dict = {}
    engine_kwargs: dict = {}

    # Handle sslmode for asyncpg
    if url.get_backend_name() == "postgresql" and url.get_driver_name() == "asyncpg":
        query = dict(url.query)
        if "sslmode" in query:
            connect_args["ssl"] = query.pop("sslmode")
        # asyncpg does not support channel_binding
        query.pop("channel_binding", None)
        url = url._replace(query=query)

    # In-memory SQLite lives as long as its single connection
    if url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:"):
        connect_args["check_same_thread"] = False
        engine_kwargs["poolclass"] = StaticPool

    return create_async_engine(
        url,
        pool_pre_ping=True,
        connect_args=connect_args,
        **engine_kwargs,
    )


class Database:
    """Store client shared by all requests of one application instance.

    Built in the application lifespan: ``connect()`` at startup and
    ``dispose()`` at shutdown. Route handlers reach it through
    ``farmstand.api.deps``.
    """

    def __init__(self, database_url: str) -> None:
        self.url = _apply_asyncpg_scheme(database_url)
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("Database is not connected. Call connect() first.")
        return self._engine

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        if self._session_factory is None:
            raise RuntimeError("Database is not connected. Call connect() first.")
        return self._session_factory

    def connect(self) -> None:
        if self._engine is not None:
            return
        self._engine = _create_engine(self.url)
        self._session_factory = async_sessionmaker(
            bind=self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
        get_logger(__name__).info(
            "database_connection_open", backend=self._engine.url.get_backend_name()
        )

    async def create_schema(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def ping(self) -> None:
        async with self.session_factory() as session:
            await session.execute(text("SELECT 1"))

    async def dispose(self) -> None:
        if self._engine is None:
            return
        await self._engine.dispose()
        self._engine = None
        self._session_factory = None
        get_logger(__name__).info("database_connection_closed")
