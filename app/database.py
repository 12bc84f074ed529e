import logging
from collections.abc import AsyncIterator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool

from app.config import settings

logger = logging.getLogger(__name__)

SQLITE_BEGIN_OPTION = "sqlite_begin"


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


def normalize_database_url(url: str) -> str:
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql+asyncpg://", 1)
    elif url.startswith("postgresql://"):
        url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


class Base(DeclarativeBase):
    pass


class Database:
    """Process-wide handle on the database.

    ``connect()`` must run before the first request is served and
    ``disconnect()`` once the server stops accepting requests; the FastAPI
    lifespan in ``app.main`` does both.
    """

    def __init__(self, url: str):
        self.url = normalize_database_url(url)
        self._engine: AsyncEngine | None = None
        self._sessionmaker: async_sessionmaker[AsyncSession] | None = None

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    def _create_engine(self) -> AsyncEngine:
        engine_kwargs: dict = {"echo": False}
        if self.is_sqlite:
            engine_kwargs.update(poolclass=NullPool)
        else:
            engine_kwargs.update(pool_size=5, max_overflow=10, pool_pre_ping=True)

        engine = create_async_engine(self.url, **engine_kwargs)

        if self.is_sqlite:
            @event.listens_for(engine.sync_engine, "connect")
            def configure_sqlite(dbapi_conn, connection_record):
                # SQLite's builtin lower() only folds ASCII.
                dbapi_conn.create_function("lower", 1, _unicode_lower)
                dbapi_conn.isolation_level = None

            @event.listens_for(engine.sync_engine, "begin")
            def begin(conn):
                # Write transactions take the lock up front so they queue on it
                # instead of failing when a deferred lock upgrade would deadlock.
                mode = conn.get_execution_options().get(SQLITE_BEGIN_OPTION, "DEFERRED")
                conn.exec_driver_sql(f"BEGIN {mode}")

        return engine

    async def connect(self) -> None:
        if self._engine is not None:
            return
        self._engine = self._create_engine()
        self._sessionmaker = async_sessionmaker(
            self._engine, class_=AsyncSession, expire_on_commit=False
        )
        async with self._engine.begin() as conn:
            from app.models import booking, car  # noqa: F401
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Connected to %s", self._engine.url.render_as_string(hide_password=True))

    async def disconnect(self) -> None:
        if self._engine is None:
            return
        await self._engine.dispose()
        self._engine = None
        self._sessionmaker = None
        logger.info("Database connection closed")

    def session(self) -> AsyncSession:
        if self._sessionmaker is None:
            raise RuntimeError("Database is not connected")
        return self._sessionmaker()


database = Database(settings.database_url)


async def get_db() -> AsyncIterator[AsyncSession]:
    async with database.session() as session:
        yield session


async def begin_write(session: AsyncSession) -> None:
    """Open the session's transaction as a writer.

    Must run before the session's first statement. On SQLite this starts the
    transaction with ``BEGIN IMMEDIATE``; other backends ignore the option.
    """
    await session.connection(execution_options={SQLITE_BEGIN_OPTION: "IMMEDIATE"})


async def get_write_db() -> AsyncIterator[AsyncSession]:
    async with database.session() as session:
        await begin_write(session)
        yield session
