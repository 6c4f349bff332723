"""Async engine/session lifecycle for the SQLite store."""
from collections.abc import AsyncIterator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# only created when push history is switched on
HISTORY_TABLE = "progress_history"


class Database:
    """Owns the engine: opened once at startup, closed at shutdown."""

    def __init__(self, url: str, timeout: float = 30.0, record_history: bool = False):
        self.url = url
        self.timeout = timeout
        self.record_history = record_history
        self.engine: AsyncEngine | None = None
        self._sessionmaker: async_sessionmaker[AsyncSession] | None = None

    def open(self) -> None:
        # timeout: how long sqlite waits for a competing writer
        self.engine = create_async_engine(self.url, connect_args={"timeout": self.timeout})
        self._sessionmaker = async_sessionmaker(self.engine, expire_on_commit=False)

    def tables(self) -> list:
        return [
            table
            for table in Base.metadata.sorted_tables
            if self.record_history or table.name != HISTORY_TABLE
        ]

    async def create_tables(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all, tables=self.tables())

    async def close(self) -> None:
        if self.engine is not None:
            await self.engine.dispose()
            self.engine = None
            self._sessionmaker = None

    def session(self) -> AsyncSession:
        if self._sessionmaker is None:
            raise RuntimeError("database is not open")
        return self._sessionmaker()


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """One session per request, from the database opened in the app lifespan."""
    async with request.app.state.database.session() as db:
        yield db
