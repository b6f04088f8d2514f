"""SQLite file holding the client configuration."""

from __future__ import annotations

import asyncio
import logging
import sqlite3
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Any

import aiosqlite

from spotify_tui.domain.shared.constants import DatabaseTables, SQLPragmas
from spotify_tui.domain.shared.messages import LogTemplates

if TYPE_CHECKING:
    from ...config.settings import DatabaseSettings

logger = logging.getLogger(__name__)

MEMORY = ":memory:"

_SCHEMA = f"""
CREATE TABLE IF NOT EXISTS {DatabaseTables.CLIENT_CONFIG} (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%f','now'))
)
"""


def _path_from_url(url: str) -> str:
    path = url.removeprefix("sqlite:///")
    if path == MEMORY:
        return path
    return str(Path(path).expanduser())


class Database:
    """One aiosqlite connection shared by every statement of the process.

    The client is a single process with a handful of small writes, so the
    connection is opened in :meth:`initialize` and kept until :meth:`close`.
    Statements are serialized through a lock so a transaction never sees
    another coroutine's half-written changes.
    """

    def __init__(self, url: str, settings: DatabaseSettings | None = None) -> None:
        self._db_path = _path_from_url(url)
        self._busy_timeout = settings.busy_timeout_ms if settings else 5000
        self._connection_timeout = settings.connection_timeout_s if settings else 10
        self._conn: aiosqlite.Connection | None = None
        self._lock = asyncio.Lock()

    @property
    def db_path(self) -> str:
        return self._db_path

    @property
    def is_initialized(self) -> bool:
        return self._conn is not None

    async def initialize(self) -> None:
        if self._conn is not None:
            return

        if self._db_path != MEMORY:
            Path(self._db_path).parent.mkdir(parents=True, exist_ok=True)

        conn = await aiosqlite.connect(self._db_path, timeout=self._connection_timeout)
        conn.row_factory = aiosqlite.Row
        if self._db_path != MEMORY:
            await conn.execute(SQLPragmas.JOURNAL_MODE_WAL)
        await conn.execute(SQLPragmas.BUSY_TIMEOUT.format(timeout=self._busy_timeout))
        await conn.execute(_SCHEMA)
        await conn.commit()

        self._conn = conn
        logger.info(LogTemplates.DATABASE_INITIALIZED, self._db_path)

    def _require_connection(self) -> aiosqlite.Connection:
        if self._conn is None:
            raise sqlite3.ProgrammingError("Database is not initialized")
        return self._conn

    @asynccontextmanager
    async def transaction(self) -> AsyncGenerator[aiosqlite.Connection, None]:
        """Hold the connection exclusively; commit on success, roll back on error."""
        async with self._lock:
            conn = self._require_connection()
            try:
                yield conn
                await conn.commit()
            except Exception:
                await conn.rollback()
                raise

    async def execute(self, sql: str, parameters: tuple[Any, ...] = ()) -> None:
        async with self.transaction() as conn:
            await conn.execute(sql, parameters)

    async def fetch_one(self, sql: str, parameters: tuple[Any, ...] = ()) -> dict[str, Any] | None:
        async with self._lock:
            async with self._require_connection().execute(sql, parameters) as cursor:
                row = await cursor.fetchone()
        return dict(row) if row else None

    async def fetch_all(self, sql: str, parameters: tuple[Any, ...] = ()) -> list[dict[str, Any]]:
        async with self._lock:
            async with self._require_connection().execute(sql, parameters) as cursor:
                rows = await cursor.fetchall()
        return [dict(row) for row in rows]

    async def close(self) -> None:
        if self._conn is None:
            return
        conn, self._conn = self._conn, None
        await conn.close()
        logger.info(LogTemplates.DATABASE_CLOSED)
