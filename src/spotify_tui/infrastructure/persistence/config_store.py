"""SQLite-backed client configuration store."""

from __future__ import annotations

import logging
import sqlite3
from typing import TYPE_CHECKING

from spotify_tui.application.interfaces.config_store import ClientConfigStore
from spotify_tui.domain.shared.constants import ConfigKeys, DatabaseTables
from spotify_tui.domain.shared.exceptions import ConfigPersistenceError
from spotify_tui.domain.shared.messages import LogTemplates

if TYPE_CHECKING:
    from .database import Database

logger = logging.getLogger(__name__)

_TABLE = DatabaseTables.CLIENT_CONFIG


class SQLiteClientConfigStore(ClientConfigStore):
    """Key/value configuration persisted in the ``client_config`` table.

    ``device_id`` is served from memory; call :meth:`load` once at start-up.
    """

    def __init__(self, database: Database) -> None:
        self._db = database
        self._device_id: str | None = None

    @property
    def device_id(self) -> str | None:
        return self._device_id

    async def load(self) -> None:
        self._device_id = await self.get(ConfigKeys.DEVICE_ID)
        logger.debug(LogTemplates.CONFIG_LOADED, self._device_id)

    async def set_device_id(self, device_id: str) -> None:
        await self.set(ConfigKeys.DEVICE_ID, device_id)
        self._device_id = device_id
        logger.info(LogTemplates.CONFIG_DEVICE_SAVED, device_id)

    async def get(self, key: str) -> str | None:
        row = await self._db.fetch_one(f"SELECT value FROM {_TABLE} WHERE key = ?", (key,))
        return row["value"] if row else None

    async def set(self, key: str, value: str) -> None:
        try:
            await self._db.execute(
                f"""
                INSERT INTO {_TABLE} (key, value) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = strftime('%Y-%m-%dT%H:%M:%f','now')
                """,
                (key, value),
            )
        except sqlite3.Error as e:
            logger.error(LogTemplates.CONFIG_WRITE_FAILED, key, e)
            raise ConfigPersistenceError(key) from e
