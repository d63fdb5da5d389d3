from __future__ import annotations

from typing import Iterable, Optional

import mysql.connector

from ..core.exceptions import StorageError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone


class MySQLStorage:
    """Key/value medium backed by the `kv_store` table (see database/schema.sql)."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_item(self, key: str) -> Optional[str]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("SELECT value FROM kv_store WHERE storage_key=%s", (key,))
                row = fetchone(cur)
                return row["value"] if row else None
        except mysql.connector.Error as e:
            raise StorageError(f"Cannot read {key!r}: {e}") from e

    def set_item(self, key: str, value: str) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO kv_store(storage_key, value, updated_at)
                    VALUES(%s, %s, NOW())
                    ON DUPLICATE KEY UPDATE value=VALUES(value), updated_at=NOW()
                    """,
                    (key, value),
                )
        except mysql.connector.Error as e:
            raise StorageError(f"Cannot write {key!r}: {e}") from e

    def remove_item(self, key: str) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("DELETE FROM kv_store WHERE storage_key=%s", (key,))
        except mysql.connector.Error as e:
            raise StorageError(f"Cannot remove {key!r}: {e}") from e

    def keys(self) -> Iterable[str]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("SELECT storage_key FROM kv_store ORDER BY storage_key")
                return [row["storage_key"] for row in fetchall(cur)]
        except mysql.connector.Error as e:
            raise StorageError(f"Cannot list keys: {e}") from e
