"""Durable key-value media for client state.

Two implementations of the ``KeyValueMedium`` protocol:

- ``MemoryMedium``: process-local dict, used by default and in tests.
- ``SqliteMedium``: stdlib ``sqlite3`` file with a single ``kv`` table.
  Blocking calls run in an anyio worker thread; each write is one upsert
  statement, so readers never see a partial value.

Media raise ``StorageError`` for any read or write failure.
"""

import sqlite3
import threading
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any, Protocol

import anyio.to_thread

from talkshell.errors import StorageError


class KeyValueMedium(Protocol):
    """Async string key-value store."""

    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str) -> None: ...

    async def delete(self, key: str) -> None: ...


class MemoryMedium:
    """In-process medium. Survives for the lifetime of the object."""

    __slots__ = ("_data",)

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value

    async def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def __repr__(self) -> str:
        return f"MemoryMedium({self._data!r})"


_SCHEMA = "CREATE TABLE IF NOT EXISTS kv (key TEXT PRIMARY KEY, value TEXT NOT NULL)"
_UPSERT = (
    "INSERT INTO kv (key, value) VALUES (?, ?) "
    "ON CONFLICT(key) DO UPDATE SET value = excluded.value"
)


def _run_sync(func: Callable[..., Any], *args: Any) -> Any:
    """Run blocking call in anyio worker thread."""
    return anyio.to_thread.run_sync(func, *args)


class SqliteMedium:
    """SQLite-backed medium.

    ``check_same_thread=False`` is required because ``anyio.to_thread``
    dispatches to a pool; a lock serialises access to the one connection.
    """

    __slots__ = ("_conn", "_lock", "path")

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._conn: sqlite3.Connection | None = None
        self._lock = threading.Lock()

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(self.path, check_same_thread=False, isolation_level=None)
            conn.execute(_SCHEMA)
            self._conn = conn
        return self._conn

    def _get(self, key: str) -> str | None:
        with self._lock:
            row = self._connection().execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
        return None if row is None else row[0]

    def _set(self, key: str, value: str) -> None:
        with self._lock:
            self._connection().execute(_UPSERT, (key, value))

    def _delete(self, key: str) -> None:
        with self._lock:
            self._connection().execute("DELETE FROM kv WHERE key = ?", (key,))

    async def get(self, key: str) -> str | None:
        try:
            return await _run_sync(self._get, key)
        except (sqlite3.Error, OSError) as exc:
            msg = f"read of {key!r} from {self.path} failed: {exc}"
            raise StorageError(msg) from exc

    async def set(self, key: str, value: str) -> None:
        try:
            await _run_sync(self._set, key, value)
        except (sqlite3.Error, OSError) as exc:
            msg = f"write of {key!r} to {self.path} failed: {exc}"
            raise StorageError(msg) from exc

    async def delete(self, key: str) -> None:
        try:
            await _run_sync(self._delete, key)
        except (sqlite3.Error, OSError) as exc:
            msg = f"delete of {key!r} from {self.path} failed: {exc}"
            raise StorageError(msg) from exc

    def close(self) -> None:
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None
