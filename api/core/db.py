"""
Async database access (raw SQL) using asyncpg.

`Database` owns one connection pool. It is constructed explicitly, opened by
the process entrypoint, and handed to the FastAPI app (see `api/main.py`), so
tests can pass a fake in its place.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import asyncpg

from .config import Settings
from .errors import ConnectivityError, QueryError

# Anything raised while obtaining a connection means the database is not reachable.
_CONNECT_ERRORS = (OSError, asyncio.TimeoutError, asyncpg.PostgresError, asyncpg.InterfaceError)
_QUERY_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, asyncio.TimeoutError)


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


class Database:
    def __init__(
        self,
        dsn: str,
        *,
        max_size: int = 10,
        acquire_timeout: float = 10.0,
        query_timeout: float = 30.0,
    ) -> None:
        self.dsn = dsn
        self.max_size = max_size
        self.acquire_timeout = acquire_timeout
        self.query_timeout = query_timeout
        self._pool: asyncpg.Pool | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(
            settings.database_url(),
            max_size=settings.pool_max_size,
            acquire_timeout=settings.acquire_timeout_s,
            query_timeout=settings.query_timeout_s,
        )

    async def open(self) -> None:
        if self._pool is not None:
            return None
        # min_size=0: connections are made on demand, so the pool can be
        # created before the database is up.
        self._pool = await asyncpg.create_pool(
            dsn=self.dsn,
            min_size=0,
            max_size=self.max_size,
            command_timeout=self.query_timeout,
        )

    async def close(self) -> None:
        if self._pool is None:
            return None
        await self._pool.close()
        self._pool = None

    def pool(self) -> asyncpg.Pool:
        if self._pool is None:
            raise RuntimeError("DB pool is not initialized. Call open() on startup.")
        return self._pool

    @asynccontextmanager
    async def acquire(self) -> AsyncIterator[asyncpg.Connection]:
        """
        Borrow a connection for the duration of the block.

        Waits for a free connection when the pool is exhausted, up to
        `acquire_timeout` seconds. The connection goes back to the pool on
        every exit path.
        """
        pool = self.pool()
        try:
            conn = await pool.acquire(timeout=self.acquire_timeout)
        except _CONNECT_ERRORS as exc:
            raise ConnectivityError(f"Database unreachable: {exc}") from exc
        try:
            yield conn
        finally:
            await pool.release(conn)

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        """
        Run a query and return all rows as a list of dicts.
        """
        async with self.acquire() as conn:
            try:
                rows = await conn.fetch(sql, *args, timeout=self.query_timeout)
            except _QUERY_ERRORS as exc:
                raise QueryError(f"Query failed: {exc}") from exc
        return [_record_to_dict(r) for r in rows]

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        """
        Run a query and return a single row as a dict (or None).
        """
        rows = await self.fetch_all(sql, *args)
        return rows[0] if rows else None
