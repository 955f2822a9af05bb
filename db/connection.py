"""
db/connection.py
----------------
Runs SQL against PostgreSQL for the repositories.
Wraps psycopg2's ThreadedConnectionPool; blocking driver calls are moved to a
worker thread so callers can simply `await executor.execute(...)`.
"""

import asyncio
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

import psycopg2
from psycopg2 import pool, extras

from config import DATABASE_URL, DB_POOL_MAX, DB_POOL_MIN
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class QueryResult:
    """Rows returned by a statement (as dicts) and the driver's row count."""
    rows: list[dict] = field(default_factory=list)
    row_count: int = 0


class QueryExecutor:
    """
    Owns a connection pool and executes parameterized statements on it.

    The caller controls the lifecycle: call `open()` before the first query
    and `close()` when done, or use the executor as an async context manager.
    """

    def __init__(
        self,
        dsn: str = DATABASE_URL,
        min_conn: int = DB_POOL_MIN,
        max_conn: int = DB_POOL_MAX,
    ):
        self.dsn = dsn
        self.min_conn = min_conn
        self.max_conn = max_conn
        self._pool: pool.ThreadedConnectionPool | None = None
        self._slots: asyncio.Semaphore | None = None

    @property
    def is_open(self) -> bool:
        return self._pool is not None

    def open(self) -> None:
        """
        Create the connection pool. Does nothing if it is already open.

        Raises:
            psycopg2.OperationalError: If the database is unreachable.
        """
        if self._pool is not None:
            return
        try:
            self._pool = pool.ThreadedConnectionPool(self.min_conn, self.max_conn, self.dsn)
            self._slots = asyncio.Semaphore(self.max_conn)
            logger.info("Database connection pool initialized successfully.")
        except psycopg2.OperationalError as e:
            logger.error(f"Failed to initialize database pool: {e}")
            raise

    def close(self) -> None:
        """Close all connections in the pool."""
        if self._pool is not None:
            self._pool.closeall()
            self._pool = None
            self._slots = None
            logger.info("Database connection pool closed.")

    async def __aenter__(self) -> "QueryExecutor":
        self.open()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.close()

    async def execute(self, sql: str, params: Optional[Sequence[Any]] = None) -> QueryResult:
        """
        Execute one statement and commit it.

        Args:
            sql: Statement text with `%s` placeholders.
            params: Positional values for the placeholders.

        Returns:
            QueryResult with the returned rows (empty if the statement
            returns none) and the affected row count.

        Raises:
            RuntimeError: If the executor has not been opened.
            psycopg2.Error: Whatever the driver raises, unchanged.
        """
        if self._pool is None:
            raise RuntimeError("Database pool not initialized. Call open() first.")
        # at most max_conn statements hold a pooled connection at once
        async with self._slots:
            return await asyncio.to_thread(self._run, sql, params)

    def _run(self, sql: str, params: Optional[Sequence[Any]]) -> QueryResult:
        conn = self._pool.getconn()
        try:
            with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                cur.execute(sql, params)
                rows = [dict(r) for r in cur.fetchall()] if cur.description else []
                result = QueryResult(rows=rows, row_count=cur.rowcount)
            conn.commit()
            return result
        except Exception as e:
            logger.error(f"Query failed: {e}")
            try:
                conn.rollback()
            except psycopg2.Error as rollback_error:
                logger.warning(f"Rollback failed: {rollback_error}")
            raise
        finally:
            self._pool.putconn(conn)
