"""
db/connection.py
----------------
Manages the PostgreSQL connection pool.
Uses psycopg2's ThreadedConnectionPool so a single pool can be shared by
concurrent callers. The pool is an explicit handle: the surrounding service
builds it, passes it into the repositories and closes it on shutdown.
"""

import psycopg2
from psycopg2 import pool

from config import DATABASE_URL, DB_POOL_MAX, DB_POOL_MIN
from db.errors import ConnectivityError
from utils.logger import get_logger

logger = get_logger(__name__)


class ConnectionPool:
    """Thin wrapper around a psycopg2 pool with acquire/release semantics."""

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

    def open(self) -> None:
        """
        Initialize the underlying connection pool.

        Raises:
            ConnectivityError: If the database is unreachable.
        """
        if self._pool is not None:
            return
        try:
            self._pool = pool.ThreadedConnectionPool(self.min_conn, self.max_conn, self.dsn)
            logger.info("Database connection pool initialized successfully.")
        except psycopg2.Error as e:
            logger.error(f"Failed to initialize database pool: {e}")
            raise ConnectivityError(str(e)) from e

    def get_connection(self):
        """
        Get a connection from the pool.

        Returns:
            A psycopg2 connection object.

        Raises:
            RuntimeError: If the pool has not been opened.
        """
        if self._pool is None:
            raise RuntimeError("Database pool not initialized. Call open() first.")
        return self._pool.getconn()

    def release_connection(self, conn) -> None:
        """Return a connection back to the pool."""
        if self._pool is not None:
            self._pool.putconn(conn)

    def close(self) -> None:
        """Close all connections in the pool."""
        if self._pool is not None:
            self._pool.closeall()
            self._pool = None
            logger.info("Database connection pool closed.")
