"""
db/connection.py
----------------
Manages the PostgreSQL connection.
Uses psycopg2's SimpleConnectionPool sized to a single persistent
connection, opened at start and closed when the process exits.
"""

import atexit

import psycopg2
from psycopg2 import pool, extras
from config import DATABASE_URL
from utils.logger import get_logger

logger = get_logger(__name__)

_pool: pool.SimpleConnectionPool | None = None


def init_pool(min_conn: int = 1, max_conn: int = 1) -> None:
    """
    Initialize the database connection pool.

    Args:
        min_conn: Minimum number of connections to keep open.
        max_conn: Maximum number of connections allowed.

    Raises:
        psycopg2.OperationalError: If the database is unreachable.
    """
    global _pool
    if _pool is not None:
        return
    try:
        _pool = pool.SimpleConnectionPool(min_conn, max_conn, DATABASE_URL)
        atexit.register(close_pool)
        logger.info("Database connection pool initialized successfully.")
    except psycopg2.OperationalError as e:
        logger.error(f"Failed to initialize database pool: {e}")
        raise


def get_connection():
    """
    Get a connection from the pool.

    Returns:
        A psycopg2 connection object.

    Raises:
        RuntimeError: If the pool has not been initialized.
    """
    if _pool is None:
        raise RuntimeError("Database pool not initialized. Call init_pool() first.")
    return _pool.getconn()


def release_connection(conn) -> None:
    """
    Return a connection back to the pool.

    Args:
        conn: The psycopg2 connection to release.
    """
    if _pool is not None:
        _pool.putconn(conn)


def close_pool() -> None:
    """Close all connections in the pool."""
    global _pool
    if _pool is not None:
        _pool.closeall()
        _pool = None
        logger.info("Database connection pool closed.")


def fetch_all(sql, params=None) -> list[dict]:
    """
    Run a read query and return every row as a dict keyed by column name.

    The transaction is closed afterwards so that the next statement does not
    run inside an aborted or stale transaction.
    """
    conn = get_connection()
    try:
        with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
            cur.execute(sql, params)
            rows = [dict(r) for r in cur.fetchall()]
        conn.commit()
        return rows
    except psycopg2.Error:
        conn.rollback()
        raise
    finally:
        release_connection(conn)


def fetch_one(sql, params=None) -> dict | None:
    """Run a read query and return the first row, or None."""
    rows = fetch_all(sql, params)
    return rows[0] if rows else None


def execute(sql, params=None) -> int:
    """
    Run a write statement inside a transaction.

    Returns:
        The number of affected rows.
    """
    conn = get_connection()
    try:
        with conn.cursor() as cur:
            cur.execute(sql, params)
            affected = cur.rowcount
        conn.commit()
        return affected
    except psycopg2.Error:
        conn.rollback()
        raise
    finally:
        release_connection(conn)
