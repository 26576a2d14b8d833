"""
db/init_db.py
-------------
Creates the database and executes the SQL scripts that build the schema,
functions, procedures, triggers and seed data.
The functions are exposed through the admin command-line tool:
    gradebook-admin setup
    gradebook-admin seed
    gradebook-admin reset
"""

from pathlib import Path

import psycopg2
from psycopg2 import sql

from config import (
    DB_HOST,
    DB_NAME,
    DB_PASS,
    DB_PORT,
    DB_USER,
    MAINTENANCE_DB,
    SEED_SQL_FILE,
    SETUP_SQL_FILES,
    SQL_DIR,
)
from db.connection import get_connection, init_pool, release_connection
from utils.logger import get_logger

logger = get_logger(__name__)


def create_database() -> bool:
    """
    Create the application database if it does not exist yet.

    Connects to the maintenance database because CREATE DATABASE cannot run
    against the database being created.

    Returns:
        True if the database exists afterwards, False on failure.
    """
    try:
        conn = psycopg2.connect(
            host=DB_HOST,
            port=DB_PORT,
            user=DB_USER,
            password=DB_PASS,
            dbname=MAINTENANCE_DB,
        )
    except psycopg2.Error as e:
        logger.error(f"Error creating database: {e}")
        return False

    # CREATE DATABASE is not allowed inside a transaction block
    conn.autocommit = True
    try:
        with conn.cursor() as cur:
            cur.execute("SELECT 1 FROM pg_database WHERE datname = %s;", (DB_NAME,))
            if cur.fetchone() is None:
                cur.execute(
                    sql.SQL("CREATE DATABASE {}").format(sql.Identifier(DB_NAME))
                )
                logger.info(f"Database {DB_NAME} created successfully.")
            else:
                logger.info(f"Database {DB_NAME} already exists.")
        return True
    except psycopg2.Error as e:
        logger.error(f"Error creating database: {e}")
        return False
    finally:
        conn.close()


def execute_sql_file(file_path: Path) -> bool:
    """
    Execute a whole SQL script as one batch.

    Args:
        file_path: Path of the script to run.

    Returns:
        True if the script ran and was committed, False if it could not be
        read or failed (the transaction is rolled back).
    """
    file_path = Path(file_path)
    try:
        script = file_path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error(f"Error reading SQL file: {e}")
        return False
    logger.info(f"SQL file read from: {file_path}")

    conn = get_connection()
    try:
        with conn.cursor() as cur:
            cur.execute(script)
        conn.commit()
        logger.info(f"Successfully executed: {file_path}")
        return True
    except psycopg2.Error as e:
        conn.rollback()
        logger.error(f"Error executing SQL from {file_path}: {e}")
        return False
    finally:
        release_connection(conn)


def run_setup_scripts() -> bool:
    """Run the schema, function, procedure and trigger scripts in order."""
    for name in SETUP_SQL_FILES:
        if not execute_sql_file(SQL_DIR / name):
            return False
    return True


def setup_database() -> bool:
    """
    Create the database if needed and install every object the client uses.

    The pool is opened only after the database exists, since it connects
    to the database being created.
    """
    if not create_database():
        return False
    init_pool()
    return run_setup_scripts()


def seed_database() -> bool:
    """Load the sample users, courses, enrollments and grades."""
    return execute_sql_file(SQL_DIR / SEED_SQL_FILE)


def reset_database() -> bool:
    """Drop and recreate every object, then load the seed data."""
    return run_setup_scripts() and seed_database()
