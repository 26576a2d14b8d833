"""
main.py
-------
Entry point for the interactive GradeBook client.

Responsibilities:
    - Open the single database connection.
    - Run the login loop and the role menus.
    - Close the connection on exit.
"""

import sys

import psycopg2
from rich.markup import escape

from db.connection import close_pool, init_pool
from handlers.menu import start
from utils.console import console
from utils.logger import get_logger

logger = get_logger(__name__)


def main() -> None:
    """Connect and run the client."""
    logger.info("Connecting to database...")
    try:
        init_pool()
    except psycopg2.OperationalError as e:
        console.print(f"[red]✗ Could not connect to the database: {escape(str(e).strip())}[/red]")
        sys.exit(1)

    try:
        start()
    finally:
        close_pool()
        logger.info("GradeBook client stopped.")


if __name__ == "__main__":
    main()
