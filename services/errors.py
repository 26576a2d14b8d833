"""
services/errors.py
------------------
Turns database failures into console messages ("log and continue").
"""

from functools import wraps
from typing import Callable

import psycopg2
from rich.markup import escape

from utils.logger import get_logger

logger = get_logger(__name__)


def describe_db_error(error: psycopg2.Error) -> str:
    """
    Short human-readable text for a psycopg2 error.

    Prefers the primary message reported by the server (what RAISE EXCEPTION
    produced) over the full multi-line error text.
    """
    diag = getattr(error, "diag", None)
    primary = getattr(diag, "message_primary", None) if diag is not None else None
    return primary or str(error).strip() or error.__class__.__name__


def reports_db_errors(action: str):
    """
    Decorator for service methods that return something printable.

    On psycopg2.Error the failure is logged and the method returns a red
    "Error <action>: <reason>" message instead of raising.

    Usage:
        @reports_db_errors("fetching users")
        def list_users(self): ...
    """
    def decorator(func: Callable):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except psycopg2.Error as e:
                reason = describe_db_error(e)
                logger.error(f"Error {action}: {reason}")
                return f"[red]Error {action}: {escape(reason)}[/red]"
        return wrapper
    return decorator
