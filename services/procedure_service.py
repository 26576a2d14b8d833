"""
services/procedure_service.py
-----------------------------
Runs a stored procedure and reports the outcome as a console message.
"""

import psycopg2
from rich.markup import escape

from repositories.procedure_repo import ProcedureRepository
from services.errors import describe_db_error
from utils.logger import get_logger

logger = get_logger(__name__)


class ProcedureService:
    """Shared by every role service that writes through procedures."""

    def __init__(self):
        self.repo = ProcedureRepository()

    def call(self, procedure: str, *params) -> str:
        """
        Call `procedure` with `params`.

        Returns:
            A green success message, or a red error message carrying the
            reason the database gave.
        """
        try:
            self.repo.call(procedure, *params)
        except psycopg2.Error as e:
            reason = describe_db_error(e)
            logger.error(f"Error executing {procedure}: {reason}")
            return f"[red]Error executing {procedure}: {escape(reason)}[/red]"
        return f"[green]Procedure {procedure} executed successfully.[/green]"
