"""
repositories/procedure_repo.py
-------------------------------
Calls the stored procedures that implement every write made from the
role menus. The procedure name is quoted as an identifier and every
argument is bound as a query parameter.
"""

import psycopg2
from psycopg2 import sql

from db.connection import execute
from utils.logger import get_logger

logger = get_logger(__name__)


class ProcedureRepository:
    """Executes `CALL <procedure>(...)` statements."""

    @staticmethod
    def build_call(procedure: str, param_count: int) -> sql.Composed:
        """Build the CALL statement with one placeholder per argument."""
        return sql.SQL("CALL {}({});").format(
            sql.Identifier(procedure),
            sql.SQL(", ").join(sql.Placeholder() * param_count),
        )

    def call(self, procedure: str, *params) -> None:
        """
        Run a stored procedure.

        Raises:
            psycopg2.Error: Whatever the procedure raises (unknown user,
                out-of-range grade, ...).
        """
        query = self.build_call(procedure, len(params))
        try:
            execute(query, params)
            logger.info(f"Procedure {procedure} executed with {len(params)} argument(s)")
        except psycopg2.Error as e:
            logger.error(f"Procedure {procedure} failed: {e}")
            raise
