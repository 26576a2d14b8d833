"""
repositories/grade_repo.py
---------------------------
Data access layer for the grades table.
Inserting a grade fires the trigger that recalculates the final grade.
"""

import psycopg2

from db.connection import fetch_one
from utils.logger import get_logger

logger = get_logger(__name__)


class GradeRepository:
    """Repository for direct writes to the grades table."""

    def add(self, enrollment_id: int, grade_component_id: int, grade: float) -> int:
        """
        Insert a grade without going through assign_or_update_grade.

        Returns:
            The ID of the new grade.
        """
        sql = """
            INSERT INTO grades (enrollment_id, grade_component_id, grade)
            VALUES (%s, %s, %s)
            RETURNING id;
        """
        try:
            row = fetch_one(sql, (enrollment_id, grade_component_id, grade))
        except psycopg2.Error as e:
            logger.error(f"Failed to assign grade for enrollment {enrollment_id}: {e}")
            raise
        logger.info(f"Added grade #{row['id']} for enrollment {enrollment_id}")
        return row["id"]
