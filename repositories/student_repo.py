"""
repositories/student_repo.py
-----------------------------
Data access layer for student records.
"""

import psycopg2

from db.connection import execute, fetch_all
from models.user import StudentRecord
from utils.logger import get_logger

logger = get_logger(__name__)


class StudentRepository:
    """Repository for the students table."""

    def add(self, user_id: int, programme: str) -> None:
        """Attach a student record to an existing user."""
        sql = "INSERT INTO students (user_id, programme) VALUES (%s, %s);"
        try:
            execute(sql, (user_id, programme))
            logger.info(f"Created student record for user {user_id}")
        except psycopg2.Error as e:
            logger.error(f"Failed to create student for user {user_id}: {e}")
            raise

    def list_all(self) -> list[StudentRecord]:
        sql = "SELECT id, user_id, programme FROM students ORDER BY id;"
        return [
            StudentRecord(id=r["id"], user_id=r["user_id"], programme=r["programme"])
            for r in fetch_all(sql)
        ]
