"""
repositories/enrollment_repo.py
--------------------------------
Data access layer for enrollments, grades and the grade history.
"""

from typing import Optional

import psycopg2

from db.connection import execute, fetch_all, fetch_one
from models.enrollment import (
    Enrollment,
    EnrollmentRecord,
    GradeHistoryEntry,
    StudentGrade,
)
from models.user import StudentInfo
from utils.logger import get_logger
from utils.numbers import optional_float

logger = get_logger(__name__)


class EnrollmentRepository:
    """Repository for enrollments and everything graded through them."""

    # ── CREATE ────────────────────────────────────────────

    def add(self, student_id: int, course_id: int) -> None:
        """
        Enroll a student in a course by raw IDs.

        Raises:
            psycopg2.Error: On unknown IDs or a duplicate enrollment.
        """
        sql = "INSERT INTO enrollments (student_id, course_id) VALUES (%s, %s);"
        try:
            execute(sql, (student_id, course_id))
            logger.info(f"Enrolled student {student_id} in course {course_id}")
        except psycopg2.Error as e:
            logger.error(f"Failed to enroll student {student_id}: {e}")
            raise

    # ── READ ──────────────────────────────────────────────

    def list_all(self) -> list[EnrollmentRecord]:
        """Fetch every row of the enrollments table."""
        sql = "SELECT id, student_id, course_id, final_grade FROM enrollments ORDER BY id;"
        return [
            EnrollmentRecord(
                id=r["id"],
                student_id=r["student_id"],
                course_id=r["course_id"],
                final_grade=optional_float(r["final_grade"]),
            )
            for r in fetch_all(sql)
        ]

    def for_course(self, course_id: int) -> list[Enrollment]:
        """Students enrolled in a course with their final grades."""
        sql = "SELECT * FROM get_enrollments_for_course(%s);"
        return [
            Enrollment(
                id=r["enrollment_id"],
                student_username=r["student_username"],
                final_grade=optional_float(r["final_grade"]),
            )
            for r in fetch_all(sql, (course_id,))
        ]

    def grades(self, enrollment_id: int) -> list[StudentGrade]:
        """Per-component grades of one enrollment."""
        sql = "SELECT * FROM get_student_grades_for_enrollment(%s);"
        return [
            StudentGrade(component_name=r["component_name"], grade=float(r["grade"]))
            for r in fetch_all(sql, (enrollment_id,))
        ]

    def grade_history(self, username: str) -> list[GradeHistoryEntry]:
        """Recorded grade changes for a student, newest first."""
        sql = "SELECT * FROM view_grade_history(%s);"
        return [
            GradeHistoryEntry(
                id=r["grade_history_id"],
                old_grade=optional_float(r["old_grade"]),
                new_grade=float(r["new_grade"]),
                change_timestamp=r["change_timestamp"],
                teacher_username=r["teacher_username"],
                change_reason=r["change_reason"],
            )
            for r in fetch_all(sql, (username,))
        ]

    def student_info(self, username: str) -> Optional[StudentInfo]:
        """
        Programme, earned ECTS and GPA of a student.

        Returns:
            StudentInfo, or None if the user has no student record.
        """
        sql = "SELECT * FROM get_student_info(%s);"
        row = fetch_one(sql, (username,))
        if row is None:
            return None
        return StudentInfo(
            programme=row["programme"],
            ects=row["ects"],
            gpa=optional_float(row["gpa"]),
        )
