"""
repositories/course_repo.py
----------------------------
Data access layer for courses and grade components.
Per-user course lists come from the get_courses_for_* database functions.
"""

from typing import Optional

from db.connection import fetch_all, fetch_one
from models.course import Course, GradeComponent
from utils.numbers import optional_float


class CourseRepository:
    """Repository for read operations on courses."""

    def list_all(self) -> list[Course]:
        """Fetch the ID and name of every course."""
        sql = "SELECT id, name FROM courses ORDER BY id;"
        return [Course(id=r["id"], name=r["name"]) for r in fetch_all(sql)]

    def get_by_id(self, course_id: int) -> Optional[Course]:
        """
        Fetch the full details of a single course.

        Returns:
            A Course with description and ECTS, or None if not found.
        """
        sql = """
            SELECT c.name, c.description, c.ects, c.id
            FROM courses c
            WHERE c.id = %s;
        """
        row = fetch_one(sql, (course_id,))
        if row is None:
            return None
        return Course(
            id=row["id"],
            name=row["name"],
            description=row["description"],
            ects=row["ects"],
        )

    def for_teacher(self, username: str) -> list[Course]:
        """Courses the given teacher is assigned to."""
        sql = "SELECT * FROM get_courses_for_teacher(%s);"
        return [
            Course(id=r["course_id"], name=r["course_name"])
            for r in fetch_all(sql, (username,))
        ]

    def for_student(self, username: str) -> list[Course]:
        """Courses the given student is enrolled in, with their final grades."""
        sql = "SELECT * FROM get_courses_for_student(%s);"
        return [
            Course(
                id=r["course_id"],
                name=r["course_name"],
                final_grade=optional_float(r["final_grade"]),
            )
            for r in fetch_all(sql, (username,))
        ]

    def grade_components(self, course_id: int) -> list[GradeComponent]:
        """Grade components defined for a course."""
        sql = "SELECT * FROM get_grade_components_for_course(%s);"
        return [
            GradeComponent(
                id=r["grade_component_id"],
                name=r["component_name"],
                max_score=float(r["max_score"]),
            )
            for r in fetch_all(sql, (course_id,))
        ]
