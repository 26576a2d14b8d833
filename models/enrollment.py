"""
models/enrollment.py
--------------------
Domain models for enrollments, grades and the grade change history.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Enrollment:
    """
    A student enrolled in a course, as seen by the course teacher.

    Attributes:
        id: Enrollment primary key.
        student_username: Username of the enrolled student.
        final_grade: Grade on the 2.0 - 5.0 scale, None until graded.
    """
    id: int
    student_username: str
    final_grade: Optional[float] = None


@dataclass
class EnrollmentRecord:
    """A raw row of the enrollments table."""
    id: int
    student_id: int
    course_id: int
    final_grade: Optional[float] = None


@dataclass
class StudentGrade:
    """The grade a student received for one grade component."""
    component_name: str
    grade: float


@dataclass
class GradeHistoryEntry:
    """
    One recorded change of a grade.

    Attributes:
        id: grades_history primary key.
        old_grade: Grade before the change.
        new_grade: Grade after the change.
        change_timestamp: When the change happened.
        teacher_username: Teacher who made the change (None if deleted).
        change_reason: Free-text justification.
    """
    id: int
    old_grade: Optional[float]
    new_grade: float
    change_timestamp: datetime
    teacher_username: Optional[str] = None
    change_reason: Optional[str] = None
