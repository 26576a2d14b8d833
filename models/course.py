"""
models/course.py
----------------
Domain models for courses and their grade components.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Course:
    """
    Represents a course.

    Attributes:
        id: Database primary key.
        name: Course name.
        description: Free-text description (only loaded for course info).
        ects: Credit value (only loaded for course info).
        final_grade: The student's final grade, when listed for a student.
    """
    id: int
    name: str
    description: Optional[str] = None
    ects: Optional[int] = None
    final_grade: Optional[float] = None

    def __str__(self) -> str:
        text = f"ID: {self.id}, Course Name: {self.name}"
        if self.description is not None:
            text += f", Description: {self.description}"
        if self.ects is not None:
            text += f", ECTS: {self.ects}"
        return text


@dataclass
class GradeComponent:
    """A graded part of a course (assignment, exam, ...)."""
    id: int
    name: str
    max_score: float
