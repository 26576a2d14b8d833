"""
models/user.py
--------------
Domain model for user accounts and their roles.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Role(str, Enum):
    """The three roles a user account can hold."""
    ADMIN = "admin"
    TEACHER = "teacher"
    STUDENT = "student"


@dataclass
class User:
    """
    Represents a row of the users table.

    Attributes:
        id: Database primary key.
        username: Unique login name.
        role: One of 'admin', 'teacher', 'student'.
    """
    username: str
    role: str
    id: Optional[int] = None


@dataclass
class StudentRecord:
    """A row of the students table, as listed by the admin tool."""
    id: int
    user_id: int
    programme: str


@dataclass
class StudentInfo:
    """
    Programme and progress summary of a student.

    ECTS and GPA are computed by the database.
    """
    programme: str
    ects: int
    gpa: Optional[float] = None

    def __str__(self) -> str:
        gpa = f"{self.gpa:.2f}" if self.gpa is not None else "-"
        return f"Programme: {self.programme}, ECTS: {self.ects}, GPA: {gpa}"
