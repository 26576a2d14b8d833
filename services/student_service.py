"""
services/student_service.py
---------------------------
Business logic behind the student menu.
"""

from rich.console import RenderableType
from rich.markup import escape

from repositories.course_repo import CourseRepository
from repositories.enrollment_repo import EnrollmentRepository
from services.errors import reports_db_errors
from services.procedure_service import ProcedureService
from utils.numbers import format_grade
from utils.tables import make_table


class StudentService:
    """Views of a student's own record, plus self-enrollment."""

    def __init__(self):
        self.course_repo = CourseRepository()
        self.enrollment_repo = EnrollmentRepository()
        self.procedures = ProcedureService()

    @reports_db_errors("fetching student information")
    def info(self, username: str) -> RenderableType:
        """Programme, earned ECTS and GPA."""
        info = self.enrollment_repo.student_info(username)
        if info is None:
            return "No results found."
        return escape(str(info))

    @reports_db_errors("fetching courses for student")
    def list_my_courses(self, username: str) -> RenderableType:
        courses = self.course_repo.for_student(username)
        if not courses:
            return "You are not enrolled in any courses."
        return make_table(
            "Your courses",
            ("ID", "Course Name", "Final Grade"),
            ((c.id, c.name, format_grade(c.final_grade)) for c in courses),
        )

    def enroll(self, username: str, course_id: int) -> str:
        return self.procedures.call("enroll_student", username, course_id)

    @reports_db_errors("fetching grade history")
    def grade_history(self, username: str) -> RenderableType:
        entries = self.enrollment_repo.grade_history(username)
        if not entries:
            return "No grade history found or you do not have permission to view it."
        return make_table(
            "Grade History",
            ("ID", "Old Grade", "New Grade", "Change Timestamp", "Teacher", "Reason"),
            (
                (
                    e.id,
                    format_grade(e.old_grade),
                    format_grade(e.new_grade),
                    e.change_timestamp.strftime("%Y-%m-%d %H:%M"),
                    e.teacher_username,
                    e.change_reason,
                )
                for e in entries
            ),
        )
