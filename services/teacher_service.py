"""
services/teacher_service.py
---------------------------
Business logic behind the teacher menu: course rosters and grading.
"""

from rich.console import RenderableType

from repositories.course_repo import CourseRepository
from repositories.enrollment_repo import EnrollmentRepository
from services.errors import reports_db_errors
from services.procedure_service import ProcedureService
from utils.numbers import format_grade
from utils.tables import make_table


class TeacherService:
    """
    Views and actions available to teachers.

    Grades are written with the assign_or_update_grade procedure, which also
    records the grade history; the final grade is recalculated by the database.
    """

    def __init__(self):
        self.course_repo = CourseRepository()
        self.enrollment_repo = EnrollmentRepository()
        self.procedures = ProcedureService()

    @reports_db_errors("fetching courses for teacher")
    def list_courses(self, username: str) -> RenderableType:
        courses = self.course_repo.for_teacher(username)
        if not courses:
            return "You are not assigned to any courses."
        return make_table(
            "Your courses",
            ("ID", "Course Name"),
            ((c.id, c.name) for c in courses),
        )

    @reports_db_errors("fetching enrollments")
    def list_enrollments(self, course_id: int) -> RenderableType:
        enrollments = self.enrollment_repo.for_course(course_id)
        if not enrollments:
            return "No enrollments found for this course."
        return make_table(
            "Enrollments for the course",
            ("Enrollment ID", "Student", "Final Grade"),
            ((e.id, e.student_username, format_grade(e.final_grade)) for e in enrollments),
        )

    @reports_db_errors("fetching grade components")
    def list_grade_components(self, course_id: int) -> RenderableType:
        components = self.course_repo.grade_components(course_id)
        if not components:
            return "No grade components found for this course."
        return make_table(
            "Grade components for the course",
            ("Grade Component ID", "Name", "Max Score"),
            ((c.id, c.name, f"{c.max_score:.2f}") for c in components),
        )

    @reports_db_errors("fetching student grades")
    def list_student_grades(self, enrollment_id: int) -> RenderableType:
        grades = self.enrollment_repo.grades(enrollment_id)
        if not grades:
            return "No grades found for this enrollment."
        return make_table(
            "Grades for the student in this course",
            ("Grade Component", "Grade"),
            ((g.component_name, f"{g.grade:.2f}") for g in grades),
        )

    def set_grade(
        self,
        enrollment_id: int,
        grade_component_id: int,
        grade: float,
        teacher_username: str,
        change_reason: str,
    ) -> str:
        return self.procedures.call(
            "assign_or_update_grade",
            enrollment_id,
            grade_component_id,
            grade,
            teacher_username,
            change_reason,
        )

    def change_room(self, username: str, room: str) -> str:
        return self.procedures.call("change_teacher_room", username, room)
