"""
services/course_service.py
--------------------------
Course catalogue views shared by the admin and student menus.
"""

from rich.console import RenderableType
from rich.markup import escape

from repositories.course_repo import CourseRepository
from services.errors import reports_db_errors
from utils.tables import make_table


class CourseService:
    """Lists courses and shows course details."""

    def __init__(self):
        self.repo = CourseRepository()

    @reports_db_errors("fetching courses")
    def list_courses(self) -> RenderableType:
        courses = self.repo.list_all()
        if not courses:
            return "No results found."
        return make_table(
            "Courses",
            ("ID", "Course Name"),
            ((c.id, c.name) for c in courses),
        )

    @reports_db_errors("fetching course information")
    def course_info(self, course_id: int) -> RenderableType:
        course = self.repo.get_by_id(course_id)
        if course is None:
            return "Course not found."
        return escape(str(course))
