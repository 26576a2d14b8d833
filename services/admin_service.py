"""
services/admin_service.py
-------------------------
Business logic behind the admin menu: user and course management.
All writes go through stored procedures.
"""

from rich.console import RenderableType

from repositories.user_repo import UserRepository
from services.errors import reports_db_errors
from services.procedure_service import ProcedureService
from utils.tables import make_table


class AdminService:
    """User, course and grade component administration."""

    def __init__(self):
        self.user_repo = UserRepository()
        self.procedures = ProcedureService()

    @reports_db_errors("fetching users")
    def list_users(self) -> RenderableType:
        users = self.user_repo.list_all()
        if not users:
            return "No users found."
        return make_table(
            "List of users and their roles",
            ("ID", "Username", "Role"),
            ((u.id, u.username, u.role) for u in users),
        )

    # ── Users ─────────────────────────────────────────────

    def create_student(self, username: str, programme: str) -> str:
        return self.procedures.call("create_student", username, programme)

    def create_teacher(self, username: str, room: str) -> str:
        return self.procedures.call("create_teacher", username, room)

    def create_admin(self, username: str) -> str:
        return self.procedures.call("create_admin", username)

    def delete_user(self, username: str) -> str:
        return self.procedures.call("delete_user", username)

    # ── Courses ───────────────────────────────────────────

    def create_course(self, name: str, description: str, ects: int) -> str:
        return self.procedures.call("create_course", name, description, ects)

    def delete_course(self, course_id: int) -> str:
        return self.procedures.call("delete_course", course_id)

    def change_course_info(
        self, course_id: int, name: str, description: str, ects: int
    ) -> str:
        return self.procedures.call("change_course_info", course_id, name, description, ects)

    def create_grade_component(self, course_id: int, name: str, max_score: float) -> str:
        return self.procedures.call("create_grade_component", course_id, name, max_score)

    def assign_teacher(self, teacher_username: str, course_id: int) -> str:
        return self.procedures.call("assign_teacher_to_course", teacher_username, course_id)
