"""
handlers/teacher_handler.py
---------------------------
Teacher menu: rosters, grade components, grading and office room.
"""

from handlers.dispatch import run_menu
from models.user import Role
from security.auth import role_required
from services.teacher_service import TeacherService
from utils.console import console
from utils.prompts import question_blue, question_blue_float, question_blue_int

teacher_service = TeacherService()


def list_courses(username: str) -> None:
    console.print(teacher_service.list_courses(username))


def list_enrollments(username: str) -> None:
    course_id = question_blue_int("Enter course ID to list enrollments")
    console.print(teacher_service.list_enrollments(course_id))


def list_grade_components(username: str) -> None:
    course_id = question_blue_int("Enter course ID to list grade components")
    console.print(teacher_service.list_grade_components(course_id))


def list_student_grades(username: str) -> None:
    enrollment_id = question_blue_int("Enter enrollment ID to list student grades")
    console.print(teacher_service.list_student_grades(enrollment_id))


def set_grade(username: str) -> None:
    enrollment_id = question_blue_int("Enter enrollment ID to set grade")
    grade_component_id = question_blue_int("Enter grade component ID")
    change_reason = question_blue("Why?")
    grade = question_blue_float("Enter grade")
    console.print(
        teacher_service.set_grade(
            enrollment_id, grade_component_id, grade, username, change_reason
        )
    )


def change_room(username: str) -> None:
    room = question_blue("Enter new room")
    console.print(teacher_service.change_room(username, room))


ACTIONS = {
    "ls courses": list_courses,
    "ls enrollments": list_enrollments,
    "ls grade components": list_grade_components,
    "ls student grades": list_student_grades,
    "set grade": set_grade,
    "change room": change_room,
}


@role_required(Role.TEACHER)
def teacher_menu(username: str) -> None:
    """Run the teacher menu until logout."""
    run_menu(username, ACTIONS)
