"""
handlers/student_handler.py
---------------------------
Student menu: profile, courses, enrollment and grade history.
"""

from handlers.dispatch import run_menu
from models.user import Role
from security.auth import role_required
from services.course_service import CourseService
from services.student_service import StudentService
from utils.console import console
from utils.prompts import question_blue_int

student_service = StudentService()
course_service = CourseService()


def show_me(username: str) -> None:
    console.print(student_service.info(username))


def list_all_courses(username: str) -> None:
    console.print(course_service.list_courses())


def list_my_courses(username: str) -> None:
    console.print(student_service.list_my_courses(username))


def enroll(username: str) -> None:
    course_id = question_blue_int("Enter course ID to enroll in")
    console.print(student_service.enroll(username, course_id))


def course_info(username: str) -> None:
    course_id = question_blue_int("Enter course ID to view info")
    console.print(course_service.course_info(course_id))


def grades_history(username: str) -> None:
    console.print(student_service.grade_history(username))


ACTIONS = {
    "me": show_me,
    "ls all courses": list_all_courses,
    "ls my courses": list_my_courses,
    "enroll": enroll,
    "course info": course_info,
    "grades history": grades_history,
}


@role_required(Role.STUDENT)
def student_menu(username: str) -> None:
    """Run the student menu until logout."""
    run_menu(username, ACTIONS)
