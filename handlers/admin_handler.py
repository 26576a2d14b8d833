"""
handlers/admin_handler.py
-------------------------
Admin menu: manage users, courses, grade components and teaching assignments.
"""

from handlers.dispatch import run_menu
from models.user import Role
from security.auth import role_required
from services.admin_service import AdminService
from services.course_service import CourseService
from utils.console import console
from utils.prompts import question_blue, question_blue_float, question_blue_int

admin_service = AdminService()
course_service = CourseService()


def list_users(username: str) -> None:
    console.print(admin_service.list_users())


def list_courses(username: str) -> None:
    console.print(course_service.list_courses())


def create_student(username: str) -> None:
    student = question_blue("Enter username for new student")
    programme = question_blue("Enter programme for student")
    console.print(admin_service.create_student(student, programme))


def create_teacher(username: str) -> None:
    teacher = question_blue("Enter username for new teacher")
    room = question_blue("Enter room for teacher")
    console.print(admin_service.create_teacher(teacher, room))


def create_admin(username: str) -> None:
    admin = question_blue("Enter username for new admin")
    console.print(admin_service.create_admin(admin))


def delete_user(username: str) -> None:
    target = question_blue("Enter username of user to delete")
    console.print(admin_service.delete_user(target))


def create_course(username: str) -> None:
    name = question_blue("Enter course name")
    description = question_blue("Enter course description")
    ects = question_blue_int("Enter ECTS")
    console.print(admin_service.create_course(name, description, ects))


def delete_course(username: str) -> None:
    course_id = question_blue_int("Enter course ID to delete")
    console.print(admin_service.delete_course(course_id))


def change_course_info(username: str) -> None:
    course_id = question_blue_int("Enter course ID to change")
    name = question_blue("Enter new course name")
    description = question_blue("Enter new course description")
    ects = question_blue_int("Enter ECTS")
    console.print(admin_service.change_course_info(course_id, name, description, ects))


def create_grade_component(username: str) -> None:
    course_id = question_blue_int("Enter course ID for grade component")
    name = question_blue("Enter grade component name")
    max_score = question_blue_float("Enter max score")
    console.print(admin_service.create_grade_component(course_id, name, max_score))


def assign_teacher(username: str) -> None:
    teacher = question_blue("Enter teacher username")
    course_id = question_blue_int("Enter course ID")
    console.print(admin_service.assign_teacher(teacher, course_id))


ACTIONS = {
    "ls users": list_users,
    "ls courses": list_courses,
    "create student": create_student,
    "create teacher": create_teacher,
    "create admin": create_admin,
    "delete user": delete_user,
    "create course": create_course,
    "delete course": delete_course,
    "change course info": change_course_info,
    "create grade component": create_grade_component,
    "assign teacher": assign_teacher,
}


@role_required(Role.ADMIN)
def admin_menu(username: str) -> None:
    """Run the admin menu until logout."""
    run_menu(username, ACTIONS)
