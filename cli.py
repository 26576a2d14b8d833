"""
cli.py
------
Administrative command-line tool.

Unlike the interactive menus, these commands write with plain SQL statements
instead of stored procedures. They are meant for bulk fixes and scripting:
    gradebook-admin list-students
    gradebook-admin create-student alice "Computer Science"
    gradebook-admin enroll-student 1 2
    gradebook-admin assign-grade 1 1 87.5
"""

import psycopg2
import typer
from rich.markup import escape

from db.connection import init_pool
from db.init_db import reset_database, seed_database, setup_database
from repositories.course_repo import CourseRepository
from repositories.enrollment_repo import EnrollmentRepository
from repositories.grade_repo import GradeRepository
from repositories.student_repo import StudentRepository
from repositories.user_repo import UserRepository
from services.errors import describe_db_error
from utils.console import console
from utils.numbers import format_grade
from utils.tables import make_table

app = typer.Typer(
    name="gradebook-admin",
    help="Administrative tool for the academic records database.",
    no_args_is_help=True,
)


def _connect() -> None:
    """Open the database connection, or exit with an error."""
    try:
        init_pool()
    except psycopg2.OperationalError as e:
        _unreachable(e)


def _unreachable(error: psycopg2.OperationalError) -> None:
    console.print(f"[red]✗ Could not connect to the database: {escape(str(error).strip())}[/red]")
    raise typer.Exit(code=1)


def _fail(action: str, error: psycopg2.Error) -> None:
    console.print(f"[red]✗ Error {action}: {escape(describe_db_error(error))}[/red]")
    raise typer.Exit(code=1)


@app.command(name="list-students")
def list_students() -> None:
    """List all students."""
    _connect()
    try:
        students = StudentRepository().list_all()
    except psycopg2.Error as e:
        _fail("fetching students", e)
    console.print(
        make_table(
            "Students",
            ("ID", "User ID", "Programme"),
            ((s.id, s.user_id, s.programme) for s in students),
        )
    )


@app.command(name="create-student")
def create_student(
    username: str = typer.Argument(..., help="Existing user to turn into a student"),
    programme: str = typer.Argument(..., help="Study programme"),
) -> None:
    """Create a new student."""
    _connect()
    try:
        user_id = UserRepository().get_id(username)
        if user_id is None:
            console.print("[red]✗ User not found. Please create the user first.[/red]")
            raise typer.Exit(code=1)
        StudentRepository().add(user_id, programme)
    except psycopg2.Error as e:
        _fail("creating student", e)
    console.print(f"[green]✓ Student {escape(username)} created successfully.[/green]")


@app.command(name="list-courses")
def list_courses() -> None:
    """List all courses."""
    _connect()
    try:
        courses = CourseRepository().list_all()
    except psycopg2.Error as e:
        _fail("fetching courses", e)
    console.print(
        make_table("Courses", ("ID", "Course Name"), ((c.id, c.name) for c in courses))
    )


@app.command(name="enroll-student")
def enroll_student(
    student_id: int = typer.Argument(..., help="ID from the students table"),
    course_id: int = typer.Argument(..., help="ID from the courses table"),
) -> None:
    """Enroll a student in a course."""
    _connect()
    try:
        EnrollmentRepository().add(student_id, course_id)
    except psycopg2.Error as e:
        _fail("enrolling student", e)
    console.print(f"[green]✓ Student {student_id} enrolled in course {course_id}.[/green]")


@app.command(name="assign-grade")
def assign_grade(
    enrollment_id: int = typer.Argument(...),
    grade_component_id: int = typer.Argument(...),
    grade: float = typer.Argument(...),
) -> None:
    """Assign a grade to a student."""
    _connect()
    try:
        grade_id = GradeRepository().add(enrollment_id, grade_component_id, grade)
    except psycopg2.Error as e:
        _fail("assigning grade", e)
    console.print(f"[green]✓ Grade assigned with ID {grade_id}[/green]")


@app.command(name="list-enrollments")
def list_enrollments() -> None:
    """List all enrollments."""
    _connect()
    try:
        enrollments = EnrollmentRepository().list_all()
    except psycopg2.Error as e:
        _fail("fetching enrollments", e)
    console.print(
        make_table(
            "Enrollments",
            ("ID", "Student ID", "Course ID", "Final Grade"),
            (
                (e.id, e.student_id, e.course_id, format_grade(e.final_grade))
                for e in enrollments
            ),
        )
    )


@app.command()
def setup() -> None:
    """Create the database and install tables, functions, procedures and triggers."""
    try:
        ok = setup_database()
    except psycopg2.OperationalError as e:
        _unreachable(e)
    if not ok:
        console.print("[red]✗ Database setup failed, see the log for details.[/red]")
        raise typer.Exit(code=1)
    console.print("[green]✓ Database is set up.[/green]")


@app.command()
def seed() -> None:
    """Load the sample data."""
    _connect()
    if not seed_database():
        console.print("[red]✗ Seeding failed, see the log for details.[/red]")
        raise typer.Exit(code=1)
    console.print("[green]✓ Sample data loaded.[/green]")


@app.command()
def reset() -> None:
    """Drop and recreate every database object, then load the sample data."""
    _connect()
    if not reset_database():
        console.print("[red]✗ Reset failed, see the log for details.[/red]")
        raise typer.Exit(code=1)
    console.print("[green]✓ Database reset.[/green]")


if __name__ == "__main__":
    app()
