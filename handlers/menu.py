"""
handlers/menu.py
----------------
Login loop: ask for a username, look up its role and open the matching menu.
"""

from rich.markup import escape

from handlers.admin_handler import admin_menu
from handlers.student_handler import student_menu
from handlers.teacher_handler import teacher_menu
from models.user import Role
from services.auth_service import AuthService
from utils.console import console
from utils.logger import get_logger
from utils.prompts import question_green

logger = get_logger(__name__)
auth_service = AuthService()

ROLE_MENUS = {
    Role.ADMIN.value: admin_menu,
    Role.TEACHER.value: teacher_menu,
    Role.STUDENT.value: student_menu,
}


def start() -> None:
    """
    Run login sessions until an unknown username is entered or the user
    interrupts (Ctrl-C / end of input).

    After a menu's `logout` the loop asks for a username again.
    """
    try:
        while True:
            username = question_green("\nEnter your username").strip()
            role = auth_service.get_user_role(username)

            if not role:
                console.print("User not found. Exiting..")
                return

            console.print(f"\nWelcome, {escape(username)}! Your role is: {role}")
            logger.info(f"User '{username}' logged in as {role}")

            menu = ROLE_MENUS.get(role)
            if menu is None:
                console.print("Unknown role.")
                continue
            menu(username)
    except (KeyboardInterrupt, EOFError):
        console.print("\nGoodbye!")
