"""
security/auth.py
-----------------
Authorization guard for the role menus.
Blocks a menu when the user's current role is not one it serves.
"""

from functools import wraps
from typing import Callable

from services.auth_service import AuthService
from utils.console import console
from utils.logger import get_logger

logger = get_logger(__name__)
auth_service = AuthService()


def role_required(*roles: str):
    """
    Decorator that restricts a menu handler to users holding one of `roles`.

    The role is looked up again when the menu is entered, so an account that
    was deleted or changed since login cannot open the menu.

    Usage:
        @role_required(Role.ADMIN)
        def admin_menu(username: str) -> None:
            ...
    """
    def decorator(func: Callable):
        @wraps(func)
        def wrapper(username: str, *args, **kwargs):
            role = auth_service.get_user_role(username)
            if role not in roles:
                logger.warning(f"⛔ Blocked {func.__name__} for user '{username}' (role: {role})")
                console.print("[red]⛔ You are not allowed to use this menu.[/red]")
                return None
            return func(username, *args, **kwargs)

        return wrapper
    return decorator
