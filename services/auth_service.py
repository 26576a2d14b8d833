"""
services/auth_service.py
------------------------
Resolves a username to its role. There are no passwords: knowing a
username is enough to open its menu.
"""

from typing import Optional

import psycopg2

from repositories.user_repo import UserRepository
from services.errors import describe_db_error
from utils.logger import get_logger

logger = get_logger(__name__)


class AuthService:
    """Username-based login."""

    def __init__(self):
        self.repo = UserRepository()

    def get_user_role(self, username: str) -> Optional[str]:
        """
        Look up the role of a user.

        Returns:
            The role, or None if the user does not exist or the lookup failed.
        """
        try:
            role = self.repo.get_role(username)
        except psycopg2.Error as e:
            logger.error(f"Error fetching user role: {describe_db_error(e)}")
            return None
        if role is None:
            logger.info(f"Login attempt for unknown user '{username}'")
        return role
