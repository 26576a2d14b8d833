"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
"""

from typing import Optional

from db.connection import fetch_all, fetch_one
from models.user import User


class UserRepository:
    """Repository for read operations on the users table."""

    def get_role(self, username: str) -> Optional[str]:
        """
        Look up the role of a user.

        Returns:
            'admin', 'teacher' or 'student', or None if the user does not exist.
        """
        sql = "SELECT role FROM users WHERE username = %s;"
        row = fetch_one(sql, (username,))
        return row["role"] if row else None

    def get_id(self, username: str) -> Optional[int]:
        """Fetch the primary key of a user by username."""
        sql = "SELECT id FROM users WHERE username = %s;"
        row = fetch_one(sql, (username,))
        return row["id"] if row else None

    def list_all(self) -> list[User]:
        """Fetch every user ordered by ID."""
        sql = "SELECT username, role, id FROM users ORDER BY id;"
        return [
            User(username=r["username"], role=r["role"], id=r["id"])
            for r in fetch_all(sql)
        ]
