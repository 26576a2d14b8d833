"""Tests for the role guard on menus."""

from unittest.mock import MagicMock, patch

from models.user import Role
from security.auth import role_required


def _guarded(roles, role_in_db):
    inner = MagicMock(return_value="ran")
    inner.__name__ = "menu"
    guarded = role_required(*roles)(inner)
    with patch("security.auth.auth_service") as mock_auth, \
            patch("security.auth.console") as mock_console:
        mock_auth.get_user_role.return_value = role_in_db
        result = guarded("someone")
    return inner, result, mock_console


def test_matching_role_runs_handler():
    inner, result, _ = _guarded((Role.TEACHER,), "teacher")
    inner.assert_called_once_with("someone")
    assert result == "ran"


def test_other_role_is_blocked():
    inner, result, mock_console = _guarded((Role.ADMIN,), "student")
    inner.assert_not_called()
    assert result is None
    assert "not allowed" in mock_console.print.call_args.args[0]


def test_deleted_user_is_blocked():
    inner, result, _ = _guarded((Role.STUDENT,), None)
    inner.assert_not_called()


def test_several_roles():
    inner, _, _ = _guarded((Role.ADMIN, Role.TEACHER), "teacher")
    inner.assert_called_once()
