"""Tests for the interactive role menus and the login loop."""

from unittest.mock import MagicMock, patch

import pytest

import handlers.admin_handler as admin_handler
import handlers.student_handler as student_handler
import handlers.teacher_handler as teacher_handler
from handlers import menu
from handlers.dispatch import run_menu


@pytest.fixture
def allow_all_roles():
    """Make the role guard accept whoever is asking."""
    with patch("security.auth.auth_service") as mock_auth:
        mock_auth.get_user_role.side_effect = lambda username: {
            "admin": "admin",
            "teacher1": "teacher",
            "student1": "student",
        }.get(username)
        yield mock_auth


class TestRunMenu:
    """The keyword dispatch loop."""

    def test_dispatches_until_logout(self):
        handler = MagicMock()
        with patch("handlers.dispatch.choose_action", side_effect=["ls users", "logout"]), \
                patch("handlers.dispatch.console") as mock_console:
            run_menu("admin", {"ls users": handler})

        handler.assert_called_once_with("admin")
        mock_console.print.assert_called_with("Goodbye!")

    def test_unknown_keyword_asks_again(self):
        handler = MagicMock()
        with patch("handlers.dispatch.choose_action", side_effect=["ls everything", "ls users", "logout"]), \
                patch("handlers.dispatch.console") as mock_console:
            run_menu("admin", {"ls users": handler})

        handler.assert_called_once()
        printed = [c.args[0] for c in mock_console.print.call_args_list]
        assert any("Invalid choice. Try again." in p for p in printed)

    def test_logout_is_offered_last(self):
        with patch("handlers.dispatch.choose_action", return_value="logout") as mock_choose, \
                patch("handlers.dispatch.console"):
            run_menu("admin", {"ls users": MagicMock(), "ls courses": MagicMock()})

        mock_choose.assert_called_once_with(["ls users", "ls courses", "logout"])


class TestAdminMenu:

    def test_keywords(self):
        assert list(admin_handler.ACTIONS) == [
            "ls users", "ls courses", "create student", "create teacher",
            "create admin", "delete user", "create course", "delete course",
            "change course info", "create grade component", "assign teacher",
        ]

    def test_create_student_prompts_and_calls_service(self):
        with patch.object(admin_handler, "question_blue", side_effect=["alice", "Physics"]), \
                patch.object(admin_handler, "admin_service") as mock_service, \
                patch.object(admin_handler, "console") as mock_console:
            mock_service.create_student.return_value = "done"
            admin_handler.create_student("admin")

        mock_service.create_student.assert_called_once_with("alice", "Physics")
        mock_console.print.assert_called_once_with("done")

    def test_create_admin_prompt_names_the_right_role(self):
        with patch.object(admin_handler, "question_blue", return_value="root") as mock_prompt, \
                patch.object(admin_handler, "admin_service"), \
                patch.object(admin_handler, "console"):
            admin_handler.create_admin("admin")

        assert "admin" in mock_prompt.call_args.args[0]

    def test_change_course_info_reads_ects_as_int(self):
        with patch.object(admin_handler, "question_blue_int", side_effect=[2, 7]), \
                patch.object(admin_handler, "question_blue", side_effect=["Algebra II", "Harder"]), \
                patch.object(admin_handler, "admin_service") as mock_service, \
                patch.object(admin_handler, "console"):
            admin_handler.change_course_info("admin")

        mock_service.change_course_info.assert_called_once_with(2, "Algebra II", "Harder", 7)

    def test_create_grade_component(self):
        with patch.object(admin_handler, "question_blue_int", return_value=1), \
                patch.object(admin_handler, "question_blue", return_value="Quiz"), \
                patch.object(admin_handler, "question_blue_float", return_value=25.0), \
                patch.object(admin_handler, "admin_service") as mock_service, \
                patch.object(admin_handler, "console"):
            admin_handler.create_grade_component("admin")

        mock_service.create_grade_component.assert_called_once_with(1, "Quiz", 25.0)

    def test_menu_is_guarded(self, allow_all_roles):
        with patch.object(admin_handler, "run_menu") as mock_run, \
                patch("security.auth.console"):
            admin_handler.admin_menu("student1")
        mock_run.assert_not_called()

    def test_menu_runs_for_admin(self, allow_all_roles):
        with patch.object(admin_handler, "run_menu") as mock_run:
            admin_handler.admin_menu("admin")
        mock_run.assert_called_once_with("admin", admin_handler.ACTIONS)


class TestTeacherMenu:

    def test_set_grade_reads_reason_as_text(self):
        with patch.object(teacher_handler, "question_blue_int", side_effect=[1, 2]), \
                patch.object(teacher_handler, "question_blue", return_value="Late submission accepted"), \
                patch.object(teacher_handler, "question_blue_float", return_value=91.5), \
                patch.object(teacher_handler, "teacher_service") as mock_service, \
                patch.object(teacher_handler, "console"):
            teacher_handler.set_grade("teacher1")

        mock_service.set_grade.assert_called_once_with(
            1, 2, 91.5, "teacher1", "Late submission accepted"
        )

    def test_change_room_uses_logged_in_teacher(self):
        with patch.object(teacher_handler, "question_blue", return_value="D4"), \
                patch.object(teacher_handler, "teacher_service") as mock_service, \
                patch.object(teacher_handler, "console"):
            teacher_handler.change_room("teacher1")

        mock_service.change_room.assert_called_once_with("teacher1", "D4")

    def test_list_enrollments(self):
        with patch.object(teacher_handler, "question_blue_int", return_value=3), \
                patch.object(teacher_handler, "teacher_service") as mock_service, \
                patch.object(teacher_handler, "console"):
            teacher_handler.list_enrollments("teacher1")

        mock_service.list_enrollments.assert_called_once_with(3)


class TestStudentMenu:

    def test_keywords(self):
        assert list(student_handler.ACTIONS) == [
            "me", "ls all courses", "ls my courses", "enroll", "course info", "grades history",
        ]

    def test_me_only_shows_profile(self):
        with patch.object(student_handler, "student_service") as mock_service, \
                patch.object(student_handler, "console"):
            student_handler.show_me("student1")

        mock_service.info.assert_called_once_with("student1")
        mock_service.list_my_courses.assert_not_called()

    def test_enroll(self):
        with patch.object(student_handler, "question_blue_int", return_value=4), \
                patch.object(student_handler, "student_service") as mock_service, \
                patch.object(student_handler, "console"):
            student_handler.enroll("student1")

        mock_service.enroll.assert_called_once_with("student1", 4)

    def test_course_info(self):
        with patch.object(student_handler, "question_blue_int", return_value=1), \
                patch.object(student_handler, "course_service") as mock_service, \
                patch.object(student_handler, "console"):
            student_handler.course_info("student1")

        mock_service.course_info.assert_called_once_with(1)


class TestLoginLoop:

    def _printed(self, mock_console):
        return [c.args[0] if c.args else "" for c in mock_console.print.call_args_list]

    def test_unknown_user_ends_session(self):
        with patch.object(menu, "question_green", return_value="ghost"), \
                patch.object(menu, "auth_service") as mock_auth, \
                patch.object(menu, "console") as mock_console:
            mock_auth.get_user_role.return_value = None
            menu.start()

        assert "User not found. Exiting.." in self._printed(mock_console)

    def test_routes_to_role_menu_then_asks_again(self):
        teacher_menu = MagicMock()
        with patch.object(menu, "question_green", side_effect=["teacher1", "ghost"]), \
                patch.object(menu, "auth_service") as mock_auth, \
                patch.dict(menu.ROLE_MENUS, {"teacher": teacher_menu}), \
                patch.object(menu, "console") as mock_console:
            mock_auth.get_user_role.side_effect = ["teacher", None]
            menu.start()

        teacher_menu.assert_called_once_with("teacher1")
        printed = self._printed(mock_console)
        assert "\nWelcome, teacher1! Your role is: teacher" in printed
        assert printed[-1] == "User not found. Exiting.."

    def test_unknown_role(self):
        with patch.object(menu, "question_green", side_effect=["odd", "ghost"]), \
                patch.object(menu, "auth_service") as mock_auth, \
                patch.object(menu, "console") as mock_console:
            mock_auth.get_user_role.side_effect = ["janitor", None]
            menu.start()

        assert "Unknown role." in self._printed(mock_console)

    def test_username_is_trimmed(self):
        with patch.object(menu, "question_green", return_value="  ghost  "), \
                patch.object(menu, "auth_service") as mock_auth, \
                patch.object(menu, "console"):
            mock_auth.get_user_role.return_value = None
            menu.start()

        mock_auth.get_user_role.assert_called_once_with("ghost")

    @pytest.mark.parametrize("interrupt", [KeyboardInterrupt, EOFError])
    def test_interrupt_exits_cleanly(self, interrupt):
        with patch.object(menu, "question_green", side_effect=interrupt), \
                patch.object(menu, "console") as mock_console:
            menu.start()

        assert self._printed(mock_console)[-1] == "\nGoodbye!"

    def test_every_role_has_a_menu(self):
        assert set(menu.ROLE_MENUS) == {"admin", "teacher", "student"}
