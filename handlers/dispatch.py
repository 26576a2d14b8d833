"""
handlers/dispatch.py
--------------------
The read-dispatch loop shared by the three role menus.
"""

from typing import Callable

from utils.console import console
from utils.prompts import choose_action

LOGOUT = "logout"

ActionHandler = Callable[[str], None]


def run_menu(username: str, actions: dict[str, ActionHandler]) -> None:
    """
    Ask for an action keyword until the user logs out.

    Args:
        username: The logged-in user, passed to every handler.
        actions: Keyword → handler. `logout` is always offered last.
    """
    keywords = [*actions, LOGOUT]
    while True:
        action = choose_action(keywords)
        if action == LOGOUT:
            console.print("Goodbye!")
            return
        handler = actions.get(action)
        if handler is None:
            console.print("[yellow]Invalid choice. Try again.[/yellow]")
            continue
        handler(username)
