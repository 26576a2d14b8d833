"""
utils/prompts.py
----------------
Colored terminal prompts built on rich.prompt.
Numeric prompts keep asking until the input parses.
"""

from typing import Iterable

from rich.prompt import FloatPrompt, IntPrompt, Prompt

from utils.console import console


def question_green(text: str) -> str:
    return Prompt.ask(f"[green]{text}[/green]", console=console)


def question_blue(text: str) -> str:
    return Prompt.ask(f"[blue]{text}[/blue]", console=console)


def question_blue_int(text: str) -> int:
    return IntPrompt.ask(f"[blue]{text}[/blue]", console=console)


def question_blue_float(text: str) -> float:
    return FloatPrompt.ask(f"[blue]{text}[/blue]", console=console)


def choose_action(actions: Iterable[str]) -> str:
    """Ask for one of the menu keywords; surrounding whitespace is ignored."""
    listing = ", ".join(actions)
    return Prompt.ask(
        f"Choose an action ({listing})", console=console, prompt_suffix="\n> "
    ).strip()
