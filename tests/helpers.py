"""Helpers shared by the test modules."""

import io

from rich.console import Console


def render(renderable) -> str:
    """Render a rich renderable (or markup string) to plain text."""
    buffer = io.StringIO()
    Console(file=buffer, width=200, color_system=None).print(renderable)
    return buffer.getvalue()
