"""
utils/console.py
----------------
The single rich Console every menu and command prints through.
"""

from rich.console import Console

console = Console()
