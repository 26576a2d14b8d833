"""
utils/tables.py
---------------
Builds the rich tables used to print query results.
"""

from typing import Iterable, Sequence

from rich.markup import escape
from rich.table import Table


def make_table(title: str, headers: Sequence[str], rows: Iterable[Sequence[object]]) -> Table:
    """
    Build a table with one column per header.

    Args:
        title: Caption printed above the table.
        headers: Column headers.
        rows: Cell values; each is converted with str() and escaped, None
            is shown as "-".

    Returns:
        A rich Table ready for console.print().
    """
    table = Table(title=title, title_justify="left", header_style="bold cyan")
    for header in headers:
        table.add_column(header)
    for row in rows:
        table.add_row(*(escape(str(cell)) if cell is not None else "-" for cell in row))
    return table
