"""Shared output formatting.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from collections.abc import Iterable

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text


def make_table(*titles: str) -> Table:
    """Borderless table with a rule under bold titles."""
    table = Table(
        box=box.SIMPLE_HEAD,
        show_edge=False,
        header_style="bold",
        padding=(0, 1),
    )
    for title in titles:
        table.add_column(title, overflow="fold")
    return table


def add_row(table: Table, cells: Iterable[str]) -> None:
    """Add cells as plain text, server values may contain brackets."""
    table.add_row(*(Text(cell) for cell in cells))


def print_field(console: Console, label: str, value: object) -> None:
    """Print ``label`` in bold followed by its value."""
    console.print(Text.assemble((label, "bold"), " ", str(value)))


def or_empty(value: object | None) -> str:
    """Render missing values as empty string."""
    return "" if value is None else str(value)
