# src/ranker/ui.py

from rich.align import Align
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from sqlalchemy import Enum as SQLAlchemyEnum
from sqlalchemy import Table as SQLTable

from .core.logging import console


def display_table_structure(table: SQLTable) -> None:
    """Prints a mapped table's columns using a rich Table."""

    console.print(f"[bold cyan]{table.name}[/bold cyan]")
    structure_table = Table(
        box=None, padding=(0, 1), show_header=False, show_edge=False
    )
    structure_table.add_column("Name", style="cyan", no_wrap=True, width=24)
    structure_table.add_column("Type", style="green", width=20)
    structure_table.add_column("Details", style="white")

    for column in table.columns:
        col_name = f"{column.name}{'*' if not column.nullable else ''}"

        details = []
        if column.primary_key:
            details.append("[yellow]PK[/yellow]")
        if column.foreign_keys:
            fk = next(iter(column.foreign_keys))
            details.append(f"[blue]FK -> {fk.column.table.name}[/blue]")

        if isinstance(column.type, SQLAlchemyEnum):
            details.append(
                f"[magenta]Enum[/magenta]: {', '.join(map(str, column.type.enums))}"
            )

        structure_table.add_row(col_name, str(column.type), " ".join(details))

    console.print(structure_table)
    console.print()


def print_welcome(project_name: str, version: str, docs_url: str) -> None:
    """Prints a welcome message using a rich Panel."""
    message = Text.from_markup(
        f"API Documentation available at [link={docs_url}]{docs_url}[/link]"
    )
    panel = Panel(
        Align.center(message, vertical="middle"),
        title=f"[bold green]{project_name} v{version}[/bold green]",
        border_style="blue",
        padding=(1, 2),
    )
    console.print(panel)
