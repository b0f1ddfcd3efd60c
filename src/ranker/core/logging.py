# src/ranker/core/logging.py
"""Console logging built on rich."""

import time
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, List, Sequence

from rich.console import Console
from rich.table import Table

# --- Global Console ---
# All modules print through this single console instance.
console = Console()


def _markup(style: str) -> Callable[[Any], str]:
    return lambda value: f"[{style}]{value}[/{style}]"


color_palette: Dict[str, Callable[[Any], str]] = {
    "table": _markup("cyan"),
    "field": _markup("green"),
    "value": _markup("yellow"),
    "route": _markup("blue"),
    "count": _markup("bold magenta"),
}

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}


class Logger:
    """Small leveled logger that prints rich markup to the shared console."""

    def __init__(self, console: Console = console, level: str = "info"):
        self.console = console
        self.level = LEVELS[level]
        self._indent = 0

    def set_level(self, level: str) -> None:
        if level not in LEVELS:
            raise ValueError(f"Unknown log level '{level}'")
        self.level = LEVELS[level]

    def _emit(self, level: str, prefix: str, message: str) -> None:
        if LEVELS[level] < self.level:
            return
        self.console.print(f"{'  ' * self._indent}{prefix} {message}")

    def debug(self, message: str) -> None:
        self._emit("debug", "[dim]·[/dim]", f"[dim]{message}[/dim]")

    def info(self, message: str) -> None:
        self._emit("info", "[blue]ℹ[/blue]", message)

    def success(self, message: str) -> None:
        self._emit("info", "[green]✓[/green]", message)

    def warn(self, message: str) -> None:
        self._emit("warn", "[yellow]⚠[/yellow]", message)

    def error(self, message: str) -> None:
        self._emit("error", "[red]✗[/red]", message)

    def section(self, title: str) -> None:
        if LEVELS["info"] < self.level:
            return
        self.console.rule(f"[bold]{title}[/bold]")

    @contextmanager
    def indented(self) -> Iterator[None]:
        self._indent += 1
        try:
            yield
        finally:
            self._indent -= 1

    @contextmanager
    def timed(self, label: str) -> Iterator[None]:
        """Log how long the wrapped block took."""
        start = time.perf_counter()
        try:
            yield
        finally:
            elapsed = (time.perf_counter() - start) * 1000
            self.debug(f"{label} took {elapsed:.2f}ms")

    def table(self, headers: Sequence[str], rows: List[Sequence[Any]]) -> None:
        if LEVELS["info"] < self.level:
            return
        table = Table(box=None, padding=(0, 1))
        for header in headers:
            table.add_column(header, style="cyan")
        for row in rows:
            table.add_row(*(str(cell) for cell in row))
        self.console.print(table)


log = Logger()
