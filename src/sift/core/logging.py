# src/sift/core/logging.py
"""Rich-backed console logger shared by every sift module."""

import os
import time
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

LEVELS: Dict[str, int] = {
    "DEBUG": 10,
    "INFO": 20,
    "WARNING": 30,
    "ERROR": 40,
}

# Markup helpers so callers can highlight the things they log.
color_palette: Dict[str, Callable[[Any], str]] = {
    "column": lambda s: f"[cyan]{escape(str(s))}[/cyan]",
    "operator": lambda s: f"[magenta]{escape(str(s))}[/magenta]",
    "value": lambda s: f"[green]{escape(repr(s))}[/green]",
    "param": lambda s: f"[yellow]:{escape(str(s))}[/yellow]",
    "table": lambda s: f"[blue]{escape(str(s))}[/blue]",
}


class Logger:
    """Small leveled logger that prints through a rich Console."""

    def __init__(self, level: str = "INFO", console: Optional[Console] = None):
        self.console = console or Console(stderr=True)
        self.level = LEVELS["INFO"]
        self.set_level(level)
        self._indent = 0

    def set_level(self, level: str) -> None:
        try:
            self.level = LEVELS[level.upper()]
        except KeyError:
            raise ValueError(
                f"Unknown log level '{level}', expected one of {', '.join(LEVELS)}"
            ) from None

    def is_enabled(self, level: str) -> bool:
        return LEVELS[level] >= self.level

    def _emit(self, level: str, prefix: str, message: str) -> None:
        if not self.is_enabled(level):
            return
        pad = "  " * self._indent
        self.console.print(f"{pad}{prefix} {message}")

    def debug(self, message: str) -> None:
        self._emit("DEBUG", "[dim]DEBUG[/dim]", f"[dim]{message}[/dim]")

    def info(self, message: str) -> None:
        self._emit("INFO", "[blue]INFO[/blue] ", message)

    def success(self, message: str) -> None:
        self._emit("INFO", "[green]OK[/green]   ", message)

    def warn(self, message: str) -> None:
        self._emit("WARNING", "[yellow]WARN[/yellow] ", message)

    def error(self, message: str) -> None:
        self._emit("ERROR", "[bold red]ERROR[/bold red]", message)

    def section(self, title: str) -> None:
        if self.is_enabled("INFO"):
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
            self.info(f"{label} [dim]({elapsed:.2f} ms)[/dim]")

    def table(self, headers: List[str], rows: List[List[Any]]) -> None:
        if not self.is_enabled("INFO"):
            return
        table = Table(box=None, padding=(0, 1))
        for header in headers:
            table.add_column(header, style="cyan")
        for row in rows:
            table.add_row(*(str(cell) for cell in row))
        self.console.print(table)


# * Global logger: every module imports this single instance.
log = Logger(level=os.environ.get("SIFT_LOG_LEVEL", "INFO"))
