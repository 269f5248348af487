# src/sift/ui.py

from typing import Iterable, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .core.query.compiler import CompiledPredicate

# --- Global Console ---
console = Console()


def display_predicates(
    predicates: Iterable[CompiledPredicate], target: Optional[Console] = None
) -> None:
    """Prints compiled predicates and their bindings as a rich Table."""
    out = target or console

    table = Table(box=None, padding=(0, 1), show_edge=False)
    table.add_column("Column", style="cyan", no_wrap=True)
    table.add_column("Operator", style="magenta")
    table.add_column("Clause", style="white")
    table.add_column("Binding", style="green")

    for predicate in predicates:
        binding = escape(f":{predicate.parameter_name} = {predicate.parameter_value!r}")
        if predicate.includes_null_check:
            binding += " [yellow](+NULL)[/yellow]"
        table.add_row(
            escape(predicate.column_ref),
            predicate.kind.name,
            escape(predicate.clause),
            binding,
        )

    out.print(table)
