from __future__ import annotations

from typing import Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel

from .errors import InputError

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

BANNER = "ADVENT OF CODE 2025"


def print_program_header(day: int, problem_name: str, out: Console | None = None) -> None:
    out = console if out is None else out
    out.print(Panel(Align.center(BANNER), width=49, style="bold"))
    out.print()
    out.print(f"DAY {day:02}: {problem_name}")
    out.print()


def print_result(label: str, value: int, out: Console | None = None) -> None:
    (console if out is None else out).print(f"{label}: [bold]{value}[/bold]")


def print_errors(heading: str, errors: Sequence[InputError], out: Console | None = None) -> None:
    out = err_console if out is None else out
    out.print(f"[red]{heading}[/red]")
    for error in errors:
        out.print(f"  - {error}", markup=False)
