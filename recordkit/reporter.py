from __future__ import annotations

from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from recordkit.domain.models import Record


def print_records(records: Sequence[Record], console: Optional[Console] = None) -> None:
    """
    Render records as a rich table, one row per record in the given order.
    """
    console = console or Console()

    if not records:
        console.print("[yellow]No records to display.[/yellow]")
        return

    table = Table(
        title="Records",
        box=box.ROUNDED,
        caption=f"{len(records)} record(s)",
    )
    table.add_column("#", justify="right", style="dim")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Value", justify="right", style="magenta")

    for index, record in enumerate(records, start=1):
        table.add_row(str(index), record.name, str(record.value))

    console.print(table)


__all__ = ["print_records"]
