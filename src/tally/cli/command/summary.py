from __future__ import annotations

from rich.table import Table

from .util import console, fmt_amount
from tally.model.seed import seed_state
from tally.model.state import TrackerState
from tally.services.display import expense_total, sum_amounts


def _build_table(state: TrackerState, expand: bool) -> Table:
    table = Table(title="Expenses", show_lines=expand)
    table.add_column("Expense", style="blue", no_wrap=True)
    table.add_column("Entries", justify="right")
    table.add_column("Total", justify="right")

    for expense in state.expenses:
        table.add_row(expense.title, str(len(expense.entries)), fmt_amount(expense_total(expense)))
        if expand:
            for entry in expense.entries:
                table.add_row(f"  {entry.entry_title}", "", fmt_amount(entry.amount, currency=False))

    return table


def run(*, expand: bool = False, state: TrackerState | None = None) -> int:
    """Print expenses and totals as a Rich table.

    Uses the startup expenses unless a state is supplied.

    Returns an exit code (always 0).
    """
    state = state if state is not None else seed_state()

    if not state.expenses:
        console.print("[yellow]No expenses.[/]")
        return 0

    console.print(_build_table(state, expand))

    grand_total = sum_amounts(expense_total(e) for e in state.expenses)
    console.print(
        f"[bold]{len(state.expenses)}[/] expense(s), grand total ", fmt_amount(grand_total)
    )
    return 0
