from __future__ import annotations

from tally.model.expense import Expense, ExpenseEntry
from tally.model.state import TrackerState

SEED_EXPENSES: list[tuple[str, list[tuple[str, int]]]] = [
    ("Al-Fateh", [("Lunch", 12), ("Dinner", 15), ("Snacks", 20)]),
    ("Pan shop", [("Chewing Gum", 5), ("Cigarettes", 7)]),
    ("Stationary", [("Notebooks", 8), ("Pens", 10), ("Paper", 5)]),
]


def seed_state() -> TrackerState:
    """Build the startup state: three collapsed expenses and empty buffers.

    Fresh ids are generated on every call.
    """
    expenses = tuple(
        Expense(
            title=title,
            entries=tuple(ExpenseEntry(entry_title=name, amount=amt) for name, amt in entries),
        )
        for title, entries in SEED_EXPENSES
    )
    return TrackerState(
        expenses=expenses,
        expanded={e.expense_id: False for e in expenses},
    )


__all__ = ["SEED_EXPENSES", "seed_state"]
