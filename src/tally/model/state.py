from __future__ import annotations

"""
Screen state for the expense tracker.

One immutable value holds everything the screen renders: the ordered
expenses, one disclosure flag per expense (keyed by expense id), and the
three form buffers shared across the whole screen.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from tally.model.expense import Expense


class TrackerState(BaseModel):
    """Complete, immutable state of the tracker screen."""

    model_config = ConfigDict(frozen=True)

    expenses: tuple[Expense, ...] = Field(default_factory=tuple)
    expanded: dict[str, bool] = Field(
        default_factory=dict, description="Disclosure flag per expense_id"
    )
    new_expense_title: str = ""
    new_entry_title: str = ""
    new_entry_amount: str = ""

    @model_validator(mode="after")
    def _validate_flags(self) -> TrackerState:
        """Every expense has exactly one disclosure flag and no flag is orphaned."""
        ids = [e.expense_id for e in self.expenses]
        if len(set(ids)) != len(ids):
            raise ValueError("Expense ids must be unique")
        if set(ids) != set(self.expanded):
            raise ValueError("Disclosure flags must match expense ids one-to-one")
        return self

    @property
    def expand_flags(self) -> list[bool]:
        """Disclosure flags in expense order."""
        return [self.expanded[e.expense_id] for e in self.expenses]

    def find_expense(self, expense_id: str) -> Expense | None:
        """Find an expense by id."""
        for expense in self.expenses:
            if expense.expense_id == expense_id:
                return expense
        return None

    def is_expanded(self, expense_id: str) -> bool:
        return self.expanded.get(expense_id, False)


__all__ = ["TrackerState"]
