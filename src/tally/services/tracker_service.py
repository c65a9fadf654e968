"""
Tracker service - functional core for the expense tracker screen.

Applies user intents to an immutable TrackerState and returns the next state.
This is the single place where state changes are computed; the GUI store
only holds the latest state and publishes it.

NO IMPORTS FROM:
- rich (console, table, prompt)
- typer
- PySide6/Qt

All functions return data structures. Nothing here raises for user input:
rejected submissions come back as an UpdateResult with applied=False.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from tally.model.expense import Expense, ExpenseEntry
from tally.model.intents import (
    AddEntryRequested,
    CreateExpenseRequested,
    EntryAmountEdited,
    EntryTitleEdited,
    ExpansionToggled,
    ExpenseTitleEdited,
    Intent,
)
from tally.model.state import TrackerState
from tally.services.amount_input import filter_amount_text, parse_amount
from tally.services.display import can_add_entry, can_create_expense

REASON_FORM_INCOMPLETE = "form_incomplete"
REASON_UNPARSABLE_AMOUNT = "unparsable_amount"
REASON_UNKNOWN_EXPENSE = "unknown_expense"


@dataclass
class UpdateResult:
    """Outcome of applying one intent."""

    state: TrackerState
    applied: bool
    reason: Optional[str] = None


class TrackerService:
    """
    Service for tracker state transitions.

    Responsibilities:
    - Update the three form buffers (masking the amount buffer)
    - Create expenses and add entries behind their enablement gates
    - Toggle per-expense disclosure flags

    Does NOT:
    - Hold the current state (the caller passes it in)
    - Display anything or report errors to the user
    """

    def apply(self, state: TrackerState, intent: Intent) -> UpdateResult:
        """Apply any intent to a state.

        Raises:
            TypeError: If the intent type is not handled
        """
        if isinstance(intent, ExpenseTitleEdited):
            return self.edit_expense_title(state, intent.text)
        if isinstance(intent, EntryTitleEdited):
            return self.edit_entry_title(state, intent.text)
        if isinstance(intent, EntryAmountEdited):
            return self.edit_entry_amount(state, intent.text)
        if isinstance(intent, CreateExpenseRequested):
            return self.create_expense(state)
        if isinstance(intent, AddEntryRequested):
            return self.add_entry(state, intent.expense_id)
        if isinstance(intent, ExpansionToggled):
            return self.toggle_expansion(state, intent.expense_id)
        raise TypeError(f"Unsupported intent: {type(intent).__name__}")

    def edit_expense_title(self, state: TrackerState, text: str) -> UpdateResult:
        return UpdateResult(
            state=state.model_copy(update={"new_expense_title": text}), applied=True
        )

    def edit_entry_title(self, state: TrackerState, text: str) -> UpdateResult:
        return UpdateResult(
            state=state.model_copy(update={"new_entry_title": text}), applied=True
        )

    def edit_entry_amount(self, state: TrackerState, text: str) -> UpdateResult:
        """Store the amount buffer with every non-digit, non-'.' character removed."""
        return UpdateResult(
            state=state.model_copy(update={"new_entry_amount": filter_amount_text(text)}),
            applied=True,
        )

    def create_expense(self, state: TrackerState) -> UpdateResult:
        """
        Append a new, collapsed expense titled from the title buffer.

        Duplicate titles are allowed; each call creates a distinct expense.

        Args:
            state: Current state

        Returns:
            UpdateResult; not applied when the title buffer is empty
        """
        if not can_create_expense(state):
            return UpdateResult(state=state, applied=False, reason=REASON_FORM_INCOMPLETE)

        expense = Expense(title=state.new_expense_title)
        new_state = TrackerState(
            expenses=(*state.expenses, expense),
            expanded={**state.expanded, expense.expense_id: False},
            new_expense_title="",
            new_entry_title=state.new_entry_title,
            new_entry_amount=state.new_entry_amount,
        )
        return UpdateResult(state=new_state, applied=True)

    def add_entry(self, state: TrackerState, expense_id: str) -> UpdateResult:
        """
        Append an entry built from the entry buffers to one expense.

        The amount is parsed only here. When the parse fails the state is
        returned untouched, so both buffers keep their text for correction.

        Args:
            state: Current state
            expense_id: Target expense

        Returns:
            UpdateResult; reason explains why it was not applied
        """
        if not can_add_entry(state):
            return UpdateResult(state=state, applied=False, reason=REASON_FORM_INCOMPLETE)

        amount = parse_amount(state.new_entry_amount)
        if amount is None:
            return UpdateResult(state=state, applied=False, reason=REASON_UNPARSABLE_AMOUNT)

        target = state.find_expense(expense_id)
        if target is None:
            return UpdateResult(state=state, applied=False, reason=REASON_UNKNOWN_EXPENSE)

        updated = target.with_entry(ExpenseEntry(entry_title=state.new_entry_title, amount=amount))
        expenses = tuple(updated if e.expense_id == expense_id else e for e in state.expenses)
        new_state = state.model_copy(
            update={"expenses": expenses, "new_entry_title": "", "new_entry_amount": ""}
        )
        return UpdateResult(state=new_state, applied=True)

    def toggle_expansion(self, state: TrackerState, expense_id: str) -> UpdateResult:
        """Flip the disclosure flag of one expense; nothing else changes."""
        if expense_id not in state.expanded:
            return UpdateResult(state=state, applied=False, reason=REASON_UNKNOWN_EXPENSE)

        expanded = {**state.expanded, expense_id: not state.expanded[expense_id]}
        return UpdateResult(state=state.model_copy(update={"expanded": expanded}), applied=True)


__all__ = [
    "TrackerService",
    "UpdateResult",
    "REASON_FORM_INCOMPLETE",
    "REASON_UNPARSABLE_AMOUNT",
    "REASON_UNKNOWN_EXPENSE",
]
