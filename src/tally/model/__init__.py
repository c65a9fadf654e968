from .expense import Expense, ExpenseEntry
from .intents import (
    AddEntryRequested,
    CreateExpenseRequested,
    EntryAmountEdited,
    EntryTitleEdited,
    ExpansionToggled,
    ExpenseTitleEdited,
    Intent,
)
from .seed import SEED_EXPENSES, seed_state
from .state import TrackerState

__all__ = [
    # models
    "Expense",
    "ExpenseEntry",
    "TrackerState",
    # intents
    "Intent",
    "ExpenseTitleEdited",
    "EntryTitleEdited",
    "EntryAmountEdited",
    "CreateExpenseRequested",
    "AddEntryRequested",
    "ExpansionToggled",
    # seed data
    "SEED_EXPENSES",
    "seed_state",
]
