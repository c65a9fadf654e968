"""
Intent models for the tracker screen.

Each user action on the screen becomes one immutable intent. Widgets emit
intents; the tracker service applies them to a TrackerState and returns the
next state. Intents carry only what the user supplied; ids of the resulting
expenses and entries are generated when they are applied.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Intent(BaseModel):
    """Base class for all user intents."""

    model_config = ConfigDict(frozen=True)

    intent_type: str


class ExpenseTitleEdited(Intent):
    """The new-expense title input changed."""

    intent_type: str = Field(default="ExpenseTitleEdited", frozen=True)
    text: str


class EntryTitleEdited(Intent):
    """The new-entry title input changed."""

    intent_type: str = Field(default="EntryTitleEdited", frozen=True)
    text: str


class EntryAmountEdited(Intent):
    """The new-entry amount input changed.

    The raw text is recorded as typed; masking happens when it is applied.
    """

    intent_type: str = Field(default="EntryAmountEdited", frozen=True)
    text: str


class CreateExpenseRequested(Intent):
    """The "Create Expense" button was pressed."""

    intent_type: str = Field(default="CreateExpenseRequested", frozen=True)


class AddEntryRequested(Intent):
    """The "Add entry" button of one expense panel was pressed."""

    intent_type: str = Field(default="AddEntryRequested", frozen=True)
    expense_id: str


class ExpansionToggled(Intent):
    """The disclosure toggle of one expense row was clicked."""

    intent_type: str = Field(default="ExpansionToggled", frozen=True)
    expense_id: str


__all__ = [
    "Intent",
    "ExpenseTitleEdited",
    "EntryTitleEdited",
    "EntryAmountEdited",
    "CreateExpenseRequested",
    "AddEntryRequested",
    "ExpansionToggled",
]
