from __future__ import annotations

"""
Expense models for the tracker screen.

Scope
- Pure Pydantic v2 models; no I/O, no Qt.
- Expenses are immutable values. Appending an entry produces a new Expense
  that keeps the same expense_id.

Privacy
- Values live in process memory only. Nothing is persisted or transmitted.
"""

from decimal import Decimal, InvalidOperation
from typing import Any
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class ExpenseEntry(BaseModel):
    """A single line item within an expense."""

    model_config = ConfigDict(frozen=True)

    entry_id: str = Field(default_factory=lambda: str(uuid4()))
    entry_title: str
    amount: Decimal = Field(ge=0, description="Non-negative amount in currency units")

    @field_validator("amount", mode="before")
    @classmethod
    def parse_amount(cls, value: Any) -> Decimal:
        """Parse amount from string or number without float drift."""
        if isinstance(value, Decimal):
            return value
        try:
            return Decimal(value if isinstance(value, str) else str(value))
        except InvalidOperation as e:
            raise ValueError(f"Invalid amount: {value!r}") from e

    @field_serializer("amount")
    def serialize_amount(self, value: Decimal) -> str:
        """Serialize Decimal to string to preserve precision."""
        return str(value)


class Expense(BaseModel):
    """A named group of entries with a derived total.

    Never renamed or deleted; the only change is appending entries.
    """

    model_config = ConfigDict(frozen=True)

    expense_id: str = Field(default_factory=lambda: str(uuid4()))
    title: str = Field(min_length=1, description="Expense title")
    entries: tuple[ExpenseEntry, ...] = Field(default_factory=tuple)

    def with_entry(self, entry: ExpenseEntry) -> Expense:
        """Return a copy of this expense with the entry appended."""
        return self.model_copy(update={"entries": (*self.entries, entry)})


__all__ = ["Expense", "ExpenseEntry"]
