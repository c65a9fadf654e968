"""
Derived display values for expenses and the form enablement gates.

Pure functions over the model; the GUI and the CLI render with these so both
show the same totals.

Amounts have no upper bound, so sums and rounding run in an unbounded
decimal context instead of the default 28-digit one.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, ROUND_HALF_EVEN, Context, Decimal, localcontext

from tally.config import CURRENCY_SYMBOL
from tally.model.expense import Expense
from tally.model.state import TrackerState

_CENTS = Decimal("0.01")
_EXACT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN, rounding=ROUND_HALF_EVEN)


def sum_amounts(amounts: Iterable[Decimal]) -> Decimal:
    """Exact sum of amounts, whatever their size."""
    with localcontext(_EXACT):
        return sum(amounts, Decimal("0"))


def expense_total(expense: Expense) -> Decimal:
    """Sum of the expense's entry amounts."""
    return sum_amounts(entry.amount for entry in expense.entries)


def format_entry_amount(amount: Decimal) -> str:
    """Fixed two-decimal amount without a currency symbol."""
    with localcontext(_EXACT):
        return f"{amount.quantize(_CENTS, rounding=ROUND_HALF_EVEN)}"


def format_total(expense: Expense) -> str:
    """Expense total as currency, e.g. "$47.00"."""
    return f"{CURRENCY_SYMBOL}{format_entry_amount(expense_total(expense))}"


def can_create_expense(state: TrackerState) -> bool:
    return state.new_expense_title != ""


def can_add_entry(state: TrackerState) -> bool:
    """Both entry buffers are non-empty. Parseability is not checked here."""
    return state.new_entry_title != "" and state.new_entry_amount != ""


__all__ = [
    "sum_amounts",
    "expense_total",
    "format_entry_amount",
    "format_total",
    "can_create_expense",
    "can_add_entry",
]
