"""
Service layer for the Tally expense tracker.

This module contains the functional core separated from the imperative
shell (CLI/GUI).

Principles:
- No UI framework imports (Rich, Typer, Qt)
- Functions return data structures, not void
- Fully testable with simple unit tests
"""

from tally.services.amount_input import filter_amount_text, parse_amount
from tally.services.display import (
    can_add_entry,
    can_create_expense,
    expense_total,
    format_entry_amount,
    format_total,
    sum_amounts,
)
from tally.services.tracker_service import TrackerService, UpdateResult

__all__ = [
    "filter_amount_text",
    "parse_amount",
    "can_add_entry",
    "can_create_expense",
    "expense_total",
    "format_entry_amount",
    "format_total",
    "sum_amounts",
    "TrackerService",
    "UpdateResult",
]
