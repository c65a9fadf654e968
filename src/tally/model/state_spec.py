from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from tally.model.expense import Expense
from tally.model.seed import seed_state
from tally.model.state import TrackerState


class DescribeTrackerState:
    def it_should_default_to_empty_screen(self):
        state = TrackerState()
        assert state.expenses == ()
        assert state.expand_flags == []
        assert state.new_expense_title == ""
        assert state.new_entry_title == ""
        assert state.new_entry_amount == ""

    def it_should_list_flags_in_expense_order(self):
        a = Expense(title="A")
        b = Expense(title="B")
        state = TrackerState(expenses=(a, b), expanded={b.expense_id: True, a.expense_id: False})
        assert state.expand_flags == [False, True]

    def it_should_reject_expense_without_flag(self):
        expense = Expense(title="A")
        with pytest.raises(ValidationError, match="Disclosure flags"):
            TrackerState(expenses=(expense,), expanded={})

    def it_should_reject_orphaned_flag(self):
        with pytest.raises(ValidationError, match="Disclosure flags"):
            TrackerState(expenses=(), expanded={"missing": False})

    def it_should_reject_duplicate_expense_ids(self):
        expense = Expense(title="A")
        with pytest.raises(ValidationError, match="unique"):
            TrackerState(expenses=(expense, expense), expanded={expense.expense_id: False})

    def it_should_find_expense_by_id(self):
        expense = Expense(title="A")
        state = TrackerState(expenses=(expense,), expanded={expense.expense_id: False})
        assert state.find_expense(expense.expense_id) == expense
        assert state.find_expense("nope") is None


class DescribeSeedState:
    def it_should_contain_three_collapsed_expenses(self):
        state = seed_state()
        assert [e.title for e in state.expenses] == ["Al-Fateh", "Pan shop", "Stationary"]
        assert state.expand_flags == [False, False, False]

    def it_should_seed_entries_in_order(self):
        state = seed_state()
        al_fateh = state.expenses[0]
        assert [(e.entry_title, e.amount) for e in al_fateh.entries] == [
            ("Lunch", Decimal("12")),
            ("Dinner", Decimal("15")),
            ("Snacks", Decimal("20")),
        ]

    def it_should_start_with_empty_buffers(self):
        state = seed_state()
        assert (state.new_expense_title, state.new_entry_title, state.new_entry_amount) == ("", "", "")

    def it_should_generate_fresh_ids_per_call(self):
        assert seed_state().expenses[0].expense_id != seed_state().expenses[0].expense_id
