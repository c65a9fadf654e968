from __future__ import annotations

import pytest

try:
    from PySide6.QtWidgets import QApplication

    _app = QApplication.instance() or QApplication([])
    from tally.gui.main_window import MainWindow
    from tally.gui.services.tracker_store import TrackerStore

    HAS_QT = True
except ImportError:
    HAS_QT = False

from tally.model.state import TrackerState

pytestmark = pytest.mark.skipif(not HAS_QT, reason="PySide6 not installed")


@pytest.fixture
def window():
    win = MainWindow()
    yield win
    win.close()
    win.deleteLater()


def _first_row(window):
    expense = window.store.state.expenses[0]
    return expense, window.expense_list.row_for(expense.expense_id)


class DescribeMainWindow:
    class DescribeInitialRender:
        def it_should_render_one_row_per_seed_expense(self, window):
            assert window.expense_list.row_count() == 3

        def it_should_show_title_and_total_in_each_header(self, window):
            headers = []
            for expense in window.store.state.expenses:
                row = window.expense_list.row_for(expense.expense_id)
                headers.append((row.title_label.text(), row.total_label.text()))
            assert headers == [
                ("Al-Fateh", "Total Amount: $47.00"),
                ("Pan shop", "Total Amount: $12.00"),
                ("Stationary", "Total Amount: $23.00"),
            ]

        def it_should_start_collapsed(self, window):
            _, row = _first_row(window)
            assert row.is_expanded() is False

        def it_should_disable_both_submit_buttons(self, window):
            _, row = _first_row(window)
            assert window.create_form.create_btn.isEnabled() is False
            assert row.detail.add_btn.isEnabled() is False

        def it_should_list_entries_with_two_decimal_amounts(self, window):
            _, row = _first_row(window)
            assert row.detail.entry_lines() == ["Lunch $12.00", "Dinner $15.00", "Snacks $20.00"]

    class DescribeDisclosure:
        def it_should_expand_and_collapse_on_toggle(self, window):
            expense, row = _first_row(window)

            row.toggle_btn.click()
            assert row.is_expanded() is True
            assert window.store.state.is_expanded(expense.expense_id) is True

            row.toggle_btn.click()
            assert row.is_expanded() is False
            assert window.store.state.expand_flags == [False, False, False]

    class DescribeCreateExpense:
        def it_should_enable_button_once_title_is_typed(self, window):
            window.create_form.title_edit.textEdited.emit("Gym")
            assert window.create_form.create_btn.isEnabled() is True

        def it_should_append_collapsed_row_and_clear_input(self, window):
            window.create_form.title_edit.textEdited.emit("Gym")
            window.create_form.create_btn.click()

            state = window.store.state
            new = state.expenses[-1]
            row = window.expense_list.row_for(new.expense_id)
            assert window.expense_list.row_count() == 4
            assert row.total_label.text() == "Total Amount: $0.00"
            assert row.is_expanded() is False
            assert window.create_form.title_edit.text() == ""
            assert window.create_form.create_btn.isEnabled() is False

    class DescribeAddEntry:
        def it_should_mask_amount_input(self, window):
            _, row = _first_row(window)
            row.detail.amount_edit.textEdited.emit("3a.5")
            assert row.detail.amount_edit.text() == "3.5"

        def it_should_add_entry_and_update_total(self, window):
            _, row = _first_row(window)
            row.toggle_btn.click()

            row.detail.title_edit.textEdited.emit("Coffee")
            row.detail.amount_edit.textEdited.emit("3.50")
            assert row.detail.add_btn.isEnabled() is True
            row.detail.add_btn.click()

            assert row.total_label.text() == "Total Amount: $50.50"
            assert row.detail.entry_lines()[-1] == "Coffee $3.50"
            assert row.detail.title_edit.text() == ""
            assert row.detail.amount_edit.text() == ""

        def it_should_keep_buffers_when_amount_is_unparsable(self, window):
            _, row = _first_row(window)
            row.detail.title_edit.textEdited.emit("X")
            row.detail.amount_edit.textEdited.emit(".")
            row.detail.add_btn.click()

            assert len(window.store.state.expenses[0].entries) == 3
            assert row.detail.title_edit.text() == "X"
            assert row.detail.amount_edit.text() == "."

        def it_should_share_entry_buffers_across_panels(self, window):
            state = window.store.state
            first = window.expense_list.row_for(state.expenses[0].expense_id)
            second = window.expense_list.row_for(state.expenses[1].expense_id)

            first.detail.title_edit.textEdited.emit("Shared")

            assert second.detail.title_edit.text() == "Shared"

    class DescribeInjectedStore:
        def it_should_render_an_empty_state(self):
            win = MainWindow(store=TrackerStore(state=TrackerState()))
            try:
                assert win.expense_list.row_count() == 0
            finally:
                win.close()
                win.deleteLater()
