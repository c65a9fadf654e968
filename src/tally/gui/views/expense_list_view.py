from __future__ import annotations

"""
Expense List View - Scrollable list of expense rows

Renders one ExpenseRowWidget per expense in insertion order. Rows are
matched to expenses by id, so existing rows (and the inputs inside them)
survive every re-render.
"""

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QFrame, QScrollArea, QVBoxLayout, QWidget

from tally.gui.widgets.expense_row import ExpenseRowWidget
from tally.model.state import TrackerState


class ExpenseListView(QScrollArea):
    """Scroll area listing all expenses."""

    intent_emitted = Signal(object)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._rows: dict[str, ExpenseRowWidget] = {}
        self._init_ui()

    def _init_ui(self):
        self.setWidgetResizable(True)
        self.setFrameShape(QFrame.NoFrame)

        container = QWidget()
        self._layout = QVBoxLayout(container)
        self._layout.setSpacing(16)
        self._layout.addStretch()
        self.setWidget(container)

    def show_state(self, state: TrackerState):
        """
        Reconcile rows with the state's expenses and render each one.

        Args:
            state: Current tracker state
        """
        current_ids = {e.expense_id for e in state.expenses}
        for expense_id in list(self._rows):
            if expense_id not in current_ids:
                row = self._rows.pop(expense_id)
                self._layout.removeWidget(row)
                row.deleteLater()

        for index, expense in enumerate(state.expenses):
            row = self._rows.get(expense.expense_id)
            if row is None:
                row = ExpenseRowWidget(expense.expense_id)
                row.intent_emitted.connect(self.intent_emitted)
                self._rows[expense.expense_id] = row
                self._layout.insertWidget(index, row)
            row.show_state(expense, state)

    def row_for(self, expense_id: str) -> ExpenseRowWidget | None:
        return self._rows.get(expense_id)

    def row_count(self) -> int:
        return len(self._rows)

    def apply_theme(self):
        for row in self._rows.values():
            row.apply_theme()
