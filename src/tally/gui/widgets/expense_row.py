from __future__ import annotations

"""
Expense Row Widget - Collapsible card for one expense

Header shows the disclosure arrow, the title, and the formatted total.
The detail panel is only visible while the expense is expanded.
"""

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QToolButton,
    QVBoxLayout,
)

from tally.gui.theme import Theme
from tally.gui.widgets.expense_detail import ExpenseDetailWidget
from tally.model.expense import Expense
from tally.model.intents import ExpansionToggled
from tally.model.state import TrackerState
from tally.services.display import format_total


class ExpenseRowWidget(QFrame):
    """Disclosure group for a single expense."""

    # Emits an Intent for the store (toggle here, form intents from the detail)
    intent_emitted = Signal(object)

    def __init__(self, expense_id: str, parent=None):
        super().__init__(parent)
        self.expense_id = expense_id
        self.setObjectName("expenseRow")
        self._init_ui()
        self.apply_theme()

    def _init_ui(self):
        """Initialize the user interface."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)

        header = QHBoxLayout()

        self.toggle_btn = QToolButton()
        self.toggle_btn.setAutoRaise(True)
        self.toggle_btn.setArrowType(Qt.RightArrow)
        self.toggle_btn.clicked.connect(self._on_toggle_clicked)
        header.addWidget(self.toggle_btn)

        self.title_label = QLabel()
        self.title_label.setTextFormat(Qt.PlainText)
        header.addWidget(self.title_label)

        header.addStretch()

        self.total_label = QLabel()
        header.addWidget(self.total_label)

        layout.addLayout(header)

        self.detail = ExpenseDetailWidget(self.expense_id)
        self.detail.intent_emitted.connect(self.intent_emitted)
        self.detail.setVisible(False)
        layout.addWidget(self.detail)

    def apply_theme(self):
        """Apply current theme colors to the card and header labels."""
        style = Theme.get_row_style()
        self.setStyleSheet(
            f"""
            QFrame#expenseRow {{
                background-color: {style['bg']};
                border-radius: 10px;
            }}
        """
        )
        self.title_label.setStyleSheet(
            f"color: {style['title']}; font-weight: bold; font-size: 13pt;"
        )
        self.total_label.setStyleSheet(
            f"color: {style['total']}; font-weight: bold; font-size: 13pt;"
        )
        self.detail.apply_theme()

    def show_state(self, expense: Expense, state: TrackerState):
        """
        Update the header and detail panel from state.

        Args:
            expense: Expense shown by this row
            state: Current tracker state
        """
        expanded = state.is_expanded(expense.expense_id)

        self.title_label.setText(expense.title)
        self.total_label.setText(f"Total Amount: {format_total(expense)}")
        self.toggle_btn.setArrowType(Qt.DownArrow if expanded else Qt.RightArrow)
        self.detail.setVisible(expanded)
        self.detail.show_state(expense, state)

    def is_expanded(self) -> bool:
        """Whether the detail panel is currently shown."""
        return not self.detail.isHidden()

    def _on_toggle_clicked(self):
        self.intent_emitted.emit(ExpansionToggled(expense_id=self.expense_id))
