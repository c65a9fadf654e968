from __future__ import annotations

"""
Create Expense Form - Title input and "Create Expense" button
"""

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QGroupBox,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
)

from tally.model.intents import CreateExpenseRequested, ExpenseTitleEdited
from tally.model.state import TrackerState
from tally.services.display import can_create_expense


class CreateExpenseForm(QGroupBox):
    """Form for adding a new, empty expense."""

    intent_emitted = Signal(object)

    def __init__(self, parent=None):
        super().__init__("Create New Expense", parent)
        self._init_ui()

    def _init_ui(self):
        layout = QVBoxLayout(self)

        self.title_edit = QLineEdit()
        self.title_edit.setPlaceholderText("New Expense Title")
        self.title_edit.textEdited.connect(self._on_title_edited)
        self.title_edit.returnPressed.connect(self._on_create_clicked)
        layout.addWidget(self.title_edit)

        self.create_btn = QPushButton("Create Expense")
        self.create_btn.setEnabled(False)
        self.create_btn.clicked.connect(self._on_create_clicked)
        layout.addWidget(self.create_btn)

    def show_state(self, state: TrackerState):
        if self.title_edit.text() != state.new_expense_title:
            self.title_edit.setText(state.new_expense_title)
        self.create_btn.setEnabled(can_create_expense(state))

    def _on_title_edited(self, text: str):
        self.intent_emitted.emit(ExpenseTitleEdited(text=text))

    def _on_create_clicked(self):
        # Return key bypasses the button, so honor the same gate here
        if self.create_btn.isEnabled():
            self.intent_emitted.emit(CreateExpenseRequested())
