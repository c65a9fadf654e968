from __future__ import annotations

"""
Expense Detail Widget - Entries of one expense and the add-entry form

The form inputs show the screen-wide entry buffers, so every open panel
displays the same text. Edits are emitted as intents; the widget only
changes when show_state() is called with a new state.
"""

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QFormLayout,
    QFrame,
    QGridLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from tally.config import CURRENCY_SYMBOL
from tally.gui.theme import Theme
from tally.model.expense import Expense
from tally.model.intents import AddEntryRequested, EntryAmountEdited, EntryTitleEdited
from tally.model.state import TrackerState
from tally.services.display import can_add_entry, format_entry_amount


class ExpenseDetailWidget(QWidget):
    """Entry list plus the add-entry form for a single expense."""

    # Emits an Intent for the store
    intent_emitted = Signal(object)

    def __init__(self, expense_id: str, parent=None):
        super().__init__(parent)
        self.expense_id = expense_id
        self._rendered_entry_ids: tuple[str, ...] | None = None
        self._init_ui()
        self.apply_theme()

    def _init_ui(self):
        """Initialize the user interface."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 4, 4, 4)

        # Entries grid (rebuilt when the entries change)
        self.entries_widget = QWidget()
        self.entries_layout = QGridLayout(self.entries_widget)
        self.entries_layout.setContentsMargins(0, 0, 0, 0)
        self.entries_layout.setHorizontalSpacing(16)
        layout.addWidget(self.entries_widget)

        self.divider = QFrame()
        self.divider.setFrameShape(QFrame.HLine)
        self.divider.setFrameShadow(QFrame.Plain)
        layout.addWidget(self.divider)

        # Add-entry form
        form = QFormLayout()

        self.title_edit = QLineEdit()
        self.title_edit.setPlaceholderText("New Entry Title")
        self.title_edit.textEdited.connect(self._on_title_edited)
        form.addRow(self.title_edit)

        self.amount_edit = QLineEdit()
        self.amount_edit.setPlaceholderText("New Entry Amount")
        self.amount_edit.textEdited.connect(self._on_amount_edited)
        form.addRow(self.amount_edit)

        self.add_btn = QPushButton("Add entry")
        self.add_btn.setEnabled(False)
        self.add_btn.clicked.connect(self._on_add_clicked)
        form.addRow(self.add_btn)

        layout.addLayout(form)

    def show_state(self, expense: Expense, state: TrackerState):
        """
        Show the expense's entries and the shared entry buffers.

        Args:
            expense: Expense this panel belongs to
            state: Current tracker state
        """
        entry_ids = tuple(e.entry_id for e in expense.entries)
        if entry_ids != self._rendered_entry_ids:
            self._rebuild_entries(expense)
            self._rendered_entry_ids = entry_ids

        self._sync_text(self.title_edit, state.new_entry_title)
        self._sync_text(self.amount_edit, state.new_entry_amount)
        self.add_btn.setEnabled(can_add_entry(state))

    def _rebuild_entries(self, expense: Expense):
        """Replace the entry rows with the expense's current entries."""
        while self.entries_layout.count():
            item = self.entries_layout.takeAt(0)
            if item.widget():
                item.widget().deleteLater()

        label_color = Theme.color("entry_label_fg").name()
        value_color = Theme.color("entry_value_fg").name()

        for row, entry in enumerate(expense.entries):
            cells = [
                ("Title:", f"color: {label_color}; font-weight: bold;"),
                (entry.entry_title, f"color: {value_color};"),
                ("Amount:", f"color: {label_color}; font-weight: bold;"),
                (f"{CURRENCY_SYMBOL}{format_entry_amount(entry.amount)}", f"color: {value_color};"),
            ]
            for col, (text, style) in enumerate(cells):
                label = QLabel(text)
                label.setTextFormat(Qt.PlainText)
                label.setStyleSheet(style)
                label.setTextInteractionFlags(Qt.TextSelectableByMouse)
                self.entries_layout.addWidget(label, row, col)
        self.entries_layout.setColumnStretch(1, 1)

    def entry_lines(self) -> list[str]:
        """Rendered entry rows as plain text, one string per entry."""
        lines = []
        for row in range(self.entries_layout.rowCount()):
            texts = []
            for col in (1, 3):
                item = self.entries_layout.itemAtPosition(row, col)
                if item is not None and item.widget() is not None:
                    texts.append(item.widget().text())
            if texts:
                lines.append(" ".join(texts))
        return lines

    @staticmethod
    def _sync_text(edit: QLineEdit, value: str):
        """Set the line edit text only when it differs, keeping the cursor otherwise."""
        if edit.text() != value:
            edit.setText(value)

    def _on_title_edited(self, text: str):
        self.intent_emitted.emit(EntryTitleEdited(text=text))

    def _on_amount_edited(self, text: str):
        self.intent_emitted.emit(EntryAmountEdited(text=text))

    def _on_add_clicked(self):
        self.intent_emitted.emit(AddEntryRequested(expense_id=self.expense_id))

    def apply_theme(self):
        """Recolor the divider and force entry labels to be rebuilt."""
        self.divider.setStyleSheet(f"color: {Theme.color('divider').name()};")
        self._rendered_entry_ids = None
