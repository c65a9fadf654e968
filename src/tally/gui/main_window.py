from __future__ import annotations

"""
Main Window - The single expense tracker screen

Heading, expense list, and the create-expense form. All widgets emit
intents into one TrackerStore and re-render from its state.
"""

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction
from PySide6.QtWidgets import (
    QFrame,
    QLabel,
    QMainWindow,
    QMessageBox,
    QVBoxLayout,
    QWidget,
)

from tally.config import APP_NAME, WINDOW_MIN_HEIGHT, WINDOW_MIN_WIDTH, WINDOW_TITLE
from tally.gui.services.tracker_store import TrackerStore
from tally.gui.views.expense_list_view import ExpenseListView
from tally.gui.widgets.create_expense_form import CreateExpenseForm
from tally.model.state import TrackerState


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, store: TrackerStore | None = None):
        super().__init__()

        self.setWindowTitle(WINDOW_TITLE)
        self.setMinimumSize(WINDOW_MIN_WIDTH, WINDOW_MIN_HEIGHT)

        self.store = store or TrackerStore(parent=self)

        self._init_ui()
        self._create_menu_bar()

        self.store.state_changed.connect(self._render)
        self._render(self.store.state)

    def _init_ui(self):
        """Initialize the user interface."""
        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(16)

        # Heading
        heading = QLabel(WINDOW_TITLE)
        heading.setAlignment(Qt.AlignCenter)
        heading.setStyleSheet("font-size: 24pt; font-weight: bold; padding-bottom: 16px;")
        layout.addWidget(heading)

        # Expense list
        self.expense_list = ExpenseListView()
        self.expense_list.intent_emitted.connect(self.store.dispatch)
        layout.addWidget(self.expense_list, 1)

        divider = QFrame()
        divider.setFrameShape(QFrame.HLine)
        divider.setFrameShadow(QFrame.Sunken)
        layout.addWidget(divider)

        # Create expense form
        self.create_form = CreateExpenseForm()
        self.create_form.intent_emitted.connect(self.store.dispatch)
        layout.addWidget(self.create_form)

    def _create_menu_bar(self):
        """Create the menu bar."""
        menubar = self.menuBar()

        file_menu = menubar.addMenu("&File")
        quit_action = QAction("&Quit", self)
        quit_action.setShortcut("Ctrl+Q")
        quit_action.triggered.connect(self.close)
        file_menu.addAction(quit_action)

        help_menu = menubar.addMenu("&Help")
        about_action = QAction(f"&About {APP_NAME}", self)
        about_action.triggered.connect(self._show_about)
        help_menu.addAction(about_action)

    def _render(self, state: TrackerState):
        self.expense_list.show_state(state)
        self.create_form.show_state(state)

    def on_theme_changed(self, theme: str):
        """
        Handle theme change event.

        Args:
            theme: 'light' or 'dark'
        """
        self.expense_list.apply_theme()
        self._render(self.store.state)

    def _show_about(self):
        """Show about dialog."""
        QMessageBox.about(
            self,
            f"About {APP_NAME}",
            f"<h2>{APP_NAME}</h2>"
            "<p>A <b>local-only</b> expense tracker.</p>"
            "<p>Expenses live in memory for the current session only.</p>"
            "<p><small>Built with Python and Qt6</small></p>",
        )
