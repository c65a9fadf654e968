from PySide6.QtGui import QColor
from PySide6.QtWidgets import QApplication


class Theme:
    """Centralized theme management for colors."""

    @staticmethod
    def is_dark() -> bool:
        """Check if dark mode is active."""
        app = QApplication.instance()
        if app:
            return app.property("current_theme") == "dark"
        return False

    @staticmethod
    def color(name: str) -> QColor:
        """Get color by name for current theme."""
        is_dark = Theme.is_dark()

        # Tuple format: (Light Mode, Dark Mode)
        colors = {
            # Backgrounds
            "row_bg": ("#ededed", "#2d2d2d"),  # Light gray / Dark gray
            # Foregrounds (Text)
            "expense_title_fg": ("#1a73e8", "#5dade2"),  # Blue
            "total_fg": ("#000000", "#ffffff"),
            "entry_label_fg": ("#000000", "#e0e0e0"),
            "entry_value_fg": ("#444444", "#b0b0b0"),
            "divider": ("#dcdcdc", "#404040"),
        }

        if name in colors:
            light, dark = colors[name]
            return QColor(dark if is_dark else light)

        return QColor("#000000")

    @staticmethod
    def get_row_style() -> dict:
        """Get expense row card colors."""
        return {
            "bg": Theme.color("row_bg").name(),
            "title": Theme.color("expense_title_fg").name(),
            "total": Theme.color("total_fg").name(),
        }
