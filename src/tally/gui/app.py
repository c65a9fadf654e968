from __future__ import annotations

"""
Tally GUI Application

Local-only Qt6 expense tracker. All state lives in memory for the session;
there is no file or network I/O beyond loading bundled stylesheets.
"""

import logging
import sys
from pathlib import Path

from PySide6.QtGui import QColor, QPalette
from PySide6.QtWidgets import QApplication

from tally.config import APP_NAME, ORGANIZATION_DOMAIN, ORGANIZATION_NAME
from tally.gui.main_window import MainWindow
from tally.logging_setup import configure_logging

logger = logging.getLogger(__name__)


def _luminance(color: QColor) -> float:
    return 0.299 * color.red() + 0.587 * color.green() + 0.114 * color.blue()


def is_dark_mode(app: QApplication) -> bool:
    """True when the palette draws light text on a darker window."""
    palette = app.palette()
    return _luminance(palette.color(QPalette.Window)) < _luminance(
        palette.color(QPalette.WindowText)
    )


def load_stylesheet(theme: str) -> str:
    """
    Load stylesheet for the specified theme.

    Args:
        theme: 'light' or 'dark'

    Returns:
        Stylesheet content, or an empty string when none is available
    """
    resources_dir = Path(__file__).parent / "resources"
    stylesheet_path = resources_dir / f"styles_{theme}.qss"

    if stylesheet_path.exists():
        try:
            return stylesheet_path.read_text(encoding="utf-8")
        except OSError as e:
            logger.warning("Could not load %s stylesheet: %s", theme, e)

    return ""


def apply_stylesheet(app: QApplication) -> str:
    """
    Apply application stylesheet based on system theme.

    Args:
        app: QApplication instance

    Returns:
        The theme that was applied
    """
    theme = "dark" if is_dark_mode(app) else "light"
    app.setStyleSheet(load_stylesheet(theme))
    app.setProperty("current_theme", theme)
    return theme


class ThemeManager:
    """Re-applies the stylesheet and restyles the window when the system theme flips."""

    def __init__(self, app: QApplication, window: MainWindow):
        self.app = app
        self.window = window

    def on_palette_changed(self):
        old_theme = self.app.property("current_theme")
        if old_theme == ("dark" if is_dark_mode(self.app) else "light"):
            return
        new_theme = apply_stylesheet(self.app)
        logger.info("System theme changed: %s -> %s", old_theme, new_theme)
        self.window.on_theme_changed(new_theme)


def main(argv: list[str] | None = None, log_level: str | None = None) -> int:
    """Main entry point for the GUI application."""
    configure_logging(log_level)

    app = QApplication.instance() or QApplication(argv if argv is not None else sys.argv)
    app.setApplicationName(APP_NAME)
    app.setOrganizationName(ORGANIZATION_NAME)
    app.setOrganizationDomain(ORGANIZATION_DOMAIN)

    apply_stylesheet(app)

    window = MainWindow()
    theme_manager = ThemeManager(app, window)
    window.show()

    app.paletteChanged.connect(theme_manager.on_palette_changed)

    return app.exec()


def run():
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
