from __future__ import annotations

from .util import console


def run(*, log_level: str | None = None) -> int:
    """Start the Qt application and block until the window closes.

    Returns the Qt event loop exit code, or 1 when PySide6 cannot be loaded.
    """
    try:
        from tally.gui.app import main as gui_main
    except ImportError as e:
        console.print(f"[red]Cannot start the GUI:[/] {e}")
        return 1

    return gui_main(argv=["tally"], log_level=log_level)
