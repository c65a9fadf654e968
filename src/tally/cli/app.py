from __future__ import annotations

"""
Tally CLI Wrapper (Typer + Rich)

Local-only entry point for the expense tracker: launch the Qt screen or
print the startup expenses as a table.
"""

from typing import Optional

import typer

from tally.config import LOG_LEVEL_ENV_VAR
from tally.logging_setup import configure_logging

APP_HELP = "Tally expense tracker (local-only)"

app = typer.Typer(no_args_is_help=True, add_completion=False, help=APP_HELP)


@app.callback()
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        envvar=LOG_LEVEL_ENV_VAR,
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    ),
):
    """Tally CLI: in-memory expense tracking, nothing is persisted."""
    ctx.ensure_object(dict)
    ctx.obj["log_level"] = log_level
    configure_logging(log_level)


@app.command()
def gui(ctx: typer.Context):
    """Open the expense tracker window.

    Examples:
      tally gui
      tally --log-level DEBUG gui
    """
    from tally.cli.command import gui as cmd_gui

    code = cmd_gui.run(log_level=ctx.obj["log_level"])
    raise typer.Exit(code=code)


@app.command()
def summary(
    expand: bool = typer.Option(False, "--expand", "-e", help="List every entry under its expense"),
):
    """Show the startup expenses and their totals as a Rich table.

    Examples:
      tally summary
      tally summary --expand
    """
    from tally.cli.command import summary as cmd_summary

    code = cmd_summary.run(expand=expand)
    raise typer.Exit(code=code)


if __name__ == "__main__":
    app()  # pragma: no cover
