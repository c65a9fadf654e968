from __future__ import annotations

# Command implementations for tally CLI.
# Each command module exposes a `run(...)` function that performs the action
# and prints to the console. Typer wrappers in tally.cli.app delegate here.

__all__ = [
    "gui",
    "summary",
]
