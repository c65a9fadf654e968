from __future__ import annotations

from decimal import Decimal

from rich.console import Console
from rich.text import Text

from tally.config import CURRENCY_SYMBOL
from tally.services.display import format_entry_amount

console = Console()


def fmt_amount(amt: Decimal, currency: bool = True) -> Text:
    s = format_entry_amount(amt)
    if currency:
        s = f"{CURRENCY_SYMBOL}{s}"
    if amt > 0:
        return Text(s, style="bold green")
    return Text(s, style="dim")
