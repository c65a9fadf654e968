"""
Amount input mask and submit-time parsing.

The mask runs on every edit of the amount field and only drops characters;
it does not enforce a single decimal point. The strict parse runs when an
entry is submitted, so a masked buffer such as "." or "1.2.3" can still be
rejected there.

NO IMPORTS FROM:
- rich, typer
- PySide6/Qt
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation

from tally.config import AMOUNT_CHARACTERS

_AMOUNT_PATTERN = re.compile(r"[0-9]+\.?[0-9]*|\.[0-9]+")


def filter_amount_text(text: str) -> str:
    """Drop every character that is not a digit or '.'.

    Idempotent: filtering already-filtered text returns it unchanged.
    """
    return "".join(ch for ch in text if ch in AMOUNT_CHARACTERS)


def parse_amount(text: str) -> Decimal | None:
    """Parse a masked amount buffer into a Decimal.

    Accepts digits with at most one '.' and at least one digit ("12", "3.50",
    "1.", ".5"). Returns None for anything else, including "", "." and "..".
    """
    if not _AMOUNT_PATTERN.fullmatch(text):
        return None
    try:
        return Decimal(text)
    except InvalidOperation:
        return None


__all__ = ["filter_amount_text", "parse_amount"]
