"""Display formatting for amounts, dates and user text."""

import html
from datetime import datetime
from typing import Optional

from bizinvoice.config import DisplaySettings, get_settings
from bizinvoice.dashboard import local_date


def format_currency(amount: float, display: Optional[DisplaySettings] = None) -> str:
    """
    Format an amount in the configured currency, e.g. $1,234.50.

    Negative amounts put the sign before the symbol: -$5.00.
    """
    display = display or get_settings().display
    digits = display.fraction_digits
    rounded = round(amount, digits)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{display.symbol}{abs(rounded):,.{digits}f}"


def format_date(timestamp: datetime) -> str:
    """Local calendar date as 'Oct 19, 2026'."""
    day = local_date(timestamp)
    return f"{day:%b} {day.day}, {day.year}"


def format_quantity(quantity: float) -> str:
    """Whole quantities without a trailing .0."""
    if float(quantity).is_integer():
        return str(int(quantity))
    return f"{quantity:g}"


def escape_text(text: str) -> str:
    """Escape user-supplied text for inclusion in HTML."""
    return html.escape(text, quote=True)
