"""US-locale display formatting for currency and dates"""

from datetime import date
from typing import Optional


def format_currency(amount: float) -> str:
    """$1,234.50 style with exactly two fraction digits"""
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def format_date(value: Optional[date]) -> str:
    """Long form used on documents: February 6, 2026"""
    if value is None:
        return ""
    return f"{value:%B} {value.day}, {value.year}"


def format_date_short(value: Optional[date]) -> str:
    """Numeric form used in footnotes: 02/06/2026"""
    if value is None:
        return ""
    return value.strftime("%m/%d/%Y")


def format_expiry_date(value: Optional[date]) -> str:
    """Abbreviated month form: Feb 6, 2026"""
    if value is None:
        return ""
    return f"{value:%b} {value.day}, {value.year}"
