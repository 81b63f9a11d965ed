"""Date manipulation utilities"""

import calendar
from datetime import date, timedelta


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def add_months(from_date: date, months: int) -> date:
    """
    Add whole calendar months, letting day-of-month overflow roll forward.

    Jan 31 + 1 month lands on Mar 3 in a 28-day February rather than being
    clamped to Feb 28.
    """
    month_index = from_date.month - 1 + months
    year = from_date.year + month_index // 12
    month = month_index % 12 + 1
    return date(year, month, 1) + timedelta(days=from_date.day - 1)


def add_business_days(from_date: date, days: int) -> date:
    """Add business days to a date (Mon-Fri, doesn't account for holidays).

    Counting starts the day after from_date; from_date itself never counts.
    """
    result = from_date
    counted = 0
    while counted < days:
        result += timedelta(days=1)
        if result.weekday() < 5:
            counted += 1
    return result
