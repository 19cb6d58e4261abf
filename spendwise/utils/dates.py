"""Calendar helpers for month-based reporting."""

import calendar
from datetime import date

# 1-indexed: MONTH_NAMES[1] == "Jan"; index 0 is intentionally empty.
MONTH_NAMES = ["", "Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]


def month_name(month: int) -> str:
    return MONTH_NAMES[month]


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """Return the first and last day (inclusive) of a calendar month."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def shift_months(value: date, months: int) -> date:
    """Move a date by a number of calendar months (negative goes back).

    The day is clamped to the length of the target month, so
    ``shift_months(date(2024, 3, 31), -1)`` is ``date(2024, 2, 29)``.
    """
    index = value.year * 12 + (value.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)
