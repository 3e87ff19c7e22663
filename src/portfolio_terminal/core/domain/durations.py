"""
Month arithmetic shared by the experience and stats commands.

A month is a fixed ``AVERAGE_MONTH_DAYS`` long; spans are floored to whole
months and never negative.
"""

from __future__ import annotations

import math
from datetime import datetime

from portfolio_terminal.constants import AVERAGE_MONTH_DAYS, SECONDS_PER_DAY

_SECONDS_PER_MONTH = SECONDS_PER_DAY * AVERAGE_MONTH_DAYS

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)  # fmt: skip

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)  # fmt: skip


def months_between(start: datetime, end: datetime) -> int:
    """Whole average-length months from ``start`` to ``end``, clamped at 0.

    >>> from datetime import datetime
    >>> months_between(datetime(2020, 1, 1), datetime(2021, 1, 1))
    12
    """
    elapsed = (end - start).total_seconds()
    return max(0, math.floor(elapsed / _SECONDS_PER_MONTH))


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'}"


def format_months(total_months: int) -> str:
    """Render a month count as years and months.

    >>> format_months(0)
    '0 months'
    >>> format_months(14)
    '1 year, 2 months'
    """
    years, months = divmod(total_months, 12)
    if years == 0:
        return _plural(months, "month")
    if months == 0:
        return _plural(years, "year")
    return f"{_plural(years, 'year')}, {_plural(months, 'month')}"


def format_month_year(value: datetime, *, abbreviated: bool = True) -> str:
    names = MONTH_ABBREVIATIONS if abbreviated else MONTH_NAMES
    return f"{names[value.month - 1]} {value.year}"
