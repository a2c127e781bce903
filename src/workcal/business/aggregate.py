from __future__ import annotations

from itertools import groupby
from typing import Optional, Sequence

import numpy as np

from workcal.business.predicate import is_business_day
from workcal.calendar import CalendarConfig
from workcal.dates import DateValue

Week = list[DateValue]


# ── helpers ──────────────────────────────────────────────────────────────

def _span(first: DateValue, last: DateValue) -> list[DateValue]:
    """Start-of-day values from ``first`` through ``last`` inclusive."""
    start = first.start_of_day()
    n = last.ordinal - first.ordinal + 1
    return [start.add(i, "days") for i in range(max(n, 0))]


def _month_span(d: DateValue, from_anchor: bool) -> list[DateValue]:
    first = d if from_anchor else d.start_of_month()
    return _span(first, d.end_of_month())


def _business(days: Sequence[DateValue], config: CalendarConfig) -> list[DateValue]:
    return [day for day in days if is_business_day(day, config)]


def _group_weeks(days: Sequence[DateValue]) -> list[Week]:
    """Split ascending days into Sunday-start calendar weeks."""
    # date.toordinal() is 1 for Monday 0001-01-01, so ordinal // 7 steps on Sundays.
    return [list(week) for _, week in groupby(days, key=lambda day: day.ordinal // 7)]


# ── month enumerations ───────────────────────────────────────────────────

def month_business_days(
    d: DateValue, config: CalendarConfig, until: Optional[DateValue] = None
) -> list[DateValue]:
    """Business days of ``d``'s month, ascending; stop at ``until`` if given."""
    if not d.is_valid():
        return []
    days = _month_span(d, from_anchor=False)
    if until is not None:
        if not until.is_valid():
            return []
        days = [day for day in days if day.ordinal <= until.ordinal]
    return _business(days, config)


def month_natural_days(d: DateValue, from_anchor: bool = False) -> list[DateValue]:
    """Every day of ``d``'s month, from the 1st or from ``d`` itself."""
    if not d.is_valid():
        return []
    return _month_span(d, from_anchor)


def business_days_into_month(d: DateValue, config: CalendarConfig) -> int | float:
    """Business days from the 1st of the month through ``d`` inclusive."""
    if not d.is_valid():
        return np.nan
    return len(_business(_span(d.start_of_month(), d), config))


def month_business_weeks(
    d: DateValue, config: CalendarConfig, from_anchor: bool = False
) -> list[Week]:
    if not d.is_valid():
        return []
    return _group_weeks(_business(_month_span(d, from_anchor), config))


def month_natural_weeks(d: DateValue, from_anchor: bool = False) -> list[Week]:
    if not d.is_valid():
        return []
    return _group_weeks(_month_span(d, from_anchor))


# ── ranges ───────────────────────────────────────────────────────────────

def business_weeks_between(
    start: DateValue, end: DateValue, config: CalendarConfig
) -> list[Week]:
    """
    Business days from ``start`` through ``end`` grouped by calendar week.

    Weeks without a business day are left out; an ``end`` before ``start``
    gives no weeks.
    """
    if not (start.is_valid() and end.is_valid()):
        return []
    return _group_weeks(_business(_span(start, end), config))
