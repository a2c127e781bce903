from __future__ import annotations

import numpy as np

from workcal.business.predicate import is_business_day
from workcal.calendar import CalendarConfig
from workcal.dates import DateValue


def business_diff(
    start: DateValue, end: DateValue, config: CalendarConfig, relative: bool = False
) -> int | float:
    """
    Business days between the calendar days of ``start`` and ``end``.

    Counts days after the earlier date up to and including the later one;
    time-of-day is ignored.  With ``relative`` the count is negative when
    ``start`` is earlier than ``end``.  NaN if either date is invalid.
    """
    if not (start.is_valid() and end.is_valid()):
        return np.nan
    if start.is_same_day(end):
        return 0

    earlier, later = (start, end) if start.is_before_day(end) else (end, start)
    day = earlier.start_of_day()
    count = 0
    for _ in range(later.ordinal - earlier.ordinal):
        day = day.add(1, "days")
        if is_business_day(day, config):
            count += 1

    if relative and start.is_before_day(end):
        return -count
    return count
