"""
workcal.business
~~~~~~~~~~~~~~~~

Business-day evaluation, bounded search, arithmetic, counting and
month/week enumeration.  Module-level functions take an explicit
CalendarConfig; BusinessCalendar binds them to a CalendarRegistry.

None of these operations raise on bad dates: invalid input yields ``False``,
an invalid DateValue, NaN or an empty list.

Basic usage::

    from workcal.business import BusinessCalendar

    cal = BusinessCalendar()
    cal.business_add("2015-11-03", 5)            # DateValue('2015-11-10T00:00:00')
    cal.business_diff("2017-05-15", "2017-05-08")  # 5
    len(cal.month_business_weeks("2019-02-02"))  # 5
"""

from __future__ import annotations

from workcal.business.aggregate import (
    business_days_into_month,
    business_weeks_between,
    month_business_days,
    month_business_weeks,
    month_natural_days,
    month_natural_weeks,
)
from workcal.business.arithmetic import business_add, business_subtract
from workcal.business.counter import business_diff
from workcal.business.predicate import is_business_day, is_holiday
from workcal.business.search import (
    Direction,
    next_business_day,
    prev_business_day,
    search,
)
from workcal.business.engine import BusinessCalendar

__all__ = [
    "BusinessCalendar",
    "Direction",
    "business_add",
    "business_days_into_month",
    "business_diff",
    "business_subtract",
    "business_weeks_between",
    "is_business_day",
    "is_holiday",
    "month_business_days",
    "month_business_weeks",
    "month_natural_days",
    "month_natural_weeks",
    "next_business_day",
    "prev_business_day",
    "search",
]
