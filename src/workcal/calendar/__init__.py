"""
workcal.calendar
~~~~~~~~~~~~~~~~

Business-day calendar rules.  A CalendarConfig holds the working-weekday
mask, the holiday resolver and the search limit of one named calendar; a
CalendarRegistry keeps several of them with one marked active.

Basic usage::

    from workcal.calendar import CalendarConfig, CalendarRegistry

    us = CalendarConfig("us", holiday_dates=("2016-07-04",))
    registry = CalendarRegistry([us])
    registry.update("us", working_weekdays={1, 2, 3, 4, 5, 6})   # add Saturday
    registry.register("xmas", holiday_predicate=lambda d: (d.month, d.day) == (12, 25))
    registry.use("xmas")

Public API
----------
CalendarConfig      Immutable rule set of one calendar.
CalendarRegistry    Named calendars plus the active pointer.
ListResolver        Holidays from a formatted date list.
PredicateResolver   Holidays from a caller-supplied function.
CalendarError       Raised for misconfiguration.
"""

from __future__ import annotations

from workcal.calendar._exceptions import CalendarError
from workcal.calendar.config import (
    DEFAULT_HOLIDAY_FORMAT,
    DEFAULT_SEARCH_LIMIT,
    DEFAULT_WORKING_WEEKDAYS,
    CalendarConfig,
    HolidayResolver,
    ListResolver,
    PredicateResolver,
)
from workcal.calendar.registry import CalendarRegistry

__all__ = [
    "CalendarConfig",
    "CalendarError",
    "CalendarRegistry",
    "HolidayResolver",
    "ListResolver",
    "PredicateResolver",
    "DEFAULT_HOLIDAY_FORMAT",
    "DEFAULT_SEARCH_LIMIT",
    "DEFAULT_WORKING_WEEKDAYS",
]
