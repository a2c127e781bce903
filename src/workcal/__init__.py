"""
workcal
~~~~~~~

Business-day calendar arithmetic: working-day tests, bounded next/previous
business day search, business-period addition, business-day differences and
month/week enumeration over named, switchable calendars.

Public API
----------
BusinessCalendar    Operations bound to the active calendar of a registry.
CalendarConfig      Rule set of one named calendar.
CalendarRegistry    Named calendars plus the active pointer.
DateValue           Date/time value with an explicit invalid state.
CalendarError       Raised for misconfiguration.
"""

from __future__ import annotations

from workcal.business import BusinessCalendar, Direction
from workcal.calendar import CalendarConfig, CalendarError, CalendarRegistry
from workcal.dates import DateValue

__version__ = "0.1.0"

__all__ = [
    "BusinessCalendar",
    "CalendarConfig",
    "CalendarError",
    "CalendarRegistry",
    "DateValue",
    "Direction",
    "__version__",
]
