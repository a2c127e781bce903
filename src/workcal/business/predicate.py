from __future__ import annotations

from workcal.calendar import CalendarConfig
from workcal.dates import DateValue


def is_business_day(d: DateValue, config: CalendarConfig) -> bool:
    """Weekday in the working mask and not a holiday; invalid dates never qualify."""
    if not d.is_valid():
        return False
    if d.weekday() not in config.working_weekdays:
        return False
    resolver = config.resolver
    if resolver is None:
        return True
    return not resolver.is_holiday(d)


def is_holiday(d: DateValue, config: CalendarConfig) -> bool:
    """Holiday verdict of the resolver alone, ignoring the weekday mask."""
    if not d.is_valid() or config.resolver is None:
        return False
    return config.resolver.is_holiday(d)
