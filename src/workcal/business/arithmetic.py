from __future__ import annotations

import math

from workcal.business.predicate import is_business_day
from workcal.business.search import Direction, search
from workcal.calendar import CalendarConfig
from workcal.dates import DateValue, normalize_unit, round_half_away


def business_add(
    d: DateValue, config: CalendarConfig, amount: float, unit: str = "days"
) -> DateValue:
    """
    Add ``amount`` business ``unit``s to ``d``.

    For days, ``amount`` is rounded half away from zero and each unit moves
    to the next (or previous) business day.  Other units are added as plain
    calendar time and the result is then rolled, a day at a time, onto a
    business day in the direction of ``amount``.  Time-of-day is kept.

    Invalid input or a non-finite amount yields a new invalid DateValue;
    exhausting the search limit also yields an invalid DateValue.
    """
    if not d.is_valid() or not math.isfinite(amount):
        return DateValue()

    steps = round_half_away(amount)
    if steps == 0:
        return d

    if normalize_unit(unit) == "days":
        direction = Direction.FORWARD if steps > 0 else Direction.BACKWARD
        result = d
        for _ in range(abs(steps)):
            result = search(result, config, direction)
            if not result.is_valid():
                break
        return result

    result = d.add(amount, unit)
    if not result.is_valid() or is_business_day(result, config):
        return result
    direction = Direction.FORWARD if amount >= 0 else Direction.BACKWARD
    return search(result, config, direction)


def business_subtract(
    d: DateValue, config: CalendarConfig, amount: float, unit: str = "days"
) -> DateValue:
    return business_add(d, config, -amount, unit)
