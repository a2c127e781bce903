from __future__ import annotations

import logging
from enum import Enum

from workcal.business.predicate import is_business_day
from workcal.calendar import CalendarConfig
from workcal.dates import DateValue

logger = logging.getLogger(__name__)


class Direction(str, Enum):
    """Direction of a day-by-day search."""

    FORWARD = "forward"
    BACKWARD = "backward"

    @property
    def step(self) -> int:
        return 1 if self is Direction.FORWARD else -1


def search(d: DateValue, config: CalendarConfig, direction: Direction | str) -> DateValue:
    """
    First business day strictly after (FORWARD) or before (BACKWARD) ``d``.

    The time-of-day of ``d`` is kept.  At most ``config.limit_for(...)`` days
    are examined; when none qualifies the result is an invalid DateValue.
    Invalid input is returned as is.
    """
    if not d.is_valid():
        return d
    direction = Direction(direction)
    limit = config.limit_for(direction is Direction.FORWARD)

    current = d
    for _ in range(limit):
        current = current.add(direction.step, "days")
        if is_business_day(current, config):
            return current

    logger.debug(
        f"No business day within {limit} days {direction.value} of {d} "
        f"in calendar {config.name!r}"
    )
    return DateValue()


def next_business_day(d: DateValue, config: CalendarConfig) -> DateValue:
    return search(d, config, Direction.FORWARD)


def prev_business_day(d: DateValue, config: CalendarConfig) -> DateValue:
    return search(d, config, Direction.BACKWARD)
