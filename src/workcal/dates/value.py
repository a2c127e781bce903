from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Optional, Union

from dateutil.parser import isoparse
from dateutil.relativedelta import relativedelta

from workcal.calendar._exceptions import CalendarError

_UNITS: dict[str, str] = {
    "ms": "milliseconds",
    "millisecond": "milliseconds",
    "second": "seconds",
    "minute": "minutes",
    "hour": "hours",
    "day": "days",
    "week": "weeks",
    "month": "months",
    "year": "years",
}

DateLike = Union["DateValue", datetime, date, str, None]


def normalize_unit(unit: str) -> str:
    """Map ``"day"``, ``"Days"``, ``"hours"`` ... to the plural keyword form."""
    key = str(unit).strip().lower()
    if key in _UNITS.values():
        return key
    if key in _UNITS:
        return _UNITS[key]
    raise CalendarError(f"Unknown time unit {unit!r}.")


def round_half_away(amount: float) -> int:
    """Round to the nearest integer, halves away from zero (0.5 -> 1, -0.5 -> -1)."""
    return int(math.copysign(math.floor(abs(amount) + 0.5), amount))


@dataclass(frozen=True, slots=True)
class DateValue:
    """
    Immutable point in time with an explicit "invalid" state.

    ``DateValue()`` (or ``DateValue(None)``) is the invalid value.  Invalid
    values compare equal to each other, never raise, and propagate through
    :meth:`add` so that callers can chain arithmetic without checks.

    Weekdays follow the Gregorian convention 0 = Sunday .. 6 = Saturday.
    """

    value: Optional[datetime] = None

    # ── construction ─────────────────────────────────────────────────────

    @classmethod
    def of(cls, obj: DateLike) -> DateValue:
        if isinstance(obj, DateValue):
            return obj
        if obj is None:
            return cls()
        if isinstance(obj, datetime):
            return cls(obj)
        if isinstance(obj, date):
            return cls(datetime.combine(obj, time()))
        if isinstance(obj, str):
            try:
                return cls(isoparse(obj))
            except ValueError:
                return cls()
        raise TypeError(f"Cannot interpret {type(obj).__name__} as a date.")

    @classmethod
    def parse(cls, text: str, fmt: str) -> DateValue:
        try:
            return cls(datetime.strptime(text, fmt))
        except (TypeError, ValueError):
            return cls()

    @classmethod
    def invalid(cls) -> DateValue:
        return cls()

    # ── fields ───────────────────────────────────────────────────────────

    def is_valid(self) -> bool:
        return self.value is not None

    @property
    def year(self) -> Optional[int]:
        return None if self.value is None else self.value.year

    @property
    def month(self) -> Optional[int]:
        return None if self.value is None else self.value.month

    @property
    def day(self) -> Optional[int]:
        return None if self.value is None else self.value.day

    @property
    def ordinal(self) -> Optional[int]:
        """Proleptic Gregorian day number; ``ordinal // 7`` changes on Sundays."""
        return None if self.value is None else self.value.toordinal()

    def weekday(self) -> Optional[int]:
        if self.value is None:
            return None
        return self.value.isoweekday() % 7

    def to_date(self) -> Optional[date]:
        return None if self.value is None else self.value.date()

    def format(self, pattern: str) -> str:
        if self.value is None:
            return ""
        return self.value.strftime(pattern)

    # ── arithmetic ───────────────────────────────────────────────────────

    def add(self, amount: float, unit: str = "days") -> DateValue:
        key = normalize_unit(unit)
        if self.value is None:
            return DateValue()
        try:
            if key in ("months", "years"):
                # relativedelta refuses fractional months and years
                delta = relativedelta(**{key: round_half_away(amount)})
            else:
                delta = timedelta(**{key: amount})
            return DateValue(self.value + delta)
        except (OverflowError, ValueError):
            # out of the datetime range, or a non-finite amount
            return DateValue()

    def subtract(self, amount: float, unit: str = "days") -> DateValue:
        return self.add(-amount, unit)

    def start_of_day(self) -> DateValue:
        if self.value is None:
            return self
        return DateValue(self.value.replace(hour=0, minute=0, second=0, microsecond=0))

    def start_of_month(self) -> DateValue:
        if self.value is None:
            return self
        return self.start_of_day().replace_day(1)

    def end_of_month(self) -> DateValue:
        """Start of the last day of the month."""
        if self.value is None:
            return self
        first = self.start_of_month()
        return first.add(1, "months").add(-1, "days")

    def replace_day(self, day: int) -> DateValue:
        if self.value is None:
            return self
        return DateValue(self.value.replace(day=day))

    # ── comparison ───────────────────────────────────────────────────────

    def is_same_day(self, other: DateValue) -> bool:
        if self.value is None or other.value is None:
            return False
        return self.to_date() == other.to_date()

    def is_before_day(self, other: DateValue) -> bool:
        if self.value is None or other.value is None:
            return False
        return self.ordinal < other.ordinal

    def __repr__(self) -> str:
        if self.value is None:
            return "DateValue(invalid)"
        return f"DateValue({self.value.isoformat()!r})"
