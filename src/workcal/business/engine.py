from __future__ import annotations

from typing import Any, Optional

from workcal.business.aggregate import (
    Week,
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
from workcal.business.search import next_business_day, prev_business_day
from workcal.calendar import CalendarConfig, CalendarRegistry
from workcal.dates import DateLike, DateValue


class BusinessCalendar:
    """
    Business-day operations bound to a CalendarRegistry.

    Every method evaluates against the registry's active calendar at call
    time.  Dates may be DateValue, ``datetime``, ``date``, ISO strings or
    ``None`` (invalid); invalid input never raises.
    """

    def __init__(self, registry: Optional[CalendarRegistry] = None) -> None:
        self._registry = registry if registry is not None else CalendarRegistry()

    # ── configuration ────────────────────────────────────────────────────

    @property
    def registry(self) -> CalendarRegistry:
        return self._registry

    @property
    def config(self) -> CalendarConfig:
        return self._registry.active

    def register(
        self, name: str, config: Optional[CalendarConfig] = None, /, **settings: Any
    ) -> CalendarConfig:
        return self._registry.register(name, config, **settings)

    def update(self, name: Optional[str] = None, /, **settings: Any) -> CalendarConfig:
        return self._registry.update(name or self._registry.active_name, **settings)

    def use(self, name: str) -> CalendarConfig:
        return self._registry.use(name)

    # ── predicate / search ───────────────────────────────────────────────

    def is_business_day(self, d: DateLike) -> bool:
        return is_business_day(DateValue.of(d), self.config)

    def is_holiday(self, d: DateLike) -> bool:
        return is_holiday(DateValue.of(d), self.config)

    def next_business_day(self, d: DateLike) -> DateValue:
        return next_business_day(DateValue.of(d), self.config)

    def prev_business_day(self, d: DateLike) -> DateValue:
        return prev_business_day(DateValue.of(d), self.config)

    # ── arithmetic / counting ────────────────────────────────────────────

    def business_add(self, d: DateLike, amount: float, unit: str = "days") -> DateValue:
        return business_add(DateValue.of(d), self.config, amount, unit)

    def business_subtract(self, d: DateLike, amount: float, unit: str = "days") -> DateValue:
        return business_subtract(DateValue.of(d), self.config, amount, unit)

    def business_diff(self, start: DateLike, end: DateLike, relative: bool = False) -> int | float:
        return business_diff(
            DateValue.of(start), DateValue.of(end), self.config, relative
        )

    def business_days_into_month(self, d: DateLike) -> int | float:
        return business_days_into_month(DateValue.of(d), self.config)

    # ── enumerations ─────────────────────────────────────────────────────

    def month_business_days(self, d: DateLike, until: DateLike = None) -> list[DateValue]:
        limit = None if until is None else DateValue.of(until)
        return month_business_days(DateValue.of(d), self.config, limit)

    def month_natural_days(self, d: DateLike, from_anchor: bool = False) -> list[DateValue]:
        return month_natural_days(DateValue.of(d), from_anchor)

    def month_business_weeks(self, d: DateLike, from_anchor: bool = False) -> list[Week]:
        return month_business_weeks(DateValue.of(d), self.config, from_anchor)

    def month_natural_weeks(self, d: DateLike, from_anchor: bool = False) -> list[Week]:
        return month_natural_weeks(DateValue.of(d), from_anchor)

    def business_weeks_between(self, start: DateLike, end: DateLike = None) -> list[Week]:
        return business_weeks_between(
            DateValue.of(start), DateValue.of(end), self.config
        )

    def __repr__(self) -> str:
        return f"BusinessCalendar(active={self._registry.active_name!r})"
