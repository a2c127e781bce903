from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, fields, replace
from datetime import date
from typing import Any, Callable, Iterable, Mapping, Optional, Union

from workcal.calendar._exceptions import CalendarError
from workcal.dates import DateValue

logger = logging.getLogger(__name__)

DEFAULT_WORKING_WEEKDAYS: frozenset[int] = frozenset({1, 2, 3, 4, 5})
DEFAULT_HOLIDAY_FORMAT: str = "%Y-%m-%d"
DEFAULT_SEARCH_LIMIT: int = 30

HolidayPredicate = Callable[[DateValue], bool]
HolidayEntry = Union[str, date]


# ── holiday resolvers ─────────────────────────────────────────────────────

class HolidayResolver(ABC):
    """Decides whether a (valid) date is a holiday."""

    @abstractmethod
    def is_holiday(self, d: DateValue) -> bool:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class ListResolver(HolidayResolver):
    """Holidays given as a fixed list, matched on their formatted string."""

    dates: frozenset[str]
    format: str = DEFAULT_HOLIDAY_FORMAT

    @classmethod
    def from_entries(
        cls, entries: Iterable[HolidayEntry], fmt: str = DEFAULT_HOLIDAY_FORMAT
    ) -> ListResolver:
        formatted: set[str] = set()
        for entry in entries:
            if isinstance(entry, str):
                parsed = DateValue.parse(entry, fmt)
            else:
                parsed = DateValue.of(entry)
            if not parsed.is_valid():
                logger.warning(f"Skipping holiday {entry!r}: does not match format {fmt!r}")
                continue
            formatted.add(parsed.format(fmt))
        return cls(frozenset(formatted), fmt)

    def is_holiday(self, d: DateValue) -> bool:
        return d.format(self.format) in self.dates


@dataclass(frozen=True, slots=True)
class PredicateResolver(HolidayResolver):
    """Holidays decided by a caller-supplied function, called on every lookup."""

    fn: HolidayPredicate

    def is_holiday(self, d: DateValue) -> bool:
        return bool(self.fn(d))


# ── calendar configuration ────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class CalendarConfig:
    """
    Rule set of one named calendar.

    ``working_weekdays`` uses 0 = Sunday .. 6 = Saturday; ``None`` resets it
    to Monday-Friday.  When ``holiday_predicate`` is set it is authoritative
    and ``holiday_dates`` is ignored.  ``next_search_limit`` and
    ``prev_search_limit`` override ``search_limit`` for one direction.
    """

    name: str = "default"
    working_weekdays: frozenset[int] = DEFAULT_WORKING_WEEKDAYS
    holiday_dates: tuple[HolidayEntry, ...] = ()
    holiday_format: str = DEFAULT_HOLIDAY_FORMAT
    holiday_predicate: Optional[HolidayPredicate] = None
    search_limit: int = DEFAULT_SEARCH_LIMIT
    next_search_limit: Optional[int] = None
    prev_search_limit: Optional[int] = None
    resolver: Optional[HolidayResolver] = field(
        init=False, default=None, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if self.working_weekdays is None:
            weekdays = DEFAULT_WORKING_WEEKDAYS
        else:
            weekdays = frozenset(int(w) for w in self.working_weekdays)
        bad = sorted(w for w in weekdays if not 0 <= w <= 6)
        if bad:
            raise CalendarError(f"Working weekdays must be in 0..6; got {bad}.")
        object.__setattr__(self, "working_weekdays", weekdays)
        object.__setattr__(self, "holiday_dates", tuple(self.holiday_dates or ()))

        if self.search_limit is None or int(self.search_limit) < 1:
            raise CalendarError(f"search_limit must be >= 1; got {self.search_limit}.")
        for attr in ("next_search_limit", "prev_search_limit"):
            value = getattr(self, attr)
            if value is not None and int(value) < 1:
                raise CalendarError(f"{attr} must be >= 1; got {value}.")

        object.__setattr__(self, "resolver", self._build_resolver())

    def _build_resolver(self) -> Optional[HolidayResolver]:
        if self.holiday_predicate is not None:
            return PredicateResolver(self.holiday_predicate)
        if self.holiday_dates:
            return ListResolver.from_entries(self.holiday_dates, self.holiday_format)
        return None

    @classmethod
    def field_names(cls) -> frozenset[str]:
        return frozenset(f.name for f in fields(cls) if f.init)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> CalendarConfig:
        unknown = sorted(set(mapping) - cls.field_names())
        if unknown:
            raise CalendarError(f"Unknown calendar settings: {unknown}.")
        return cls(**mapping)

    def merge(self, **changes: Any) -> CalendarConfig:
        """Return a copy with ``changes`` applied over the current fields."""
        unknown = sorted(set(changes) - self.field_names())
        if unknown:
            raise CalendarError(f"Unknown calendar settings: {unknown}.")
        return replace(self, **changes)

    def limit_for(self, forward: bool) -> int:
        override = self.next_search_limit if forward else self.prev_search_limit
        return int(override if override is not None else self.search_limit)
