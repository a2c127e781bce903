"""
workcal.dates
~~~~~~~~~~~~~

The date value consumed by every business-day operation.  A DateValue wraps
an optional ``datetime``; the empty wrapper is the *invalid* date, which
every operation in :mod:`workcal.business` accepts and propagates instead of
raising.

Basic usage::

    from workcal.dates import DateValue

    d = DateValue.of("2015-11-03T12:42:00")
    d.weekday()                 # 2 (Tuesday, 0 = Sunday)
    d.add(36, "hours")          # DateValue('2015-11-05T00:42:00')
    DateValue.parse("bogus", "%Y-%m-%d").is_valid()   # False
"""

from __future__ import annotations

from workcal.dates.value import (
    DateLike,
    DateValue,
    normalize_unit,
    round_half_away,
)

__all__ = [
    "DateLike",
    "DateValue",
    "normalize_unit",
    "round_half_away",
]
