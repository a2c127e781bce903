"""
tests/business/test_counter.py

Covers:
  - Unsigned and relative business-day differences
  - Custom weekday masks and holidays
  - Non-business endpoints (inclusive upper / exclusive lower bound)
  - Time-of-day ignored
  - Invalid input -> NaN
  - Symmetry properties
"""

import math

import pytest

from workcal.business import business_diff
from workcal.calendar import CalendarConfig
from workcal.dates import DateValue


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def us():
    return CalendarConfig("us", holiday_dates=("2016-07-04",))


def D(text):
    return DateValue.of(text)


# ── Basic counting ────────────────────────────────────────────────────────────

class TestBusinessDiff:

    def test_one_week(self, us):
        assert business_diff(D("2017-05-15"), D("2017-05-08"), us) == 5

    def test_reverse_order(self, us):
        assert business_diff(D("2017-05-08"), D("2017-05-15"), us) == 5

    def test_relative_negative_when_start_earlier(self, us):
        assert business_diff(D("2017-05-08"), D("2017-05-15"), us, relative=True) == -5

    def test_relative_positive_when_start_later(self, us):
        assert business_diff(D("2017-05-15"), D("2017-05-08"), us, relative=True) == 5

    def test_custom_working_days(self, us):
        six = us.merge(working_weekdays={1, 2, 3, 4, 5, 6})
        assert business_diff(D("2017-05-15"), D("2017-05-08"), six) == 6

    def test_all_days_working(self, us):
        every = us.merge(working_weekdays=range(7))
        assert business_diff(D("2017-06-18"), D("2017-05-18"), every) == 31

    def test_same_day(self, us):
        assert business_diff(D("2017-05-08"), D("2017-05-08"), us) == 0

    def test_same_day_different_hours(self, us):
        a = D("2018-08-16T19:06:57.665")
        b = D("2018-08-16T18:06:57.665")
        assert business_diff(a, b, us) == 0
        assert business_diff(a, b, us, relative=True) == 0

    def test_holidays(self, us):
        assert business_diff(D("2016-07-01"), D("2016-07-10"), us) == 4

    def test_non_business_end(self, us):
        assert business_diff(D("2021-02-22"), D("2021-02-28"), us) == 4

    def test_non_business_start_later(self, us):
        assert business_diff(D("2021-02-28"), D("2021-02-22"), us, relative=True) == 4

    def test_ignores_time_of_day(self, us):
        assert business_diff(D("2018-09-04T14:48:46"), D("2018-08-30T11:48:46"), us) == 3

    def test_adjacent_weekend_days(self, us):
        assert business_diff(D("2015-11-07"), D("2015-11-08"), us) == 0

    def test_empty_mask(self):
        cfg = CalendarConfig(working_weekdays=())
        assert business_diff(D("2017-05-08"), D("2017-06-08"), cfg) == 0

    def test_returns_int(self, us):
        assert isinstance(business_diff(D("2017-05-15"), D("2017-05-08"), us), int)


# ── Invalid input ─────────────────────────────────────────────────────────────

class TestInvalid:

    def test_invalid_start(self, us):
        assert math.isnan(business_diff(DateValue(), D("2017-05-08"), us))

    def test_invalid_end(self, us):
        assert math.isnan(business_diff(D("2017-05-08"), DateValue(), us, relative=True))


# ── Properties ────────────────────────────────────────────────────────────────

PAIRS = [
    ("2016-06-27", "2016-07-12"),
    ("2015-11-03T12:00", "2015-11-21T08:00"),
    ("2021-02-20", "2021-03-01"),
    ("2019-12-24", "2020-01-06"),
]


class TestProperties:

    @pytest.mark.parametrize("a, b", PAIRS)
    def test_magnitude_symmetric(self, us, a, b):
        assert business_diff(D(a), D(b), us) == business_diff(D(b), D(a), us)

    @pytest.mark.parametrize("a, b", PAIRS)
    def test_relative_antisymmetric(self, us, a, b):
        forward = business_diff(D(a), D(b), us, relative=True)
        backward = business_diff(D(b), D(a), us, relative=True)
        assert forward == -backward
        assert forward <= 0

    @pytest.mark.parametrize("a", ["2016-07-04", "2015-11-07T10:00", "2019-12-31"])
    def test_self_diff_is_zero(self, us, a):
        assert business_diff(D(a), D(a), us) == 0
