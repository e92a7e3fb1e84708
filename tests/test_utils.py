"""Tests for date helpers."""

import pandas
import pytest

from pyflowstats._utils import (_ORIGIN_DATES, _get_day_of_water_year, _get_water_year, _to_analysis_date,
                                _year_span)


class TestOriginDates:
    """Test the start month lookup table."""

    def test_every_month(self):
        assert sorted(_ORIGIN_DATES) == list(range(1, 13))

    @pytest.mark.parametrize("month", range(1, 13))
    def test_day_one_is_first_of_month(self, month):
        day_one = _to_analysis_date(1, month)

        assert day_one.month == month
        assert day_one.day == 1

    @pytest.mark.parametrize("month", range(1, 13))
    def test_day_365_is_end_of_year(self, month):
        """Day 365 is the day before the start month, one year later."""
        day_365 = _to_analysis_date(365, month)

        assert day_365 + pandas.Timedelta(days=1) == _to_analysis_date(1, month) + pandas.DateOffset(years=1)


class TestWaterYear:
    """Test water year helpers."""

    def test_water_year(self):
        idx = pandas.DatetimeIndex(["2000-09-30", "2000-10-01", "2001-01-01"])

        assert _get_water_year(idx, 10).tolist() == [2000, 2001, 2001]
        assert _get_water_year(idx, 1).tolist() == [2000, 2000, 2001]

    def test_day_of_water_year(self):
        idx = pandas.DatetimeIndex(["2000-10-01", "2001-01-01", "2001-09-30"])

        assert _get_day_of_water_year(idx, 10).tolist() == [1, 93, 365]

    @pytest.mark.parametrize("month", range(1, 13))
    def test_day_one_for_each_start_month(self, month):
        idx = pandas.DatetimeIndex([pandas.Timestamp(2001, month, 1)])

        assert _get_day_of_water_year(idx, month).tolist() == [1]

    def test_year_span(self):
        start, end = _year_span(pandas.Timestamp("2001-03-05"), pandas.Timestamp("2002-11-20"), 10)

        assert start == pandas.Timestamp("2000-10-01")
        assert end == pandas.Timestamp("2003-09-30")

    def test_calendar_year_span(self):
        start, end = _year_span(pandas.Timestamp("2001-03-05"), pandas.Timestamp("2002-11-20"), 1)

        assert start == pandas.Timestamp("2001-01-01")
        assert end == pandas.Timestamp("2002-12-31")
