"""Tests for year windows and year filtering."""

import pytest

from pyflowstats import AnalysisWindow, InvalidParameter, InvalidRange, ObservedFlow, filter_years
from tests.conftest import make_flows


@pytest.fixture
def aligned():
    return ObservedFlow(make_flows("1999-01-01", "2004-12-31"), year_type="calendar").data


class TestAnalysisWindow:
    """Test window validation and resolution."""

    def test_start_after_end(self):
        with pytest.raises(InvalidRange):
            AnalysisWindow(start_year=2005, end_year=2000)

    def test_resolve_defaults_to_data_years(self):
        window = AnalysisWindow().resolve([2001, 1999, 2003])

        assert window.start_year == 1999
        assert window.end_year == 2003

    def test_resolve_start_after_last_year(self):
        with pytest.raises(InvalidRange):
            AnalysisWindow(start_year=2010).resolve([2000, 2005])

    def test_exclude_single_year(self):
        assert AnalysisWindow(exclude_years=2001).exclude_years == frozenset({2001})

    @pytest.mark.parametrize("years", ["2001", [2001.5], object()])
    def test_invalid_exclude_years(self, years):
        with pytest.raises(InvalidParameter):
            AnalysisWindow(exclude_years=years)

    def test_invalid_year_type(self):
        with pytest.raises(InvalidParameter, match="year_type"):
            AnalysisWindow(year_type="fiscal")


class TestFilterYears:
    """Test filtering aligned data."""

    def test_full_range_keeps_all_but_leap_day(self, aligned):
        """Full range and no exclusions keep every row except day 366."""
        data, window = filter_years(aligned, AnalysisWindow())

        assert len(data) == len(aligned[aligned.calendar_day_of_year != 366])
        assert (window.start_year, window.end_year) == (1999, 2004)

    def test_every_year_has_365_days(self, aligned):
        data, _ = filter_years(aligned, AnalysisWindow())

        assert data.groupby("year").size().eq(365).all()
        assert data.day_of_year.max() == 365

    def test_leap_year_drops_last_day(self, aligned):
        """In a calendar leap year the 366th day is 31 December."""
        data, _ = filter_years(aligned, AnalysisWindow())
        year_2000 = data[data.year == 2000]

        assert (year_2000.date.dt.strftime("%m-%d") == "02-29").any()
        assert not (year_2000.date.dt.strftime("%m-%d") == "12-31").any()

    def test_window_and_exclusions(self, aligned):
        data, window = filter_years(aligned, AnalysisWindow(start_year=2000, end_year=2003, exclude_years={2001}))

        assert sorted(data.year.unique()) == [2000, 2002, 2003]
        assert window.exclude_years == frozenset({2001})

    def test_excluded_years_outside_window(self, aligned):
        data, _ = filter_years(aligned, AnalysisWindow(exclude_years=[1990]))

        assert data.year.nunique() == 6

    def test_water_years(self):
        aligned = ObservedFlow(make_flows("1999-10-01", "2002-09-30"), year_type="water",
                               water_year_start=10).data

        data, window = filter_years(aligned, AnalysisWindow(year_type="water"))

        assert (window.start_year, window.end_year) == (2000, 2002)
        first = data[data.year == 2000].iloc[0]
        assert first["date"].strftime("%Y-%m-%d") == "1999-10-01"
        assert first["day_of_year"] == 1

    def test_input_not_modified(self, aligned):
        columns = list(aligned.columns)

        filter_years(aligned, AnalysisWindow())

        assert list(aligned.columns) == columns
