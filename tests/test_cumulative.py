"""Tests for cumulative volumes and yields."""

import numpy
import pytest

from pyflowstats import (AnalysisWindow, DataQualityWarning, InvalidParameter, MissingParameter, ObservedFlow,
                         add_cumulative, filter_years)
from tests.conftest import make_flows


def filtered(flows, year_type="calendar", water_year_start=10):
    observed = ObservedFlow(flows, year_type=year_type, water_year_start=water_year_start)
    data, _ = filter_years(observed.data, AnalysisWindow(year_type=year_type))
    return data


class TestVolume:
    """Test cumulative volume."""

    def test_one_cms_for_a_year(self):
        """1 m3/s for a non-leap year is 31,536,000 m3 on day 365."""
        data = add_cumulative(filtered(make_flows("2001-01-01", "2001-12-31")), units="volume")

        assert data.cumulative.iloc[0] == 86400
        assert data.cumulative.iloc[-1] == 365 * 86400 == 31536000

    def test_resets_each_year(self, random_flows):
        data = add_cumulative(filtered(random_flows))

        first_days = data[data.day_of_year == 1]
        assert numpy.allclose(first_days.cumulative, first_days.value * 86400)

    def test_non_decreasing(self, random_flows):
        data = add_cumulative(filtered(random_flows))

        assert data.groupby("year").cumulative.apply(lambda x: x.is_monotonic_increasing).all()
        assert data.cumulative_complete.all()

    def test_water_years(self):
        data = add_cumulative(filtered(make_flows("2000-10-01", "2002-09-30"), year_type="water",
                                       water_year_start=10))

        end_of_years = data[data.day_of_year == 365]
        assert end_of_years.cumulative.tolist() == [31536000, 31536000]


class TestYield:
    """Test cumulative runoff yield."""

    def test_yield_in_mm(self):
        data = add_cumulative(filtered(make_flows("2001-01-01", "2001-12-31")), units="yield", basin_area=100)

        assert data.cumulative.iloc[0] == pytest.approx(0.864)
        assert data.cumulative.iloc[-1] == pytest.approx(0.864 * 365)

    def test_missing_basin_area(self):
        with pytest.raises(MissingParameter):
            add_cumulative(filtered(make_flows("2001-01-01", "2001-12-31")), units="yield")

    @pytest.mark.parametrize("area", [0, -5.0, "big"])
    def test_invalid_basin_area(self, area):
        with pytest.raises(InvalidParameter):
            add_cumulative(filtered(make_flows("2001-01-01", "2001-12-31")), units="yield", basin_area=area)

    def test_unknown_units(self):
        with pytest.raises(InvalidParameter, match="units"):
            add_cumulative(filtered(make_flows("2001-01-01", "2001-12-31")), units="litres")


class TestMissingDays:
    """Test missing values in running totals."""

    def test_missing_day_does_not_break_total(self):
        flows = make_flows("2001-01-01", "2001-12-31")
        flows.loc[9, "Value"] = numpy.nan

        with pytest.warns(DataQualityWarning):
            data = add_cumulative(filtered(flows))

        assert numpy.isnan(data.cumulative.iloc[9])
        assert data.cumulative.iloc[10] == 10 * 86400
        assert data.cumulative.iloc[-1] == 364 * 86400

    def test_incomplete_flag(self):
        flows = make_flows("2001-01-01", "2002-12-31")
        flows.loc[9, "Value"] = numpy.nan

        with pytest.warns(DataQualityWarning):
            data = add_cumulative(filtered(flows))

        year_2001 = data[data.year == 2001]
        assert year_2001.cumulative_complete.iloc[:9].all()
        assert not year_2001.cumulative_complete.iloc[9:].any()
        assert data[data.year == 2002].cumulative_complete.all()
