"""Shared fixtures for pyflowstats tests."""

import numpy
import pandas
import pytest


def make_flows(start: str, end: str, value=1.0) -> pandas.DataFrame:
    """Daily flows with `Date` and `Value` columns from `start` to `end` inclusive."""
    dates = pandas.date_range(start, end, freq="D")
    if callable(value):
        values = [value(date) for date in dates]
    else:
        values = numpy.full(len(dates), value, dtype=float)
    return pandas.DataFrame({"Date": dates, "Value": values})


@pytest.fixture
def two_years():
    """2001 flows of 10 and 2002 flows of 20 on every day."""
    return pandas.concat([make_flows("2001-01-01", "2001-12-31", 10.0),
                          make_flows("2002-01-01", "2002-12-31", 20.0)], ignore_index=True)


@pytest.fixture
def random_flows():
    """Ten years of positive random flows."""
    rng = numpy.random.default_rng(42)
    flows = make_flows("1990-01-01", "1999-12-31")
    flows["Value"] = rng.gamma(2.0, 5.0, len(flows))
    return flows
