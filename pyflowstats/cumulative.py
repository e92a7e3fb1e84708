import pandas
from typing import Union
from .config import CumulativeUnits, get_units, check_basin_area
from .errors import MissingParameter

SECONDS_PER_DAY = 86400


def add_cumulative(flow_data: pandas.DataFrame,
                   units: Union[str, CumulativeUnits] = "volume",
                   basin_area: float = None) -> pandas.DataFrame:
    """
    Add the running total of daily flows for each year.

    Daily mean flows (cubic metres per second) are converted to daily volumes (cubic metres) and summed from the
    first day of each year. For `yield`, volumes are divided by the basin area and reported as depth in mm.
    A day without a value has a missing total, but the days after it keep summing the other days of the year.
    `cumulative_complete` turns `False` from the first missing day of a year onward.

    Args:
        flow_data: filtered flow data with `year`, `day_of_year` and `value` columns, see `filter_years`
        units: `volume` or `yield`
        basin_area: upstream drainage area in square kilometres. required for `yield`

    Returns:
        copy of the data sorted by year and day of year with `cumulative` and `cumulative_complete` columns
    """
    units = get_units(units)
    basin_area = check_basin_area(basin_area)

    factor = SECONDS_PER_DAY
    if units is CumulativeUnits.yield_:
        if basin_area is None:
            raise MissingParameter("no 'basin_area' provided with yield units")
        factor = SECONDS_PER_DAY / (basin_area * 1000)

    data = flow_data.sort_values(["year", "day_of_year"]).reset_index(drop=True)
    is_missing = data.value.isna()

    data["cumulative"] = data.value.mul(factor).fillna(0).groupby(data.year).cumsum()
    data.loc[is_missing, "cumulative"] = float("nan")
    data["cumulative_complete"] = is_missing.astype(int).groupby(data.year).cummax().eq(0)
    return data
