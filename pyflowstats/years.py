import logging
import pandas
from typing import Tuple
from .config import AnalysisWindow, YearType
from .errors import InvalidInput

logger = logging.getLogger(__name__)

_YEAR_COLUMNS = {
    YearType.calendar: ("calendar_year", "calendar_day_of_year"),
    YearType.water: ("water_year", "water_day_of_year"),
}


def add_analysis_year(flow_data: pandas.DataFrame, year_type: YearType) -> pandas.DataFrame:
    """copy of aligned flow data with `year` and `day_of_year` columns of the selected year type"""
    year_col, day_col = _YEAR_COLUMNS[year_type]
    if not {year_col, day_col}.issubset(flow_data.columns):
        raise InvalidInput(f"flow data doesn't contain the columns '{year_col}' and '{day_col}'")
    return flow_data.assign(year=flow_data[year_col], day_of_year=flow_data[day_col])


def filter_years(flow_data: pandas.DataFrame,
                 window: AnalysisWindow) -> Tuple[pandas.DataFrame, AnalysisWindow]:
    """
    Restrict aligned flow data to the years in `window` and drop the 366th day of leap years so that every year has
    the same 365 day axis.

    Args:
        flow_data: aligned flow data, see `ObservedFlow.data`
        window: years to keep. missing start and end years are taken from the data

    Returns:
        filtered copy of the data with `year` and `day_of_year` columns, and the resolved window
    """
    data = add_analysis_year(flow_data, window.year_type)
    window = window.resolve(data.year.unique())

    keep = (data.year.between(window.start_year, window.end_year)
            & ~data.year.isin(list(window.exclude_years))
            & data.day_of_year.lt(366))
    data = data.loc[keep].reset_index(drop=True)

    logger.info("kept %d %s years between %d and %d (%d excluded)",
                data.year.nunique(), window.year_type.name, window.start_year, window.end_year,
                len(window.exclude_years))
    return data, window
