import logging
import pandas
from pandas.api import types
from pathlib import Path
from typing import Mapping, Union
from .config import YearType, get_year_type, check_month
from .errors import InvalidInput, report
from ._utils import _get_water_year, _get_day_of_water_year, _year_span

logger = logging.getLogger(__name__)

FlowInput = Union[str, Path, pandas.DataFrame, pandas.Series, Mapping]


class ObservedFlow:
    def __init__(self,
                 flow: FlowInput,
                 date_col: str = "Date",
                 value_col: str = "Value",
                 year_type: Union[str, YearType] = "calendar",
                 water_year_start: int = 10,
                 date_format: str = None):
        """
        Reads raw daily flow data and aligns it to a complete daily grid. The grid spans whole years of the selected
        type, from the first day of the year of the first observation to the last day of the year of the last
        observation. Dates without observations are inserted with missing values.

        Args:
            flow: pandas Dataframe with flow data, path to the csv file containing flow data, pandas Series indexed
                by date, or a mapping of date to flow
            date_col: name of the date column in the csv or Dataframe
            value_col: name of the daily mean flow column (cubic metres per second) in the csv or Dataframe
            year_type: `calendar` or `water`. decides where the grid starts and ends
            water_year_start: the month when the water year starts. default is `10` (for October)
            date_format: format to use for parsing date column
        """
        self.year_type = get_year_type(year_type)
        self.water_year_start = check_month(water_year_start)

        self.diagnostics = []
        "data-quality notices found while reading, list of `Diagnostic`"

        self.data = self.__read_flow(flow, date_col, value_col, date_format)
        """
        aligned flow data in long format with columns `date`, `value`, `calendar_year`, `calendar_day_of_year`,
        `water_year` and `water_day_of_year`. one row per day
        """

    @property
    def year_start(self) -> int:
        return self.water_year_start if self.year_type is YearType.water else 1

    def __read_flow(self, data, date_col, value_col, date_format):
        if isinstance(data, (str, Path)):
            try:
                flow_data = pandas.read_csv(data, usecols=[date_col, value_col])
            except ValueError as err:
                raise InvalidInput(f"csv '{data}' doesn't contain the columns '{date_col}' and '{value_col}'") from err
            flow_data = flow_data[[date_col, value_col]].copy()
        elif isinstance(data, pandas.DataFrame):
            if not {date_col, value_col}.issubset(data.columns):
                raise InvalidInput(f"flow data frame doesn't contain the columns '{date_col}' and '{value_col}'")
            flow_data = data[[date_col, value_col]].copy()
        elif isinstance(data, pandas.Series):
            flow_data = pandas.DataFrame({"date": data.index, "value": data.to_numpy()})
        elif isinstance(data, Mapping):
            flow_data = pandas.DataFrame({"date": list(data.keys()), "value": list(data.values())})
        else:
            raise InvalidInput(f"'flow' of type {type(data).__name__} is not valid")

        flow_data.columns = ["date", "value"]

        if flow_data.empty:
            raise InvalidInput("flow data is empty")

        flow_data["date"] = self._parse_dates(flow_data["date"], date_format)
        flow_data["value"] = self._parse_values(flow_data["value"])

        duplicated = flow_data.date.duplicated()
        if duplicated.any():
            dates = flow_data.date[duplicated].dt.strftime("%Y-%m-%d").unique()[:5].tolist()
            raise InvalidInput(f"flow data has more than one observation for dates {dates}")

        n_negative = int(flow_data.value.lt(0).sum())
        if n_negative:
            report(self.diagnostics, "negative_values",
                   f"flow data has {n_negative} negative values - check your data", n_negative)

        n_observed = len(flow_data)
        first, last = _year_span(flow_data.date.min(), flow_data.date.max(), self.year_start)
        grid = pandas.date_range(first, last, freq="D", name="date")
        logger.debug("aligning %d observations to %d days from %s to %s",
                     n_observed, len(grid), first.date(), last.date())

        flow_data = flow_data.set_index("date").reindex(grid)

        n_filled = len(grid) - n_observed
        if n_filled:
            report(self.diagnostics, "gaps_filled",
                   f"{n_filled} dates without observations were filled with missing values", n_filled)

        n_missing = int(flow_data.value.isna().sum())
        if n_missing:
            report(self.diagnostics, "missing_values",
                   f"flow data has {n_missing} days without a value", n_missing)

        flow_data["calendar_year"] = grid.year
        flow_data["calendar_day_of_year"] = grid.dayofyear
        flow_data["water_year"] = _get_water_year(grid, self.water_year_start)
        flow_data["water_day_of_year"] = _get_day_of_water_year(grid, self.water_year_start)
        return flow_data.reset_index()

    @staticmethod
    def _parse_dates(dates: pandas.Series, date_format: str) -> pandas.Series:
        if types.is_bool_dtype(dates) or types.is_numeric_dtype(dates):
            raise InvalidInput("date column in flow data is not a date")

        if not types.is_datetime64_any_dtype(dates):
            try:
                dates = pandas.to_datetime(dates, format=date_format)
            except (ValueError, TypeError) as err:
                raise InvalidInput("date column in flow data is not a date") from err

        if dates.isna().any():
            raise InvalidInput("date column in flow data has missing dates")

        if dates.dt.tz is not None:
            dates = dates.dt.tz_localize(None)
        return dates.dt.normalize()

    @staticmethod
    def _parse_values(values: pandas.Series) -> pandas.Series:
        if types.is_bool_dtype(values):
            raise InvalidInput("value column in flow data is not numeric")

        if not types.is_numeric_dtype(values):
            try:
                values = pandas.to_numeric(values, errors="raise")
            except (ValueError, TypeError) as err:
                raise InvalidInput("value column in flow data has non-numeric entries") from err
        return values.astype(float)
