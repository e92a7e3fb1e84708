import logging
import pandas
from dataclasses import dataclass
from typing import Callable, Optional, Tuple, Union
from .config import AnalysisWindow, CumulativeUnits, FlowStatsConfig, check_basin_area
from .cumulative import add_cumulative
from .daily_stats import DailyStats
from .errors import ConflictingInput, InvalidInput, MissingParameter, Diagnostic, report
from .observed_flow import ObservedFlow, FlowInput
from .screening import screen_flow_data
from .years import filter_years
from ._utils import _to_analysis_date

logger = logging.getLogger(__name__)

STATION_COLUMN = "STATION_NUMBER"


@dataclass(frozen=True)
class StationRecord:
    """
    Daily flows returned by a station data source.

    Args:
        data: daily flow data with `Date` and `Value` columns
        basin_area: gross drainage area of the station in square kilometres, if known
    """
    data: pandas.DataFrame
    basin_area: Optional[float] = None


@dataclass(frozen=True)
class InlineFlows:
    """
    flow data supplied directly. see `ObservedFlow` for the accepted types. if `fetch` is given and the data frame has
    a `STATION_NUMBER` column, the basin area of the first station in it is looked up for yield
    """
    data: FlowInput
    date_col: str = "Date"
    value_col: str = "Value"
    date_format: Optional[str] = None
    fetch: Optional[Callable[[str], StationRecord]] = None


@dataclass(frozen=True)
class StationFlows:
    """flow data retrieved for `station` by calling `fetch(station)`"""
    station: str
    fetch: Callable[[str], StationRecord]


FlowSource = Union[InlineFlows, StationFlows]


def resolve_source(flow_data: FlowInput = None,
                   station: str = None,
                   fetch: Callable[[str], StationRecord] = None,
                   date_col: str = "Date",
                   value_col: str = "Value",
                   date_format: str = None) -> FlowSource:
    """
    pick the flow source from mutually exclusive arguments. exactly one of `flow_data` or `station` must be set
    """
    if flow_data is not None and station is not None:
        raise ConflictingInput("must select either 'flow_data' or 'station' arguments, not both")
    if flow_data is None and station is None:
        raise ConflictingInput("one of 'flow_data' or 'station' arguments must be set")

    if station is not None:
        if not isinstance(station, str) or not station:
            raise InvalidInput(f"'station' must be a station identifier, got {station!r}")
        if fetch is None:
            raise MissingParameter("a 'fetch' function is required to retrieve flows for a station")
        return StationFlows(station, fetch)
    return InlineFlows(flow_data, date_col, value_col, date_format, fetch)


@dataclass(frozen=True)
class DailyFlowStats:
    """
    Results of daily flow statistics, ready to be drawn.

    Attributes:
        summary: statistics of daily flows for each day of the year, see `DailyStats.get_summary`. `date` is the
            display date of the day of year
        cumulative_summary: the same statistics of the cumulative flows
        years: daily and cumulative flows of each retained year in long format with columns `year`, `day_of_year`,
            `date`, `analysis_date`, `value`, `cumulative` and `cumulative_complete`
        window: the years used, with start and end resolved from the data
        units: units of the cumulative flows, `m3` or `mm`
        diagnostics: data-quality notices
    """
    summary: pandas.DataFrame
    cumulative_summary: pandas.DataFrame
    years: pandas.DataFrame
    window: AnalysisWindow
    units: str
    diagnostics: Tuple[Diagnostic, ...] = ()

    def get_year(self, year: int) -> pandas.DataFrame:
        """daily and cumulative flows of one year for overlaying on the summary"""
        if year not in set(self.years.year):
            raise InvalidInput(f"year {year} is not part of the analysis")
        return self.years.loc[self.years.year == year].reset_index(drop=True)

    def to_wide(self, column: str = "cumulative") -> pandas.DataFrame:
        """`column` of `years` with one column per year, indexed by day of year"""
        return DailyStats(self.years, value_col=column, percentiles=()).data


class FlowStats:
    def __init__(self,
                 source: FlowSource,
                 config: FlowStatsConfig = None):
        """
        Daily and cumulative flow statistics of a daily streamflow record.

        Args:
            source: `InlineFlows` or `StationFlows`
            config: settings, see `FlowStatsConfig`. defaults are used if not given
        """
        if not isinstance(source, (InlineFlows, StationFlows)):
            raise InvalidInput(f"'source' must be InlineFlows or StationFlows, got {type(source).__name__}")
        self.source = source
        self.config = config if config is not None else FlowStatsConfig()

    def _read_source(self) -> Tuple[FlowInput, str, str, Optional[str], Optional[float]]:
        """flow data, its column names and date format, and the basin area reported for the station"""
        source = self.source
        if isinstance(source, StationFlows):
            record = source.fetch(source.station)
            logger.info("retrieved %d days of flow for station %s", len(record.data), source.station)
            return record.data, "Date", "Value", None, record.basin_area
        return source.data, source.date_col, source.value_col, source.date_format, None

    def _lookup_basin_area(self, flow: FlowInput) -> Optional[float]:
        """basin area of the station named in the `STATION_NUMBER` column of inline flows"""
        fetch = self.source.fetch
        if fetch is None or not isinstance(flow, pandas.DataFrame) or STATION_COLUMN not in flow.columns or flow.empty:
            return None
        station = str(flow[STATION_COLUMN].iloc[0])
        logger.info("looking up the basin area of station %s", station)
        return fetch(station).basin_area

    def _resolve_basin_area(self, flow: FlowInput, station_area: Optional[float]) -> Optional[float]:
        """basin area used for yield. `None` for volume units"""
        config = self.config
        if config.units is not CumulativeUnits.yield_:
            return None
        if config.basin_area is not None:
            return config.basin_area

        if station_area is None and isinstance(self.source, InlineFlows):
            station_area = self._lookup_basin_area(flow)
        # stations without a known drainage area report it as NaN
        if station_area is not None and not pandas.isna(station_area):
            return check_basin_area(station_area)
        raise MissingParameter("no 'basin_area' provided with yield units")

    def _align(self, flow: FlowInput, date_col: str, value_col: str, date_format: Optional[str]) -> ObservedFlow:
        config = self.config
        return ObservedFlow(flow, date_col=date_col, value_col=value_col, year_type=config.year_type,
                            water_year_start=config.water_year_start, date_format=date_format)

    def run(self) -> DailyFlowStats:
        """
        fill missing dates, filter years, and calculate daily statistics of daily and cumulative flows

        Returns:
            `DailyFlowStats`
        """
        config = self.config
        flow, date_col, value_col, date_format, station_area = self._read_source()
        basin_area = self._resolve_basin_area(flow, station_area)
        observed = self._align(flow, date_col, value_col, date_format)
        diagnostics = list(observed.diagnostics)

        flow_data, window = filter_years(observed.data, config.window)
        flow_data = add_cumulative(flow_data, units=config.units, basin_area=basin_area)

        n_incomplete = int((~flow_data.cumulative_complete).sum())
        if n_incomplete:
            report(diagnostics, "incomplete_cumulative",
                   f"{n_incomplete} cumulative flows follow a day without a value", n_incomplete)

        year_start = config.year_start
        summary = self._summarize(flow_data, "value", year_start)
        cumulative_summary = self._summarize(flow_data, "cumulative", year_start)

        years = flow_data[["year", "day_of_year", "date", "value", "cumulative", "cumulative_complete"]].copy()
        years.insert(3, "analysis_date", _to_analysis_date(years.day_of_year, year_start))

        logger.debug("calculated daily statistics for %d years", years.year.nunique())
        return DailyFlowStats(summary=summary,
                              cumulative_summary=cumulative_summary,
                              years=years,
                              window=window,
                              units=config.units.value,
                              diagnostics=tuple(diagnostics))

    def _summarize(self, flow_data: pandas.DataFrame, value_col: str, year_start: int) -> pandas.DataFrame:
        summary = DailyStats(flow_data, value_col=value_col, percentiles=self.config.percentiles).get_summary()
        summary.insert(0, "date", _to_analysis_date(summary.index.to_numpy(), year_start))
        return summary.reset_index()

    def screen(self, rolling_days: int = 1, rolling_align: str = "right") -> pandas.DataFrame:
        """annual summary of the flow data between the start and end years, see `screen_flow_data`"""
        flow, date_col, value_col, date_format, _ = self._read_source()
        observed = self._align(flow, date_col, value_col, date_format)
        return screen_flow_data(observed.data, self.config.window, rolling_days, rolling_align)


def calc_daily_stats(flow_data: FlowInput = None,
                     station: str = None,
                     fetch: Callable[[str], StationRecord] = None,
                     date_col: str = "Date",
                     value_col: str = "Value",
                     date_format: str = None,
                     **kwargs) -> DailyFlowStats:
    """
    calculate daily and cumulative flow statistics for each day of the year.

    Args:
        flow_data: daily mean flows. not required if `station` is used
        station: station identifier passed to `fetch`. not required if `flow_data` is used
        fetch: function returning a `StationRecord` for `station`. with `flow_data`, used to look up the basin area of
            the station in its `STATION_NUMBER` column
        date_col: name of the date column in `flow_data`
        value_col: name of the flow column in `flow_data`
        date_format: strftime format of string dates in `flow_data`. inferred if not given
        **kwargs: settings passed to `FlowStatsConfig`

    Returns:
        `DailyFlowStats`
    """
    source = resolve_source(flow_data, station, fetch, date_col, value_col, date_format)
    return FlowStats(source, FlowStatsConfig(**kwargs)).run()
