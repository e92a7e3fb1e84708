import numbers
from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterable, Optional, Tuple, Union
from .errors import InvalidParameter, InvalidRange


class YearType(Enum):
    calendar = "calendar"
    water = "water"


class CumulativeUnits(Enum):
    volume = "m3"
    yield_ = "mm"


_UNIT_NAMES = {"volume": CumulativeUnits.volume, "yield": CumulativeUnits.yield_}


def get_year_type(year_type: Union[str, YearType]) -> YearType:
    if isinstance(year_type, YearType):
        return year_type
    try:
        return YearType[year_type]
    except (KeyError, TypeError):
        raise InvalidParameter(f"'year_type' {year_type!r} is not valid. "
                               f"'year_type' has to be in {[e.name for e in YearType]}") from None


def get_units(units: Union[str, CumulativeUnits]) -> CumulativeUnits:
    if isinstance(units, CumulativeUnits):
        return units
    try:
        return _UNIT_NAMES[units]
    except (KeyError, TypeError):
        raise InvalidParameter(f"'units' {units!r} is not valid. "
                               f"'units' has to be in {list(_UNIT_NAMES)}") from None


def _is_int(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def check_month(value, name: str = "water_year_start") -> int:
    if not _is_int(value) or not 1 <= value <= 12:
        raise InvalidParameter(f"'{name}' must be an integer between 1 and 12 (Jan-Dec), got {value!r}")
    return int(value)


def check_year(value, name: str) -> Optional[int]:
    if value is None:
        return None
    if not _is_int(value):
        raise InvalidParameter(f"'{name}' must be an integer, got {value!r}")
    return int(value)


def check_basin_area(value) -> Optional[float]:
    """basin area in square kilometres. `None` means unknown"""
    if value is None:
        return None
    if not isinstance(value, numbers.Real) or isinstance(value, bool) or value != value:
        raise InvalidParameter(f"'basin_area' must be a number, got {value!r}")
    if value <= 0:
        raise InvalidParameter(f"'basin_area' must be positive, got {value!r}")
    return float(value)


def _to_year_set(years: Union[None, int, Iterable[int]]) -> FrozenSet[int]:
    if years is None:
        return frozenset()
    if _is_int(years):
        years = [years]
    try:
        return frozenset(check_year(year, "exclude_years") for year in years)
    except TypeError:
        raise InvalidParameter(f"'exclude_years' must be a year or a collection of years, got {years!r}") from None


@dataclass(frozen=True)
class AnalysisWindow:
    """
    Years considered for analysis.

    Args:
        year_type: group by calendar years or by water years
        start_year: first year to consider. `None` uses the first year in the data
        end_year: last year to consider. `None` uses the last year in the data
        exclude_years: years that never contribute to the statistics
    """
    year_type: YearType = YearType.calendar
    start_year: Optional[int] = None
    end_year: Optional[int] = None
    exclude_years: FrozenSet[int] = frozenset()

    def __post_init__(self):
        object.__setattr__(self, "year_type", get_year_type(self.year_type))
        object.__setattr__(self, "start_year", check_year(self.start_year, "start_year"))
        object.__setattr__(self, "end_year", check_year(self.end_year, "end_year"))
        object.__setattr__(self, "exclude_years", _to_year_set(self.exclude_years))
        if self.start_year is not None and self.end_year is not None and self.start_year > self.end_year:
            raise InvalidRange(f"'start_year' ({self.start_year}) must not be after 'end_year' ({self.end_year})")

    def resolve(self, years: Iterable[int]) -> "AnalysisWindow":
        """fill in unspecified start and end years from the years present in the data"""
        years = list(years)
        start_year = self.start_year if self.start_year is not None else min(years)
        end_year = self.end_year if self.end_year is not None else max(years)
        if start_year > end_year:
            raise InvalidRange(f"'start_year' ({start_year}) must not be after 'end_year' ({end_year})")
        return AnalysisWindow(self.year_type, int(start_year), int(end_year), self.exclude_years)


@dataclass(frozen=True)
class FlowStatsConfig:
    """
    Settings for daily and cumulative flow statistics. All fields are validated on creation.

    Args:
        year_type: `calendar` or `water`. water years are named by the year in which they end
        water_year_start: the month when the water year starts. default is `10` (for October)
        start_year: first year to consider for analysis. `None` for the first year in the data
        end_year: last year to consider for analysis. `None` for the last year in the data
        exclude_years: single year or collection of years to exclude from analysis
        units: `volume` for cumulative volumes in cubic metres or `yield` for runoff yield in mm
        basin_area: upstream drainage area in square kilometres, required for `yield` unless the
            station record provides one
        percentiles: percentiles calculated for each day of the year
    """
    year_type: YearType = YearType.calendar
    water_year_start: int = 10
    start_year: Optional[int] = None
    end_year: Optional[int] = None
    exclude_years: FrozenSet[int] = frozenset()
    units: CumulativeUnits = CumulativeUnits.volume
    basin_area: Optional[float] = None
    percentiles: Tuple[float, ...] = field(default=(5, 25, 75, 95))

    def __post_init__(self):
        object.__setattr__(self, "year_type", get_year_type(self.year_type))
        object.__setattr__(self, "water_year_start", check_month(self.water_year_start))
        object.__setattr__(self, "units", get_units(self.units))
        object.__setattr__(self, "basin_area", check_basin_area(self.basin_area))
        object.__setattr__(self, "percentiles", check_percentiles(self.percentiles))
        window = AnalysisWindow(self.year_type, self.start_year, self.end_year, self.exclude_years)
        object.__setattr__(self, "start_year", window.start_year)
        object.__setattr__(self, "end_year", window.end_year)
        object.__setattr__(self, "exclude_years", window.exclude_years)

    @property
    def window(self) -> AnalysisWindow:
        return AnalysisWindow(self.year_type, self.start_year, self.end_year, self.exclude_years)

    @property
    def year_start(self) -> int:
        """month on which the analysis year starts. calendar years start in January"""
        return self.water_year_start if self.year_type is YearType.water else 1


def check_percentiles(percentiles: Iterable[float]) -> Tuple[float, ...]:
    try:
        percentiles = tuple(percentiles)
    except TypeError:
        raise InvalidParameter(f"'percentiles' must be a collection of numbers, got {percentiles!r}") from None

    for p in percentiles:
        if not isinstance(p, numbers.Real) or isinstance(p, bool) or not 0 <= p <= 100:
            raise InvalidParameter(f"'percentiles' must be numbers between 0 and 100, got {p!r}")
    return tuple(sorted(set(percentiles)))
