import datetime
import numpy
import pandas
from typing import Tuple, Union

# day before the first day of the year for each start month, used as the origin for converting day of year to a
# display date. 1900 is not a leap year so day 1-365 always map to distinct dates
_ORIGIN_DATES = {
    1: datetime.date(1899, 12, 31),
    2: datetime.date(1899, 1, 31),
    3: datetime.date(1899, 2, 28),
    4: datetime.date(1899, 3, 31),
    5: datetime.date(1899, 4, 30),
    6: datetime.date(1899, 5, 31),
    7: datetime.date(1899, 6, 30),
    8: datetime.date(1899, 7, 31),
    9: datetime.date(1899, 8, 31),
    10: datetime.date(1899, 9, 30),
    11: datetime.date(1899, 10, 31),
    12: datetime.date(1899, 11, 30),
}


def _get_water_year(idx: pandas.DatetimeIndex, year_start: int) -> pandas.Index:
    """

    :param idx: datetime index
    :param year_start: month when the water year starts
    :return: the year in which the water year of each date ends
    """
    water_year = numpy.where((idx.month < year_start) | (year_start == 1), idx.year, idx.year + 1)
    return pandas.Index(water_year)


def _get_water_year_start(water_year: pandas.Index, year_start: int) -> pandas.DatetimeIndex:
    """first day of each water year"""
    years = pandas.DataFrame({"year": numpy.asarray(water_year) - int(year_start != 1),
                              "month": year_start,
                              "day": 1})
    return pandas.DatetimeIndex(pandas.to_datetime(years))


def _get_day_of_water_year(idx: pandas.DatetimeIndex, year_start: int) -> pandas.Index:
    """
    1-based day of the water year. equals the calendar day of year when `year_start` is `1`

    :param idx: datetime index
    :param year_start: month when the water year starts
    """
    starts = _get_water_year_start(_get_water_year(idx, year_start), year_start)
    return pandas.Index((idx - starts).days + 1)


def _year_span(first: pandas.Timestamp,
               last: pandas.Timestamp,
               year_start: int) -> Tuple[pandas.Timestamp, pandas.Timestamp]:
    """
    first day of the year containing `first` and last day of the year containing `last`, where years start on
    the first day of `year_start` month
    """
    first_year, last_year = _get_water_year(pandas.DatetimeIndex([first, last]), year_start)
    start = _get_water_year_start(pandas.Index([first_year, last_year + 1]), year_start)
    return start[0], start[1] - pandas.Timedelta(days=1)


def _to_analysis_date(day_of_year: Union[int, pandas.Series, numpy.ndarray],
                      year_start: int) -> Union[pandas.Timestamp, pandas.Series]:
    """display date for day of year, see `_ORIGIN_DATES`"""
    origin = pandas.Timestamp(_ORIGIN_DATES[year_start])
    return origin + pandas.to_timedelta(day_of_year, unit="D")
