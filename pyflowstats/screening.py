import numbers
import pandas
from .config import AnalysisWindow
from .errors import InvalidParameter
from .years import add_analysis_year

_ALIGNMENTS = ("right", "left", "center")


def _rolling_mean(values: pandas.Series, days: int, align: str) -> pandas.Series:
    if days == 1:
        return values
    rolled = values.rolling(window=days, center=(align == "center"))
    mean = rolled.mean()
    if align == "left":
        mean = mean.shift(-(days - 1))
    return mean


def screen_flow_data(flow_data: pandas.DataFrame,
                     window: AnalysisWindow = AnalysisWindow(),
                     rolling_days: int = 1,
                     rolling_align: str = "right") -> pandas.DataFrame:
    """
    Summarize each year of flow data to help spot years with missing or suspicious data.

    The n-day rolling mean is calculated on the whole aligned series before splitting it into years, so the first
    days of a year use the end of the previous year. A window with a missing day has a missing mean.
    Excluded years in `window` are still screened.

    Args:
        flow_data: aligned flow data, see `ObservedFlow.data`
        window: year type and start and end years to screen
        rolling_days: number of days of the rolling mean, between 1 and 180
        rolling_align: whether the date of the rolling mean is the last (`right`), first (`left`) or middle
            (`center`) day of the rolling window

    Returns:
        `DataFrame` with one row per year and columns `year`, `n_days`, `n_q`, `n_missing_q`, `min`, `max`,
            `mean`, `median` and `std`
    """
    if not isinstance(rolling_days, numbers.Integral) or isinstance(rolling_days, bool) \
            or not 1 <= rolling_days <= 180:
        raise InvalidParameter(f"'rolling_days' must be an integer between 1 and 180, got {rolling_days!r}")
    if rolling_align not in _ALIGNMENTS:
        raise InvalidParameter(f"'rolling_align' must be one of {list(_ALIGNMENTS)}, got {rolling_align!r}")

    data = add_analysis_year(flow_data.sort_values("date"), window.year_type)
    window = window.resolve(data.year.unique())
    data["q"] = _rolling_mean(data.value, int(rolling_days), rolling_align).to_numpy()
    data = data.loc[data.year.between(window.start_year, window.end_year)]

    by_year = data.groupby("year").q
    summary = pandas.DataFrame({"n_days": by_year.size(),
                                "n_q": by_year.count(),
                                "min": by_year.min(),
                                "max": by_year.max(),
                                "mean": by_year.mean(),
                                "median": by_year.median(),
                                "std": by_year.std()})
    summary.insert(2, "n_missing_q", summary.n_days - summary.n_q)
    summary.index.name = "year"
    return summary.reset_index()
