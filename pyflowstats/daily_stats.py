import pandas
from typing import Iterable
from . import _stats
from .config import check_percentiles

DAYS = pandas.RangeIndex(1, 366, name="day_of_year")


class DailyStats:
    """
    class that holds daily flow data in wide format and calculates statistics for each day of the year across all
    years.
    """

    def __init__(self,
                 flow_data: pandas.DataFrame,
                 value_col: str = "value",
                 percentiles: Iterable[float] = (5, 25, 75, 95)):
        """
        Args:
            flow_data: filtered flow data in long format with `year`, `day_of_year` and `value_col` columns
            value_col: the column to summarize, e.g. `value` or `cumulative`
            percentiles: percentiles to calculate for each day of the year
        """
        self.percentiles = check_percentiles(percentiles)
        """percentiles calculated for each day of the year"""

        self.data = self._to_wide(flow_data, value_col)
        """
        `DataFrame` in wide format. columns are different years. index is the day of year from 1 to 365.
        """

    @staticmethod
    def _to_wide(flow_data: pandas.DataFrame, value_col: str) -> pandas.DataFrame:
        if flow_data.empty:
            return pandas.DataFrame(index=DAYS, dtype=float)

        wide = flow_data.pivot(index="day_of_year", columns="year", values=value_col)
        wide = wide.reindex(DAYS).astype(float)
        wide.columns.name = None
        return wide

    def get_summary(self) -> pandas.DataFrame:
        """
        summarize values of each day of the year across years. missing values are ignored. percentiles use linear
        interpolation between order statistics (type 7).

        Returns:
            `Dataframe` indexed by day of year (1 to 365) with columns `count`, `mean`, `median`, `min`, `max`, one
                column per percentile (e.g. `p5`) and `no_data`. days without any value are marked by `no_data` and
                have missing statistics.
        """
        summary = pandas.DataFrame(index=self.data.index)
        summary["count"] = self.data.notna().sum(axis=1).astype(int)
        summary["mean"] = self.data.mean(axis=1)
        summary["median"] = self.data.median(axis=1)
        summary["min"] = self.data.min(axis=1)
        summary["max"] = self.data.max(axis=1)

        values = _stats.get_percentiles(self.data.to_numpy(), self.percentiles)
        for i, p in enumerate(self.percentiles):
            summary[_stats.percentile_name(p)] = values[:, i]

        summary["no_data"] = summary["count"].eq(0)
        return summary
