"""
# pyflowstats

A python package for daily streamflow statistics - summarizing a multi-year record of daily mean flows for each day
of the calendar year or water year, as daily flows and as cumulative volumes or runoff yields.

## Method

1. The daily flow data is aligned to a complete daily grid covering whole years. Dates without observations are
    added with missing values. Each day gets its calendar year and day of year, and its water year and day of water
    year. Water years are named by the year in which they end, e.g. with `water_year_start=10` the water year 1901
    goes from 1900-10-01 to 1901-09-30.
2. The years of the selected type are restricted to `start_year`-`end_year`, without `exclude_years`. The 366th
    day of leap years is dropped so every year has the same 365 days.
3. Cumulative flows are summed from the first day of each year, as volume (`m3`) or as runoff yield (`mm`) using
    the basin area. Missing days do not reset the total, but are flagged in `cumulative_complete`.
4. For each day of the year, the mean, median, minimum, maximum, and percentiles (default 5th, 25th, 75th,
    95th) are calculated across years, for daily flows and for cumulative flows. Percentiles are interpolated
    linearly between order statistics (type 7). Days without any data are marked with `no_data`.

## Usage

```python
import pyflowstats

stats = pyflowstats.calc_daily_stats(flow_data=flows, year_type="water", water_year_start=10,
                                     units="yield", basin_area=10.2, exclude_years=[1999])
stats.cumulative_summary  # one row per day of year
stats.get_year(2005)  # cumulative flows of 2005 to draw over the summary
```
"""

from .config import AnalysisWindow, CumulativeUnits, FlowStatsConfig, YearType
from .cumulative import add_cumulative
from .daily_stats import DailyStats
from .errors import (ConflictingInput, DataQualityWarning, Diagnostic, FlowStatsError, InvalidInput,
                     InvalidParameter, InvalidRange, MissingParameter)
from .flow_stats import (DailyFlowStats, FlowStats, InlineFlows, StationFlows, StationRecord, calc_daily_stats,
                         resolve_source)
from .observed_flow import ObservedFlow
from .screening import screen_flow_data
from .years import filter_years
