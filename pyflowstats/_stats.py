import numpy
from scipy.stats import mstats
from typing import Iterable

# Hyndman and Fan type 7 (linear interpolation between order statistics)
_ALPHAP = 1
_BETAP = 1


def percentile_name(p: float) -> str:
    return f"p{p:g}"


def get_percentiles(data: numpy.ndarray, percentiles: Iterable[float]) -> numpy.ndarray:
    """
    Calculate percentiles of each row of `data`, ignoring missing values.

    :param data: 2d array, one row per sample
    :param percentiles: percentiles between 0 and 100
    :return: array of shape (rows, percentiles). rows without any value are all `nan`
    """
    probs = numpy.asarray(list(percentiles), dtype=float) / 100
    data = numpy.asarray(data, dtype=float)
    result = numpy.full((data.shape[0], probs.size), numpy.nan)
    if probs.size == 0:
        return result

    for i, row in enumerate(data):
        row = row[~numpy.isnan(row)]
        if row.size:
            result[i] = numpy.ma.getdata(mstats.mquantiles(row, prob=probs, alphap=_ALPHAP, betap=_BETAP))
    return result
