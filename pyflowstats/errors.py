import warnings
from dataclasses import dataclass


class FlowStatsError(ValueError):
    """base class for all argument and input errors raised by pyflowstats"""


class InvalidInput(FlowStatsError):
    """flow data is missing, empty or malformed"""


class InvalidParameter(FlowStatsError):
    """a scalar argument is outside its domain, e.g. a non-positive basin area or a month outside 1-12"""


class InvalidRange(FlowStatsError):
    """start year is after end year"""


class MissingParameter(FlowStatsError):
    """a required argument was not supplied, e.g. yield requested without a basin area"""


class ConflictingInput(FlowStatsError):
    """both or neither of inline flow data and a station were supplied"""


class DataQualityWarning(UserWarning):
    """non-fatal issue found in the flow data"""


@dataclass(frozen=True)
class Diagnostic:
    """
    A non-fatal data-quality notice returned alongside results.

    Args:
        code: short machine readable identifier, e.g. `negative_values`
        message: human readable description
        count: number of affected days
    """
    code: str
    message: str
    count: int = 0


def report(diagnostics: list, code: str, message: str, count: int = 0) -> Diagnostic:
    diagnostic = Diagnostic(code, message, count)
    diagnostics.append(diagnostic)
    warnings.warn(message, DataQualityWarning, stacklevel=3)
    return diagnostic
