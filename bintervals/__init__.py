from .errors import InvalidOrderError
from .interval import Comparable, Interval, IntervalLike

__all__ = [
    "Interval",
    "IntervalLike",
    "Comparable",
    "InvalidOrderError",
]
