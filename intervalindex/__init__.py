from .errors import (IntervalIndexError, InvalidIntervalError, EmptyInputError,
                     InternalInvariantViolation)
from .interval import Interval, check_interval
from .intervaltree import IntervalIndex, IntervalTreeNode

__version__ = "0.1.0"

def build(intervals):
    """Build a static IntervalIndex over `intervals` (Interval objects or (low, high) pairs)."""
    return IntervalIndex(intervals)
