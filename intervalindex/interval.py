import math
import numbers
from collections import namedtuple

from .errors import InvalidIntervalError

class Interval(namedtuple('Interval', ['low', 'high', 'data'])):
    """Closed interval [low, high] with an opaque payload."""
    __slots__ = ()

    def __new__(cls, low, high, data=None):
        return super().__new__(cls, low, high, data)

    def contains(self, point):
        return self.low <= point <= self.high

    def intersects(self, other):
        return self.low <= other.high and other.low <= self.high

    @property
    def length(self):
        return self.high - self.low

    def __repr__(self):
        if self.data is None:
            return "Interval(%r, %r)" % (self.low, self.high)
        return "Interval(%r, %r, data=%r)" % (self.low, self.high, self.data)

def _is_nan(x):
    try:
        return math.isnan(x)
    except TypeError:
        return False

def check_interval(interval):
    """
    Return `interval` as an Interval, raising InvalidIntervalError if it is malformed.
    Plain (low, high) pairs are accepted.
    """
    if not isinstance(interval, Interval):
        try:
            low, high = interval.low, interval.high
        except AttributeError:
            if not isinstance(interval, (tuple, list)) or len(interval) != 2:
                raise InvalidIntervalError("not an interval: %r" % (interval,))
            low, high = interval
        interval = Interval(low, high, getattr(interval, "data", None))

    for x in (interval.low, interval.high):
        if not isinstance(x, numbers.Number) or (isinstance(x, numbers.Complex) and not isinstance(x, numbers.Real)):
            raise InvalidIntervalError("endpoint is not a real number: %r" % (interval,))
    if _is_nan(interval.low) or _is_nan(interval.high):
        raise InvalidIntervalError("NaN endpoint: %r" % (interval,))
    if interval.low > interval.high:
        raise InvalidIntervalError("low > high: %r" % (interval,))
    return interval
