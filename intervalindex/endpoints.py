import numpy

def _columns(intervals):
    lows  = numpy.array([x.low  for x in intervals])
    highs = numpy.array([x.high for x in intervals])
    return lows, highs

def sort_by_low(intervals):
    lows, highs = _columns(intervals)
    # last key is primary
    order = numpy.lexsort((highs, lows))
    return [intervals[i] for i in order]

def sort_by_high(intervals):
    lows, highs = _columns(intervals)
    order = numpy.lexsort((lows, highs))
    return [intervals[i] for i in order]

def sorted_endpoints(by_low, by_high):
    """Distinct endpoint values of both orderings, ascending."""
    lows  = numpy.array([x.low  for x in by_low])
    highs = numpy.array([x.high for x in by_high])
    return numpy.unique(numpy.concatenate([lows, highs])).tolist()

def collect(intervals):
    intervals = list(intervals)
    by_low  = sort_by_low(intervals)
    by_high = sort_by_high(intervals)
    return by_low, by_high, sorted_endpoints(by_low, by_high)
