class IntervalIndexError(Exception):
    pass

class InvalidIntervalError(IntervalIndexError, ValueError):
    """low > high, or an endpoint that cannot be ordered (NaN)."""

class EmptyInputError(IntervalIndexError, ValueError):
    """No tree can be built over zero intervals."""

class InternalInvariantViolation(IntervalIndexError, AssertionError):
    """The tree is malformed. Not an input error; never recovered."""
