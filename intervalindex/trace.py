# massivelogger trace reader: one record per line, "rank0,t0,rank1,t1,kind"

from .errors import InvalidIntervalError
from .interval import Interval, check_interval

COLUMNS = ['rank0', 't0', 'rank1', 't1', 'kind']

def parse_lines(lines):
    data_lists = {k: [] for k in COLUMNS}
    intervals = []
    for lineno, s in enumerate(lines, 1):
        s = s.strip()
        if not s:
            continue
        d = s.split(",")
        if len(d) < len(COLUMNS):
            raise InvalidIntervalError("line %d: expected %d fields, got %d"
                                       % (lineno, len(COLUMNS), len(d)))
        try:
            rank0, t0, rank1, t1 = int(d[0]), float(d[1]), int(d[2]), float(d[3])
            interval = check_interval(Interval(t0, t1, data=len(intervals)))
        except (ValueError, InvalidIntervalError) as e:
            raise InvalidIntervalError("line %d: %s" % (lineno, e))

        intervals.append(interval)
        data_lists['rank0'].append(rank0)
        data_lists['t0'   ].append(t0)
        data_lists['rank1'].append(rank1)
        data_lists['t1'   ].append(t1)
        data_lists['kind' ].append(d[4])

    data_lists['duration'] = [t1-t0 for t0, t1 in zip(data_lists['t0'], data_lists['t1'])]
    return intervals, data_lists

def read_trace(path):
    """Return (intervals, column lists); each interval's data is its row index."""
    with open(path) as f:
        return parse_lines(f)
