# Static Interval Tree

import os
import sys
from collections import Counter, deque
from datetime import datetime

import numpy

from .endpoints import collect
from .errors import EmptyInputError, InternalInvariantViolation
from .interval import check_interval

def _debug_print(message):
    if os.getenv("INTERVALINDEX_DEBUG", "false").lower() in ["true", "1"]:
        timestamp = datetime.now().strftime("%H:%M:%S")
        print(f"[{timestamp}] {message}", file=sys.stderr)

def _frozen_keys(values):
    keys = numpy.array(values)
    keys.flags.writeable = False
    return keys

class IntervalTreeNode:
    def __init__(self, split_value, min_endpoint, max_endpoint):
        self.split_value  = split_value
        self.min_endpoint = min_endpoint
        self.max_endpoint = max_endpoint
        self.left_child   = None
        self.right_child  = None
        self.by_left      = []
        self.by_right     = []
        self.left_keys    = None
        self.right_keys   = None

    @property
    def is_leaf(self):
        return self.left_child is None and self.right_child is None

    def freeze(self):
        self.by_left    = tuple(self.by_left)
        self.by_right   = tuple(self.by_right)
        self.left_keys  = _frozen_keys([x.low  for x in self.by_left])
        self.right_keys = _frozen_keys([x.high for x in self.by_right])

    def overlaps(self, q, out):
        if q.contains(self.split_value):
            # every interval here contains split_value too
            out.extend(self.by_left)
            if self.right_child is not None:
                self.right_child.overlaps(q, out)
            if self.left_child is not None:
                self.left_child.overlaps(q, out)
        elif self.split_value < q.low:
            # only right; stored lows are all below q.low
            boundary = self.right_keys.searchsorted(q.low, side="left")
            out.extend(self.by_right[boundary:])
            if self.right_child is not None:
                self.right_child.overlaps(q, out)
        else:
            # only left; stored highs are all above q.high
            boundary = self.left_keys.searchsorted(q.high, side="right")
            out.extend(self.by_left[:boundary])
            if self.left_child is not None:
                self.left_child.overlaps(q, out)

    def __repr__(self):
        return "IntervalTreeNode(split=%r, range=[%r, %r], intervals=%d)" % (
            self.split_value, self.min_endpoint, self.max_endpoint, len(self.by_left))

def build_tree_nodes(endpoints):
    """
    Build the balanced tree shape over sorted, distinct endpoints.

    Adjacent nodes are paired level by level; an odd node at the end of a pass
    is moved behind the new parents so left-to-right order is kept.
    """
    if len(endpoints) == 0:
        raise EmptyInputError("no endpoints to build a tree from")

    queue = deque(IntervalTreeNode(x, x, x) for x in endpoints)

    while len(queue) > 1:
        remaining = len(queue)
        while remaining > 1:
            t1 = queue.popleft()
            t2 = queue.popleft()
            lo, hi = t1.max_endpoint, t2.min_endpoint
            # large ints round when halved as floats
            split = min(max((lo + hi) / 2, lo), hi)
            parent = IntervalTreeNode(split, t1.min_endpoint, t2.max_endpoint)
            parent.left_child  = t1
            parent.right_child = t2
            queue.append(parent)
            remaining -= 2
        if remaining == 1:
            queue.append(queue.popleft())

    return queue.popleft()

def _descend(root, x):
    node = root
    while node is not None:
        if x.contains(node.split_value):
            return node
        if node.split_value < x.low:
            node = node.right_child
        else:
            node = node.left_child
    raise InternalInvariantViolation("descent fell off the tree for %r" % (x,))

def map_intervals(root, by_low, by_high):
    """Attach each interval to the highest node whose split value it contains."""
    for x in by_low:
        _descend(root, x).by_left.append(x)
    for x in by_high:
        _descend(root, x).by_right.append(x)

    for node in iter_nodes(root):
        node.freeze()

def iter_nodes(root):
    # pre-order
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        if node.right_child is not None:
            stack.append(node.right_child)
        if node.left_child is not None:
            stack.append(node.left_child)

def tree_height(node):
    if node is None:
        return 0
    return 1 + max(tree_height(node.left_child), tree_height(node.right_child))

class IntervalIndex:
    """
    Read-only index answering "which stored intervals overlap [low, high]".

    The tree is built once in the constructor and never modified afterwards,
    so queries may run concurrently from several threads.
    """

    def __init__(self, intervals):
        intervals = [check_interval(x) for x in intervals]
        if len(intervals) == 0:
            raise EmptyInputError("cannot build an interval index from no intervals")

        by_low, by_high, endpoints = collect(intervals)
        self._root = build_tree_nodes(endpoints)
        map_intervals(self._root, by_low, by_high)

        self._by_low    = tuple(by_low)
        self._endpoints = tuple(endpoints)

        _debug_print("built interval index: %d intervals, %d endpoints, height %d"
                     % (len(self._by_low), len(self._endpoints), self.height()))

    def query(self, q):
        """
        Return every stored interval that overlaps `q`, one entry per interval.
        `q` may be an Interval or a (low, high) pair.
        """
        q = check_interval(q)
        out = []
        self._root.overlaps(q, out)
        return out

    def query_point(self, point):
        return self.query((point, point))

    def root(self):
        return self._root

    def endpoints(self):
        return self._endpoints

    def nodes(self):
        return iter_nodes(self._root)

    def height(self):
        return tree_height(self._root)

    def verify(self):
        """Raise InternalInvariantViolation if the tree is malformed."""
        leaves = []
        stored = 0

        def fail(message):
            raise InternalInvariantViolation(message)

        def walk(node, ancestor_splits):
            nonlocal stored
            if (node.left_child is None) != (node.right_child is None):
                fail("node with a single child: %r" % (node,))

            if node.is_leaf:
                if not node.split_value == node.min_endpoint == node.max_endpoint:
                    fail("leaf split differs from its endpoint: %r" % (node,))
                leaves.append(node.split_value)
            else:
                left, right = node.left_child, node.right_child
                if not left.max_endpoint <= node.split_value <= right.min_endpoint:
                    fail("split value outside children range: %r" % (node,))
                if node.min_endpoint != left.min_endpoint or node.max_endpoint != right.max_endpoint:
                    fail("endpoint range disagrees with children: %r" % (node,))

            if Counter(map(id, node.by_left)) != Counter(map(id, node.by_right)):
                fail("by_left and by_right hold different intervals: %r" % (node,))
            if any(a.low > b.low for a, b in zip(node.by_left, node.by_left[1:])):
                fail("by_left out of order: %r" % (node,))
            if any(a.high > b.high for a, b in zip(node.by_right, node.by_right[1:])):
                fail("by_right out of order: %r" % (node,))
            for x in node.by_left:
                if not x.contains(node.split_value):
                    fail("%r does not contain split value of %r" % (x, node))
                if any(x.contains(s) for s in ancestor_splits):
                    fail("%r belongs to an ancestor of %r" % (x, node))
            stored += len(node.by_left)

            if not node.is_leaf:
                ancestor_splits.append(node.split_value)
                walk(node.left_child, ancestor_splits)
                walk(node.right_child, ancestor_splits)
                ancestor_splits.pop()

        walk(self._root, [])

        if tuple(leaves) != self._endpoints:
            fail("leaves are not the sorted distinct endpoints")
        if stored != len(self._by_low):
            fail("%d intervals stored, %d indexed" % (stored, len(self._by_low)))

    def __len__(self):
        return len(self._by_low)

    def __iter__(self):
        return iter(self._by_low)

    def __contains__(self, q):
        return len(self.query(q)) > 0
