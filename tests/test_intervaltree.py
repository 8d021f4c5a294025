import pytest

from intervalindex import Interval, EmptyInputError, InternalInvariantViolation, build
from intervalindex.intervaltree import (IntervalTreeNode, build_tree_nodes, iter_nodes,
                                        map_intervals, tree_height)


def leaves(node):
    if node.is_leaf:
        return [node.split_value]
    return leaves(node.left_child) + leaves(node.right_child)


def test_single_endpoint_is_a_leaf():
    root = build_tree_nodes([5])
    assert root.is_leaf
    assert (root.split_value, root.min_endpoint, root.max_endpoint) == (5, 5, 5)
    assert root.by_left == [] and root.by_right == []


def test_three_endpoints_carry_the_odd_leaf_forward():
    root = build_tree_nodes([1, 2, 3])
    assert root.split_value == 2.5
    assert root.left_child.split_value == 1.5
    assert root.right_child.is_leaf and root.right_child.split_value == 3
    assert (root.min_endpoint, root.max_endpoint) == (1, 3)
    assert leaves(root) == [1, 2, 3]


def test_five_endpoints():
    root = build_tree_nodes([1, 2, 3, 4, 5])
    assert root.split_value == 4.5
    assert root.left_child.split_value == 2.5
    assert [n.split_value for n in (root.left_child.left_child, root.left_child.right_child)] == [1.5, 3.5]
    assert leaves(root) == [1, 2, 3, 4, 5]
    assert tree_height(root) == 4


@pytest.mark.parametrize("n", [1, 2, 3, 7, 8, 9, 100, 1000, 1025])
def test_height_is_logarithmic_and_order_is_kept(n):
    endpoints = list(range(n))
    root = build_tree_nodes(endpoints)
    assert leaves(root) == endpoints
    # ceil(log2(n)) levels of parents above the leaves
    assert tree_height(root) == 1 + (n - 1).bit_length()
    for node in iter_nodes(root):
        if not node.is_leaf:
            assert node.left_child.max_endpoint <= node.split_value <= node.right_child.min_endpoint


def test_build_tree_nodes_needs_endpoints():
    with pytest.raises(EmptyInputError):
        build_tree_nodes([])


def test_intervals_go_to_the_highest_containing_node():
    a, b = Interval(1, 5), Interval(5, 10)
    root = build_tree_nodes([1, 5, 10])
    map_intervals(root, [a, b], [a, b])

    assert root.split_value == 7.5
    assert root.by_left == (b,) and root.by_right == (b,)
    assert root.left_child.split_value == 3
    assert root.left_child.by_left == (a,)
    assert all(len(n.by_left) == 0 for n in iter_nodes(root) if n.is_leaf)


def test_node_lists_keep_both_orders():
    intervals = [Interval(0, 10), Interval(2, 6), Interval(4, 8), Interval(3, 12)]
    index = build(intervals)
    node = index.root()
    assert set(node.by_left) == set(intervals)
    assert [x.low for x in node.by_left] == [0, 2, 3, 4]
    assert [x.high for x in node.by_right] == [6, 8, 10, 12]
    assert list(node.left_keys) == [0, 2, 3, 4]
    assert list(node.right_keys) == [6, 8, 10, 12]


def test_mapping_off_the_tree_is_an_invariant_violation():
    root = build_tree_nodes([1, 2])
    with pytest.raises(InternalInvariantViolation):
        map_intervals(root, [Interval(7, 9)], [Interval(7, 9)])


def test_verify_passes_on_built_index():
    index = build([(1, 3), (2, 8), (5, 6), (5, 5), (9, 20), (0, 30)])
    index.verify()


def test_verify_detects_broken_split():
    index = build([(1, 3), (2, 8), (9, 20)])
    index.root().split_value = 100
    with pytest.raises(InternalInvariantViolation):
        index.verify()


def test_verify_detects_interval_below_its_node():
    index = build([(1, 3), (2, 8), (9, 20), (0, 30)])
    root = index.root()
    moved = root.by_left[0]
    leaf = next(n for n in iter_nodes(root) if n.is_leaf and moved.contains(n.split_value))
    root.by_left, root.by_right = root.by_left[1:], tuple(x for x in root.by_right if x is not moved)
    leaf.by_left, leaf.by_right = leaf.by_left + (moved,), leaf.by_right + (moved,)
    with pytest.raises(InternalInvariantViolation):
        index.verify()


def test_node_keys_are_read_only():
    index = build([(1, 3)])
    with pytest.raises(ValueError):
        index.root().left_keys[0] = 0


def test_node_repr():
    node = IntervalTreeNode(1.5, 1, 2)
    assert repr(node) == "IntervalTreeNode(split=1.5, range=[1, 2], intervals=0)"
