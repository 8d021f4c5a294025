from intervalindex import build
from intervalindex.layout import EDGE_COLUMNS, NODE_COLUMNS, tree_columns


def test_tree_columns():
    index = build([(1, 5), (5, 10)])
    nodes, edges = tree_columns(index.root())

    assert set(nodes) == set(NODE_COLUMNS)
    assert set(edges) == set(EDGE_COLUMNS)
    # root, then its children, then the grandchildren
    assert nodes['split'] == [7.5, 3, 10, 1, 5]
    assert nodes['depth'] == [0, 1, 1, 2, 2]
    assert nodes['count'] == [1, 1, 0, 0, 0]
    assert nodes['leaf'] == [False, False, True, True, True]
    assert len(edges['x0']) == len(nodes['x']) - 1
    assert list(zip(edges['x0'], edges['x1'])) == [(7.5, 3), (7.5, 10), (3, 1), (3, 5)]


def test_single_leaf_has_no_edges():
    nodes, edges = tree_columns(build([(2, 2)]).root())
    assert nodes['depth'] == [0]
    assert edges['y1'] == []
