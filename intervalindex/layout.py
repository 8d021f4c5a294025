# Column data for drawing the tree; no plotting imports here.

NODE_COLUMNS = ['x', 'depth', 'split', 'min_endpoint', 'max_endpoint', 'count', 'leaf']
EDGE_COLUMNS = ['x0', 'y0', 'x1', 'y1']

def tree_columns(root):
    """
    Walk the tree breadth first and return (nodes, edges) as dicts of lists.

    Nodes are placed at x = split value and y = depth (root at 0), so the
    picture lines up with an interval plot sharing the same x axis.
    """
    nodes = {k: [] for k in NODE_COLUMNS}
    edges = {k: [] for k in EDGE_COLUMNS}

    level = [root]
    depth = 0
    while level:
        next_level = []
        for node in level:
            nodes['x'           ].append(node.split_value)
            nodes['depth'       ].append(depth)
            nodes['split'       ].append(node.split_value)
            nodes['min_endpoint'].append(node.min_endpoint)
            nodes['max_endpoint'].append(node.max_endpoint)
            nodes['count'       ].append(len(node.by_left))
            nodes['leaf'        ].append(node.is_leaf)
            for child in (node.left_child, node.right_child):
                if child is None:
                    continue
                edges['x0'].append(node.split_value)
                edges['y0'].append(depth)
                edges['x1'].append(child.split_value)
                edges['y1'].append(depth + 1)
                next_level.append(child)
        level = next_level
        depth += 1

    return nodes, edges
