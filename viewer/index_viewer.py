#!/usr/bin/env python3

# Run this script with this command:
#   $ bokeh serve --show ./viewer --args "trace_file"

import sys
import random
from bokeh.io import curdoc
from bokeh.plotting import figure
from bokeh.models import ColumnDataSource, RangeTool, LabelSet
from bokeh.layouts import column, row
from bokeh.palettes import viridis
from bokeh.transform import factor_cmap
from bokeh.models.widgets import CheckboxGroup, CheckboxButtonGroup, Div

from intervalindex import build
from intervalindex.layout import tree_columns
from intervalindex.trace import read_trace

NUM_RECT_SAMPLES = 10000
NUM_LABEL_SAMPLES = 1000
NUM_RANGETOOL_SAMPLES = 10000

TOOLTIPS = [
    ("t", "(@t0,@t1)"),
    ("duration", "@duration"),
    ("rank", "(@rank0,@rank1)"),
    ("kind", "@kind")
]

TREE_TOOLTIPS = [
    ("split", "@split"),
    ("endpoints", "[@min_endpoint, @max_endpoint]"),
    ("intervals", "@count"),
]

def get_sampled_data(d_lists, idx_list, max_num_samples, visible_kinds):
    idx_list = list(idx_list)
    if len(idx_list) > max_num_samples:
        idx_list = random.sample(idx_list, max_num_samples)

    return {k: [l[i] for i in idx_list if d_lists['kind'][i] in visible_kinds]
        for k, l in d_lists.items()}

def run():
    input_name = sys.argv[1]

    print("Reading file...")
    intervals, data_lists = read_trace(input_name)

    print("Building index...")
    index = build(intervals)
    print("index height:", index.height())

    kind_list = sorted(set(data_lists['kind']))
    kind_colors = viridis(len(kind_list))

    x_min = min(data_lists['t0'])
    x_max = max(data_lists['t1'])

    empty_data = {k: [] for k in data_lists.keys()}
    rect_source = ColumnDataSource(data=dict(empty_data))
    label_source = ColumnDataSource(data=dict(empty_data))
    rangetool_source = ColumnDataSource(data=dict(empty_data))

    tree_nodes, tree_edges = tree_columns(index.root())
    tree_node_source = ColumnDataSource(data=tree_nodes)
    tree_edge_source = ColumnDataSource(data=tree_edges)

    color_mapper = factor_cmap(field_name='kind', palette=kind_colors, factors=kind_list)

    p1 = figure(width=1200, height=800,
                x_range=(x_min, x_max),
                tools='hover,xwheel_zoom,ywheel_zoom,xpan,pan,save,help',
                active_drag='xpan', active_scroll="xwheel_zoom",
                tooltips=TOOLTIPS, output_backend='webgl')

    p1.hbar(y="rank0", left="t0", right="t1", height=0.1,
            legend_field='kind', color=color_mapper, source=rect_source)

    labels = LabelSet(x='t0', y='rank0', text='kind',
                      x_offset=5, y_offset=5, source=label_source,
                      level='glyph')

    p1.add_layout(labels)

    p2 = figure(width=1200, height=150,
                y_range=p1.y_range,
                toolbar_location=None, output_backend='webgl')

    p2.hbar(y="rank0", left="t0", right="t1", height=0.5, color=color_mapper, source=rangetool_source)

    range_tool = RangeTool(x_range=p1.x_range)
    p2.add_tools(range_tool)

    p3 = figure(width=1200, height=250,
                x_range=p1.x_range,
                tools='hover,xwheel_zoom,xpan,save',
                tooltips=TREE_TOOLTIPS, title="interval tree")
    p3.y_range.flipped = True
    p3.segment(x0='x0', y0='y0', x1='x1', y1='y1', color='gray', source=tree_edge_source)
    p3.scatter(x='x', y='depth', size=6, source=tree_node_source)

    status = Div(text="")

    kind_checks = CheckboxGroup(labels=kind_list, active=list(range(len(kind_list))))

    state = {
        'x_start': x_min,
        'x_end': x_max,
        'kinds': set(kind_list),
    }

    def update_rangetool_data():
        rangetool_source.data = get_sampled_data(
            data_lists, range(len(data_lists['t0'])), NUM_RANGETOOL_SAMPLES, state['kinds'])

    def update_cur_data():
        matches = index.query((state['x_start'], state['x_end']))
        idx_list = sorted(x.data for x in matches)

        rect_data = get_sampled_data(data_lists, idx_list, NUM_RECT_SAMPLES, state['kinds'])
        label_data = get_sampled_data(rect_data, range(len(rect_data['t0'])), NUM_LABEL_SAMPLES, state['kinds'])

        rect_source.data = rect_data
        label_source.data = label_data
        status.text = "%d of %d intervals overlap [%g, %g]" % (
            len(matches), len(index), state['x_start'], state['x_end'])

    def update_x_range(attr, old, new):
        if attr == 'start':
            state['x_start'] = new
        elif attr == 'end':
            state['x_end'] = new
        if state['x_start'] > state['x_end']:
            return
        update_cur_data()

    def update_kinds(attr, old, new):
        state['kinds'] = set(kind_list[i] for i in new)
        update_rangetool_data()
        update_cur_data()

    def update_all_kinds(attr, old, new):
        kind_checks.active = list(range(len(kind_list))) if 0 in new else []

    update_cur_data()
    update_rangetool_data()

    range_tool.x_range.on_change('start', update_x_range)
    range_tool.x_range.on_change('end', update_x_range)

    kind_checks.on_change('active', update_kinds)

    kind_all_button = CheckboxButtonGroup(labels=["Show all"], active=[0])
    kind_all_button.on_change('active', update_all_kinds)

    curdoc().add_root(column(row(p1, column(kind_checks, kind_all_button, status)), p2, p3))
