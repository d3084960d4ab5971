from pysvbench.analyses.TreeProver import LeafReport, TreeReport
from pysvbench.selector import Leaf, build_tree
from pysvbench.utils.visual import tree_to_dot


def node_lines(dot):
    return [ line for line in dot.source.splitlines() if '[label=' in line and '->' not in line ]


def test_tree_to_dot():
    tree = build_tree()
    dot = tree_to_dot(tree)
    # five guards of the max cascade, four per min cascade, thirty leaves
    assert len(node_lines(dot)) == 5 + 6 * 4 + 30
    for leaf in tree.leaves():
        assert str(leaf) in dot.source
    assert '(a>b) && (a>c)' in dot.source
    assert 'color=red' not in dot.source


def test_unsafe_leaves_are_highlighted():
    report = TreeReport([LeafReport(Leaf('c', 'b'), True, False, (1, -3, 0, -2, -1, -2))])
    lines = [ line for line in node_lines(tree_to_dot(build_tree(), report)) if 'color=red' in line ]
    assert len(lines) == 1
    assert 'leaf_c_b' in lines[0]
