#!/usr/bin/env python3
"""
pysvbench.utils.visual
----------------------

Graphviz rendering of max/min decision trees.

• Graphable          – minimal interface a node must implement
• graphable_to_dot() – generic breadth-first walk → graphviz.Digraph
• tree_to_dot()      – decision tree (optionally annotated by a prover report)
"""

from __future__ import annotations
from typing import Iterable, Optional
from graphviz import Digraph

from pysvbench.selector import DecisionTree, Leaf


# ------------------------------------------------------------------ #
#  very small “interface”                                            #
# ------------------------------------------------------------------ #
class Graphable:
    def get_node_id(self) -> str: ...
    def get_node_label(self) -> str: ...
    def get_node_attrs(self) -> dict: return {}
    def get_successors (self) -> Iterable["Graphable"]: ...
    def get_edge_labels(self, succ: "Graphable") -> Iterable[str]: ...


# ------------------------------------------------------------------ #
#  generic Graphable → graphviz helper                               #
# ------------------------------------------------------------------ #
def graphable_to_dot(roots, nodeattrs={"shape": "box"}):
    assert isinstance(roots, list)
    dot = Digraph()
    for (key, value) in nodeattrs.items():
        dot.attr("node", [(key, value)])
    for root in roots:
        waitlist = [root]
        reached = {root.get_node_id()}
        while len(waitlist) > 0:
            node = waitlist.pop(0)
            dot.node(node.get_node_id(), label=node.get_node_label(), **node.get_node_attrs())
            for successor in node.get_successors():
                for edgelabel in node.get_edge_labels(successor):
                    dot.edge(node.get_node_id(), successor.get_node_id(), label=edgelabel)
                if successor.get_node_id() not in reached:
                    reached.add(successor.get_node_id())
                    waitlist.append(successor)
    return dot


# ------------------------------------------------------------------ #
#  decision tree → Graphviz                                          #
# ------------------------------------------------------------------ #
class GraphableTest(Graphable):
    """ guard of branch `index` in the max cascade (under=None) or the min cascade under a max candidate """

    def __init__(self, tree: DecisionTree, under: Optional[str], index: int, unsafe=frozenset()):
        self.tree = tree
        self.under = under
        self.index = index
        self.unsafe = unsafe

    def branches(self):
        return self.tree.max_branches if self.under is None else self.tree.min_branches[self.under]

    def get_node_id(self):
        return "%s_%d" % (self.under or "max", self.index)

    def get_node_label(self):
        return str(self.branches()[self.index].guard)

    def _target(self, index):
        branches = self.branches()
        if index < len(branches) - 1:
            return GraphableTest(self.tree, self.under, index, self.unsafe)
        return self._taken(branches[-1].candidate)

    def _taken(self, candidate):
        if self.under is None:
            return GraphableTest(self.tree, candidate, 0, self.unsafe)
        return GraphableLeaf(Leaf(self.under, candidate), self.unsafe)

    def get_successors(self):
        return [self._taken(self.branches()[self.index].candidate), self._target(self.index + 1)]

    def get_edge_labels(self, succ):
        true_succ, false_succ = self.get_successors()
        labels = []
        if succ.get_node_id() == true_succ.get_node_id():
            labels.append("true")
        if succ.get_node_id() == false_succ.get_node_id():
            labels.append("false")
        return labels


class GraphableLeaf(Graphable):
    def __init__(self, leaf: Leaf, unsafe=frozenset()):
        self.leaf = leaf
        self.unsafe = unsafe

    def get_node_id(self):
        return "leaf_%s_%s" % self.leaf

    def get_node_label(self):
        return str(self.leaf)

    def get_node_attrs(self):
        if self.leaf in self.unsafe:
            return {"color": "red", "style": "filled"}
        return {"shape": "ellipse"}

    def get_successors(self):
        return []

    def get_edge_labels(self, succ):
        return []


def tree_to_dot(tree: DecisionTree, report=None) -> Digraph:
    """ leaves refuted in `report` (a TreeProver.TreeReport) are drawn red """
    unsafe = frozenset(r.leaf for r in report.violations()) if report else frozenset()
    return graphable_to_dot([GraphableTest(tree, None, 0, unsafe)])
