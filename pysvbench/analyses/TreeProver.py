#!/usr/bin/env python
"""
Leaf-wise proof of a max/min decision tree.

Every leaf is checked twice: its path condition must be satisfiable (the leaf
is reachable) and must imply the postcondition (the leaf is correct).
A leaf violating the postcondition yields a counterexample sextuple.
"""

from pysmt.shortcuts import And, Not, is_sat, get_model

from pysvbench.analyses.FormulaBuilder import FormulaBuilder
from pysvbench.selector import DecisionTree, Leaf
from pysvbench.verdict import Verdict

from pysvbench import log

from typing import List, NamedTuple, Optional


class LeafReport(NamedTuple):
    leaf : Leaf
    reachable : bool
    valid : bool
    counterexample : Optional[tuple]

    def __str__(self):
        if not self.reachable:
            return '%s: unreachable' % (self.leaf,)
        if self.valid:
            return '%s: safe' % (self.leaf,)
        return '%s: unsafe %s' % (self.leaf, self.counterexample)


class TreeReport:
    def __init__(self, leaves : List[LeafReport]):
        self.leaves = leaves

    @property
    def verdict(self) -> Verdict:
        if any(not r.valid for r in self.leaves):
            return Verdict.FALSE
        return Verdict.TRUE

    def unreachable(self) -> List[Leaf]:
        return [ r.leaf for r in self.leaves if not r.reachable ]

    def violations(self) -> List[LeafReport]:
        return [ r for r in self.leaves if not r.valid ]

    def counterexample(self) -> Optional[tuple]:
        for r in self.leaves:
            if not r.valid:
                return r.counterexample
        return None

    def __str__(self):
        return '\n'.join(str(r) for r in self.leaves)


def prove(tree : DecisionTree, width : int = 32, solver_name=None) -> TreeReport:
    builder = FormulaBuilder(width)
    reports = []
    for leaf in tree.leaves():
        path = builder.path(tree, leaf)
        reachable = is_sat(path, solver_name=solver_name)
        counterexample = None
        valid = True
        if reachable:
            model = get_model(And(path, Not(builder.postcondition(leaf))), solver_name=solver_name)
            if model is not None:
                valid = False
                counterexample = builder.values(model)
        report = LeafReport(leaf, reachable, valid, counterexample)
        log.printer.log_debug(2, '[TreeProver] %s' % (report,))
        reports.append(report)
    return TreeReport(reports)
