#!/usr/bin/env python
"""
Bit-vector formulas for decision trees: comparisons, guards, leaf paths and the
max/min postcondition, all in signed `width`-bit arithmetic.
"""

from pysmt.shortcuts import (
    And, Not, Symbol, SBV,
    BVSGT, BVSLT, BVSGE, BVSLE,
    get_env
)
from pysmt.typing import BVType
from pysmt.fnode import FNode

from pysvbench.selector import POSITIONS, Comparison, Guard, DecisionTree, Leaf

from typing import Dict, Optional


def solver_available(solver_name : Optional[str] = None) -> bool:
    solvers = get_env().factory.all_solvers()
    return len(solvers) > 0 if solver_name is None else solver_name in solvers


class FormulaBuilder:
    """ builds formulas over one signed bit-vector symbol per position """

    def __init__(self, width : int = 32):
        self.width = width
        self.int_type = BVType(width)
        # symbol names carry the width, pysmt does not allow redeclaring a name with another type
        self.variables : Dict[str, FNode] = {
            p : Symbol('%s@%d' % (p, width), self.int_type) for p in POSITIONS
        }

    def constant(self, value : int) -> FNode:
        return SBV(value, self.width)

    def variable(self, position : str) -> FNode:
        return self.variables[position]

    def comparison(self, c : Comparison) -> FNode:
        left, right = self.variable(c.left), self.variable(c.right)
        match c.op:
            case '>':
                return BVSGT(left, right)
            case '<':
                return BVSLT(left, right)
            case _:
                raise NotImplementedError('Operator %s is not implemented!' % c.op)

    def guard(self, g : Guard) -> FNode:
        return And([ self.comparison(c) for c in g.conjuncts ])

    def path(self, tree : DecisionTree, leaf : Leaf) -> FNode:
        """ path condition of `leaf`: earlier guards fail, the leaf's guards hold """
        return And([
            self.guard(g) if outcome else Not(self.guard(g))
            for g, outcome in tree.path(leaf)
        ])

    def postcondition(self, leaf : Leaf) -> FNode:
        max_var = self.variable(leaf.max_position)
        min_var = self.variable(leaf.min_position)
        return And(
            [ BVSGE(max_var, v) for v in self.variables.values() ] +
            [ BVSLE(min_var, v) for v in self.variables.values() ]
        )

    def values(self, model) -> tuple:
        """ signed values of a..f in a model """
        return tuple(model.get_value(self.variable(p)).bv_signed_value() for p in POSITIONS)
