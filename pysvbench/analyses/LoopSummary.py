#!/usr/bin/env python
"""
Soundness of the closed-form loop summary in fixed-width arithmetic.

For a loop adding `delta` to `x` on every iteration, the summary after `n`
iterations is `x + n*delta`. By induction on `n` the summary equals literal
accumulation if
    summary(x, 0) == x                                   (base)
    summary(x, n) + delta == summary(x, n + 1)           (step)
hold for all bit-vectors x, delta, n; wraparound is part of the bit-vector semantics.
"""

from functools import lru_cache

from pysmt.shortcuts import And, Equals, Symbol, BV, BVAdd, BVMul, is_valid
from pysmt.typing import BVType
from pysmt.fnode import FNode

from pysvbench import log


def summary(x : FNode, n : FNode, delta : FNode) -> FNode:
    return BVAdd(x, BVMul(n, delta))


def induction_obligation(width : int) -> FNode:
    int_type = BVType(width)
    x = Symbol('x@%d' % width, int_type)
    n = Symbol('n@%d' % width, int_type)
    delta = Symbol('delta@%d' % width, int_type)

    base = Equals(summary(x, BV(0, width), delta), x)
    step = Equals(BVAdd(summary(x, n, delta), delta), summary(x, BVAdd(n, BV(1, width)), delta))
    return And(base, step)


@lru_cache(maxsize=None)
def prove_closed_form(width : int = 32, solver_name=None) -> bool:
    proven = is_valid(induction_obligation(width), solver_name=solver_name)
    log.printer.log_debug(1, '[LoopSummary] closed form at %d bit: %s' % (width, 'proven' if proven else 'refuted'))
    return proven
