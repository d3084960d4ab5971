#!/usr/bin/env python
"""
Order-statistics decision tree: maximum and minimum of six values.

The tree is a cascade of mutually exclusive branches. A branch for candidate `x`
fires when `x` is strictly greater (for the maximum) than every candidate tested
after it; the last candidate is the structural fallback (final `else`).
Once the maximum is fixed, the minimum is found by the same cascade over the five
remaining positions, with `<` instead of `>`.

All guards are derived from the ordered candidate list by `cascade`, so that a
single mistyped comparison (the fault injected in Maxmin6varKO2) can only enter
a tree through an explicit `Fault`.
"""

from __future__ import annotations

import copy
import operator

from typing import Dict, Iterator, List, NamedTuple, Optional, Sequence, Tuple


POSITIONS = ('a', 'b', 'c', 'd', 'e', 'f')

MAX = 'max'
MIN = 'min'

operators = {
    '>' : operator.gt,
    '<' : operator.lt,
}


class Comparison:
    """ one conjunct `left op right` over positions """

    def __init__(self, op : str, left : str, right : str, location : Optional[str] = None):
        assert op in operators, op
        assert left in POSITIONS and right in POSITIONS, (left, right)
        self.op = op
        self.left = left
        self.right = right
        self.location = location

    def evaluate(self, valuation : Dict[str, int]) -> bool:
        return operators[self.op](valuation[self.left], valuation[self.right])

    def __eq__(self, other):
        if not isinstance(other, Comparison):
            return False
        return (self.op, self.left, self.right) == (other.op, other.left, other.right)

    def __hash__(self):
        return hash((self.op, self.left, self.right))

    def __str__(self):
        return '%s%s%s' % (self.left, self.op, self.right)

    def __repr__(self):
        return 'Comparison(%r, %r, %r)' % (self.op, self.left, self.right)


class Guard:
    """ conjunction of comparisons, evaluated left to right with short-circuit """

    def __init__(self, conjuncts : Sequence[Comparison]):
        self.conjuncts = list(conjuncts)

    def evaluate(self, valuation, trace : Optional[List[str]] = None) -> bool:
        for c in self.conjuncts:
            if trace is not None:
                trace.append(c.location)
            if not c.evaluate(valuation):
                return False
        return True

    def is_fallback(self) -> bool:
        return len(self.conjuncts) == 0

    def __str__(self):
        if self.is_fallback():
            return 'else'
        return ' && '.join('(%s)' % c for c in self.conjuncts)


class Branch:
    def __init__(self, candidate : str, guard : Guard):
        self.candidate = candidate
        self.guard = guard

    def __str__(self):
        return '%s -> %s' % (self.guard, self.candidate)


def cascade(candidates : Sequence[str], op : str, prefix : str = '') -> List[Branch]:
    """
    branches selecting the candidate that is strictly `op` all candidates after it;
    the last candidate has the empty (fallback) guard
    """
    branches = []
    for i, candidate in enumerate(candidates):
        rest = candidates[i + 1:]
        guard = Guard([
            Comparison(op, candidate, other, '%s/%s#%d' % (prefix, candidate, k))
            for k, other in enumerate(rest)
        ])
        branches.append(Branch(candidate, guard))
    return branches


def choose(branches : Sequence[Branch], valuation, trace=None) -> Tuple[int, str]:
    """ index and candidate of the first branch whose guard holds """
    for i, branch in enumerate(branches):
        if branch.guard.evaluate(valuation, trace):
            return i, branch.candidate
    # unreachable: the last guard is empty
    assert False, [str(b) for b in branches]


class SelectionResult(NamedTuple):
    max : int
    min : int
    max_position : str
    min_position : str


class Leaf(NamedTuple):
    max_position : str
    min_position : str

    def __str__(self):
        return 'max=%s, min=%s' % (self.max_position, self.min_position)


class Fault:
    """
    replaces conjunct `index` of the guard of `candidate` in one cascade by `replacement`;
    `under` names the max candidate whose min cascade is affected (min faults only)
    """

    def __init__(self, extremum : str, candidate : str, index : int, replacement : Comparison, under : Optional[str] = None):
        assert extremum in (MAX, MIN)
        assert (extremum == MIN) == (under is not None)
        self.extremum = extremum
        self.candidate = candidate
        self.index = index
        self.replacement = replacement
        self.under = under

    def __str__(self):
        where = self.extremum if self.under is None else '%s[%s]' % (self.extremum, self.under)
        return '%s/%s#%d := %s' % (where, self.candidate, self.index, self.replacement)


class DecisionTree:
    def __init__(self, max_branches : List[Branch], min_branches : Dict[str, List[Branch]], faults : Sequence[Fault] = ()):
        self.max_branches = max_branches
        self.min_branches = min_branches
        self.faults = list(faults)

    def select(self, a, b, c, d, e, f, trace : Optional[List[str]] = None) -> SelectionResult:
        valuation = dict(zip(POSITIONS, (a, b, c, d, e, f)))
        _, max_position = choose(self.max_branches, valuation, trace)
        _, min_position = choose(self.min_branches[max_position], valuation, trace)
        return SelectionResult(valuation[max_position], valuation[min_position], max_position, min_position)

    def leaves(self) -> Iterator[Leaf]:
        for branch in self.max_branches:
            for inner in self.min_branches[branch.candidate]:
                yield Leaf(branch.candidate, inner.candidate)

    def path(self, leaf : Leaf) -> List[Tuple[Guard, bool]]:
        """ guards and their required outcomes on the way to `leaf` """
        result = []
        for branches, target in ((self.max_branches, leaf.max_position),
                                 (self.min_branches[leaf.max_position], leaf.min_position)):
            for branch in branches:
                if branch.candidate == target:
                    result.append((branch.guard, True))
                    break
                result.append((branch.guard, False))
        return result

    def comparisons(self) -> Iterator[Comparison]:
        for branch in self.max_branches:
            yield from branch.guard.conjuncts
        for candidate in (b.candidate for b in self.max_branches):
            for branch in self.min_branches[candidate]:
                yield from branch.guard.conjuncts

    def with_fault(self, fault : Fault) -> DecisionTree:
        tree = copy.deepcopy(self)
        branches = tree.max_branches if fault.extremum == MAX else tree.min_branches[fault.under]
        branch = next(b for b in branches if b.candidate == fault.candidate)
        assert 0 <= fault.index < len(branch.guard.conjuncts), str(fault)
        original = branch.guard.conjuncts[fault.index]
        branch.guard.conjuncts[fault.index] = Comparison(
                fault.replacement.op, fault.replacement.left, fault.replacement.right, original.location)
        tree.faults.append(fault)
        return tree

    def __str__(self):
        lines = []
        for branch in self.max_branches:
            lines.append('%s' % branch)
            for inner in self.min_branches[branch.candidate]:
                lines.append('    %s' % inner)
        return '\n'.join(lines)


def build_tree() -> DecisionTree:
    max_branches = cascade(POSITIONS, '>', MAX)
    min_branches = {}
    for branch in max_branches:
        remaining = [ p for p in POSITIONS if p != branch.candidate ]
        min_branches[branch.candidate] = cascade(remaining, '<', '%s[%s]' % (MIN, branch.candidate))
    return DecisionTree(max_branches, min_branches)


# Maxmin6varKO2: `(b>d)` typed instead of `(a>d)` in the guard of max=a
KO2_FAULT = Fault(MAX, 'a', 2, Comparison('>', 'b', 'd'))


TREE = build_tree()

def select(a, b, c, d, e, f) -> SelectionResult:
    return TREE.select(a, b, c, d, e, f)
