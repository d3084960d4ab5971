#!/usr/bin/env python
"""
Loop-accumulator harness.

A counter loop `repeat count times: x += delta` is summarized by its closed form
`x + count*delta`. Both forms are evaluated in fixed-width signed arithmetic
with two's-complement wraparound, as a C `int` would be.
"""

from typing import List, NamedTuple, Sequence

from pysvbench import log


def wrap(value : int, width : int = 32) -> int:
    """ two's-complement wraparound of `value` to a signed `width`-bit integer """
    modulus = 1 << width
    value %= modulus
    if value >= modulus >> 1:
        value -= modulus
    return value


class Step(NamedTuple):
    count : int
    delta : int

    @staticmethod
    def until(start : int, bound : int, delta : int) -> 'Step':
        """ the step executed by `while (x < bound) x += delta;` starting at `start` """
        assert delta > 0, delta
        if start >= bound:
            return Step(0, delta)
        return Step(-((start - bound) // delta), delta)


def run(initial : int, steps : Sequence[Step], width : int = 32) -> int:
    """ closed form: every step adds count*delta at once """
    x = wrap(initial, width)
    for step in steps:
        assert step.count >= 0, step
        x = wrap(x + step.count * step.delta, width)
    return x


def iterate(initial : int, steps : Sequence[Step], width : int = 32) -> int:
    """ literal form: one wrapped addition per loop iteration """
    x = wrap(initial, width)
    for step in steps:
        assert step.count >= 0, step
        for _ in range(step.count):
            x = wrap(x + step.delta, width)
    return x


class StepCheck(NamedTuple):
    step : Step
    method : str        # 'literal' or 'inductive'
    agrees : bool


class EquivalenceReport:
    def __init__(self, initial, width, checks : List[StepCheck], final : int):
        self.initial = initial
        self.width = width
        self.checks = checks
        self.final = final

    @property
    def agrees(self) -> bool:
        return all(c.agrees for c in self.checks)

    def __str__(self):
        return ', '.join('%s*%s:%s%s' % (c.step.count, c.step.delta, c.method, '' if c.agrees else '!') for c in self.checks)


def check_equivalence(initial : int, steps : Sequence[Step], width : int = 32, literal_limit : int = 100000) -> EquivalenceReport:
    """
    checks that the closed form agrees with literal accumulation step by step.
    Steps longer than `literal_limit` are not executed, they are covered by the
    inductive proof that the closed form is sound at this width.
    """
    checks = []
    proven = None
    x = wrap(initial, width)
    for step in steps:
        summary = run(x, [step], width)
        if step.count <= literal_limit:
            checks.append(StepCheck(step, 'literal', iterate(x, [step], width) == summary))
        else:
            if proven is None:
                # imported here: the solver is only needed for long loops
                from pysvbench.analyses.LoopSummary import prove_closed_form
                proven = prove_closed_form(width)
            checks.append(StepCheck(step, 'inductive', proven))
        x = summary
    report = EquivalenceReport(initial, width, checks, x)
    log.printer.log_debug(1, '[accumulator] %s -> %s: %s' % (initial, x, report))
    return report
