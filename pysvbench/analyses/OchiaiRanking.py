#!/usr/bin/env python
"""
Spectrum-based fault localization for decision trees (Ochiai).

Each run feeds six inputs to the tree, records which comparisons were evaluated
and lets the oracle decide whether the run failed. A comparison is suspicious
when it is evaluated in many failing and few passing runs:

    ochiai(s) = ef(s) / sqrt(F * (ef(s) + ep(s)))

with F the number of failing runs.
"""

import math

from typing import Dict, List, NamedTuple, Optional

from pysvbench.nondet import NondetSource
from pysvbench.oracle import check
from pysvbench.selector import DecisionTree
from pysvbench.sink import ErrorSink

from pysvbench import log


class Ranked(NamedTuple):
    location : str
    comparison : str
    score : float


class Spectrum:
    def __init__(self):
        self.failed : Dict[str, int] = {}
        self.passed : Dict[str, int] = {}
        self.total_failed = 0
        self.total_passed = 0

    def add_run(self, evaluated : List[str], failed : bool):
        counts = self.failed if failed else self.passed
        for location in set(evaluated):
            counts[location] = counts.get(location, 0) + 1
        if failed:
            self.total_failed += 1
        else:
            self.total_passed += 1

    def ochiai(self, location : str) -> float:
        ef = self.failed.get(location, 0)
        ep = self.passed.get(location, 0)
        if ef == 0:
            return 0.0
        return ef / math.sqrt(self.total_failed * (ef + ep))


def collect(tree : DecisionTree, source : NondetSource, max_runs : Optional[int] = None) -> Spectrum:
    spectrum = Spectrum()
    sink = ErrorSink()
    runs = 0
    while True:
        source.begin_run()
        values = [ source.nondet_int() for _ in range(6) ]
        trace = []
        result = tree.select(*values, trace=trace)
        sink.reset()
        check(*values, result.max, result.min, sink.reach_error)
        spectrum.add_run(trace, sink.reached)
        runs += 1
        if not source.end_run() or (max_runs is not None and runs >= max_runs):
            break
    log.printer.log_debug(1, '[Ochiai] %d runs, %d failing' % (runs, spectrum.total_failed))
    return spectrum


def rank(tree : DecisionTree, source : NondetSource, max_runs : Optional[int] = None) -> List[Ranked]:
    """ comparisons of `tree`, most suspicious first """
    spectrum = collect(tree, source, max_runs)
    ranking = [
        Ranked(c.location, str(c), spectrum.ochiai(c.location))
        for c in tree.comparisons()
    ]
    ranking.sort(key=lambda r: r.score, reverse=True)
    return ranking
