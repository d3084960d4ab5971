#!/usr/bin/env python
"""
Nondeterministic input sources: the capability behind `__VERIFIER_nondet_int()`.

• FixedNondet       – replays a literal input vector (regression of known counterexamples)
• RandomNondet      – adversarial random values (extrema, zero, duplicates)
• ExhaustiveNondet  – every sequence of values over a finite domain
"""

import random

from typing import List, Sequence, Optional

from pysvbench import log


def int_range(width : int = 32):
    """ smallest and largest signed integer of the given bit width """
    return -(1 << (width - 1)), (1 << (width - 1)) - 1


class NondetExhausted(Exception):
    """ raised when a replayed input vector is shorter than the program's demand """
    pass


class NondetSource:
    """ interface of an input source, consumed one value per call """

    def begin_run(self) -> None:
        """ called before each program run """
        pass

    def end_run(self) -> bool:
        """ called after each program run, returns whether another run is possible """
        return False

    def nondet_int(self) -> int:
        raise NotImplementedError('nondet_int not implemented!')

    def consumed(self) -> List[int]:
        """ values returned during the current run """
        raise NotImplementedError('consumed not implemented!')

    # sources are handed to programs as callables
    def __call__(self) -> int:
        return self.nondet_int()


class FixedNondet(NondetSource):
    def __init__(self, values : Sequence[int]):
        self.values = list(values)
        self.position = 0

    def begin_run(self):
        self.position = 0

    def nondet_int(self) -> int:
        if self.position >= len(self.values):
            raise NondetExhausted('input vector %s has no value at position %d' % (self.values, self.position))
        value = self.values[self.position]
        self.position += 1
        return value

    def consumed(self):
        return self.values[:self.position]


class RandomNondet(NondetSource):
    """
    returns arbitrary signed integers of the given width;
    with probability `bias` a value is taken from the interesting ones
    (extrema, zero, ±1 and values already returned in this run)
    """

    def __init__(self, seed : int = 0, width : int = 32, runs : Optional[int] = 1000, bias : float = 0.5):
        self.random = random.Random(seed)
        self.min_int, self.max_int = int_range(width)
        self.runs = runs
        self.bias = bias
        self.run = 0
        self.values : List[int] = []

    def begin_run(self):
        self.values = []

    def end_run(self):
        self.run += 1
        return self.runs is None or self.run < self.runs

    def nondet_int(self) -> int:
        if self.random.random() < self.bias:
            interesting = [self.min_int, self.max_int, 0, 1, -1] + self.values
            value = self.random.choice(interesting)
        else:
            value = self.random.randint(self.min_int, self.max_int)
        self.values.append(value)
        return value

    def consumed(self):
        return list(self.values)


class ExhaustiveNondet(NondetSource):
    """
    enumerates all sequences of nondet values over `domain`.

    The sequence length is not known in advance: every run records the values
    handed out, the next run advances the last position that has not yet
    seen every domain value (odometer). Positions beyond the recorded prefix
    start at the first domain value.
    """

    def __init__(self, domain : Sequence[int]):
        assert len(domain) > 0
        self.domain = list(domain)
        self.prefix : List[int] = []      # domain indices of the current run
        self.position = 0

    def begin_run(self):
        self.position = 0

    def nondet_int(self) -> int:
        if self.position == len(self.prefix):
            self.prefix.append(0)
        index = self.prefix[self.position]
        self.position += 1
        return self.domain[index]

    def end_run(self):
        # values requested in this run are the only ones that matter
        del self.prefix[self.position:]
        while len(self.prefix) > 0 and self.prefix[-1] == len(self.domain) - 1:
            self.prefix.pop()
        if len(self.prefix) == 0:
            log.printer.log_debug(1, '[ExhaustiveNondet] domain %s exhausted' % self.domain)
            return False
        self.prefix[-1] += 1
        return True

    def consumed(self):
        return [ self.domain[i] for i in self.prefix[:self.position] ]
