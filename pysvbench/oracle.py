#!/usr/bin/env python
"""
Postcondition oracle of the max/min benchmarks.
"""

from typing import Callable


def postcondition(a, b, c, d, e, f, max, min) -> bool:
    values = (a, b, c, d, e, f)
    return all(max >= v for v in values) and all(min <= v for v in values)


def check(a, b, c, d, e, f, max, min, reach_error : Callable[[], None]) -> None:
    """ calls reach_error iff max does not dominate or min is not dominated by all six values """
    if not postcondition(a, b, c, d, e, f, max, min):
        reach_error()
