#!/usr/bin/env python
"""
Error sink: the capability behind `reach_error()`.

A benchmark reports a violated postcondition by calling the sink with no arguments.
The sink only records the call, the computation that led to it is left untouched.
"""

import inspect

from typing import List, Optional

from pysvbench import log


# stable identifier of the error location (the `ERROR:` label of the C benchmarks)
ERROR_LABEL = 'ERROR'


class PostconditionViolation:
    """ a single call of reach_error """
    def __init__(self, label : str, location : Optional[str] = None, context : Optional[dict] = None):
        self.label = label
        self.location = location
        self.context = context or {}

    def __eq__(self, other):
        if not isinstance(other, PostconditionViolation):
            return False
        return (self.label, self.location, self.context) == (other.label, other.location, other.context)

    def __hash__(self):
        return hash((self.label, self.location))

    def __str__(self):
        if self.location:
            return '%s at %s' % (self.label, self.location)
        return self.label

    def __repr__(self):
        return 'PostconditionViolation(%r, %r)' % (self.label, self.location)


class ErrorSink:
    def __init__(self, label : str = ERROR_LABEL):
        self.label = label
        self.violations : List[PostconditionViolation] = []

    def reach_error(self, **context) -> None:
        frame = inspect.currentframe().f_back
        location = '%s:%d' % (frame.f_code.co_name, frame.f_lineno)
        violation = PostconditionViolation(self.label, location, context)
        log.printer.log_debug(2, '[ErrorSink] reached %s' % violation)
        self.violations.append(violation)

    __call__ = reach_error

    @property
    def reached(self) -> bool:
        return len(self.violations) > 0

    def reset(self):
        self.violations = []
