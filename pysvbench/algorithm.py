#!/usr/bin/env python


from pysvbench.task import Task, Result, Status
from pysvbench.program import Program
from pysvbench.nondet import NondetSource, NondetExhausted
from pysvbench.verdict import Verdict

from pysvbench import log


class ExecutionAlgorithm:
    """
    runs a program once per input vector of `source` until the error sink is reached
    or the source has no more inputs.

    A program that never asks for an input has a single behaviour, one run is exhaustive.
    Otherwise `complete` decides whether an exhausted source covered every behaviour;
    it is called with the source and the largest number of inputs used in a run.
    """

    def __init__(self, program : Program, source : NondetSource, specification, task : Task, result : Result, complete=None):
        self.program = program
        self.source = source
        self.specification = specification
        self.task = task
        self.result = result
        self.complete = complete
        self.iterations = 0
        self.max_calls = 0
        self.module = None

    def run(self):
        sink = self.specification.get_sink()
        self.module = self.program.load(self.source, sink)

        while True:
            self.iterations += 1
            if self.task.max_iterations and self.iterations > self.task.max_iterations:
                log.printer.log_debug(1, '[ExecutionAlgorithm WARN] Max iterations reached.')
                self.result.status = Status.TIMEOUT
                self.result.verdict = Verdict.UNKNOWN
                return

            sink.reset()
            self.source.begin_run()
            try:
                self.program.run(self.module)
            except NondetExhausted as x:
                log.printer.log_debug(1, '[ExecutionAlgorithm WARN] %s' % x)
                self.result.status = Status.ERROR
                self.result.verdict = Verdict.UNKNOWN
                return
            self.result.runs += 1
            self.max_calls = max(self.max_calls, len(self.source.consumed()))

            verdict = self.specification.check_sink(sink)
            if verdict == Verdict.FALSE:
                self.result.status = Status.OK
                self.result.verdict = Verdict.FALSE
                self.result.witness = self.source.consumed()
                log.printer.log_debug(1, '[ExecutionAlgorithm INFO] %s reached after %d runs with inputs %s'
                                      % (sink.violations[0], self.result.runs, self.result.witness))
                return

            if not self.source.end_run():
                break

        self.result.status = Status.OK
        self.result.complete = self.max_calls == 0 or bool(self.complete and self.complete(self.source, self.max_calls))
        self.result.verdict = Verdict.TRUE if self.result.complete else Verdict.UNKNOWN
        log.printer.log_debug(1, '[ExecutionAlgorithm INFO] %d runs without error, exploration %s'
                              % (self.result.runs, 'complete' if self.result.complete else 'incomplete'))
