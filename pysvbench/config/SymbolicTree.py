from pysvbench.analyses import TreeProver
from pysvbench.config import BoundedExhaustive
from pysvbench.nondet import FixedNondet
from pysvbench.selector import DecisionTree
from pysvbench.task import Result, Status
from pysvbench.verdict import Verdict

from pysvbench import log

# proves the decision tree a program selects with (module attribute TREE) leaf by leaf.
# A proof covers the tree only: counterexamples are replayed on main(), and a safe tree
# yields TRUE only if main() is safe on every input ordering as well.


class SymbolicTreeAlgorithm:
    def __init__(self, program, specification, task, result):
        self.program = program
        self.specification = specification
        self.task = task
        self.result = result
        self.report = None
        self.module = None

    def run(self):
        self.module = self.program.load(FixedNondet([]), self.specification.get_sink())
        tree = getattr(self.module, 'TREE', None)
        if not isinstance(tree, DecisionTree):
            log.printer.log_debug(1, '[SymbolicTree WARN] %s does not define a decision tree' % self.program.name)
            self.result.status = Status.UNSUPPORTED
            self.result.verdict = Verdict.UNKNOWN
            return

        self.report = TreeProver.prove(tree, self.task.int_width)
        for leaf in self.report.unreachable():
            log.printer.log_debug(1, '[SymbolicTree WARN] leaf %s is unreachable' % (leaf,))
        self.result.status = Status.OK

        if self.report.verdict == Verdict.FALSE:
            self.result.witness = self.report.counterexample()
            if self.confirm(self.result.witness):
                self.result.verdict = Verdict.FALSE
                self.result.complete = True
            else:
                log.printer.log_debug(1, '[SymbolicTree WARN] counterexample %s does not reach the error in %s'
                                      % (self.result.witness, self.program.name))
                self.result.verdict = Verdict.UNKNOWN
            return

        self.check_program()

    def confirm(self, witness) -> bool:
        """ replays a counterexample on the program itself """
        sink = self.specification.get_sink()
        source = FixedNondet(witness)
        module = self.program.load(source, sink)
        source.begin_run()
        self.program.run(module)
        return self.specification.check_sink(sink) == Verdict.FALSE

    def check_program(self):
        """ the tree is safe, main() may still reach the error without it """
        if not self.task.order_invariant:
            log.printer.log_debug(1, '[SymbolicTree INFO] tree of %s is safe, main() is not checked' % self.program.name)
            self.result.verdict = Verdict.UNKNOWN
            self.result.complete = False
            return

        explored = Result()
        BoundedExhaustive.get_algorithm(self.program, self.specification, self.task, explored).run()
        self.result.status = explored.status
        self.result.verdict = explored.verdict
        self.result.witness = explored.witness
        self.result.runs = explored.runs
        self.result.complete = explored.complete


def get_algorithm(program, specification, task, result):
    return SymbolicTreeAlgorithm(program, specification, task, result)
