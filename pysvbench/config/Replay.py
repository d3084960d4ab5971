from pysvbench.algorithm import ExecutionAlgorithm
from pysvbench.nondet import FixedNondet

# replays the literal input vector of the task (options: inputs), e.g. a documented counterexample

def get_algorithm(program, specification, task, result):
    return ExecutionAlgorithm(program, FixedNondet(task.inputs or []), specification, task, result)
