from pysvbench.algorithm import ExecutionAlgorithm
from pysvbench.nondet import RandomNondet

RUNS = 10000

def get_algorithm(program, specification, task, result):
    source = RandomNondet(seed=task.seed, width=task.int_width, runs=task.max_iterations or RUNS)
    return ExecutionAlgorithm(program, source, specification, task, result)
