from pysvbench.algorithm import ExecutionAlgorithm
from pysvbench.nondet import ExhaustiveNondet

# six values: enough to represent every ordering (with ties) of six inputs
DEFAULT_DOMAIN = (-3, -2, -1, 0, 1, 2)


def covers_all_orderings(domain, max_calls):
    """
    a program that only compares its inputs with each other behaves the same on all
    input vectors with the same ordering; a domain with at least as many values as
    inputs realizes every ordering, so enumerating it is a proof
    """
    return len(set(domain)) >= max_calls


def get_algorithm(program, specification, task, result):
    domain = task.domain or DEFAULT_DOMAIN
    complete = None
    if task.order_invariant:
        complete = lambda source, max_calls: covers_all_orderings(source.domain, max_calls)
    return ExecutionAlgorithm(program, ExhaustiveNondet(domain), specification, task, result, complete)
