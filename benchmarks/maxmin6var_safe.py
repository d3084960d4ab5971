# Maxmin6var: maximum and minimum of six values by a cascaded decision tree.
# __VERIFIER_nondet_int and reach_error are provided by the verifier.
from pysvbench.selector import build_tree
from pysvbench.oracle import check

TREE = build_tree()

def main():
    ''' program entry point '''
    a = __VERIFIER_nondet_int()
    b = __VERIFIER_nondet_int()
    c = __VERIFIER_nondet_int()
    d = __VERIFIER_nondet_int()
    e = __VERIFIER_nondet_int()
    f = __VERIFIER_nondet_int()

    result = TREE.select(a, b, c, d, e, f)

    check(a, b, c, d, e, f, result.max, result.min, reach_error)
