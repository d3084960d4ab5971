# Maxmin6varKO2: the guard of max=a compares (b>d) instead of (a>d).
# With {a=1, b=-3, c=0, d=-2, e=-1, f=-2} the tree answers {max=0, min=-3}
# instead of {max=1, min=-3}.
from pysvbench.selector import build_tree, KO2_FAULT
from pysvbench.oracle import check

TREE = build_tree().with_fault(KO2_FAULT)

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
