# two counter loops, summarized in closed form (wraparound):
#
#   x = 0;  while (x < 1000000) x += 2;
#   i = 0;  while (i < 2147483647) { x += 2; i += 1; }
#
# x stays even through the wraparound of the second loop, the second assertion fails.
# ILP32 only: x is a 32 bit int, the task file pins the data model
from pysvbench.accumulator import Step, run

INT_WIDTH = 32

def VERIFIER_assert(cond):
    if not cond:
        reach_error()

def main():
    x = run(0, [Step.until(0, 1000000, 2)], INT_WIDTH)
    VERIFIER_assert(x % 2 == 0)

    x = run(x, [Step(2147483647, 2)], INT_WIDTH)
    VERIFIER_assert(x % 2 != 0)
