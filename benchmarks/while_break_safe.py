def VERIFIER_assert(cond):
    if not cond:
        reach_error()

def main():
    counter = 0

    while counter < 5:
        counter += 1

        if 4 == counter:
            break

    VERIFIER_assert(counter == 4)
