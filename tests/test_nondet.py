import pytest

from pysvbench.nondet import ExhaustiveNondet, FixedNondet, NondetExhausted, RandomNondet, int_range


def runs_of(source, program):
    """ every input vector the source hands to `program` """
    vectors = []
    while True:
        source.begin_run()
        program(source)
        vectors.append(source.consumed())
        if not source.end_run():
            return vectors


def test_int_range():
    assert int_range(32) == (-2**31, 2**31 - 1)
    assert int_range(8) == (-128, 127)


def test_fixed_replays_vector():
    source = FixedNondet([1, -3, 0])
    source.begin_run()
    assert [source(), source()] == [1, -3]
    assert source.consumed() == [1, -3]
    assert source.nondet_int() == 0
    with pytest.raises(NondetExhausted):
        source.nondet_int()
    source.begin_run()
    assert source() == 1
    assert not source.end_run()


def test_random_is_reproducible():
    first = RandomNondet(seed=3)
    second = RandomNondet(seed=3)
    first.begin_run()
    second.begin_run()
    assert [ first() for _ in range(50) ] == [ second() for _ in range(50) ]


def test_random_stays_in_range():
    source = RandomNondet(seed=1, width=8, runs=None, bias=0.0)
    source.begin_run()
    for _ in range(500):
        assert -128 <= source() <= 127


def test_random_bias_prefers_interesting_values():
    source = RandomNondet(seed=0, width=16, bias=1.0)
    source.begin_run()
    values = [ source() for _ in range(100) ]
    assert set(values) <= {-2**15, 2**15 - 1, 0, 1, -1}


def test_random_run_limit():
    source = RandomNondet(seed=0, runs=3)
    assert runs_of(source, lambda s: s()) and source.run == 3


def test_exhaustive_fixed_length():
    vectors = runs_of(ExhaustiveNondet([0, 1, 2]), lambda s: (s(), s()))
    assert len(vectors) == 9
    assert len({ tuple(v) for v in vectors }) == 9
    assert vectors[0] == [0, 0] and vectors[-1] == [2, 2]


def test_exhaustive_input_dependent_length():
    def program(source):
        if source() == 0:
            source()
    vectors = runs_of(ExhaustiveNondet([0, 1, 2]), program)
    assert vectors == [[0, 0], [0, 1], [0, 2], [1], [2]]


def test_exhaustive_without_inputs_runs_once():
    assert runs_of(ExhaustiveNondet([0, 1]), lambda s: None) == [[]]
