import os

from pysvbench.__main__ import main
from pysvbench.task import Status
from pysvbench.verdict import Verdict


def task(benchmarks, name):
    return os.path.join(benchmarks, name)


def test_replay_documented_counterexample(benchmarks, make_args, tmp_path, capsys):
    results = main(make_args(task(benchmarks, 'maxmin6var_ko2_unsafe.yml'), '-c', 'Replay'))
    result = results['maxmin6var_ko2_unsafe']
    assert result.status == Status.OK
    assert result.verdict == Verdict.FALSE
    assert result.witness == [1, -3, 0, -2, -1, -2]
    assert 'maxmin6var_ko2_unsafe: OK FALSE (expected)' in capsys.readouterr().out
    output_dir = tmp_path / 'maxmin6var_ko2_unsafe'
    assert (output_dir / 'maxmin6var_ko2_unsafe.py').exists()
    assert (output_dir / 'astpretty').exists()
    assert (output_dir / 'tree.gv').exists()


def test_single_replay_is_inconclusive(benchmarks, make_args):
    result = main(make_args(task(benchmarks, 'maxmin6var_safe.yml'), '-c', 'Replay'))['maxmin6var_safe']
    assert result.verdict == Verdict.UNKNOWN
    assert result.runs == 1


def test_exhaustive_proves_safe_tree(benchmarks, make_args):
    args = make_args(task(benchmarks, 'maxmin6var_safe.yml'), '-c', 'Replay', '-c', 'BoundedExhaustive')
    result = main(args)['maxmin6var_safe']
    assert result.verdict == Verdict.TRUE
    assert result.runs == 6**6


def test_small_domain_is_inconclusive(benchmarks, make_args):
    args = make_args(task(benchmarks, 'maxmin6var_safe.yml'), '-c', 'BoundedExhaustive', '--domain', '0', '1')
    result = main(args)['maxmin6var_safe']
    assert result.verdict == Verdict.UNKNOWN
    assert result.runs == 2**6


def test_exhaustive_finds_fault(benchmarks, make_args):
    result = main(make_args(task(benchmarks, 'maxmin6var_ko2_unsafe.yml'), '-c', 'BoundedExhaustive'))['maxmin6var_ko2_unsafe']
    assert result.verdict == Verdict.FALSE
    a, b, c, d, e, f = result.witness
    assert all(a > v for v in (b, c, d, e, f)) and b <= d


def test_random_testing_finds_fault(benchmarks, make_args):
    result = main(make_args(task(benchmarks, 'maxmin6var_ko2_unsafe.yml'), '-c', 'RandomTesting'))['maxmin6var_ko2_unsafe']
    assert result.verdict == Verdict.FALSE


def test_max_iterations(benchmarks, make_args):
    args = make_args(task(benchmarks, 'maxmin6var_safe.yml'), '-c', 'RandomTesting', '--max-iterations', '5')
    result = main(args)['maxmin6var_safe']
    assert result.verdict == Verdict.UNKNOWN
    assert result.runs == 5


def test_loop_accumulator_violation(benchmarks, make_args, capsys):
    result = main(make_args(task(benchmarks, 'naive_multiple_loops13_unsafe.yml'), '-c', 'Replay'))['naive_multiple_loops13_unsafe']
    assert result.verdict == Verdict.FALSE
    assert result.witness == []
    assert '(expected)' in capsys.readouterr().out


def test_deterministic_program_is_proven_by_one_run(benchmarks, make_args):
    result = main(make_args(task(benchmarks, 'while_break_safe.yml'), '-c', 'Replay'))['while_break_safe']
    assert result.verdict == Verdict.TRUE
    assert result.complete


def test_c_fixtures(benchmarks, make_args):
    args = make_args(task(benchmarks, 'c/naive1_plusminus_transformed.yml'), task(benchmarks, 'c/naive_multiple_loops13.yml'), '-c', 'Replay')
    results = main(args)
    assert results['naive1_plusminus_transformed'].status == Status.SYNTAX_INVALID
    assert results['naive_multiple_loops13'].status == Status.UNSUPPORTED
    assert all(r.verdict == Verdict.UNKNOWN for r in results.values())


def test_invalid_program(make_args, tmp_path):
    program = tmp_path / 'broken.py'
    program.write_text('def main(:\n    pass\n')
    result = main(make_args(str(program), '-c', 'Replay'))['broken']
    assert result.status == Status.SYNTAX_INVALID


def test_short_input_vector_is_an_error(make_args, tmp_path):
    program = tmp_path / 'greedy.py'
    program.write_text('def main():\n    __VERIFIER_nondet_int()\n')
    result = main(make_args(str(program), '-c', 'Replay'))['greedy']
    assert result.status == Status.ERROR
    assert result.verdict == Verdict.UNKNOWN


def test_symbolic_tree(benchmarks, make_args, solver):
    args = make_args(task(benchmarks, 'maxmin6var_safe.yml'), task(benchmarks, 'maxmin6var_ko2_unsafe.yml'), '-c', 'SymbolicTree')
    results = main(args)
    assert results['maxmin6var_safe'].verdict == Verdict.TRUE
    unsafe = results['maxmin6var_ko2_unsafe']
    assert unsafe.verdict == Verdict.FALSE
    a, b, c, d, e, f = unsafe.witness
    assert all(a > v for v in (b, c, d, e, f)) and b <= d


def test_symbolic_tree_needs_a_tree(benchmarks, make_args, solver):
    result = main(make_args(task(benchmarks, 'while_break_safe.yml'), '-c', 'SymbolicTree'))['while_break_safe']
    assert result.status == Status.UNSUPPORTED
    assert result.verdict == Verdict.UNKNOWN


def test_module_level_input_does_not_stop_the_run(benchmarks, make_args, tmp_path):
    program = tmp_path / 'eager.py'
    program.write_text('x = __VERIFIER_nondet_int()\ndef main():\n    pass\n')
    results = main(make_args(str(program), task(benchmarks, 'while_break_safe.yml'), '-c', 'Replay'))
    assert results['eager'].status == Status.ERROR
    assert results['while_break_safe'].verdict == Verdict.TRUE
    assert not (tmp_path / 'eager' / 'tree.gv').exists()


def test_tree_is_drawn_from_the_analysed_program(benchmarks, make_args, tmp_path):
    main(make_args(task(benchmarks, 'maxmin6var_safe.yml'), '-c', 'BoundedExhaustive'))
    assert 'max=a, min=b' in (tmp_path / 'maxmin6var_safe' / 'tree.gv').read_text()


DETACHED_TREE = '''from pysvbench.selector import build_tree

TREE = build_tree()

def main():
    reach_error()
'''


def test_safe_tree_does_not_make_program_safe(make_args, tmp_path, solver):
    program = tmp_path / 'detached.py'
    program.write_text(DETACHED_TREE)
    result = main(make_args(str(program), '-c', 'SymbolicTree'))['detached']
    assert result.verdict == Verdict.UNKNOWN
    assert not result.complete
    result = main(make_args(str(program), '-c', 'SymbolicTree', '-c', 'Replay'))['detached']
    assert result.verdict == Verdict.FALSE


def test_safe_tree_with_order_invariant_task_explores_main(make_args, tmp_path, solver):
    (tmp_path / 'detached.py').write_text(DETACHED_TREE)
    (tmp_path / 'detached.yml').write_text(
        "format_version: '2.0'\n"
        "input_files: 'detached.py'\n"
        "properties:\n"
        "  - property_file: unreach-call.prp\n"
        "    expected_verdict: true\n"
        "options:\n"
        "  order_invariant: true\n")
    result = main(make_args(str(tmp_path / 'detached.yml'), '-c', 'SymbolicTree'))['detached']
    assert result.verdict == Verdict.FALSE
    assert result.witness == []
