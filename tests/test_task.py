import os

import pytest
import yaml

from pysvbench.task import Status, Task
from pysvbench.verdict import Verdict


def load(benchmarks, name, args):
    with open(os.path.join(benchmarks, name)) as file:
        return Task.task_from_yml(yaml.safe_load(file), os.path.dirname(os.path.join(benchmarks, name)), args)


def test_task_from_yml(benchmarks, make_args):
    args = make_args('x.yml', '-c', 'Replay')
    task = load(benchmarks, 'maxmin6var_ko2_unsafe.yml', args)
    assert task.program_name == 'maxmin6var_ko2_unsafe'
    assert task.program == os.path.join(benchmarks, 'maxmin6var_ko2_unsafe.py')
    assert task.expected_verdict == Verdict.FALSE
    assert task.properties == ['properties/unreach-call.prp']
    assert task.configs == ['Replay']
    assert task.inputs == [1, -3, 0, -2, -1, -2]
    assert task.order_invariant
    assert task.int_width == 32
    assert task.output_directory.endswith('/maxmin6var_ko2_unsafe')


def test_c_task(benchmarks, make_args):
    task = load(benchmarks, 'c/naive_multiple_loops13.yml', make_args('x.yml', '-c', 'Replay'))
    assert task.language == 'C'
    assert task.expected_verdict == Verdict.UNKNOWN


def test_task_from_args(make_args):
    args = make_args('prog.py', '-c', 'RandomTesting', '--seed', '5', '--max-iterations', '10')
    task = Task.task_from_args('dir/prog.py', 'dir', args)
    assert task.language == 'Python'
    assert task.properties == ['unreach-call']
    assert task.seed == 5
    assert task.max_iterations == 10
    assert not task.order_invariant


def test_data_models(make_args):
    args = make_args('prog.py', '-c', 'Replay')
    assert Task('prog.py', args, options={'data_model': 'LP64'}).int_width == 64
    with pytest.raises(ValueError):
        Task('prog.py', args, options={'data_model': 'ILP16'})


def test_status_and_verdict_strings():
    assert str(Status.SYNTAX_INVALID) == 'SYNTAX_INVALID'
    assert str(Verdict.TRUE & Verdict.FALSE) == 'FALSE'
    assert Verdict.UNKNOWN & Verdict.TRUE == Verdict.UNKNOWN
