import os

import pytest

from pysvbench.analyses.FormulaBuilder import solver_available
from pysvbench.params import parser


BENCHMARKS = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'benchmarks')


@pytest.fixture()
def benchmarks():
    return BENCHMARKS


@pytest.fixture()
def solver():
    if not solver_available():
        pytest.skip('no SMT solver available to pysmt')


@pytest.fixture()
def make_args(tmp_path):
    def make(*argv):
        return parser.parse_args(list(argv) + ['-o', str(tmp_path), '--compact'])
    return make
