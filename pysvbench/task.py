
from typing import Collection, Optional

import os

from enum import Enum

from pysvbench.verdict import Verdict


# bit width of int for the data models used in task files
data_models = {
    'ILP32' : 32,
    'LP64'  : 64,
}


class Task:
    def __init__(self, program : str, args, configs : Collection[str] = [], properties : Collection[str] = [], max_iterations=None,
                 expected_verdict : Optional[bool] = None, options : Optional[dict] = None):
        # base name of program
        self.program = program
        self.program_name = os.path.basename(program).split('.')[0]
        self.language = 'C' if program.endswith('.c') else 'Python'
        self.configs = configs
        self.properties = properties
        self.max_iterations = max_iterations
        self.output_directory = args.output_directory + '/' + self.program_name

        self.expected_verdict = Verdict.from_expected(expected_verdict)

        options = options or {}
        self.language = options.get('language', self.language)
        self.data_model = options.get('data_model', 'ILP32')
        if self.data_model not in data_models:
            raise ValueError('unsupported data model %s' % self.data_model)
        self.order_invariant = bool(options.get('order_invariant', False))
        self.inputs = options.get('inputs')
        self.seed = options.get('seed', getattr(args, 'seed', 0))
        self.domain = getattr(args, 'domain', None)

    @property
    def int_width(self) -> int:
        return data_models[self.data_model]

    @staticmethod
    def task_from_yml(yml, base_dir, args):
        properties = yml.get('properties') or []
        expected = None
        for p in properties:
            if 'expected_verdict' in p:
                expected = p['expected_verdict']

        result = Task(
                os.path.join(base_dir, yml['input_files'].split(' ')[0]),  # only accept single program for now
                args,
                args.config,
                [ p['property_file'] for p in properties ] or args.property,
                args.max_iterations,
                expected,
                yml.get('options')
        )
        return result

    @staticmethod
    def task_from_args(program, base_dir, args):
        return Task(program, args, args.config, args.property, args.max_iterations)

    def __str__(self):
        return '%s' % self.program


class Status(Enum):
    OK = 0,
    TIMEOUT = 1,
    OUT_OF_MEMORY = 2,
    ABORTED_BY_USER = 3,
    ERROR = 4,
    SYNTAX_INVALID = 5,
    UNSUPPORTED = 6

    def __str__(self):
        return Enum.__str__(self).replace('Status.', '')


class Result:
    def __init__(self, verdict=Verdict.UNKNOWN, witness=None):
        self.verdict = verdict
        self.witness = witness
        self.status = Status.OK
        self.runs = 0
        self.complete = False
