#!/usr/bin/env python
"""
Benchmark programs.

A benchmark is a Python module with a `main()` entry point. It reads inputs with
`__VERIFIER_nondet_int()` and reports a violated property with `reach_error()`;
both names are bound when the program is loaded, to the input source and the
error sink of the current analysis.
"""

import ast
import importlib.util

from types import ModuleType

from pysvbench.nondet import NondetSource
from pysvbench.sink import ErrorSink

from pysvbench import log


NONDET_FUNCTION = '__VERIFIER_nondet_int'
ERROR_FUNCTION = 'reach_error'
ENTRY_POINT = 'main'

# benchmarks are loaded under this name, never registered in sys.modules
MODULE_NAME = '__benchmark__'


class Program:
    def __init__(self, name : str, source : str, path : str):
        self.name = name
        self.source = source
        self.path = path
        # raises SyntaxError for invalid programs
        self.tree = ast.parse(source, filename=path)

    @staticmethod
    def from_file(path : str, name : str = None) -> 'Program':
        with open(path) as file:
            source = file.read()
        return Program(name or path, source, path)

    def defined_names(self) -> set:
        return { n.name for n in self.tree.body if isinstance(n, ast.FunctionDef) } | {
            t.id for n in self.tree.body if isinstance(n, ast.Assign) for t in n.targets if isinstance(t, ast.Name)
        }

    def load(self, nondet : NondetSource, sink : ErrorSink) -> ModuleType:
        """ imports the benchmark as a fresh module with the verifier functions bound """
        if ERROR_FUNCTION in self.defined_names():
            log.printer.log_debug(1, '[Program] %s defines its own %s, error calls are not observed' % (self.name, ERROR_FUNCTION))
        spec = importlib.util.spec_from_file_location(MODULE_NAME, self.path)
        module = importlib.util.module_from_spec(spec)
        setattr(module, NONDET_FUNCTION, nondet)
        setattr(module, ERROR_FUNCTION, sink)
        spec.loader.exec_module(module)
        assert hasattr(module, ENTRY_POINT), '%s has no %s()' % (self.name, ENTRY_POINT)
        return module

    def run(self, module : ModuleType) -> None:
        getattr(module, ENTRY_POINT)()
