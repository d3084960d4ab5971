#!/usr/bin/env python
"""
Validation of C benchmark fixtures.

The fixtures are only parsed, never translated: a fixture that does not parse
is reported as invalid instead of guessing what it was meant to say.
"""

from pycparser import c_parser, c_ast

import os
import re

from pysvbench import log


class InvalidFixture(Exception):
    def __init__(self, name, reason):
        super().__init__('%s: %s' % (name, reason))
        self.name = name
        self.reason = reason


# pycparser expects preprocessed input
_comment = re.compile(r'//[^\n]*|/\*.*?\*/', re.DOTALL)
_directive = re.compile(r'^\s*#[^\n]*$', re.MULTILINE)

def strip_preprocessor(source : str) -> str:
    # keep line breaks so that parse errors point at the original line
    source = _comment.sub(lambda m: '\n' * m.group(0).count('\n'), source)
    return _directive.sub('', source)


def parse_fixture(source : str, name : str = '<fixture>') -> c_ast.FileAST:
    parser = c_parser.CParser()
    try:
        return parser.parse(strip_preprocessor(source), filename=name)
    except c_parser.ParseError as x:
        log.printer.log_debug(1, '[fixture] %s rejected: %s' % (name, x))
        raise InvalidFixture(name, str(x))


def load_fixture(path : str) -> c_ast.FileAST:
    with open(path) as file:
        return parse_fixture(file.read(), os.path.basename(path))


class _CallCollector(c_ast.NodeVisitor):
    def __init__(self):
        self.calls = set()

    def visit_FuncCall(self, node):
        if isinstance(node.name, c_ast.ID):
            self.calls.add(node.name.name)
        self.generic_visit(node)


def called_functions(tree : c_ast.FileAST) -> set:
    """ names of all functions called in a fixture, e.g. to find its error function """
    collector = _CallCollector()
    collector.visit(tree)
    return collector.calls
