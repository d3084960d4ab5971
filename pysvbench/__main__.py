#!/usr/bin/env python

from pysvbench import configs

from pysvbench.program import Program
from pysvbench.fixture import load_fixture, called_functions, InvalidFixture
from pysvbench.selector import DecisionTree
from pysvbench.verdict import Verdict

from pysvbench.task import Task, Result, Status

from pysvbench.utils.visual import tree_to_dot

from pysvbench import log

import astpretty

import os
import shutil

import yaml


def check_c_fixture(task, result):
    ''' C fixtures are validated only, malformed ones are flagged instead of modelled '''
    try:
        tree = load_fixture(task.program)
    except InvalidFixture as x:
        log.printer.log_debug(1, str(x))
        result.status = Status.SYNTAX_INVALID
        return
    log.printer.log_debug(1, '%s calls %s' % (task.program_name, sorted(called_functions(tree))))
    result.status = Status.UNSUPPORTED


def write_tree(module, output_dir, report=None):
    ''' Graphviz source of the decision tree a loaded program selects with, if it has one '''
    tree = getattr(module, 'TREE', None)
    if isinstance(tree, DecisionTree):
        tree_to_dot(tree, report).save(os.path.join(output_dir, 'tree.gv'))


def main(args):
    aborted = False
    results = {}

    log.init_printer(args)

    for program_file in args.program:
        if aborted == True:
            break

        # process program argument
        extension = os.path.splitext(os.path.basename(program_file))[1]
        if extension in ('.yml', '.yaml'):
            with open(program_file, 'r') as file:
                task_yml = yaml.safe_load(file)
                task = Task.task_from_yml(task_yml, os.path.dirname(program_file), args)
        else:
            task = Task.task_from_args(program_file, os.path.dirname(program_file), args)

        log.printer.log_task(task.program_name, task.configs, task.properties)

        result = Result()
        results[task.program_name] = result

        # prepare output directory
        output_dir = task.output_directory + '/'
        if not os.path.exists(output_dir):
            os.makedirs(output_dir)
        shutil.copy(task.program, output_dir)

        if task.language == 'C':
            log.printer.log_status('parsing fixture')
            check_c_fixture(task, result)
            log.printer.log_result(task.program_name, str(result.status), str(result.verdict))
            continue

        # parse program
        log.printer.log_status('parsing')
        try:
            program = Program.from_file(task.program, task.program_name)
        except SyntaxError:
            result.status = Status.SYNTAX_INVALID
            log.printer.log_result(task.program_name, str(result.status), str(Verdict.UNKNOWN))
            continue

        # prettyprint ast
        with open(output_dir + '/astpretty', 'w') as out_file:
            out_file.write(astpretty.pformat(program.tree, show_offsets=False))

        specification_mods = [ configs.load_specification(p) for p in task.properties ]
        analysis_mods = [ configs.load_config(c) for c in task.configs ]

        # every property is checked by every analysis until one of them is conclusive
        log.printer.log_status('running analyses')
        report = None
        module = None
        try:
            for specification in specification_mods:
                for analysis in analysis_mods:
                    partial = Result()
                    algo = analysis.get_algorithm(program, specification, task, partial)
                    algo.run()
                    report = getattr(algo, 'report', None) or report
                    module = getattr(algo, 'module', None) or module
                    log.printer.log_intermediate_result(task.program_name, str(partial.status), str(partial.verdict), ' (', analysis.__name__, ')')
                    if partial.verdict != Verdict.UNKNOWN or analysis is analysis_mods[-1]:
                        break
                result.status = partial.status
                result.witness = partial.witness if partial.witness is not None else result.witness
                result.runs += partial.runs
                result.complete = partial.complete
                if specification is specification_mods[0]:
                    result.verdict = partial.verdict
                else:
                    result.verdict &= partial.verdict
        except KeyboardInterrupt:
            result.status = Status.ABORTED_BY_USER
            result.verdict = Verdict.UNKNOWN
            aborted = True
        except Exception as x:
            log.printer.log_debug(1, '[pysvbench ERROR] %s: %r' % (task.program_name, x))
            result.status = Status.ERROR
            result.verdict = Verdict.UNKNOWN

        if module is not None:
            write_tree(module, output_dir, report)

        # print status
        if result.verdict == Verdict.FALSE:
            log.printer.log_witness(task.program_name, result.witness)
        expectation = ''
        if task.expected_verdict != Verdict.UNKNOWN and result.verdict != Verdict.UNKNOWN:
            expectation = ' (expected)' if result.verdict == task.expected_verdict else ' (unexpected, %s expected)' % task.expected_verdict
        log.printer.log_result(task.program_name, str(result.status), str(result.verdict), expectation)

    return results


from pysvbench.params import parser


if __name__ == '__main__':
    args = parser.parse_args()
    main(args)
