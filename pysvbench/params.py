import argparse


parser = argparse.ArgumentParser(prog='pysvbench', description='runs self-checking verification benchmarks against nondeterministic inputs')
parser.add_argument('program', help='the benchmark program or task file (.yml) to check', nargs='+')

parser.add_argument('-o', '--output-directory', help='directory to write results to', type=str, default='out')

parser.add_argument('-c', '--config', action='append', required=True, help='which analysis configuration to use (Replay, RandomTesting, BoundedExhaustive, SymbolicTree)')
parser.add_argument('-p', '--property', action='append', default=['unreach-call'], help='which property to check')

parser.add_argument('--max-iterations', help='maximum number of program runs', type=int)
parser.add_argument('--seed', help='seed for random testing', type=int, default=0)
parser.add_argument('--domain', help='value domain for bounded exhaustive testing', type=int, nargs='+')

parser.add_argument('--compact', help='print less output (only program and verdict)', action='store_true')
parser.add_argument('--log-level', help='level of debugging output', type=int, default='0')

parser.add_argument('-v', '--version', help='show version', action='version', version='%(prog)s 0.1')
