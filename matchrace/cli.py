# -*- coding: utf-8 -*-
"""Command line tool that runs all strategies on a graph and compares them.

The graph is read from a text file with one ``p bipartite <left_count> <right_count>`` line followed by one
``e <left> <right>`` line per edge, with vertices numbered from 1. Empty lines and lines starting with ``c`` or
``#`` are ignored.
"""
import argparse
import logging
import sys
from typing import List, Optional, TextIO, Tuple

import colorlog
import tabulate

from . import __version__
from .benchmark import STRATEGIES, VerificationError, race, run, speedup
from .generate import random_graph
from .graph import BipartiteGraph

__all__ = ['main', 'read_graph', 'read_graph_file', 'configure_logging']

logger = logging.getLogger(__name__)


def _parse_index(word: str, line: str) -> int:
    try:
        index = int(word)
    except ValueError:
        raise ValueError('Invalid vertex index {!r}'.format(line)) from None
    if index < 1:
        raise ValueError('Invalid vertex index {!r}'.format(line))
    return index - 1


def read_graph(f: TextIO) -> BipartiteGraph:
    """Reads a graph in the edge list format described above."""
    counts = None  # type: Optional[Tuple[int, int]]
    edges = []  # type: List[Tuple[int, int]]

    for line in f:
        s = line.strip()
        words = s.split()

        if not words or words[0].startswith(('c', '#')):
            # Skip empty and comment lines
            continue

        if words[0] == 'p':
            if len(words) != 4 or words[1] != 'bipartite':
                raise ValueError('Expecting bipartite problem line but got {!r}'.format(s))
            if counts is not None:
                raise ValueError('Duplicate problem line')
            try:
                counts = (int(words[2]), int(words[3]))
            except ValueError:
                raise ValueError('Invalid vertex count {!r}'.format(s)) from None

        elif words[0] == 'e':
            if counts is None:
                raise ValueError('Edge before problem line {!r}'.format(s))
            if len(words) != 3:
                raise ValueError('Expecting edge but got {!r}'.format(s))
            edges.append((_parse_index(words[1], s), _parse_index(words[2], s)))

        else:
            raise ValueError('Unknown line type {!r}'.format(words[0]))

    if counts is None:
        raise ValueError('Missing problem line')

    return BipartiteGraph(counts[0], counts[1], edges)


def read_graph_file(filename: Optional[str]) -> BipartiteGraph:
    """Reads a graph from a file or from stdin if the filename is empty or ``-``."""
    if filename and filename != '-':
        with open(filename, 'r', encoding='ascii') as f:
            try:
                return read_graph(f)
            except ValueError as exc:
                raise ValueError('{} in {!r}'.format(exc, filename)) from None
    try:
        return read_graph(sys.stdin)
    except ValueError as exc:
        raise ValueError('{} in (stdin)'.format(exc)) from None


def configure_logging(level: int) -> None:
    root = logging.getLogger()
    root.setLevel(level)

    if len(root.handlers) == 0:
        handler = logging.StreamHandler()

        if sys.stderr.isatty():
            formatter = colorlog.ColoredFormatter(
                '%(asctime)s %(light_black)s%(name)s %(log_color)s%(message)s',
                log_colors={
                    'DEBUG': 'light_black',
                    'INFO': 'reset',
                    'WARNING': 'yellow',
                    'ERROR': 'red',
                    'CRITICAL': 'bold_red',
                },
            )
        else:
            formatter = logging.Formatter('%(levelname)s %(name)s %(message)s')

        handler.setFormatter(formatter)
        root.addHandler(handler)


def _print_race(graph: BipartiteGraph, strategies: Optional[List[str]]) -> None:
    for name, runner in race(graph, strategies):
        state = 'done' if runner.is_complete else '{:d} path(s)'.format(len(runner.last_paths))
        print('{:<15} iteration {:>4d}: {:>5d} matched, {}'.format(name, runner.iterations, len(runner.matching),
                                                                   state))


def main(argv: List[str]=None) -> int:
    parser = argparse.ArgumentParser(
        prog='matchrace', description='Compare maximum bipartite matching strategies on a graph'
    )
    parser.add_argument('-V', '--version', action='version', version='%(prog)s {}'.format(__version__))
    parser.add_argument('-v', '--verbose', action='store_true', help='enable debug logs')
    parser.add_argument(
        '--verify', action='store_true', help='check every result against an independently computed maximum matching'
    )
    parser.add_argument(
        '-s', '--strategy', action='append', choices=list(STRATEGIES),
        help='strategy to run, can be given multiple times (default: all)'
    )
    parser.add_argument('--race', action='store_true', help='show the progress of the strategies side by side')
    source = parser.add_mutually_exclusive_group()
    source.add_argument('input', nargs='?', help="graph file, '-' or nothing for stdin")
    source.add_argument(
        '--random', nargs=2, type=int, metavar=('LEFT', 'RIGHT'), help='use a random graph of the given size'
    )
    parser.add_argument(
        '--degree', nargs=2, type=int, default=(2, 4), metavar=('MIN', 'MAX'),
        help='degree range of the left vertices of a random graph (default: 2 4)'
    )
    parser.add_argument('--seed', type=int, help='seed for the random graph')
    args = parser.parse_args(argv)

    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        if args.random:
            graph = random_graph(args.random[0], args.random[1], args.degree[0], args.degree[1], seed=args.seed)
        else:
            graph = read_graph_file(args.input)
    except (OSError, ValueError) as exc:
        logger.error('%s', exc)
        return 1

    logger.info('Graph with %d + %d vertices and %d edges', graph.left_count, graph.right_count, len(graph))

    if args.race:
        _print_race(graph, args.strategy)

    try:
        results = run(graph, args.strategy, verify=args.verify)
    except VerificationError as exc:
        logger.error('%s', exc)
        return 2

    table = [
        [result.strategy, result.iterations, '{:.3f}'.format(result.elapsed * 1000), result.size]
        for result in results.values()
    ]
    print(tabulate.tabulate(table, headers=['strategy', 'iterations', 'time [ms]', 'matching size']))

    if 'naive-greedy' in results and 'hopcroft-karp' in results:
        ratio = speedup(results)
        if ratio is not None:
            print('hopcroft-karp is {:.1f}x as fast as naive-greedy'.format(ratio))

    return 0
