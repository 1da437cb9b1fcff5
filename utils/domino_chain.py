#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#----------------------------------------------------------------------------
# Author       : HUYNH Vinh-Nam
# Email        : huynh-vinh.nam@usth.edu.vn
# Created Date : 11-January-2024
# Updated Date : 10-October-2026
# Description  :
"""
    This script decides whether a set of dominoes can be chained into a
    single closed loop (every domino used once, neighbours share a pip,
    and the last pip matches the first one).

    Each pip value is a vertex and each domino an edge. By Euler's theorem
    the loop exists iff the graph is connected and every vertex has an
    even degree. An empty set is a (trivial) loop.
"""
#----------------------------------------------------------------------------
import argparse
from dataclasses import dataclass
import os
import sys
from typing import List, Tuple

from connectivity_checker import find_components, is_connected
from degree_counter import count_degrees, has_all_even_degrees, odd_degree_vertices
from domino_graph_visualizer import draw_domino_graph
from domino_io import list_domino_files, read_dominoes, write_report
from domino_validator import InvalidDominoError, validate_dominoes
from vertex_extractor import extract_vertices


def make_double_set(n):
    # Complete double-n set: every (a, b) with 0 <= a <= b <= n
    return [(a, b) for a in range(n + 1) for b in range(a, n + 1)]


DOUBLE_SIX = make_double_set(6)

# (name, dominoes, expected)
EXAMPLES = [
    ('empty', [], True),
    ('single double', [(1, 1)], True),
    ('single domino', [(1, 2)], False),
    ('triangle', [(1, 2), (3, 1), (2, 3)], True),
    ('dangling four', [(1, 2), (4, 1), (2, 3)], False),
    ('two separate doubles', [(1, 1), (2, 2)], False),
    ('triangle with doubled spur', [(1, 2), (2, 3), (3, 1), (2, 4), (2, 4)], True),
    ('unreachable double', [(1, 2), (1, 3), (2, 3), (4, 4)], False),
    ('two separate loops', [(1, 2), (2, 3), (3, 1), (4, 5), (5, 6), (6, 4)], False),
    ('double-six set', DOUBLE_SIX, True),
    ('double-five set', make_double_set(5), False),
]


# %% Chain feasibility

def can_chain(dominoes):
    dominoes = validate_dominoes(dominoes)

    if len(dominoes) == 0:
        return True

    # Parity is cheaper, skip the traversal when it already fails
    return has_all_even_degrees(dominoes) and is_connected(dominoes)


@dataclass
class ChainReport:
    dominoes: List[Tuple[int, int]]
    vertices: list
    degrees: dict
    odd_vertices: list
    components: list
    connected: bool
    chainable: bool

    def summary(self, verbose=False):
        verdict = 'YES' if self.chainable else 'NO'
        lines = [f'Closed chain: {verdict} ({len(self.dominoes)} dominoes, {len(self.vertices)} pip values)']

        if verbose or not self.chainable:
            if self.odd_vertices:
                lines.append(f'  Odd degree: {self.odd_vertices}')
            if not self.connected:
                lines.append(f'  Disconnected: {len(self.components)} components {self.components}')

        if verbose:
            lines.append(f'  Degrees: {self.degrees}')

        return '\n'.join(lines)


def explain_chain(dominoes):
    dominoes = validate_dominoes(dominoes)

    odd_vertices = odd_degree_vertices(dominoes)
    connected = is_connected(dominoes)

    return ChainReport(
        dominoes=dominoes,
        vertices=extract_vertices(dominoes),
        degrees=dict(count_degrees(dominoes)),
        odd_vertices=odd_vertices,
        components=find_components(dominoes),
        connected=connected,
        chainable=len(dominoes) == 0 or (len(odd_vertices) == 0 and connected),
    )


# %% Harness

def run_examples(verbose=False):
    n_failed = 0

    for name, dominoes, expected in EXAMPLES:
        got = can_chain(dominoes)
        status = '      OK ' if got == expected else '  FAILED '

        if got != expected:
            n_failed += 1

        print(f'[{status}] {name}: expected {expected}, got {got}')

        if verbose:
            print(explain_chain(dominoes).summary(verbose=True))

    print('============')

    return n_failed


def evaluate_file(file_name, verbose=False, draw=False):
    print('[PROCESSING] Current file: ', file_name)
    print('============')

    report = explain_chain(read_dominoes(file_name))

    print(report.summary(verbose=verbose))

    if draw:
        print('[     DONE ] Saved', draw_domino_graph(report.dominoes, os.path.splitext(file_name)[0] + '.png', report.chainable))

    return report


def report_row(file_name, report):
    return [os.path.basename(file_name), len(report.dominoes), len(report.vertices), len(report.components),
            ' '.join(str(v) for v in report.odd_vertices), report.chainable]


def main(argv=None):
    parser = argparse.ArgumentParser(description='Check whether a set of dominoes forms a closed chain.')

    input_args_group = parser.add_mutually_exclusive_group()

    input_args_group.add_argument('--file', type=str, help='Path to a domino set file (one "a b" pair per line)')
    input_args_group.add_argument('--folder', type=str, help='Path to a folder containing domino set files')

    parser.add_argument('--csv', type=str, help='Append the results to this CSV report')
    parser.add_argument('--draw', action='store_true', help='Save a drawing of each domino graph next to its file')
    parser.add_argument('--verbose', action='store_true', help='Print degrees, odd vertices and components')

    args = parser.parse_args(argv)

    # By default, we run the built-in examples
    if not args.file and not args.folder:
        if args.csv or args.draw:
            parser.error("--csv and --draw need --file or --folder")

        return 1 if run_examples(args.verbose) else 0

    rows = []
    try:
        file_names = [args.file] if args.file else list_domino_files(args.folder)

        for file_name in file_names:
            report = evaluate_file(file_name, args.verbose, args.draw)
            rows.append(report_row(file_name, report))
    except (InvalidDominoError, OSError) as e:
        print(f'[    ERROR ] {e}', file=sys.stderr)
        return 1

    if args.csv:
        write_report(args.csv, rows)
        print('[     DONE ] Report written to', args.csv)

    return 0


# %% Main function

if __name__ == "__main__":
    sys.exit(main())
