#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#----------------------------------------------------------------------------
# Author       : HUYNH Vinh-Nam
# Email        : huynh-vinh.nam@usth.edu.vn
# Created Date : 08-October-2026
# Description  :
"""
    Read/write domino sets from plain text files and append evaluation
    results to a CSV report.

    Text format: one domino per line, two integers separated by spaces
    and/or a comma. Blank lines and '#' comments are skipped.

        # triangle
        1 2
        2, 3
        3 1
"""
#----------------------------------------------------------------------------
import csv
import os
import re

from domino_validator import InvalidDominoError

DOMINO_FILE_EXTENSION = '.txt'

CSV_HEADER = ['file_name', 'n_dominoes', 'n_vertices', 'n_components', 'odd_vertices', 'chainable']

# %% Domino set files

def parse_domino_line(line, line_number, file_name='<string>'):
    content = line.split('#', 1)[0].strip()

    if not content:
        return None

    tokens = [t for t in re.split(r'[,\s]+', content) if t]

    if len(tokens) != 2:
        raise InvalidDominoError(f"{file_name}:{line_number}: expected 2 pips, got {len(tokens)} in '{content}'")

    try:
        return (int(tokens[0]), int(tokens[1]))
    except ValueError:
        raise InvalidDominoError(f"{file_name}:{line_number}: pips must be integers, got '{content}'") from None


def read_dominoes(FILE_NAME):
    dominoes = []

    with open(FILE_NAME, 'r') as f:
        for line_number, line in enumerate(f, start=1):
            domino = parse_domino_line(line, line_number, FILE_NAME)

            if domino is not None:
                dominoes.append(domino)

    return dominoes


def write_dominoes(FILE_NAME, dominoes):
    with open(FILE_NAME, 'w') as f:
        for a, b in dominoes:
            f.write(f'{a} {b}\n')


def list_domino_files(folder):
    return sorted(os.path.join(folder, file_name) for file_name in os.listdir(folder)
                  if file_name.endswith(DOMINO_FILE_EXTENSION))


# %% Report

def write_report(csv_file, rows):
    write_header = not os.path.exists(csv_file) or os.path.getsize(csv_file) == 0

    with open(csv_file, 'a', newline='') as csvfile:
        writer = csv.writer(csvfile)

        if write_header:
            writer.writerow(CSV_HEADER)

        for row in rows:
            writer.writerow(row)
