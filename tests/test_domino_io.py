#!/usr/bin/env python3
"""
Tests for the domino set files and the CSV report.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'utils'))

import csv

import pytest

from domino_io import CSV_HEADER, list_domino_files, parse_domino_line, read_dominoes, write_dominoes, write_report
from domino_validator import InvalidDominoError


def test_parse_domino_line():
    assert parse_domino_line('1 2\n', 1) == (1, 2)
    assert parse_domino_line('  3,4 ', 1) == (3, 4)
    assert parse_domino_line('5 , 6  # comment', 1) == (5, 6)
    assert parse_domino_line('-1\t7', 1) == (-1, 7)


def test_parse_skips_blank_and_comment_lines():
    assert parse_domino_line('\n', 1) is None
    assert parse_domino_line('# only a comment', 1) is None


@pytest.mark.parametrize('line', ['1', '1 2 3', 'a b', '1.5 2'])
def test_parse_rejects_malformed_lines(line):
    with pytest.raises(InvalidDominoError, match='set.txt:4'):
        parse_domino_line(line, 4, 'set.txt')


def test_read_and_write_dominoes(tmp_path):
    file_name = str(tmp_path / 'set.txt')
    dominoes = [(1, 2), (2, 3), (3, 1), (4, 4), (4, 4)]

    write_dominoes(file_name, dominoes)

    assert read_dominoes(file_name) == dominoes


def test_read_dominoes_with_comments(tmp_path):
    file_name = tmp_path / 'set.txt'
    file_name.write_text('# triangle\n1 2\n\n2, 3\n3 1  # closes the loop\n')

    assert read_dominoes(str(file_name)) == [(1, 2), (2, 3), (3, 1)]


def test_read_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_dominoes(str(tmp_path / 'missing.txt'))


def test_list_domino_files(tmp_path):
    (tmp_path / 'b.txt').write_text('')
    (tmp_path / 'a.txt').write_text('')
    (tmp_path / 'c.csv').write_text('')

    assert list_domino_files(str(tmp_path)) == [str(tmp_path / 'a.txt'), str(tmp_path / 'b.txt')]


def test_write_report_appends_with_single_header(tmp_path):
    csv_file = str(tmp_path / 'report.csv')

    write_report(csv_file, [['a.txt', 3, 3, 1, '', True]])
    write_report(csv_file, [['b.txt', 1, 2, 1, '1 2', False]])

    with open(csv_file, newline='') as f:
        rows = list(csv.reader(f))

    assert rows == [CSV_HEADER, ['a.txt', '3', '3', '1', '', 'True'], ['b.txt', '1', '2', '1', '1 2', 'False']]
