#!/usr/bin/env python3
"""
Tests for the connectivity check over the domino graph.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'utils'))

from connectivity_checker import depth_first_search, find_components, is_connected


def test_empty_is_connected():
    assert is_connected([])


def test_single_double_is_connected():
    assert is_connected([(1, 1)])


def test_two_doubles_are_not_connected():
    assert not is_connected([(1, 1), (2, 2)])


def test_triangle_is_connected():
    assert is_connected([(1, 2), (2, 3), (3, 1)])


def test_double_does_not_bridge_components():
    assert not is_connected([(1, 2), (3, 4), (2, 2), (3, 3)])


def test_depth_first_search_terminates_on_cycles():
    adjacency = {1: {2, 3}, 2: {1, 3}, 3: {1, 2}, 4: set()}

    assert depth_first_search(adjacency, 1) == {1, 2, 3}
    assert depth_first_search(adjacency, 4) == {4}


def test_long_path_does_not_hit_recursion_limit():
    n = sys.getrecursionlimit() * 3
    dominoes = [(i, i + 1) for i in range(n)]

    assert is_connected(dominoes)
    assert not is_connected(dominoes + [(n + 5, n + 6)])


def test_find_components():
    dominoes = [(1, 2), (2, 3), (3, 1), (5, 6), (6, 5), (7, 7)]

    assert find_components(dominoes) == [[1, 2, 3], [5, 6], [7]]
    assert find_components([]) == []


def test_generator_input():
    assert is_connected(d for d in [(1, 2), (2, 3), (3, 1)])
    assert not is_connected(d for d in [(1, 1), (2, 2)])
    assert find_components(d for d in [(1, 2)]) == [[1, 2]]
    assert find_components(d for d in [(1, 2), (3, 3)]) == [[1, 2], [3]]
