#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#----------------------------------------------------------------------------
# Author       : HUYNH Vinh-Nam
# Email        : huynh-vinh.nam@usth.edu.vn
# Created Date : 05-October-2026
# Description  :
"""
    Count how many domino ends touch each pip value.

    A double (a, a) counts twice for a, so the degrees always add up to
    twice the number of dominoes.
"""
#----------------------------------------------------------------------------
from collections import Counter

from vertex_extractor import flatten_pips


def count_degrees(dominoes):
    return Counter(flatten_pips(dominoes))


def odd_degree_vertices(dominoes):
    degrees = count_degrees(dominoes)

    return [vertex for vertex, degree in degrees.items() if degree % 2 != 0]


def has_all_even_degrees(dominoes):
    return len(odd_degree_vertices(dominoes)) == 0


def satisfies_handshake(dominoes):
    # Handshake lemma: sum(deg) == 2 * |E|
    dominoes = list(dominoes)

    return sum(count_degrees(dominoes).values()) == 2 * len(dominoes)


# %% Main function

if __name__ == "__main__":
    domino_list = [(1, 2), (4, 1), (2, 3)]

    print(count_degrees(domino_list))
    print('Odd vertices: ', odd_degree_vertices(domino_list))
