#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#----------------------------------------------------------------------------
# Author       : HUYNH Vinh-Nam
# Email        : huynh-vinh.nam@usth.edu.vn
# Created Date : 05-October-2026
# Description  :
"""
    Collect the distinct pip values (graph vertices) of a domino set.
"""
#----------------------------------------------------------------------------

def flatten_pips(dominoes):
    return [pip for domino in dominoes for pip in domino]


def extract_vertices(dominoes):
    # First-seen order, so the traversal always starts from the same vertex
    return list(dict.fromkeys(flatten_pips(dominoes)))


# %% Main function

if __name__ == "__main__":
    domino_list = [(1, 2), (2, 3), (3, 1), (2, 4), (2, 4)]

    print(extract_vertices(domino_list))
