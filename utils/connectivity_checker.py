#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#----------------------------------------------------------------------------
# Author       : HUYNH Vinh-Nam
# Email        : huynh-vinh.nam@usth.edu.vn
# Created Date : 06-October-2026
# Description  :
"""
    Check that every pip value of a domino set can be reached from every
    other one by walking along dominoes.
"""
#----------------------------------------------------------------------------
from graph_builder import build_adjacency_list
from vertex_extractor import extract_vertices


def depth_first_search(adjacency, start_node):
    visited = set()
    stack = [start_node]

    while stack:
        node = stack.pop()

        if node in visited:
            continue

        visited.add(node)

        for neighbor in adjacency[node]:
            if neighbor not in visited:
                stack.append(neighbor)

    return visited


def find_components(dominoes):
    dominoes = list(dominoes)
    vertices = extract_vertices(dominoes)
    adjacency = build_adjacency_list(dominoes)

    components = []
    seen = set()

    for vertex in vertices:
        if vertex in seen:
            continue

        visited = depth_first_search(adjacency, vertex)
        seen |= visited

        # Keep the first-seen order inside each component
        components.append([v for v in vertices if v in visited])

    return components


def is_connected(dominoes):
    dominoes = list(dominoes)
    vertices = extract_vertices(dominoes)

    if len(vertices) == 0:
        return True

    visited = depth_first_search(build_adjacency_list(dominoes), vertices[0])

    return len(visited) == len(vertices)


# %% Main function

if __name__ == "__main__":
    domino_list = [(1, 2), (2, 3), (3, 1), (5, 6), (6, 5), (7, 7)]

    print('Connected: ', is_connected(domino_list))
    print('Components: ', find_components(domino_list))
