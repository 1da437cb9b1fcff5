#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#----------------------------------------------------------------------------
# Author       : HUYNH Vinh-Nam
# Email        : huynh-vinh.nam@usth.edu.vn
# Created Date : 06-October-2026
# Description  :
"""
    Turn a domino set into a graph: every pip value is a vertex and every
    domino is an edge between the two values it bears.

    Three shapes are provided:
        - adjacency list (dict of sets), used by the connectivity check
        - dense boolean adjacency matrix (numpy), handy for small sets
        - networkx MultiGraph, one edge per domino, used for drawing
"""
#----------------------------------------------------------------------------
import networkx as nx
import numpy as np

from vertex_extractor import extract_vertices


def build_adjacency_list(dominoes):
    adjacency = {}

    for a, b in dominoes:
        # A double is never its own neighbor, but its vertex must still exist
        adjacency.setdefault(a, set())
        adjacency.setdefault(b, set())

        if a != b:
            adjacency[a].add(b)
            adjacency[b].add(a)

    return adjacency


def build_adjacency_matrix(dominoes):
    dominoes = list(dominoes)
    vertices = extract_vertices(dominoes)
    vertex_to_index = {vertex: idx for idx, vertex in enumerate(vertices)}

    matrix = np.zeros((len(vertices), len(vertices)), dtype=bool)

    for a, b in dominoes:
        if a == b:
            continue

        matrix[vertex_to_index[a], vertex_to_index[b]] = True
        matrix[vertex_to_index[b], vertex_to_index[a]] = True

    return matrix, vertices


def adjacency_matrix_to_list(matrix, vertices):
    return {vertices[row]: {vertices[col] for col in np.flatnonzero(matrix[row])} for row in range(len(vertices))}


def build_graph(dominoes):
    dominoes = list(dominoes)
    G = nx.MultiGraph()

    # Add nodes and edges to the graph
    G.add_nodes_from(extract_vertices(dominoes))
    G.add_edges_from(dominoes)

    return G


# %% Main function

if __name__ == "__main__":
    domino_list = [(1, 2), (2, 3), (3, 1), (2, 4), (2, 4), (4, 4)]

    matrix, vertices = build_adjacency_matrix(domino_list)

    print(vertices)
    print(matrix.astype(int))
    print(build_adjacency_list(domino_list))
