#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#----------------------------------------------------------------------------
# Author       : HUYNH Vinh-Nam
# Email        : huynh-vinh.nam@usth.edu.vn
# Created Date : 09-October-2026
# Description  :
"""
    A script that draws the graph of a domino set (pips as vertices,
    dominoes as edges) and saves it as an image.

    Odd-degree vertices are colored red, even-degree vertices green.
"""
#----------------------------------------------------------------------------
import matplotlib
matplotlib.use('Agg')

import matplotlib.pyplot as plt
import networkx as nx

from degree_counter import odd_degree_vertices
from graph_builder import build_graph


def draw_domino_graph(dominoes, file_name, chainable):
    dominoes = list(dominoes)
    G = build_graph(dominoes)
    odd = set(odd_degree_vertices(dominoes))

    node_colors = ['red' if node in odd else 'green' for node in G.nodes]

    plt.figure(figsize=(5, 5))

    pos = nx.circular_layout(G)
    nx.draw_networkx(G, pos=pos, node_color=node_colors, font_color='white')

    verdict = 'closed chain' if chainable else 'no closed chain'
    plt.title(f'{G.number_of_edges()} dominoes - {verdict}')
    plt.axis('off')

    plt.tight_layout()

    plt.savefig(file_name)
    plt.close()

    return file_name


# %% Main function

if __name__ == "__main__":
    from domino_chain import can_chain

    domino_list = [(1, 2), (2, 3), (3, 1), (2, 4), (2, 4)]

    print(draw_domino_graph(domino_list, 'domino_graph.png', can_chain(domino_list)))
