# -*- coding: utf-8 -*-
import hypothesis.strategies as st

from matchrace.graph import BipartiteGraph, left, right
from matchrace.matching import Matching

__all__ = ['bipartite_graphs', 'long_chain', 'SCENARIO_GRAPH', 'left', 'right']

# Two left vertices, two right vertices, L0-R0, L0-R1 and L1-R0
SCENARIO_GRAPH = BipartiteGraph(2, 2, [(0, 0), (0, 1), (1, 0)])


@st.composite
def bipartite_graphs(draw, max_left=6, max_right=6):
    left_count = draw(st.integers(min_value=0, max_value=max_left))
    right_count = draw(st.integers(min_value=0, max_value=max_right))

    edges = []
    for i in range(left_count):
        for j in range(right_count):
            if draw(st.booleans()):
                edges.append((i, j))
    edges = draw(st.permutations(edges))

    return BipartiteGraph(left_count, right_count, edges)


def long_chain(n):
    """A graph with a matching of size n - 1 whose only augmenting path visits every vertex."""
    edges = []
    for i in range(n):
        edges.append((i, i))
        if i > 0:
            edges.append((i, i - 1))
    graph = BipartiteGraph(n, n, edges)
    matching = Matching({left(i): right(i - 1) for i in range(1, n)})
    return graph, matching
